"""Tests for dynamic version management.

Verifies that ``linguistic.__version__`` is resolved from the installed
package metadata (``pyproject.toml``).
"""

from __future__ import annotations

import re

import pytest

import linguistic

# Matches semver-ish strings: major.minor.patch with optional pre-release
# suffix (e.g. "0.1.0", "1.0.0-rc.1", "0.0.0-dev").
_SEMVER_RE = re.compile(
    r"^\d+\.\d+\.\d+"  # major.minor.patch
    r"(-[A-Za-z0-9]+(\.[A-Za-z0-9]+)*)?$"  # optional pre-release
)


@pytest.mark.unit
class TestVersionAttribute:
    """Verify the ``linguistic.__version__`` package attribute."""

    def test_version_is_a_string(self) -> None:
        assert isinstance(linguistic.__version__, str)
        assert len(linguistic.__version__) > 0

    def test_version_matches_semver(self) -> None:
        assert _SEMVER_RE.match(linguistic.__version__), (
            f"__version__ {linguistic.__version__!r} does not match "
            f"expected semver pattern (major.minor.patch[-prerelease])"
        )

    def test_version_is_not_fallback(self) -> None:
        """The ``0.0.0-dev`` fallback only appears when the package is not installed."""
        assert (
            linguistic.__version__ != "0.0.0-dev"
        ), "__version__ is the fallback value; is the package installed?"
