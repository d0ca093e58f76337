"""Request descriptors and the parameter encoders shared by every service.

A :class:`RequestDescriptor` is the fully assembled request handed to a
transport: a path template, the values substituted into it, and the query
parameters.  The encoders below cover the recurring parameter shapes:

- ``combine_flags``       bitwise OR of dictionary flags.
- ``combine_options``     arithmetic sum of translator/speller options.
- ``language_direction``  ``"<from>-<to>"`` or just ``"<to>"``.
- ``hint_list``           comma-joined language hints for detection.

Flags are OR-ed while options are summed.  Summing means a repeated option
is counted twice (``IGNORE_DIGITS`` + ``IGNORE_DIGITS`` == 4, which the
speller reads as ``IGNORE_URLS``).  This matches what the services have
always been sent and is kept as-is.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from linguistic.parameters import Flag, Language, Option

QueryValue = str | int | Sequence[str]


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything a transport needs to issue one GET request.

    Attributes:
        path_template: Path with ``{name}`` placeholders,
                       e.g. ``"/api/{version}/{interface}/lookup"``.
        path_params:   Values substituted into the template.
        query:         Query parameters in wire order.  A sequence value is
                       sent as a repeated key.
    """

    path_template: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, QueryValue] = field(default_factory=dict)

    @property
    def path(self) -> str:
        """The template with every placeholder substituted."""
        return self.path_template.format(**self.path_params)

    @classmethod
    def build(
        cls,
        path_template: str,
        path_params: Mapping[str, str] | None = None,
        **query: QueryValue | None,
    ) -> RequestDescriptor:
        """Build a descriptor, dropping query parameters whose value is ``None``."""
        return cls(
            path_template=path_template,
            path_params=dict(path_params or {}),
            query={name: value for name, value in query.items() if value is not None},
        )


def combine_flags(*flags: Flag | None) -> int:
    """OR together the bits of every non-null flag.

    >>> combine_flags(Flag.FAMILY, Flag.MORPHO, Flag.FAMILY)
    5
    """
    combined = 0
    for flag in flags:
        if flag is not None:
            combined |= flag.bitmask
    return combined


def combine_options(*options: Option | int | None) -> int:
    """Sum the integer values of every non-null option.

    Accepts :class:`Option` members or raw integers.

    >>> combine_options(Option.IGNORE_DIGITS, Option.IGNORE_DIGITS)
    4
    """
    combined = 0
    for option in options:
        if option is None:
            continue
        combined += option.value if isinstance(option, Option) else int(option)
    return combined


def language_direction(source: Language | None, target: Language) -> str:
    """Wire value for a translation direction.

    When ``source`` is omitted the server autodetects it, so only the
    target code is sent.
    """
    if source is None:
        return target.code
    return f"{source.code}-{target.code}"


def hint_list(*languages: Language | None) -> str:
    """Comma-joined language codes, skipping ``None`` entries."""
    return ",".join(language.code for language in languages if language is not None)
