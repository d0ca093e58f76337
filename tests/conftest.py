"""
Shared pytest fixtures for the linguistic client test suite.

This module provides fixtures that are automatically available to all test files:
- FakeTransport and RecordingHandler instances (see tests/fakes.py)
- Isolation from a developer's local config file and LINGUISTIC_* variables

No test in the suite touches the network.
"""

import logging
from collections.abc import Generator

import pytest

from linguistic import config
from tests.fakes import FakeTransport, RecordingHandler

ENV_VARS = (
    "LINGUISTIC_DICTIONARY_KEY",
    "LINGUISTIC_PREDICTOR_KEY",
    "LINGUISTIC_TRANSLATOR_KEY",
    "LINGUISTIC_HTTP_BACKEND",
    "LINGUISTIC_TIMEOUT",
    "LINGUISTIC_LOG_LEVEL",
)


@pytest.fixture
def fake_transport() -> FakeTransport:
    """A FakeTransport with an empty queue."""
    return FakeTransport()


@pytest.fixture
def handler() -> RecordingHandler:
    """A fresh RecordingHandler."""
    return RecordingHandler()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """
    Keep the developer's config/client.ini and LINGUISTIC_* variables out of tests.

    The project config paths are pointed at a directory that does not exist,
    so load_config() without arguments yields the built-in defaults. The root
    logger level set by CLI runs is restored afterwards.
    """
    root_level = logging.getLogger().level
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "CONFIG_FILE", tmp_path / "missing" / "client.ini")
    monkeypatch.setattr(config, "CONFIG_EXAMPLE", tmp_path / "missing" / "client.example.ini")
    yield
    logging.getLogger().setLevel(root_level)
