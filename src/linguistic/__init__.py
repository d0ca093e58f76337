"""Linguistic: clients for the translator, dictionary, predictor and speller services.

Each service is wrapped by one class in :mod:`linguistic.services`.  All of
them share the same request pipeline (:mod:`linguistic.http`) and return
frozen result objects (:mod:`linguistic.response`)::

    from linguistic import Dictionary, LanguagePair

    with Dictionary("dict.1.1.xxx") as dictionary:
        result = dictionary.lookup("time", LanguagePair.ENGLISH_RUSSIAN)

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from linguistic.errors import (
    DecodeError,
    EmptyBodyError,
    LinguisticError,
    ProtocolError,
    StatusError,
    TransportError,
    UnknownCodeError,
)
from linguistic.http import CallbackHandler, ResponseHandler
from linguistic.parameters import (
    Flag,
    Format,
    Language,
    LanguagePair,
    Option,
    ResponseFormat,
    SpellingMistake,
    Version,
)
from linguistic.services import Dictionary, Predictor, Speller, Translator

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# Falls back to "0.0.0-dev" when the package is imported from a source
# checkout without being installed.
# ---------------------------------------------------------------------------
try:
    __version__: str = version("linguistic")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "CallbackHandler",
    "DecodeError",
    "Dictionary",
    "EmptyBodyError",
    "Flag",
    "Format",
    "Language",
    "LanguagePair",
    "LinguisticError",
    "Option",
    "Predictor",
    "ProtocolError",
    "ResponseFormat",
    "ResponseHandler",
    "SpellingMistake",
    "Speller",
    "StatusError",
    "Translator",
    "TransportError",
    "UnknownCodeError",
    "Version",
    "__version__",
]
