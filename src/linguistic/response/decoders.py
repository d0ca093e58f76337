"""Flat (non-recursive) decoders for predictor, speller and translator documents.

Unlike the lookup tree decoder, these decoders are strict: every field they
read is required, and a missing or mistyped field fails the whole decode
with :class:`~linguistic.errors.DecodeError`.  A spelling batch with one
bad mistake entry fails entirely; nothing is silently skipped.

Codes returned by the services (languages, pairs, mistake kinds) are
resolved through the static tables and raise
:class:`~linguistic.errors.UnknownCodeError` when unrecognised.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from linguistic.errors import DecodeError
from linguistic.parameters import Language, LanguagePair, SpellingMistake
from linguistic.response.models import (
    CompletionResult,
    Misspelling,
    SpellCheckResult,
    TranslationResult,
)

# ── Field helpers ─────────────────────────────────────────────────────────────


def load_json(body: bytes) -> Any:
    """Parse a response body as UTF-8 JSON."""
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise DecodeError(f"Response body is not valid JSON: {exc}") from exc


def _require_object(document: Any, what: str) -> dict[str, Any]:
    if not isinstance(document, dict):
        raise DecodeError(f"Expected {what} to be a JSON object, got {type(document).__name__}")
    return document


def _require_array(document: Any, what: str) -> list[Any]:
    if not isinstance(document, list):
        raise DecodeError(f"Expected {what} to be a JSON array, got {type(document).__name__}")
    return document


def _field(document: dict[str, Any], key: str, kind: type) -> Any:
    """Return ``document[key]`` after checking it exists and has type ``kind``.

    ``bool`` is a subclass of ``int`` in Python, so booleans are rejected
    where an integer is required.
    """
    if key not in document or document[key] is None:
        raise DecodeError(f"Missing required field '{key}'")
    value = document[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DecodeError(
            f"Field '{key}' should be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _strings(document: dict[str, Any], key: str) -> tuple[str, ...]:
    values = _field(document, key, list)
    for value in values:
        if not isinstance(value, str):
            raise DecodeError(f"Field '{key}' should contain only strings")
    return tuple(values)


# ── Predictor ─────────────────────────────────────────────────────────────────


def decode_completion(text: str, body: bytes) -> CompletionResult:
    """Decode ``{"endOfWord": bool, "pos": int, "text": [str, ...]}``."""
    document = _require_object(load_json(body), "completion")
    return CompletionResult(
        text=text,
        suggestions=_strings(document, "text"),
        position=_field(document, "pos", int),
        word_ended=_field(document, "endOfWord", bool),
    )


# ── Speller ───────────────────────────────────────────────────────────────────


def _decode_misspelling(document: Any) -> Misspelling:
    mistake = _require_object(document, "spelling mistake")
    return Misspelling(
        kind=SpellingMistake.by_code(_field(mistake, "code", int)),
        position=_field(mistake, "pos", int),
        row=_field(mistake, "row", int),
        column=_field(mistake, "col", int),
        length=_field(mistake, "len", int),
        word=_field(mistake, "word", str),
        suggestions=_strings(mistake, "s"),
    )


def _decode_phrase(text: str, mistakes: Any) -> SpellCheckResult:
    entries = _require_array(mistakes, "spelling result")
    return SpellCheckResult(
        text=text,
        misspellings=tuple(_decode_misspelling(entry) for entry in entries),
    )


def decode_spelling(text: str, body: bytes) -> SpellCheckResult:
    """Decode the ``checkText`` answer: an array of mistake objects."""
    return _decode_phrase(text, load_json(body))


def decode_spelling_batch(texts: Sequence[str], body: bytes) -> list[SpellCheckResult]:
    """Decode the ``checkTexts`` answer: one mistake array per input text.

    Results are aligned positionally with ``texts``.
    """
    phrases = _require_array(load_json(body), "spelling batch")
    if len(phrases) != len(texts):
        raise DecodeError(
            f"Spelling batch returned {len(phrases)} results for {len(texts)} texts"
        )
    return [_decode_phrase(text, mistakes) for text, mistakes in zip(texts, phrases, strict=True)]


# ── Translator ────────────────────────────────────────────────────────────────


def decode_translation(text: str, body: bytes) -> TranslationResult:
    """Decode ``{"lang": "xx" | "xx-yy", "text": [str, ...]}``.

    Only the first element of ``text`` is used.  A bare ``"xx"`` direction
    means the source language was not reported.
    """
    document = _require_object(load_json(body), "translation")
    direction = _field(document, "lang", str).split("-")

    if len(direction) == 2:
        source = Language.by_code(direction[0])
        target = Language.by_code(direction[1])
    else:
        source = Language.AUTODETECT
        target = Language.by_code(direction[0])

    translations = _strings(document, "text")
    if not translations:
        raise DecodeError("Field 'text' is empty")

    return TranslationResult(
        text=text,
        source_language=source,
        target_language=target,
        translated_text=translations[0],
    )


def decode_detected_language(body: bytes) -> Language:
    """Decode ``{"lang": "xx"}``."""
    document = _require_object(load_json(body), "detection result")
    return Language.by_code(_field(document, "lang", str))


# ── Direction listings ────────────────────────────────────────────────────────


def decode_language_list(body: bytes) -> list[Language]:
    """Decode a flat array of language codes (predictor ``getLangs``)."""
    codes = _require_array(load_json(body), "language list")
    return [Language.by_code(code) for code in codes]


def decode_language_pair_list(body: bytes) -> list[LanguagePair]:
    """Decode a flat array of pair codes (dictionary ``getLangs``)."""
    codes = _require_array(load_json(body), "language pair list")
    return [LanguagePair.by_code(code) for code in codes]


def decode_language_mapping(body: bytes) -> list[Language]:
    """Decode ``{"langs": {"xx": "name", ...}}`` (translator ``getLangs``).

    Languages are returned in the key order of the document.
    """
    document = _require_object(load_json(body), "language listing")
    return [Language.by_code(code) for code in _field(document, "langs", dict)]
