"""Immutable result types returned by the four services.

Every value here is created fresh by a decoder for one response and handed
to the caller; nothing is cached or shared between requests.

Dictionary lookup tree
----------------------
::

    LookupResult
    └── Definition            text, transcription, attributes
        └── Translation       text, attributes
            ├── Synonym       text, attributes
            ├── Meaning       text, attributes
            └── Example       text, attributes
                └── Snippet   text, attributes

Every node embeds an :class:`Attributes` record by value.  An attribute the
service did not send is ``None``; an empty string means the service sent an
empty string.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from linguistic.parameters import Language, SpellingMistake

# =============================================================================
# DICTIONARY LOOKUP TREE
# =============================================================================


@dataclass(frozen=True)
class Attributes:
    """Grammatical attributes shared by every lookup tree node.

    Attributes:
        number:         Grammatical number (``num``), e.g. ``"pl"``.
        gender:         Grammatical gender (``gen``), e.g. ``"f"``.
        part_of_speech: Part of speech (``pos``), e.g. ``"noun"``.
    """

    number: str | None = None
    gender: str | None = None
    part_of_speech: str | None = None


@dataclass(frozen=True)
class Snippet:
    """Translation of an example phrase."""

    text: str
    attributes: Attributes = field(default_factory=Attributes)


@dataclass(frozen=True)
class Synonym:
    text: str
    attributes: Attributes = field(default_factory=Attributes)


@dataclass(frozen=True)
class Meaning:
    text: str
    attributes: Attributes = field(default_factory=Attributes)


@dataclass(frozen=True)
class Example:
    """A usage example together with its translations."""

    text: str
    attributes: Attributes = field(default_factory=Attributes)
    snippets: tuple[Snippet, ...] = ()


@dataclass(frozen=True)
class Translation:
    """One translation of a dictionary headword."""

    text: str
    attributes: Attributes = field(default_factory=Attributes)
    synonyms: tuple[Synonym, ...] = ()
    meanings: tuple[Meaning, ...] = ()
    examples: tuple[Example, ...] = ()


@dataclass(frozen=True)
class Definition:
    """A dictionary entry for the looked-up word.

    Attributes:
        text:          The headword as the dictionary spells it.
        attributes:    Grammatical attributes of the headword.
        transcription: Phonetic transcription (``ts``), if provided.
        translations:  Translations in document order.
    """

    text: str
    attributes: Attributes = field(default_factory=Attributes)
    transcription: str | None = None
    translations: tuple[Translation, ...] = ()


@dataclass(frozen=True)
class LookupResult:
    """Decoded dictionary lookup.  No definitions is a valid answer."""

    definitions: tuple[Definition, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.definitions


# =============================================================================
# PREDICTOR
# =============================================================================


@dataclass(frozen=True)
class CompletionResult:
    """Suggestions for completing a partially typed text.

    Attributes:
        text:        The text that was sent.
        suggestions: Completion variants, best first.  May be empty.
        position:    Cursor position the suggestions apply to; ``-1`` when
                     the service reports none.
        word_ended:  ``True`` when the last word of ``text`` is complete.
    """

    text: str
    suggestions: tuple[str, ...]
    position: int
    word_ended: bool


# =============================================================================
# SPELLER
# =============================================================================


@dataclass(frozen=True)
class Misspelling:
    """One word the speller flagged.

    Attributes:
        kind:        Error kind from the speller's code table.
        position:    Offset of the word in the submitted text.
        row:         Line number of the word.
        column:      Column of the word within its line.
        length:      Length of the flagged word.
        word:        The flagged word as it appears in the text.
        suggestions: Proposed replacements, best first.
    """

    kind: SpellingMistake
    position: int
    row: int
    column: int
    length: int
    word: str
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class SpellCheckResult:
    text: str
    misspellings: tuple[Misspelling, ...] = ()

    @property
    def is_correct(self) -> bool:
        return not self.misspellings


# =============================================================================
# TRANSLATOR
# =============================================================================


@dataclass(frozen=True)
class TranslationResult:
    """A translated text.

    ``source_language`` is :attr:`Language.AUTODETECT` when the service was
    asked to detect the source and did not report it.
    """

    text: str
    source_language: Language
    target_language: Language
    translated_text: str
