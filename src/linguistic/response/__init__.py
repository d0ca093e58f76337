"""Decoders and result types.

models.py     Frozen result dataclasses.
tree.py       Generic recursive decoder for dictionary lookups.
decoders.py   Strict decoders for predictor, speller and translator
              documents, plus direction listings.
"""

from linguistic.response.models import (
    Attributes,
    CompletionResult,
    Definition,
    Example,
    LookupResult,
    Meaning,
    Misspelling,
    Snippet,
    SpellCheckResult,
    Synonym,
    Translation,
    TranslationResult,
)

__all__ = [
    "Attributes",
    "CompletionResult",
    "Definition",
    "Example",
    "LookupResult",
    "Meaning",
    "Misspelling",
    "Snippet",
    "SpellCheckResult",
    "Synonym",
    "Translation",
    "TranslationResult",
]
