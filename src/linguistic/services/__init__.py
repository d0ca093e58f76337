"""Wrappers for the four linguistic services.

base.py         BaseService: construction, configuration and lifecycle
                shared by every wrapper.
dictionary.py   Dictionary: directions, lookup.
predictor.py    Predictor: directions, complete.
speller.py      Speller: check, check_many.
translator.py   Translator: directions, detect, translate.

Every operation has a blocking form and an ``*_async`` form that takes a
``ResponseHandler``.
"""

from linguistic.services.base import BaseService
from linguistic.services.dictionary import Dictionary
from linguistic.services.predictor import Predictor
from linguistic.services.speller import Speller
from linguistic.services.translator import Translator

__all__ = ["BaseService", "Dictionary", "Predictor", "Speller", "Translator"]
