"""Tests for the Dictionary wrapper."""

import pytest

from linguistic.errors import StatusError
from linguistic.http.transport import TransportResponse
from linguistic.parameters import Flag, Language, LanguagePair
from linguistic.services import Dictionary
from tests.fakes import FakeTransport, ok

LOOKUP = {
    "head": {},
    "def": [
        {
            "text": "time",
            "pos": "noun",
            "tr": [{"text": "время", "syn": [{"text": "раз"}]}, {"text": "срок"}],
        }
    ],
}


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def dictionary(transport) -> Dictionary:
    return Dictionary("dict.test", transport=transport)


@pytest.mark.unit
class TestLookup:
    """Tests for Dictionary.lookup."""

    def test_request(self, dictionary, transport):
        transport.queue(ok(LOOKUP))
        dictionary.lookup("time", LanguagePair.ENGLISH_RUSSIAN, Flag.FAMILY, Flag.MORPHO)

        request = transport.last
        assert request.path == "/api/v1/dicservice.json/lookup"
        assert dict(request.query) == {
            "key": "dict.test",
            "lang": "en-ru",
            "text": "time",
            "ui": "en",
            "flags": 5,
        }

    def test_no_flags_sends_zero(self, dictionary, transport):
        transport.queue(ok(LOOKUP))
        dictionary.lookup("time", LanguagePair.ENGLISH_RUSSIAN, ui=Language.RUSSIAN)
        assert transport.last.query["flags"] == 0
        assert transport.last.query["ui"] == "ru"

    def test_result(self, dictionary, transport):
        transport.queue(ok(LOOKUP))
        result = dictionary.lookup("time", LanguagePair.ENGLISH_RUSSIAN)
        translations = result.definitions[0].translations
        assert [t.text for t in translations] == ["время", "срок"]
        assert translations[0].synonyms[0].text == "раз"

    def test_empty_lookup(self, dictionary, transport):
        transport.queue(ok({"head": {}, "def": []}))
        assert dictionary.lookup("qwzx", LanguagePair.ENGLISH_RUSSIAN).is_empty

    def test_blocked_key(self, dictionary, transport):
        transport.queue(TransportResponse(402, b"{}", "Payment Required"))
        with pytest.raises(StatusError) as exc_info:
            dictionary.lookup("time", LanguagePair.ENGLISH_RUSSIAN)
        assert exc_info.value.description == "Blocked key for API"

    def test_lookup_async(self, dictionary, transport, handler):
        transport.queue(ok(LOOKUP))
        dictionary.lookup_async("time", LanguagePair.ENGLISH_RUSSIAN, handler, Flag.SHORT_POS)
        handler.wait()
        transport.join()

        assert handler.calls == 1
        assert handler.responses[0].definitions[0].text == "time"
        assert transport.last.query["flags"] == 2


@pytest.mark.unit
class TestDirections:
    """Tests for Dictionary.directions."""

    def test_directions(self, dictionary, transport):
        transport.queue(ok(["en-ru", "ru-en"]))
        assert dictionary.directions() == [
            LanguagePair.ENGLISH_RUSSIAN,
            LanguagePair.RUSSIAN_ENGLISH,
        ]
        assert transport.last.path == "/api/v1/dicservice.json/getLangs"
        assert dict(transport.last.query) == {"key": "dict.test"}

    def test_pairs_expose_their_languages(self, dictionary, transport):
        transport.queue(ok(["ru-en"]))
        pair = dictionary.directions()[0]
        assert pair.source is Language.RUSSIAN
        assert pair.target is Language.ENGLISH

    def test_directions_async(self, dictionary, transport, handler):
        transport.queue(ok(["en-de"]))
        dictionary.directions_async(handler)
        handler.wait()
        transport.join()
        assert handler.responses == [[LanguagePair.ENGLISH_GERMAN]]
