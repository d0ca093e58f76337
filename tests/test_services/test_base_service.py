"""Tests for construction and lifecycle shared by every service wrapper."""

from unittest.mock import Mock, patch

import pytest
import requests

from linguistic.config import ClientConfig
from linguistic.errors import TransportError
from linguistic.http.transport import HttpxTransport, RequestsTransport
from linguistic.parameters import ResponseFormat, Version
from linguistic.services import Dictionary, Predictor, Speller, Translator


@pytest.mark.unit
class TestConstruction:
    """Tests for BaseService.__init__."""

    @pytest.mark.parametrize("service_class", [Dictionary, Predictor, Translator])
    def test_key_is_required(self, service_class, fake_transport):
        with pytest.raises(ValueError, match="API key is required"):
            service_class(transport=fake_transport)

    def test_speller_needs_no_key(self, fake_transport):
        speller = Speller(transport=fake_transport)
        assert speller.gateway.key is None

    def test_speller_ignores_a_key(self, fake_transport):
        assert Speller("unused", transport=fake_transport).gateway.key is None

    def test_defaults(self, fake_transport):
        translator = Translator("trnsl.test", transport=fake_transport)
        assert translator.version is Version.TRANSLATE_V1_5
        assert translator.response_format is ResponseFormat.TRANSLATE_JSON

    def test_foreign_version_rejected(self, fake_transport):
        with pytest.raises(ValueError):
            Dictionary("dict.test", version=Version.PREDICTOR_V1, transport=fake_transport)

    def test_xml_format_rejected(self, fake_transport):
        with pytest.raises(ValueError, match="JSON"):
            Dictionary(
                "dict.test",
                response_format=ResponseFormat.DICTIONARY_XML,
                transport=fake_transport,
            )

    def test_rejected_version_closes_default_transport(self):
        with patch("linguistic.services.base.RequestsTransport") as transport_class:
            with pytest.raises(ValueError):
                Dictionary("dict.test", version=Version.PREDICTOR_V1)

        transport_class.return_value.close.assert_called_once()

    def test_rejected_version_leaves_caller_transport_open(self, fake_transport):
        with pytest.raises(ValueError):
            Dictionary("dict.test", version=Version.PREDICTOR_V1, transport=fake_transport)
        assert not fake_transport.closed

    def test_async_call_after_close_raises(self, handler):
        session = Mock(spec=requests.Session)
        transport = RequestsTransport("https://translate.yandex.net", session=session)
        translator = Translator("trnsl.test", transport=transport)
        translator.close()

        with pytest.raises(TransportError, match="Transport is closed"):
            translator.detect_async("hallo", handler)

        assert handler.calls == 0
        session.get.assert_not_called()

    def test_default_transport_targets_public_endpoint(self):
        with Translator("trnsl.test") as translator:
            transport = translator.gateway.transport
            assert isinstance(transport, RequestsTransport)
            assert transport.base_url == "https://translate.yandex.net"

    def test_context_manager_closes_transport(self, fake_transport):
        with Predictor("pdct.test", transport=fake_transport):
            pass
        assert fake_transport.closed

    def test_repr_hides_key(self, fake_transport):
        text = repr(Dictionary("dict.secret", transport=fake_transport))
        assert text == "Dictionary(version='v1', format='dicservice.json')"


@pytest.mark.unit
class TestFromConfig:
    """Tests for BaseService.from_config."""

    def test_uses_service_section(self):
        cfg = ClientConfig()
        cfg.translator.key = "trnsl.cfg"
        cfg.translator.base_url = "http://localhost:8080"
        cfg.http.backend = "httpx"

        with Translator.from_config(cfg) as translator:
            transport = translator.gateway.transport
            assert translator.gateway.key == "trnsl.cfg"
            assert isinstance(transport, HttpxTransport)
            assert transport.base_url == "http://localhost:8080"

    def test_missing_key_in_config(self):
        with pytest.raises(ValueError):
            Dictionary.from_config(ClientConfig())

    def test_missing_key_creates_no_transport(self):
        with patch.object(ClientConfig, "create_transport") as create_transport:
            with pytest.raises(ValueError, match="API key is required"):
                Translator.from_config(ClientConfig())
        create_transport.assert_not_called()

    def test_transport_closed_when_construction_fails(self):
        cfg = ClientConfig()
        cfg.dictionary.key = "dict.cfg"
        with (
            patch.object(ClientConfig, "create_transport") as create_transport,
            patch.object(Dictionary, "DEFAULT_VERSION", Version.PREDICTOR_V1),
        ):
            with pytest.raises(ValueError):
                Dictionary.from_config(cfg)
        create_transport.return_value.close.assert_called_once()

    def test_speller_from_empty_config(self):
        with Speller.from_config(ClientConfig()) as speller:
            assert speller.gateway.transport.base_url == "https://speller.yandex.net"
