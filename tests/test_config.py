"""Tests for linguistic.config: INI loading and environment overrides."""

import configparser
from pathlib import Path

import pytest

from linguistic import config
from linguistic.config import ClientConfig, _load_from_ini, load_config
from linguistic.http.transport import HttpxTransport, RequestsTransport


@pytest.mark.unit
def test_defaults_without_config_file():
    cfg = load_config()

    assert cfg.http.backend == "requests"
    assert cfg.http.timeout == 10.0
    assert cfg.http.max_workers == 4
    assert cfg.translator.key is None
    assert cfg.speller.base_url is None
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.format == "simple"


@pytest.mark.unit
def test_ini_sections():
    parser = configparser.ConfigParser()
    parser.read_dict(
        {
            "http": {"backend": "HTTPX", "timeout": "2.5", "max_workers": "8"},
            "dictionary": {"key": "dict.ini", "base_url": "http://localhost:9000"},
            "predictor": {"key": ""},
            "logging": {"level": "debug", "format": "detailed"},
        }
    )

    cfg = ClientConfig()
    _load_from_ini(parser, cfg)

    assert cfg.http.backend == "httpx"
    assert cfg.http.timeout == 2.5
    assert cfg.http.max_workers == 8
    assert cfg.dictionary.key == "dict.ini"
    assert cfg.dictionary.base_url == "http://localhost:9000"
    assert cfg.predictor.key is None
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.format == "detailed"


@pytest.mark.unit
def test_invalid_choices_keep_defaults():
    parser = configparser.ConfigParser()
    parser.read_dict({"http": {"backend": "urllib"}, "logging": {"format": "fancy"}})

    cfg = ClientConfig()
    _load_from_ini(parser, cfg)

    assert cfg.http.backend == "requests"
    assert cfg.logging.format == "simple"


@pytest.mark.unit
def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LINGUISTIC_DICTIONARY_KEY", "dict.env")
    monkeypatch.setenv("LINGUISTIC_PREDICTOR_KEY", "pdct.env")
    monkeypatch.setenv("LINGUISTIC_TRANSLATOR_KEY", "trnsl.env")
    monkeypatch.setenv("LINGUISTIC_HTTP_BACKEND", "httpx")
    monkeypatch.setenv("LINGUISTIC_TIMEOUT", "30")
    monkeypatch.setenv("LINGUISTIC_LOG_LEVEL", "info")

    cfg = load_config()

    assert cfg.dictionary.key == "dict.env"
    assert cfg.predictor.key == "pdct.env"
    assert cfg.translator.key == "trnsl.env"
    assert cfg.http.backend == "httpx"
    assert cfg.http.timeout == 30.0
    assert cfg.logging.level == "INFO"


@pytest.mark.unit
def test_env_beats_explicit_file(tmp_path, monkeypatch):
    ini = tmp_path / "client.ini"
    ini.write_text("[translator]\nkey = trnsl.file\n\n[http]\ntimeout = 5\n")
    monkeypatch.setenv("LINGUISTIC_TRANSLATOR_KEY", "trnsl.env")

    cfg = load_config(ini)

    assert cfg.translator.key == "trnsl.env"
    assert cfg.http.timeout == 5.0


@pytest.mark.unit
def test_explicit_file_must_exist(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.ini")


@pytest.mark.unit
def test_project_file_preferred_over_example(tmp_path, monkeypatch):
    project = tmp_path / "client.ini"
    example = tmp_path / "client.example.ini"
    project.write_text("[predictor]\nkey = pdct.project\n")
    example.write_text("[predictor]\nkey = pdct.example\n")
    monkeypatch.setattr(config, "CONFIG_FILE", project)
    monkeypatch.setattr(config, "CONFIG_EXAMPLE", example)

    assert load_config().predictor.key == "pdct.project"


@pytest.mark.unit
def test_example_file_is_fallback(tmp_path, monkeypatch):
    example = tmp_path / "client.example.ini"
    example.write_text("[http]\nbackend = httpx\n")
    monkeypatch.setattr(config, "CONFIG_EXAMPLE", example)

    assert load_config().http.backend == "httpx"


@pytest.mark.unit
def test_shipped_example_matches_defaults():
    parser = configparser.ConfigParser()
    parser.read(Path(__file__).parent.parent / "config" / "client.example.ini")

    cfg = ClientConfig()
    _load_from_ini(parser, cfg)

    assert cfg == ClientConfig()


@pytest.mark.unit
class TestClientConfig:
    """Tests for ClientConfig helpers."""

    def test_service_settings(self):
        cfg = ClientConfig()
        assert cfg.service_settings("speller") is cfg.speller

    def test_unknown_service(self):
        with pytest.raises(ValueError, match="Unknown service"):
            ClientConfig().service_settings("thesaurus")

    @pytest.mark.parametrize(
        ("backend", "transport_class"),
        [("requests", RequestsTransport), ("httpx", HttpxTransport)],
    )
    def test_create_transport(self, backend, transport_class):
        cfg = ClientConfig()
        cfg.http.backend = backend
        cfg.http.timeout = 1.5

        transport = cfg.create_transport("https://dictionary.yandex.net")
        try:
            assert isinstance(transport, transport_class)
            assert transport.timeout == 1.5
        finally:
            transport.close()
