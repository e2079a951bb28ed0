import dataclasses

import pytest

from transmission_session.config import ClientConfig, Config, normalize_host


class TestHostNormalization:
    @pytest.mark.parametrize("host", ["127.0.0.1", "localhost", "nas.local", "10.0.0.5"])
    def test_bare_host_gets_http_prefix(self, host):
        assert normalize_host(host) == "http://" + host
        assert ClientConfig(host=host).host == "http://" + host

    @pytest.mark.parametrize("host", ["http://nas.local", "https://seedbox.example.com"])
    def test_prefixed_host_unchanged(self, host):
        assert ClientConfig(host=host).host == host


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()

        assert config.url == "http://127.0.0.1:9091/transmission/rpc"
        assert config.session_header == "X-Transmission-Session-Id"
        assert config.debug is False
        assert config.fields == ()
        assert config.auth is None

    def test_url_uses_port_and_endpoint(self):
        config = ClientConfig(host="nas.local", port=8080, endpoint="/rpc")

        assert config.url == "http://nas.local:8080/rpc"

    def test_auth_requires_both_credentials(self):
        assert ClientConfig(username="admin").auth is None
        assert ClientConfig(password="secret").auth is None
        assert ClientConfig(username="admin", password="secret").auth == ("admin", "secret")

    def test_is_immutable(self):
        config = ClientConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 1234

    def test_fields_stored_as_tuple(self):
        assert ClientConfig(fields=["id", "name"]).fields == ("id", "name")


class TestFromEnv:
    def test_reads_config(self, monkeypatch):
        monkeypatch.setattr(Config, "TRANSMISSION_HOST", "seedbox")
        monkeypatch.setattr(Config, "TRANSMISSION_PORT", 9999)
        monkeypatch.setattr(Config, "TRANSMISSION_USERNAME", "admin")
        monkeypatch.setattr(Config, "TRANSMISSION_PASSWORD", "secret")
        monkeypatch.setattr(Config, "TRANSMISSION_FIELDS", ("id", "name"))

        config = ClientConfig.from_env()

        assert config.url == "http://seedbox:9999/transmission/rpc"
        assert config.auth == ("admin", "secret")
        assert config.fields == ("id", "name")

    def test_empty_credentials_mean_no_auth(self, monkeypatch):
        monkeypatch.setattr(Config, "TRANSMISSION_USERNAME", "")
        monkeypatch.setattr(Config, "TRANSMISSION_PASSWORD", "")

        assert ClientConfig.from_env().auth is None

    def test_overrides_win_and_none_is_ignored(self, monkeypatch):
        monkeypatch.setattr(Config, "TRANSMISSION_HOST", "seedbox")
        monkeypatch.setattr(Config, "TRANSMISSION_PORT", 9999)

        config = ClientConfig.from_env(host="other", port=None, debug=True)

        assert config.host == "http://other"
        assert config.port == 9999
        assert config.debug is True
