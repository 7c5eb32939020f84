"""
Tests for connection configuration.
"""

from dataclasses import FrozenInstanceError

import pytest

from rest_resource.core.config import DEFAULT_USER_AGENT, ConnectionConfig, SSLConfig
from rest_resource.core.exceptions import ConfigurationError


class TestSSLConfig:

    def test_defaults(self):
        ssl = SSLConfig()
        assert ssl.verify is True
        assert ssl.client_cert is None

    def test_client_cert_forms(self):
        assert SSLConfig(cert_file="c.pem").client_cert == "c.pem"
        assert SSLConfig(cert_file="c.pem", key_file="k.pem").client_cert == ("c.pem", "k.pem")

    def test_key_without_cert(self):
        with pytest.raises(ConfigurationError):
            SSLConfig(key_file="k.pem")

    def test_hashable_and_comparable(self):
        assert SSLConfig(verify=False) == SSLConfig(verify=False)
        assert hash(SSLConfig()) == hash(SSLConfig())


class TestConnectionConfig:

    def test_defaults(self):
        config = ConnectionConfig()
        assert config.timeout is None
        assert config.proxy is None
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.logging is None

    def test_immutable(self):
        config = ConnectionConfig()
        with pytest.raises(FrozenInstanceError):
            config.timeout = 10

    def test_headers_frozen(self):
        config = ConnectionConfig(headers={"X-Key": "1"})
        with pytest.raises(TypeError):
            config.headers["X-Other"] = "2"

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigurationError):
            ConnectionConfig(timeout=timeout)

    def test_create(self):
        config = ConnectionConfig.create(timeout=30, proxy="http://proxy:3128", verify_ssl=False)
        assert config.timeout == 30
        assert config.proxy == "http://proxy:3128"
        assert config.ssl.verify is False

    def test_create_empty_proxy_is_none(self):
        assert ConnectionConfig.create(proxy="").proxy is None

    def test_default_headers(self):
        config = ConnectionConfig(headers={"X-Key": "1"}, user_agent="app/1.0")
        assert config.default_headers() == {"User-Agent": "app/1.0", "X-Key": "1"}

    def test_no_user_agent(self):
        assert ConnectionConfig(user_agent=None).default_headers() == {}

    def test_with_helpers_return_new_instances(self):
        config = ConnectionConfig()
        assert config.with_timeout(5).timeout == 5
        assert config.with_proxy("http://p:1").proxy == "http://p:1"
        assert config.with_ssl(SSLConfig(verify=False)).ssl.verify is False
        assert config.with_headers({"A": "1"}).headers["A"] == "1"
        assert config.timeout is None
        assert dict(config.headers) == {}
