import pytest
from onefuse_client.api import OneFuseAPIClient
from onefuse_client.client import OneFuseClient
from onefuse_client.core.config import Config, load_env_config
from onefuse_client.core.errors import ConfigError

ENV_VARS = (
    "ONEFUSE_SCHEME",
    "ONEFUSE_ADDRESS",
    "ONEFUSE_PORT",
    "ONEFUSE_USER",
    "ONEFUSE_PASSWORD",
    "ONEFUSE_VERIFY_SSL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Prevent load_dotenv from repopulating values from .env
    monkeypatch.setattr("onefuse_client.core.config.load_dotenv", lambda *a, **k: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_config_derived_values():
    cfg = Config(scheme="https", address="onefuse.test", port=8443, user="admin")

    assert cfg.port == "8443"
    assert cfg.host_header == "onefuse.test:8443"
    assert cfg.base_url == "https://onefuse.test:8443"
    assert cfg.verify_ssl is True


def test_config_repr_hides_password():
    cfg = Config(
        scheme="https", address="h", port=443, user="admin", password="hunter2"
    )
    assert "hunter2" not in repr(cfg)


@pytest.mark.parametrize("scheme", ["ftp", "HTTPS", ""])
def test_config_rejects_unknown_scheme(scheme):
    with pytest.raises(ConfigError):
        Config(scheme=scheme, address="h", port=443, user="u")


def test_config_requires_address():
    with pytest.raises(ValueError):
        Config(scheme="https", address="", port=443, user="u")


def test_load_env_config(monkeypatch):
    monkeypatch.setenv("ONEFUSE_SCHEME", "http")
    monkeypatch.setenv("ONEFUSE_ADDRESS", "onefuse.local")
    monkeypatch.setenv("ONEFUSE_PORT", "8000")
    monkeypatch.setenv("ONEFUSE_USER", "admin")
    monkeypatch.setenv("ONEFUSE_PASSWORD", "secret")
    monkeypatch.setenv("ONEFUSE_VERIFY_SSL", "false")

    cfg = load_env_config()

    assert cfg == Config(
        scheme="http",
        address="onefuse.local",
        port="8000",
        user="admin",
        password="secret",
        verify_ssl=False,
    )


def test_load_env_config_defaults(monkeypatch):
    monkeypatch.setenv("ONEFUSE_ADDRESS", "onefuse.local")
    monkeypatch.setenv("ONEFUSE_USER", "admin")
    monkeypatch.setenv("ONEFUSE_VERIFY_SSL", "maybe")

    cfg = load_env_config()

    assert cfg.scheme == "https"
    assert cfg.port == "443"
    assert cfg.password == ""
    assert cfg.verify_ssl is True


def test_load_env_config_missing_vars():
    with pytest.raises(ConfigError) as exc:
        load_env_config()

    assert "Missing ONEFUSE_ADDRESS or ONEFUSE_USER" in str(exc.value)


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("ONEFUSE_ADDRESS", "onefuse.local")
    monkeypatch.setenv("ONEFUSE_USER", "admin")

    with OneFuseClient.from_env() as client:
        assert client.collection_url("workspaces") == (
            "https://onefuse.local:443/api/v3/onefuse/workspaces/"
        )


def test_client_from_env_forwards_constructor_options(monkeypatch):
    monkeypatch.setenv("ONEFUSE_ADDRESS", "onefuse.local")
    monkeypatch.setenv("ONEFUSE_USER", "admin")
    monkeypatch.setenv("ONEFUSE_PASSWORD", "secret")

    with OneFuseClient.from_env(source="Ansible") as client:
        assert client.source == "Ansible"
        assert client.config.password == "secret"


def test_api_client_from_env_owns_its_client(monkeypatch):
    monkeypatch.setenv("ONEFUSE_SCHEME", "http")
    monkeypatch.setenv("ONEFUSE_ADDRESS", "onefuse.local")
    monkeypatch.setenv("ONEFUSE_PORT", "8000")
    monkeypatch.setenv("ONEFUSE_USER", "admin")

    api = OneFuseAPIClient.from_env()
    with api:
        assert api.client.config.base_url == "http://onefuse.local:8000"

    assert api.client.http.is_closed


def test_api_client_from_env_missing_vars():
    with pytest.raises(ConfigError):
        OneFuseAPIClient.from_env()
