import json

import pytest

from xbmcapi.config.loader import camel_to_snake, load_config, save_config, snake_to_camel
from xbmcapi.config.schema import ClientConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("XBMCAPI_HOSTNAME", "XBMCAPI_PORT", "XBMCAPI_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / "missing.json")
    assert config.hostname == "localhost"
    assert config.port == 9090
    assert config.ping_interval_ms == 500
    assert config.allow_direct_access is False
    assert config.socket_url == "ws://localhost:9090/"
    assert config.http_url == "http://localhost:8080/jsonrpc"
    assert config.http_auth is None


def test_load_camel_case_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "hostname": "kodi.local",
        "httpPort": 8081,
        "pingIntervalMs": 0,
        "username": "kodi",
        "password": "secret",
        "somethingElse": True,
    }))

    config = load_config(path)

    assert config.hostname == "kodi.local"
    assert config.http_port == 8081
    assert config.ping_interval_ms == 0
    assert config.http_auth == ("kodi", "secret")


def test_overrides_win_and_none_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"hostname": "kodi.local", "port": 9091}))

    config = load_config(path, hostname="other", port=None)

    assert config.hostname == "other"
    assert config.port == 9091


def test_invalid_file_raises_value_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{broken")
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config(path)


def test_invalid_value_raises_value_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 0}))
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config(path)


def test_environment_variables(monkeypatch, tmp_path):
    monkeypatch.setenv("XBMCAPI_HOSTNAME", "from-env")
    monkeypatch.setenv("XBMCAPI_PORT", "9999")
    config = load_config(tmp_path / "missing.json")
    assert config.socket_url == "ws://from-env:9999/"


def test_save_writes_camel_case(tmp_path):
    path = save_config(ClientConfig(hostname="kodi.local", http_port=8081), tmp_path / "nested" / "config.json")
    data = json.loads(path.read_text())
    assert data["httpPort"] == 8081
    assert data["pingIntervalMs"] == 500
    assert load_config(path).http_port == 8081


def test_schema_validation():
    assert ClientConfig(http_path="rpc").http_url.endswith(":8080/rpc")
    assert ClientConfig(ping_interval_ms=1500).ping_interval_seconds == 1.5
    with pytest.raises(ValueError):
        ClientConfig(hostname="  ")
    with pytest.raises(ValueError):
        ClientConfig(ping_interval_ms=-1)


def test_key_conversion():
    assert camel_to_snake("pingIntervalMs") == "ping_interval_ms"
    assert snake_to_camel("allow_direct_access") == "allowDirectAccess"
