import json

import pytest
from typer.testing import CliRunner

from xbmcapi import __version__
from xbmcapi.cli import commands
from xbmcapi.cli.commands import app
from xbmcapi.cli.shared.client_utils import build_client, parse_params
from xbmcapi.utils.exceptions import TransportUnavailableError

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "config.json"


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_methods_lists_one_namespace(monkeypatch):
    monkeypatch.setattr(commands.console, "width", 200)
    result = runner.invoke(app, ["methods", "Files"])
    assert result.exit_code == 0
    assert "Files.GetDirectory" in result.stdout
    assert "VideoLibrary.GetMovies" not in result.stdout


def test_methods_unknown_namespace():
    result = runner.invoke(app, ["methods", "Nope"])
    assert result.exit_code == 1
    assert "Unknown namespace" in result.stdout


def test_call_rejects_bad_params(config_file):
    result = runner.invoke(app, ["call", "JSONRPC.Ping", "--params", "[1, 2]", "--config", str(config_file)])
    assert result.exit_code == 2
    assert "Invalid --params" in result.stdout


def test_call_prints_result(monkeypatch, config_file):
    calls = []

    async def fake_call_once(client, method, params=None):
        calls.append((client.config.hostname, method, params))
        return {"movies": [], "limits": {"total": 0}}

    monkeypatch.setattr(commands, "call_once", fake_call_once)
    result = runner.invoke(
        app,
        ["call", "VideoLibrary.GetMovies", "-P", '{"properties": ["title"]}', "-H", "kodi.local", "-c", str(config_file)],
    )

    assert result.exit_code == 0
    assert calls == [("kodi.local", "VideoLibrary.GetMovies", {"properties": ["title"]})]
    assert '"total": 0' in result.stdout


def test_ping_reports_transport_errors(monkeypatch, config_file):
    async def fake_call_once(client, method, params=None):
        raise TransportUnavailableError(f"no open channel for {method}", method=method)

    monkeypatch.setattr(commands, "call_once", fake_call_once)
    result = runner.invoke(app, ["ping", "-c", str(config_file)])

    assert result.exit_code == 1
    assert "no open channel for JSONRPC.Ping" in result.stdout


def test_version_command_formats_api_version(monkeypatch, config_file):
    async def fake_call_once(client, method, params=None):
        return {"version": {"major": 6, "minor": 0, "patch": 0}}

    monkeypatch.setattr(commands, "call_once", fake_call_once)
    result = runner.invoke(app, ["version", "-c", str(config_file)])

    assert result.exit_code == 0
    assert "JSON-RPC API: 6.0.0" in result.stdout


def test_config_init_and_show(config_file):
    result = runner.invoke(app, ["config", "init", "-c", str(config_file), "-H", "kodi.local"])
    assert result.exit_code == 0
    assert json.loads(config_file.read_text())["hostname"] == "kodi.local"

    again = runner.invoke(app, ["config", "init", "-c", str(config_file)])
    assert again.exit_code == 1

    data = json.loads(config_file.read_text())
    data["password"] = "hunter2"
    config_file.write_text(json.dumps(data))
    shown = runner.invoke(app, ["config", "show", "-c", str(config_file)])
    assert shown.exit_code == 0
    assert "kodi.local" in shown.stdout
    assert "hunter2" not in shown.stdout


def test_config_show_invalid_file(config_file):
    config_file.write_text("{oops")
    result = runner.invoke(app, ["config", "show", "-c", str(config_file)])
    assert result.exit_code == 1


def test_build_client_disables_keepalive_and_allows_custom(config_file):
    client = build_client(host="kodi.local", port=9091, config_path=config_file)
    assert client.config.ping_interval_ms == 0
    assert client.config.allow_direct_access is True
    assert client.config.socket_url == "ws://kodi.local:9091/"


def test_parse_params():
    assert parse_params(None) == {}
    assert parse_params('{"directory": "/media"}') == {"directory": "/media"}
    with pytest.raises(ValueError):
        parse_params('"just a string"')
    with pytest.raises(ValueError):
        parse_params("{broken")


def test_rotating_log_file_sink(monkeypatch, tmp_path):
    from loguru import logger

    from xbmcapi.cli.shared import logging_utils

    monkeypatch.setattr(logging_utils, "get_data_dir", lambda: tmp_path)
    path = logging_utils.ensure_rotating_log_file("test-cli", level="DEBUG")
    try:
        assert path == tmp_path / "logs" / "test-cli.log"
        assert path.parent.is_dir()
        assert logging_utils.ensure_rotating_log_file("test-cli") == path
    finally:
        logger.remove(logging_utils._SINK_IDS.pop("test-cli"))


def test_stderr_reconfigure_lets_file_sink_come_back(monkeypatch, tmp_path):
    from loguru import logger

    from xbmcapi.cli.shared import logging_utils

    monkeypatch.setattr(logging_utils, "get_data_dir", lambda: tmp_path)
    logging_utils.ensure_rotating_log_file("test-reuse", level="DEBUG")
    first_id = logging_utils._SINK_IDS["test-reuse"]
    logging_utils.configure_stderr("WARNING")
    assert "test-reuse" not in logging_utils._SINK_IDS

    logging_utils.ensure_rotating_log_file("test-reuse", level="DEBUG")
    try:
        assert logging_utils._SINK_IDS["test-reuse"] != first_id
    finally:
        logger.remove(logging_utils._SINK_IDS.pop("test-reuse"))
