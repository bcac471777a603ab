"""CLI commands for xbmcapi.

Top-level commands (ping, call, version, methods) plus the config command group.
"""

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from xbmcapi import __logo__, __version__
from xbmcapi.cli.command_groups.config_commands import register_config_commands
from xbmcapi.cli.shared.client_utils import build_client, call_once, parse_params
from xbmcapi.cli.shared.logging_utils import configure_stderr, ensure_rotating_log_file
from xbmcapi.methods import NAMESPACES
from xbmcapi.utils.exceptions import XbmcApiError

app = typer.Typer(
    name="xbmcapi",
    help=f"{__logo__} xbmcapi - XBMC / Kodi JSON-RPC client",
    no_args_is_help=True,
)

console = Console()

HOST_OPTION = typer.Option(None, "--host", "-H", help="Media center host (default from config)")
PORT_OPTION = typer.Option(None, "--port", "-p", help="WebSocket port")
HTTP_PORT_OPTION = typer.Option(None, "--http-port", help="Web server port for the HTTP fallback")
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Config file (default ~/.xbmcapi/config.json)")


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} xbmcapi v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="stderr log level"),
    log_file: bool = typer.Option(False, "--log-file", help="Also log to ~/.xbmcapi/logs/xbmcapi.log"),
):
    """xbmcapi - XBMC / Kodi JSON-RPC client."""
    configure_stderr(log_level.upper())
    if log_file:
        ensure_rotating_log_file("xbmcapi", level="DEBUG")


def _run(coro):
    try:
        return asyncio.run(coro)
    except XbmcApiError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def ping(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    http_port: int = HTTP_PORT_OPTION,
    config: Path = CONFIG_OPTION,
):
    """Check that the media center answers JSONRPC.Ping."""
    client = build_client(host=host, port=port, http_port=http_port, config_path=config)
    result = _run(call_once(client, "JSONRPC.Ping"))
    console.print(f"[green]✓[/green] {client.config.hostname}: {result}")


@app.command()
def version(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    http_port: int = HTTP_PORT_OPTION,
    config: Path = CONFIG_OPTION,
):
    """Show the client version and the server's JSON-RPC API version."""
    client = build_client(host=host, port=port, http_port=http_port, config_path=config)
    result = _run(call_once(client, "JSONRPC.Version"))
    api = (result or {}).get("version", result) if isinstance(result, dict) else result
    if isinstance(api, dict):
        api = ".".join(str(api.get(k, 0)) for k in ("major", "minor", "patch"))
    console.print(f"{__logo__} xbmcapi v{__version__}")
    console.print(f"JSON-RPC API: {api}")


@app.command()
def call(
    method: str = typer.Argument(..., help="Remote method, e.g. VideoLibrary.GetMovies"),
    params: str = typer.Option(None, "--params", "-P", help="Params as a JSON object"),
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    http_port: int = HTTP_PORT_OPTION,
    config: Path = CONFIG_OPTION,
):
    """Call any remote method and print the result as JSON."""
    try:
        payload = parse_params(params)
    except ValueError as e:
        console.print(f"[red]Invalid --params:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    client = build_client(host=host, port=port, http_port=http_port, config_path=config)
    result = _run(call_once(client, method, payload))
    console.print(json.dumps(result, indent=2, ensure_ascii=False), markup=False)


@app.command()
def methods(
    namespace: str = typer.Argument(None, help="Only this namespace, e.g. VideoLibrary"),
):
    """List the façade methods and their parameters (no connection needed)."""
    wanted = (namespace or "").strip().lower()
    table = Table(title="Remote methods")
    table.add_column("Method", style="cyan")
    table.add_column("Python")
    table.add_column("Required")
    table.add_column("Optional", style="dim")
    rows = 0
    for attr, ns in NAMESPACES.items():
        if wanted and wanted not in (ns.name.lower(), attr):
            continue
        for name, spec in ns.methods().items():
            table.add_row(
                spec.method,
                f"{attr}.{name}",
                ", ".join(param.name for param in spec.required),
                ", ".join(param.name for param in spec.optional),
            )
            rows += 1
    if not rows:
        console.print(f"[red]Unknown namespace:[/red] {namespace}")
        raise typer.Exit(1)
    console.print(table)


register_config_commands(app=app, console=console)


if __name__ == "__main__":
    app()
