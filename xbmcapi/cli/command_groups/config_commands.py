"""Config command group."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from xbmcapi.config.loader import convert_to_camel, get_config_path, load_config, save_config
from xbmcapi.config.schema import ClientConfig


def register_config_commands(app: typer.Typer, console: Console) -> None:
    """Register config show/init commands."""
    config_app = typer.Typer(help="Client configuration")
    app.add_typer(config_app, name="config")

    @config_app.command("show")
    def config_show(
        config: Path = typer.Option(None, "--config", "-c", help="Config file"),
    ) -> None:
        """Print the effective configuration (file, env and defaults)."""
        path = config or get_config_path()
        try:
            cfg = load_config(path)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(1)
        data = convert_to_camel(cfg.model_dump())
        if data.get("password"):
            data["password"] = "********"
        console.print(f"Config: {path} {'[green]✓[/green]' if path.exists() else '[dim](defaults)[/dim]'}")
        console.print(json.dumps(data, indent=2, ensure_ascii=False), markup=False)

    @config_app.command("init")
    def config_init(
        config: Path = typer.Option(None, "--config", "-c", help="Config file"),
        host: str = typer.Option("localhost", "--host", "-H", help="Media center host"),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
    ) -> None:
        """Write a config file with default values."""
        path = config or get_config_path()
        if path.exists() and not force:
            console.print(f"[yellow]Config already exists at {path}[/yellow] (use --force to overwrite)")
            raise typer.Exit(1)
        save_config(ClientConfig(hostname=host), path)
        console.print(f"[green]✓[/green] Created config at {path}")
