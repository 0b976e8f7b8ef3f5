"""
page-driver - CLI Entry Point.

Configuration Priority:
    1. CLI arguments (--config)
    2. Environment variables (PAGE_DRIVER__DRIVER__CHECK_ELEMENT_DELAY_MS, etc.)
    3. Config file (page-driver.yaml)

Usage:
    page-driver validate commands.yaml
    page-driver config --config page-driver.yaml
"""

from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from page_driver.commands import parse_command
from page_driver.config import load_config
from page_driver.exceptions import CommandValidationError, ConfigurationError
from page_driver.utils.logging import setup_logging

app = typer.Typer(
    name="page-driver",
    help="Action command execution core for in-page test automation",
    add_completion=False,
)

console = Console()


def _load_payloads(file_path: Path) -> List[Any]:
    with open(file_path, "r") as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    return data if isinstance(data, list) else [data]


@app.command()
def validate(
    file_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON file with one command or a list of commands"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose output"),
):
    """Validate action commands and show the selectors each one resolves."""
    setup_logging("DEBUG" if verbose else "WARNING")
    
    try:
        payloads = _load_payloads(file_path)
    except yaml.YAMLError as e:
        console.print(f"[red]Error: {file_path} is not valid YAML/JSON[/red]")
        console.print(f"  {e}")
        raise typer.Exit(1)
    
    table = Table(title=str(file_path))
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Selectors")
    
    failures = 0
    for index, payload in enumerate(payloads, start=1):
        try:
            command = parse_command(payload)
        except CommandValidationError as e:
            failures += 1
            table.add_row(str(index), f"[red]{e.command_type or '?'}[/red]", f"[red]{e.message}[/red]")
            for error in e.errors:
                location = ".".join(str(part) for part in error.get("loc", ()))
                table.add_row("", "", f"[dim]{location}: {error.get('msg')}[/dim]")
            continue
        
        roles = ", ".join(f"{role.argument_name}={selector!r}" for role, selector in command.selector_roles())
        table.add_row(str(index), command.type, roles or "[dim](none)[/dim]")
    
    console.print(table)
    
    if failures:
        console.print(f"\n[red]✗ {failures} of {len(payloads)} command(s) invalid[/red]")
        raise typer.Exit(1)
    console.print(f"\n[green]✓ {len(payloads)} command(s) valid[/green]")


@app.command()
def config(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """Show the effective configuration."""
    try:
        settings = load_config(config_path=config_path)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    
    console.print(yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False).rstrip())


if __name__ == "__main__":
    app()
