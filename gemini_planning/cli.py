"""Gemini Planning CLI."""

import asyncio
import json

import click
from rich.console import Console
from rich.table import Table

from .config import PlannerConfig, load_env_file
from .errors import PlanningError

console = Console()

PROBE_LIBRARY = "react"


def _load_config() -> PlannerConfig:
    load_env_file()
    return PlannerConfig.from_env()


async def _run_checks(dispatcher) -> list:
    """Run connectivity checks; returns (name, ok, detail) rows."""
    rows = []

    result = await dispatcher.dispatch("test_gemini_connection")
    payload = json.loads(result.content[0].text)
    if result.isError:
        rows.append(("Gemini", False, payload.get("error", "")))
    else:
        rows.append(("Gemini", True, str(payload.get("response", ""))[:50]))

    result = await dispatcher.dispatch("test_context7_connection")
    payload = json.loads(result.content[0].text)
    if result.isError:
        rows.append(("Context7", False, payload.get("error", "")))
    else:
        tools = payload.get("tools") or {}
        count = len(tools.get("tools", [])) if isinstance(tools, dict) else 0
        rows.append(("Context7", True, f"{count} tools available"))

    try:
        library_id = await dispatcher.docs.resolve_library_id(PROBE_LIBRARY)
        rows.append(("Library Resolution", True, library_id[:50]))
    except PlanningError as e:
        rows.append(("Library Resolution", False, str(e)))

    return rows


@click.group()
def main():
    """Gemini Planning - implementation plans from Gemini and Context7."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"gemini-planning v{__version__}")


@main.command()
def config():
    """Show the effective configuration."""
    console.print(_load_config().display())


@main.command()
def serve():
    """Run the MCP server over stdio."""
    from .server import main as server_main
    server_main()


@main.command()
def check():
    """Check connectivity to Gemini and Context7."""
    from .server import build_dispatcher

    cfg = _load_config()
    if not cfg.gemini_api_key:
        console.print("[red]GEMINI_API_KEY not set![/red]")
        console.print("[dim]Set it: export GEMINI_API_KEY=your_key_here[/dim]")
        raise SystemExit(1)

    dispatcher = build_dispatcher(cfg)
    rows = asyncio.run(_run_checks(dispatcher))

    table = Table(title="Connection Checks")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Detail", style="dim")
    for name, ok, detail in rows:
        status = "[green]OK[/green]" if ok else "[red]FAILED[/red]"
        table.add_row(name, status, detail)
    console.print(table)

    console.print("\n[bold]System Information:[/bold]")
    console.print(f"  Model: [cyan]{cfg.gemini_model}[/cyan]")
    console.print(f"  Temperature: [cyan]{cfg.temperature}[/cyan]")
    console.print(f"  Max Tokens: [cyan]{cfg.max_output_tokens}[/cyan]")
    console.print(f"  API Key: [cyan]{cfg.masked_api_key}[/cyan]")
    console.print(f"  Context7 URL: [cyan]{cfg.context7_url}[/cyan]")

    failed = sum(1 for _, ok, _ in rows if not ok)
    if failed:
        console.print(f"\n[yellow]{len(rows) - failed} passed, {failed} failed[/yellow]")
        raise SystemExit(1)
    console.print("\n[green]All checks passed[/green]")


if __name__ == "__main__":
    main()
