"""
Root Typer application for the handle-failure CLI.

Commands:
    selfcheck   run every built-in shape through unwrap and report
    shapes      list registered result shapes
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from handle_failure.core.logging import configure_logging
from handle_failure.core.settings import LOG_LEVELS, get_settings
from handle_failure.core.traits import traits_registry
from handle_failure.selfcheck import run_selfcheck

app = typer.Typer(
    name="handle-failure",
    help="handle-failure - classify result values and escalate failures.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("handle-failure")
        except PackageNotFoundError:
            from handle_failure import __version__ as v
        typer.echo(f"handle-failure {v}")
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return level


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override HF_LOG_LEVEL.", callback=_log_level_callback
    ),
) -> None:
    """handle-failure CLI."""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("selfcheck")
def selfcheck(
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
) -> None:
    """Run the built-in scenarios; exit 1 if any behaves unexpectedly."""
    outcomes = run_selfcheck()
    failed = [o for o in outcomes if not o.passed]

    if json_out:
        console.print_json(json.dumps([o.to_dict() for o in outcomes]))
    else:
        table = Table(title="Self-check")
        table.add_column("Case", justify="right")
        table.add_column("Scenario")
        table.add_column("Expected")
        table.add_column("Result")
        table.add_column("Message", overflow="fold")
        for o in outcomes:
            status = "[green]pass[/green]" if o.passed else "[bold red]FAIL[/bold red]"
            table.add_row(
                str(o.case),
                o.name,
                "raise" if o.expect_failure else "value",
                status,
                o.message or "",
            )
        console.print(table)

    if failed:
        err_console.print(f"[bold red]{len(failed)} of {len(outcomes)} scenarios failed[/bold red]")
        raise typer.Exit(code=1)


@app.command("shapes")
def shapes(
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
) -> None:
    """List registered result shapes and their traits."""
    rows = traits_registry.shapes()

    if json_out:
        payload = [
            {
                "shape": info.name,
                "arity": info.arity,
                "traits": type(info.traits).__qualname__,
                "carries_payload": info.carries_payload,
            }
            for info in rows
        ]
        console.print_json(json.dumps(payload))
        return

    table = Table(title="Registered shapes")
    table.add_column("Shape")
    table.add_column("Arity", justify="right")
    table.add_column("Traits")
    table.add_column("Payload")
    for info in rows:
        table.add_row(
            info.name,
            "" if info.arity is None else str(info.arity),
            type(info.traits).__qualname__,
            "yes" if info.carries_payload else "no",
        )
    console.print(table)
