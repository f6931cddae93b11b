"""CLI entry point for session-file-store.

Invoked as::

    session-file-store [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m session_file_store.cli.main

Commands
--------
- version  — Show version information
- session  — Session store command group

Session sub-commands
---------------------
- session path    — Print the file path for a session id
- session new     — Create a record with a generated id
- session show    — Load and display a record
- session delete  — Delete a record
"""
from __future__ import annotations

import asyncio
import json
import sys

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from session_file_store.errors import SessionStoreError
from session_file_store.session.codec import JsonRecordCodec, RecordCodec, YamlRecordCodec
from session_file_store.session.record import Record
from session_file_store.storage.filesystem import FileStore, FileStoreConfig

console = Console()

# ---------------------------------------------------------------------------
# Store factory
# ---------------------------------------------------------------------------


def _make_codec(fmt: str) -> RecordCodec:
    if fmt == "yaml":
        return YamlRecordCodec()
    return JsonRecordCodec()


def _make_store(
    directory: str | None,
    prefix: str | None,
    suffix: str | None,
    config_path: str | None,
    fmt: str,
) -> FileStore:
    """Build a ``FileStore`` from CLI options.

    Values given on the command line take precedence over those read from
    ``config_path``.  Exits with status 1 when no directory is known or the
    configuration file cannot be used.
    """
    overrides: dict[str, str] = {}
    if directory is not None:
        overrides["directory"] = directory
    if prefix is not None:
        overrides["prefix"] = prefix
    if suffix is not None:
        overrides["suffix"] = suffix

    if not config_path and not directory:
        console.print("[red]Either --dir or --config is required.[/red]")
        sys.exit(1)

    try:
        if config_path:
            config = FileStoreConfig.from_yaml(config_path, **overrides)
        else:
            config = FileStoreConfig(**overrides)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as exc:
        console.print(f"[red]Invalid config:[/red] {escape(str(exc))}")
        sys.exit(1)

    return FileStore.from_config(config, codec=_make_codec(fmt))


def _store_from_context(ctx: click.Context) -> FileStore:
    """Build the store from the options saved by the ``session`` group."""
    return _make_store(**ctx.obj["store_options"])


def _parse_data(pairs: tuple[str, ...]) -> dict[str, object]:
    """Turn ``KEY=VALUE`` pairs into a payload dict.

    Values that parse as JSON keep their JSON type; anything else is kept
    as a plain string.
    """
    data: dict[str, object] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {pair!r}", param_hint="--data")
        try:
            data[key] = json.loads(value)
        except ValueError:
            data[key] = value
    return data


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="session-file-store")
def cli() -> None:
    """File-per-session storage for session frameworks"""


@cli.command(name="version")
def version_command() -> None:
    """Show version information."""
    from session_file_store import __version__

    console.print(f"[bold]session-file-store[/bold] v{__version__}")


# ---------------------------------------------------------------------------
# session command group
# ---------------------------------------------------------------------------


@cli.group(name="session")
@click.option("--dir", "directory", default=None, help="Session directory (no trailing separator).")
@click.option("--prefix", default=None, help="File name prefix.")
@click.option("--suffix", default=None, help="File name suffix, e.g. .json")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with directory/prefix/suffix/atomic_writes.",
)
@click.option(
    "--format",
    "fmt",
    default="json",
    show_default=True,
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    help="Record encoding.",
)
@click.pass_context
def session_group(
    ctx: click.Context,
    directory: str | None,
    prefix: str | None,
    suffix: str | None,
    config_path: str | None,
    fmt: str,
) -> None:
    """Session store commands."""
    ctx.ensure_object(dict)
    ctx.obj["store_options"] = {
        "directory": directory,
        "prefix": prefix,
        "suffix": suffix,
        "config_path": config_path,
        "fmt": fmt.lower(),
    }


@session_group.command(name="path")
@click.argument("session_id")
@click.pass_context
def session_path(ctx: click.Context, session_id: str) -> None:
    """Print the file path for SESSION_ID."""
    store = _store_from_context(ctx)
    click.echo(store.path(session_id))


@session_group.command(name="new")
@click.option("--data", "pairs", multiple=True, help="Payload entry as KEY=VALUE (repeatable).")
@click.pass_context
def session_new(ctx: click.Context, pairs: tuple[str, ...]) -> None:
    """Create a record with a generated id and print the id."""
    store = _store_from_context(ctx)
    record = Record.new(_parse_data(pairs))
    try:
        asyncio.run(store.create(record))
    except SessionStoreError as exc:
        console.print(f"[red]Could not create session:[/red] {escape(str(exc))}")
        sys.exit(1)
    console.print(f"[green]Session created:[/green] {record.id}")


@session_group.command(name="show")
@click.argument("session_id")
@click.option("--json-output", is_flag=True, help="Output raw JSON instead of formatted view.")
@click.pass_context
def session_show(ctx: click.Context, session_id: str, json_output: bool) -> None:
    """Load and display the record for SESSION_ID."""
    store = _store_from_context(ctx)
    try:
        record = asyncio.run(store.load(session_id))
    except SessionStoreError as exc:
        console.print(f"[red]Could not load session:[/red] {escape(str(exc))}")
        sys.exit(1)

    if json_output:
        console.print_json(record.model_dump_json(indent=2))
        return

    table = Table(title=f"Session {record.id}", show_lines=True)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("id", str(record.id))
    table.add_row("path", store.path(record.id))
    table.add_row("expiry_date", record.expiry_date.isoformat())
    for key, value in sorted(record.data.items()):
        table.add_row(f"data.{key}", json.dumps(value))
    console.print(table)


@session_group.command(name="delete")
@click.argument("session_id")
@click.pass_context
def session_delete(ctx: click.Context, session_id: str) -> None:
    """Delete the record for SESSION_ID."""
    store = _store_from_context(ctx)
    try:
        asyncio.run(store.delete(session_id))
    except SessionStoreError as exc:
        console.print(f"[red]Could not delete session:[/red] {escape(str(exc))}")
        sys.exit(1)
    console.print(f"[green]Session deleted:[/green] {session_id}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    cli()
