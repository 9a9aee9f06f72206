"""
Entry commands for TomlStash

Listing, inspecting, adding, updating and removing settings entries.
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer

from tomlstash.cores.settings_manager import SettingsManager
from tomlstash.errors import SettingsError
from tomlstash.helpers import ui_utils as utils
from tomlstash.helpers.codec import parse_toml, serialize
from tomlstash.helpers.ui_utils import console
from tomlstash.types import Content, LoadResult, SaveResult


def get_manager(ctx: typer.Context) -> SettingsManager:
    """Create the manager once per invocation and report load failures."""
    manager = ctx.obj.get("manager")
    if manager is not None:
        return manager

    try:
        manager = SettingsManager(config=ctx.obj["config"])
    except SettingsError as e:
        utils.print_error(str(e))
        raise typer.Exit(1)

    _report_load(manager.last_load)
    ctx.obj["manager"] = manager
    return manager


def _report_load(result: Optional[LoadResult]) -> None:
    if result is None:
        return
    for failure in result.failed:
        utils.print_warning(f"Skipped {failure.path.name}: {failure.error}")


def _report_save(result: SaveResult) -> None:
    for failure in result.failed:
        utils.print_error(str(failure.error))
    if not result.ok:
        raise typer.Exit(1)


def _read_payload(from_file: Optional[Path], json_text: Optional[str]) -> Any:
    """Payload from a .toml/.json file or a JSON string (None if neither)."""
    if from_file and json_text:
        utils.print_error("Use either --from-file or --json, not both")
        raise typer.Exit(1)

    try:
        if json_text is not None:
            return json.loads(json_text)
        if from_file is None:
            return None
        text = from_file.read_text(encoding="utf-8")
        if from_file.suffix.lower() == ".json":
            return json.loads(text)
        return parse_toml(text)
    except OSError as e:
        utils.print_error(f"Cannot read {from_file}: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        # json.JSONDecodeError and TOMLDecodeError are both ValueErrors
        utils.print_error(f"Invalid payload: {e}")
        raise typer.Exit(1)


def cmd_path(ctx: typer.Context):
    """Show the settings directory"""
    manager = get_manager(ctx)
    utils.print_header("TomlStash Settings", f"{len(manager)} entries")
    utils.print_info(f"Base path:      {manager.path}")
    utils.print_info(f"Default folder: {manager.default_folder}")


def cmd_list(ctx: typer.Context):
    """List all entries"""
    manager = get_manager(ctx)

    if not len(manager):
        utils.print_warning(f"No entries in {manager.path}")
        return

    table = utils.create_table(f"Entries in {manager.path}", [
        ("Name", "cyan", None),
        ("Modified", "yellow", 8),
        ("Date", "white", None),
        ("Hash", "dim", 14),
    ])
    for entry in manager:
        table.add_row(
            entry.name,
            "yes" if entry.header.modified else "no",
            entry.header.date or "-",
            utils.short_hash(entry.header.hash),
        )
    console.print(table)


def cmd_show(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
    raw: bool = typer.Option(False, "--raw", help="Print plain TOML without highlighting"),
):
    """Show one entry as TOML"""
    manager = get_manager(ctx)
    try:
        text = serialize(manager.get(name))
    except SettingsError as e:
        utils.print_error(str(e))
        raise typer.Exit(1)

    if raw:
        typer.echo(text, nl=False)
    else:
        utils.print_toml(text, title=name)


def cmd_add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
    from_file: Optional[Path] = typer.Option(
        None, "--from-file", "-f", help="Read payload from a .toml or .json file"
    ),
    json_text: Optional[str] = typer.Option(None, "--json", help="Payload as JSON text"),
):
    """Add a new entry and save"""
    manager = get_manager(ctx)
    payload = _read_payload(from_file, json_text)

    try:
        entry = manager.add(Content.new(name, payload))
    except (SettingsError, ValueError) as e:
        # ValueError: pydantic rejected the name
        utils.print_error(str(e))
        raise typer.Exit(1)

    _report_save(manager.save())
    utils.print_success(f"Added '{entry.name}' ({utils.short_hash(entry.header.hash)})")


def cmd_update(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
    from_file: Optional[Path] = typer.Option(
        None, "--from-file", "-f", help="Read payload from a .toml or .json file"
    ),
    json_text: Optional[str] = typer.Option(None, "--json", help="Payload as JSON text"),
):
    """Replace the payload of an entry and save"""
    manager = get_manager(ctx)
    payload = _read_payload(from_file, json_text)

    try:
        entry = manager.update(name, payload)
    except SettingsError as e:
        utils.print_error(str(e))
        raise typer.Exit(1)

    _report_save(manager.save())
    utils.print_success(f"Updated '{entry.name}' ({utils.short_hash(entry.header.hash)})")


def cmd_remove(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Entry name"),
):
    """Remove an entry and delete its file"""
    manager = get_manager(ctx)
    try:
        manager.remove(name)
    except SettingsError as e:
        utils.print_error(str(e))
        raise typer.Exit(1)
    utils.print_success(f"Removed '{name}'")


def cmd_verify(
    ctx: typer.Context,
    fix: bool = typer.Option(False, "--fix", help="Store fresh hashes and save"),
):
    """Check stored hashes against entry contents"""
    manager = get_manager(ctx)
    mismatches = manager.verify()

    if not mismatches:
        utils.print_success(f"All {len(manager)} entries verified")
        return

    for name in mismatches:
        utils.print_warning(f"Hash mismatch: {name}")

    if not fix:
        raise typer.Exit(1)

    for name in mismatches:
        manager.rehash(name)
    _report_save(manager.save())
    utils.print_success(f"Rehashed {len(mismatches)} entries")


def register_to_main_app(main_app: typer.Typer):
    """Register entry commands to main CLI app"""
    main_app.command("path")(cmd_path)
    main_app.command("list")(cmd_list)
    main_app.command("show")(cmd_show)
    main_app.command("add")(cmd_add)
    main_app.command("update")(cmd_update)
    main_app.command("remove")(cmd_remove)
    main_app.command("verify")(cmd_verify)
