"""Typer commands: probe a file, list registered steps, migrate config files."""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from confmigrate import __app_name__, __version__
from confmigrate.config.manager import ConfigManager
from confmigrate.config.schema import ApplicationConfig, UserPreferences
from confmigrate.core.types import ConfigLoadResult
from confmigrate.migration.probe import probe_version
from confmigrate.migration.registry import build_default_registry
from confmigrate.migration.step import describe_step
from confmigrate.observability.app_logger import LoguruLogger, configure_logging

app = typer.Typer(
    name=__app_name__,
    help="Inspect and migrate versioned JSON configuration files.",
    no_args_is_help=True,
)


class ConfigKind(str, Enum):
    APPLICATION = "application"
    PREFERENCES = "preferences"


_KIND_TYPES = {
    ConfigKind.APPLICATION: ApplicationConfig,
    ConfigKind.PREFERENCES: UserPreferences,
}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{__app_name__} v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    ),
) -> None:
    configure_logging("DEBUG" if verbose else "WARNING")


@app.command()
def probe(
    path: Path = typer.Argument(..., help="Config file to inspect."),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON."),
) -> None:
    """Print the schema version stored in a config file (0 = legacy/unreadable)."""
    version = probe_version(path, LoguruLogger("probe"))
    if as_json:
        typer.echo(json.dumps({"path": str(path), "version": version}))
    else:
        typer.echo(f"{path}: v{version}")


@app.command()
def steps(
    kind: Optional[ConfigKind] = typer.Option(None, "--type", "-t", help="Only this config type."),
) -> None:
    """List the migration steps registered for each config type."""
    registry = build_default_registry()
    wanted = _KIND_TYPES[kind] if kind else None
    for entry in registry.entries():
        if wanted is not None and entry.config_type is not wanted:
            continue
        registered = entry.chain.get_steps()
        typer.echo(
            f"{entry.config_type.__name__}: {len(registered)} migration steps registered "
            f"(current v{entry.current_version})"
        )
        for step in registered:
            typer.echo(f"  {describe_step(step)}")


@app.command()
def migrate(
    kind: ConfigKind = typer.Option(ConfigKind.APPLICATION, "--type", "-t", help="Config type."),
    config_dir: Optional[Path] = typer.Option(None, "--dir", "-d", help="Config directory."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Load without writing anything back."),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON."),
) -> None:
    """Load a config file, migrating it to the current schema version."""
    manager = ConfigManager(config_dir, logger=LoguruLogger("config"))
    if kind is ConfigKind.APPLICATION:
        path = manager.application_config_path
        result = manager.load_application_config(persist=not dry_run)
    else:
        path = manager.user_preferences_path
        result = manager.load_user_preferences(persist=not dry_run)

    current = manager.service.registry.resolve(_KIND_TYPES[kind]).current_version
    if as_json:
        payload = {"type": kind.value, "path": str(path), "current_version": current}
        payload.update(result.to_dict())
        typer.echo(json.dumps(payload))
        return

    typer.echo(_describe_result(path, result, current, dry_run=dry_run))


def _describe_result(path: Path, result: ConfigLoadResult, current: int, *, dry_run: bool) -> str:
    suffix = " (dry run, nothing written)" if dry_run and result.needs_save else ""
    if result.was_migrated:
        return f"Migrated {path} from v{result.original_version} to v{current}{suffix}"
    if result.was_created:
        reason = result.failure.value if result.failure else "unknown"
        return f"Created default config at {path} ({reason}){suffix}"
    if result.original_version > current:
        return f"{path} is v{result.original_version}, newer than v{current}; loaded as-is"
    return f"{path} is up to date (v{current})"
