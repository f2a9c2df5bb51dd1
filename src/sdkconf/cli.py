"""Typer CLI for sdkconf."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich import print as rprint

from . import get_version
from .bundles import discover_valid_bundles
from .config import Settings, load_settings
from .configuration import ConfigurationStore
from .destination import Destination, PathsConfiguration
from .errors import SDKConfigError
from .filesystem import LocalFileSystem
from .triple import Triple

app = typer.Typer(help="Configure paths of installed SDK destinations")


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"sdkconf {get_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Configure paths of installed SDK destinations."""


def _load_settings(config: Optional[str]) -> Settings:
    settings = load_settings(Path(config) if config else None)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _open_store(settings: Settings) -> ConfigurationStore:
    return ConfigurationStore(
        settings.resolved_host_triple(),
        settings.sdks_path,
        LocalFileSystem(),
        logging.getLogger("sdkconf"),
    )


def _fail(message: str) -> NoReturn:
    rprint(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def _absolute(value: Optional[str]) -> Optional[Path]:
    if value is None:
        return None
    return Path(value).expanduser().absolute()


def _absolute_list(values: Optional[List[str]]) -> Optional[List[Path]]:
    if not values:
        return None
    return [Path(value).expanduser().absolute() for value in values]


def _print_destination(sdk_id: str, destination: Destination) -> None:
    rprint(f"[cyan]{sdk_id}[/cyan] for [cyan]{destination.target_triple}[/cyan]")
    paths = destination.paths_configuration
    for name in PathsConfiguration.__dataclass_fields__:
        value = getattr(paths, name)
        if isinstance(value, list):
            value = ", ".join(str(item) for item in value)
        rprint(f"  {name}: {value if value is not None else 'not set'}")


@app.command("list")
def list_bundles(config: Optional[str] = typer.Option(None, help="Path to settings file")) -> None:
    """List SDK identifiers provided by installed bundles."""
    settings = _load_settings(config)
    bundles = discover_valid_bundles(settings.sdks_path, LocalFileSystem(), logging.getLogger("sdkconf"))
    if not bundles:
        rprint(f"[yellow]No SDK bundles installed in {settings.sdks_path}[/yellow]")
        return
    for bundle in bundles:
        for sdk_id in bundle.identifiers:
            rprint(f"{sdk_id} ({bundle.name})")


@app.command()
def show(
    sdk_id: str = typer.Argument(..., help="SDK identifier"),
    target_triple: str = typer.Argument(..., help="Target triple"),
    config: Optional[str] = typer.Option(None, help="Path to settings file"),
) -> None:
    """Print the resolved destination, overrides applied."""
    settings = _load_settings(config)
    try:
        store = _open_store(settings)
        triple = Triple.parse(target_triple)
        destination = store.read_configuration(sdk_id, triple)
    except (SDKConfigError, ValueError) as exc:
        _fail(str(exc))
    if destination is None:
        _fail(f"No SDK '{sdk_id}' supports {target_triple} on this host")
    _print_destination(sdk_id, destination)


@app.command()
def configure(
    sdk_id: str = typer.Argument(..., help="SDK identifier"),
    target_triple: str = typer.Argument(..., help="Target triple"),
    sdk_root_path: Optional[str] = typer.Option(None, help="SDK root (sysroot) directory"),
    toolchain_path: Optional[str] = typer.Option(None, help="Toolchain directory"),
    resources_path: Optional[str] = typer.Option(None, help="Resources directory"),
    static_resources_path: Optional[str] = typer.Option(None, help="Static resources directory"),
    include_search_path: Optional[List[str]] = typer.Option(None, help="Include search path, repeatable"),
    library_search_path: Optional[List[str]] = typer.Option(None, help="Library search path, repeatable"),
    toolset_path: Optional[List[str]] = typer.Option(None, help="Toolset file, repeatable"),
    config: Optional[str] = typer.Option(None, help="Path to settings file"),
) -> None:
    """Store path overrides for an installed SDK and target triple."""
    requested = PathsConfiguration(
        sdk_root_path=_absolute(sdk_root_path),
        toolchain_path=_absolute(toolchain_path),
        resources_path=_absolute(resources_path),
        static_resources_path=_absolute(static_resources_path),
        include_search_paths=_absolute_list(include_search_path),
        library_search_paths=_absolute_list(library_search_path),
        toolset_paths=_absolute_list(toolset_path),
    )
    if not requested.populated_fields():
        _fail("Nothing to configure: pass at least one path option")

    settings = _load_settings(config)
    try:
        store = _open_store(settings)
        triple = Triple.parse(target_triple)
        if store.read_configuration(sdk_id, triple) is None:
            _fail(f"No SDK '{sdk_id}' supports {target_triple} on this host")
        existing = store.read_override(sdk_id, triple) or PathsConfiguration()
        store.update_configuration(sdk_id, Destination(triple, existing.merged(requested)))
    except (SDKConfigError, ValueError) as exc:
        _fail(str(exc))
    rprint(
        f"[green]Updated {', '.join(requested.populated_fields())} for {sdk_id} ({target_triple})[/green]"
    )


@app.command()
def reset(
    sdk_id: str = typer.Argument(..., help="SDK identifier"),
    target_triple: str = typer.Argument(..., help="Target triple"),
    config: Optional[str] = typer.Option(None, help="Path to settings file"),
) -> None:
    """Remove stored overrides, restoring the bundle defaults."""
    settings = _load_settings(config)
    try:
        store = _open_store(settings)
        removed = store.reset_configuration(sdk_id, Triple.parse(target_triple))
    except (SDKConfigError, ValueError) as exc:
        _fail(str(exc))
    if removed:
        rprint(f"[green]Reset configuration for {sdk_id} ({target_triple})[/green]")
    else:
        rprint(f"[yellow]No configuration stored for {sdk_id} ({target_triple})[/yellow]")


if __name__ == "__main__":
    app()
