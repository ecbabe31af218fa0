"""
Commandes CLI d'organisation (execute, watch).
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.table import Table

from chiprr.adapters.cli.helpers import (
    apply_cli_overrides,
    close_catalog,
    console,
    suppress_loguru,
    with_container,
)
from chiprr.adapters.watcher import DirectoryWatcher
from chiprr.config import require_settings
from chiprr.core.exceptions import ConfigurationError
from chiprr.services.organizer import OrganizeReport, OrganizeResult, OrganizeStatus

InputDirOption = Annotated[
    Optional[Path],
    typer.Option("--input", "-i", help="Repertoire des telechargements a organiser"),
]
SortedDirOption = Annotated[
    Optional[Path],
    typer.Option("--sorted", "-s", help="Racine de l'arborescence de rangement"),
]
TokenOption = Annotated[
    Optional[str],
    typer.Option("--token", "-t", help="Jeton API TMDB"),
]

_STATUS_STYLES = {
    OrganizeStatus.LINKED: ("green", "lie"),
    OrganizeStatus.ALREADY_LINKED: ("dim", "deja lie"),
    OrganizeStatus.SKIPPED: ("yellow", "ignore"),
    OrganizeStatus.FAILED: ("red", "echec"),
}


def execute(
    input_dir: InputDirOption = None,
    sorted_dir: SortedDirOption = None,
    token: TokenOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Simule sans creer de liens"),
    ] = False,
) -> None:
    """Organise en une passe tous les episodes du repertoire d'entree."""
    asyncio.run(_execute_async(input_dir, sorted_dir, token, dry_run))


@with_container()
async def _execute_async(
    container,
    input_dir: Optional[Path],
    sorted_dir: Optional[Path],
    token: Optional[str],
    dry_run: bool,
) -> None:
    """Implementation async de la commande execute."""
    settings = apply_cli_overrides(container, input_dir, sorted_dir, token)
    try:
        require_settings(settings, "input_dir", "sorted_dir", "tmdb_token")
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    scanner = container.scanner_service()
    paths = list(scanner.scan(settings.input_dir))
    if not paths:
        console.print("[yellow]Aucun fichier video a organiser.[/yellow]")
        return

    organizer = container.organizer_service(dry_run=dry_run)
    try:
        report = await organizer.organize_many(paths, settings.max_concurrent_files)
    finally:
        await close_catalog(container)

    with suppress_loguru():
        _render_report(report, dry_run)

    if report.has_failures:
        raise typer.Exit(1)


def _render_report(report: OrganizeReport, dry_run: bool) -> None:
    """Affiche le bilan d'execution dans un tableau Rich."""
    title = "Simulation" if dry_run else "Organisation"
    table = Table(title=title)
    table.add_column("Fichier", style="cyan", overflow="fold")
    table.add_column("Statut")
    table.add_column("Destination / erreur", overflow="fold")

    for result in report.results:
        style, label = _STATUS_STYLES[result.status]
        detail = str(result.destination) if result.destination else (result.error or "")
        table.add_row(result.source.name, f"[{style}]{label}[/{style}]", detail)

    console.print(table)
    console.print(
        f"\n[bold]{report.linked}[/bold] lie(s), "
        f"[bold]{report.already_linked}[/bold] deja lie(s), "
        f"[bold]{report.skipped}[/bold] ignore(s), "
        f"[bold red]{report.failed}[/bold red] echec(s)"
    )


def watch(
    input_dir: InputDirOption = None,
    sorted_dir: SortedDirOption = None,
    token: TokenOption = None,
) -> None:
    """Surveille le repertoire d'entree et organise chaque nouvel episode."""
    try:
        asyncio.run(_watch_async(input_dir, sorted_dir, token))
    except KeyboardInterrupt:
        console.print("\n[dim]Surveillance interrompue.[/dim]")


@with_container()
async def _watch_async(
    container,
    input_dir: Optional[Path],
    sorted_dir: Optional[Path],
    token: Optional[str],
) -> None:
    """Implementation async de la commande watch."""
    settings = apply_cli_overrides(container, input_dir, sorted_dir, token)
    try:
        require_settings(settings, "input_dir", "sorted_dir", "tmdb_token")
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    scanner = container.scanner_service()
    organizer = container.organizer_service()
    base_path = settings.input_dir

    async def _on_new_file(path: Path) -> None:
        if not scanner.is_candidate(path, base_path):
            logger.debug(f"Fichier non retenu : {path}")
            return
        _print_result(await organizer.organize_safely(path))

    watcher = DirectoryWatcher(_on_new_file, max_concurrency=settings.max_concurrent_files)
    console.print(f"[bold]Surveillance de {base_path}[/bold] [dim](Ctrl-C pour arreter)[/dim]")
    try:
        await watcher.run(base_path)
    finally:
        await close_catalog(container)


def _print_result(result: OrganizeResult) -> None:
    """Affiche le resultat d'un fichier traite en mode surveillance."""
    style, label = _STATUS_STYLES[result.status]
    detail = str(result.destination) if result.destination else (result.error or "")
    console.print(f"[{style}]{label}[/{style}] {result.source.name} -> {detail}")
