"""
Commande CLI de diagnostic (parse).

Montre comment un chemin est interprete, segment par segment, et
optionnellement le resultat du rapprochement avec le catalogue.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from chiprr.adapters.cli.helpers import (
    apply_cli_overrides,
    close_catalog,
    console,
    suppress_loguru,
    with_container,
)
from chiprr.config import require_settings
from chiprr.core.exceptions import ChiprrError
from chiprr.core.value_objects.path_segment import ParsedSegment
from chiprr.services.renamer import build_episode_destination


def parse(
    path: Annotated[Path, typer.Argument(help="Chemin du fichier video (pas forcement existant)")],
    match: Annotated[
        bool,
        typer.Option("--match", "-m", help="Interroge aussi le catalogue TMDB"),
    ] = False,
    token: Annotated[
        Optional[str],
        typer.Option("--token", "-t", help="Jeton API TMDB"),
    ] = None,
) -> None:
    """Affiche l'interpretation d'un chemin de fichier video."""
    asyncio.run(_parse_async(path, match, token))


@with_container()
async def _parse_async(container, path: Path, match: bool, token: Optional[str]) -> None:
    """Implementation async de la commande parse."""
    parser = container.path_parser()
    try:
        segments = parser.parse(path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    with suppress_loguru():
        console.print(_render_segments(path, segments))

    if not match:
        return

    settings = apply_cli_overrides(container, tmdb_token=token)
    try:
        require_settings(settings, "tmdb_token")
        matcher = container.show_matcher()
        try:
            result = await matcher.match(segments)
        finally:
            await close_catalog(container)
    except ChiprrError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    lines = [
        f"Serie : [bold]{result.show_name}[/bold]",
        f"Episode : [bold]{result.episode_code}[/bold]",
    ]
    if settings.sorted_dir:
        destination = build_episode_destination(settings.sorted_dir, result, path.suffix)
        lines.append(f"Destination : {destination}")
    console.print(Panel("\n".join(lines), title="Catalogue", border_style="green"))


def _render_segments(path: Path, segments: list[ParsedSegment]) -> Table:
    """Tableau Rich d'un segment par ligne."""
    table = Table(title=str(path))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type")
    table.add_column("Element", style="cyan", overflow="fold")
    table.add_column("Nom de serie", style="bold")
    table.add_column("Saison", justify="right")
    table.add_column("Episode", justify="right")

    for segment in segments:
        table.add_row(
            str(segment.index),
            segment.type.value,
            segment.raw_name,
            segment.best_effort_show_name or "[dim]-[/dim]",
            str(segment.season) if segment.season is not None else "-",
            str(segment.episode) if segment.episode is not None else "-",
        )
    return table
