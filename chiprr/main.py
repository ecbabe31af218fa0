"""
Point d'entrée CLI de chiprr.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import execute, parse, watch
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity

app = typer.Typer(
    name="chiprr",
    help="Organisation automatique des episodes de series",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v: DEBUG)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """chiprr - Rangement des episodes par liens physiques."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose
    if quiet or verbose:
        _setup_logging(get_config())


# Monter les commandes
app.command()(execute)
app.command()(watch)
app.command()(parse)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Entrée : {config.input_dir or '(non défini)'}")
    typer.echo(f"Rangement : {config.sorted_dir or '(non défini)'}")
    typer.echo(f"Cache TMDB : {config.cache_dir}")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"Fichiers en parallèle : {config.max_concurrent_files}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"chiprr v{__version__}")


def _setup_logging(settings: Settings) -> None:
    configure_logging(
        log_level=level_for_verbosity(settings.log_level, state["verbose"], state["quiet"]),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


def main() -> None:
    """Point d'entrée de l'application."""
    _setup_logging(container.config())
    logger.info("Démarrage de chiprr", version=__version__)
    app()


if __name__ == "__main__":
    main()
