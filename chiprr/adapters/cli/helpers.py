"""
Utilitaires partages pour les commandes CLI de chiprr.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- apply_cli_overrides : surcharge des parametres par les options CLI
- close_catalog : liberation du client HTTP et du cache
- console : instance Rich Console partagee
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Optional

from dependency_injector import providers
from loguru import logger as loguru_logger
from rich.console import Console

from chiprr.config import Settings
from chiprr.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("chiprr")
    try:
        yield
    finally:
        loguru_logger.enable("chiprr")


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def apply_cli_overrides(
    container,
    input_dir: Optional[Path] = None,
    sorted_dir: Optional[Path] = None,
    tmdb_token: Optional[str] = None,
) -> Settings:
    """
    Remplace dans le container les parametres fournis en options CLI.

    Doit etre appele avant la creation des services qui en dependent.

    Returns:
        Les parametres effectifs de la commande
    """
    settings = container.config()
    updates = {
        name: value
        for name, value in (
            ("input_dir", input_dir.expanduser() if input_dir else None),
            ("sorted_dir", sorted_dir.expanduser() if sorted_dir else None),
            ("tmdb_token", tmdb_token),
        )
        if value is not None
    }
    if updates:
        settings = settings.model_copy(update=updates)
        container.config.override(providers.Object(settings))
    return settings


async def close_catalog(container) -> None:
    """Ferme le client TMDB et le cache disque."""
    await container.tmdb_client().close()
    container.catalog_cache().close()
