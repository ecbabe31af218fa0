"""
Configuration de loguru pour chiprr.

Deux sorties :
- stderr, colorée, au niveau choisi (INFO par défaut, -v pour DEBUG, -q pour ERROR)
- un fichier JSON tournant qui garde tout au niveau DEBUG, y compris le détail
  des étapes de nettoyage des noms, pour comprendre après coup un mauvais rangement
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/chiprr.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Installe les sorties console et fichier.

    Args :
        log_level : Niveau minimum affiché sur stderr
        log_file : Fichier JSON (son répertoire est créé au besoin)
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives conservées

    Rappelable : les sorties précédentes sont retirées avant d'installer
    les nouvelles.
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # appels depuis le thread watchdog
    )

    logger.debug(f"Logs console au niveau {log_level}, fichier {log_file}")


def level_for_verbosity(default_level: str, verbose: int, quiet: bool) -> str:
    """Niveau console selon les options -v/-q (-q l'emporte)."""
    if quiet:
        return "ERROR"
    if verbose >= 1:
        return "DEBUG"
    return default_level
