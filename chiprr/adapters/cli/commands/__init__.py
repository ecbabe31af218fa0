"""Sous-package CLI commands - re-exporte les commandes publiques."""

from chiprr.adapters.cli.commands.inspect_commands import parse
from chiprr.adapters.cli.commands.organize_commands import execute, watch

__all__ = [
    "execute",
    "parse",
    "watch",
]
