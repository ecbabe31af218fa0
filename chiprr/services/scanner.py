"""
Service de scan du repertoire d'entree.

Liste recursivement les fichiers video a organiser, en appliquant
les regles des fichiers .chiprrignore.
"""

from pathlib import Path
from typing import Iterator

from loguru import logger

from chiprr.adapters.ignore_filter import IgnoreFilter
from chiprr.core.ports.file_system import IFileSystem


class ScannerService:
    """
    Service orchestrant le scan du repertoire d'entree.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister les fichiers
    - Le filtre d'exclusion (IgnoreFilter) pour les .chiprrignore
    """

    def __init__(self, file_system: IFileSystem, ignore_filter: IgnoreFilter) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour les operations fichiers
            ignore_filter: Filtre des fichiers exclus
        """
        self._file_system = file_system
        self._ignore_filter = ignore_filter

    def is_candidate(self, path: Path, base_path: Path) -> bool:
        """Vrai si le fichier est une video non exclue par un .chiprrignore."""
        if not self._file_system.is_video_file(path):
            return False
        return not self._ignore_filter.should_ignore(path, base_path)

    def scan(self, directory: Path) -> Iterator[Path]:
        """
        Parcourt le repertoire et retourne les videos a organiser.

        Args:
            directory: Repertoire d'entree

        Yields:
            Chemins des fichiers video retenus
        """
        if not self._file_system.exists(directory):
            logger.warning(f"Repertoire d'entree introuvable : {directory}")
            return

        found = 0
        for path in self._file_system.list_files(directory):
            if self.is_candidate(path, directory):
                found += 1
                yield path
        logger.info(f"Scan de {directory} : {found} fichier(s) video")
