"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles :
detection des videos, listage recursif et creation de liens physiques.
"""

import os
from pathlib import Path
from typing import Iterator

from loguru import logger

from chiprr.core.exceptions import LinkCreationError
from chiprr.core.ports.file_system import IFileSystem
from chiprr.utils.constants import VIDEO_EXTENSIONS


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Les liens sont physiques (os.link) : la source et l'arborescence de
    rangement doivent etre sur le meme systeme de fichiers.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def is_video_file(self, path: Path) -> bool:
        """Verifie l'extension du fichier (insensible a la casse)."""
        return path.suffix.lower() in VIDEO_EXTENSIONS

    def list_files(self, directory: Path) -> Iterator[Path]:
        """
        Liste les fichiers d'un repertoire (recursif).

        Filtre:
        - Ignore les repertoires
        - Exclut les symlinks

        Args:
            directory: Repertoire a scanner

        Yields:
            Chemins vers les fichiers reguliers, dans un ordre stable
        """
        if not directory.exists():
            return

        for path in sorted(directory.rglob("*")):
            if path.is_symlink():
                continue
            if not path.is_file():
                continue
            yield path

    def create_hard_link(self, source: Path, destination: Path) -> bool:
        """
        Cree un lien physique vers source.

        Cree les repertoires parents si necessaire. Un lien deja present vers
        le meme fichier n'est pas une erreur.

        Args:
            source: Fichier existant
            destination: Chemin ou le lien sera cree

        Returns:
            True si le lien a ete cree, False s'il existait deja

        Raises:
            LinkCreationError: Si destination designe un autre fichier ou si
                               le systeme refuse le lien
        """
        if destination.exists():
            if os.path.samefile(source, destination):
                logger.debug(f"Lien deja present : {destination}")
                return False
            raise LinkCreationError(
                source, destination, "la destination existe et designe un autre fichier"
            )

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            os.link(source, destination)
        except OSError as e:
            raise LinkCreationError(source, destination, e.strerror or str(e)) from e

        logger.debug(f"Lien cree : {source} -> {destination}")
        return True
