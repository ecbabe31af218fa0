"""
Service d'organisation des episodes.

Enchaine, pour chaque fichier video :
analyse du chemin -> rapprochement catalogue -> destination -> lien physique.

Les fichiers sont traites de maniere concurrente (une coroutine par fichier,
nombre borne par un semaphore). L'echec d'un fichier est journalise et
consigne dans le rapport, les autres continuent.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from chiprr.core.exceptions import LinkCreationError, NoEpisodeInfoError
from chiprr.core.ports.file_system import IFileSystem
from chiprr.core.ports.parser import IPathParser
from chiprr.core.value_objects.match_result import MatchResult
from chiprr.services.renamer import build_episode_destination, sanitize_for_filesystem
from chiprr.services.show_matcher import ShowMatcherService


class OrganizeStatus(Enum):
    """Issue du traitement d'un fichier."""

    LINKED = "linked"
    ALREADY_LINKED = "already_linked"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class OrganizeResult:
    """
    Resultat du traitement d'un fichier.

    Attributs:
        source: Fichier video traite
        status: Issue du traitement
        destination: Chemin du lien (None si l'episode n'a pas ete identifie)
        match: Identite resolue de l'episode
        error: Message d'erreur pour SKIPPED et FAILED
    """

    source: Path
    status: OrganizeStatus
    destination: Optional[Path] = None
    match: Optional[MatchResult] = None
    error: Optional[str] = None


@dataclass
class OrganizeReport:
    """Bilan d'une execution, dans l'ordre des fichiers soumis."""

    results: list[OrganizeResult] = field(default_factory=list)

    def _count(self, status: OrganizeStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def linked(self) -> int:
        return self._count(OrganizeStatus.LINKED)

    @property
    def already_linked(self) -> int:
        return self._count(OrganizeStatus.ALREADY_LINKED)

    @property
    def skipped(self) -> int:
        return self._count(OrganizeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OrganizeStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0


class OrganizerService:
    """
    Service orchestrant l'organisation d'un ou plusieurs fichiers.

    Coordonne:
    - Le parser de chemins (IPathParser)
    - Le matcher (ShowMatcherService) pour le nom canonique
    - Le systeme de fichiers (IFileSystem) pour les liens physiques
    """

    def __init__(
        self,
        parser: IPathParser,
        matcher: ShowMatcherService,
        file_system: IFileSystem,
        sorted_dir: Path,
        dry_run: bool = False,
    ) -> None:
        """
        Initialise le service.

        Args:
            parser: Analyseur de chemins
            matcher: Service de rapprochement catalogue
            file_system: Operations fichiers
            sorted_dir: Racine de l'arborescence de rangement
            dry_run: Si True, calcule les destinations sans creer de lien
        """
        self._parser = parser
        self._matcher = matcher
        self._file_system = file_system
        self._sorted_dir = sorted_dir
        self._dry_run = dry_run

    def get_episode_destination(self, source: Path, match: MatchResult) -> Path:
        """
        Chemin du lien pour un episode identifie.

        Raises:
            LinkCreationError: Si le nom de serie est vide une fois nettoye
        """
        if not sanitize_for_filesystem(match.show_name):
            raise LinkCreationError(
                source, self._sorted_dir, f"nom de serie inutilisable : {match.show_name!r}"
            )
        return build_episode_destination(self._sorted_dir, match, source.suffix)

    async def organize(self, path: Path) -> OrganizeResult:
        """
        Organise un fichier video.

        Args:
            path: Fichier a organiser

        Returns:
            OrganizeResult LINKED ou ALREADY_LINKED

        Raises:
            NoEpisodeInfoError: Si le chemin ne porte pas de saison/episode
            NoCatalogMatchError: Si le catalogue ne connait aucune serie candidate
            LinkCreationError: Si le lien ne peut pas etre cree
        """
        segments = self._parser.parse(path)
        match = await self._matcher.match(segments)
        destination = self.get_episode_destination(path, match)

        if self._dry_run:
            status = (
                OrganizeStatus.ALREADY_LINKED
                if self._file_system.exists(destination)
                else OrganizeStatus.LINKED
            )
            logger.info(f"[dry-run] {path.name} -> {destination}")
            return OrganizeResult(path, status, destination, match)

        created = self._file_system.create_hard_link(path, destination)
        if created:
            logger.info(f"Lien cree : {path.name} -> {destination}")
            status = OrganizeStatus.LINKED
        else:
            status = OrganizeStatus.ALREADY_LINKED
        return OrganizeResult(path, status, destination, match)

    async def organize_safely(self, path: Path) -> OrganizeResult:
        """
        Organise un fichier sans propager les erreurs.

        Un fichier sans saison/episode est SKIPPED, toute autre erreur
        donne un resultat FAILED.
        """
        try:
            return await self.organize(path)
        except NoEpisodeInfoError as e:
            logger.warning(f"Fichier ignore, episode non identifie : {path}")
            return OrganizeResult(path, OrganizeStatus.SKIPPED, error=str(e))
        except Exception as e:
            logger.error(f"Echec de l'organisation de {path} : {e}")
            logger.opt(exception=e).debug("Trace de l'echec")
            return OrganizeResult(path, OrganizeStatus.FAILED, error=str(e))

    async def organize_many(
        self, paths: Iterable[Path], max_concurrency: int = 4
    ) -> OrganizeReport:
        """
        Organise plusieurs fichiers en parallele.

        Args:
            paths: Fichiers a organiser
            max_concurrency: Nombre maximum de fichiers traites simultanement

        Returns:
            OrganizeReport dans l'ordre des fichiers soumis
        """
        semaphore = asyncio.Semaphore(max(1, max_concurrency))

        async def _bounded(path: Path) -> OrganizeResult:
            async with semaphore:
                return await self.organize_safely(path)

        results = await asyncio.gather(*(_bounded(path) for path in paths))
        report = OrganizeReport(results=list(results))
        logger.info(
            f"Organisation terminee : {report.linked} lie(s), "
            f"{report.already_linked} deja lie(s), {report.skipped} ignore(s), "
            f"{report.failed} echec(s)"
        )
        return report
