"""
Service de rapprochement entre les segments d'un chemin et le catalogue.

ShowMatcherService determine l'identite definitive d'un episode :
- saison/episode : depuis le fichier, sinon depuis le repertoire le plus proche
- nom de serie : via une liste ordonnee d'hypotheses (nom du fichier puis noms
  des repertoires, du plus proche au plus eloigne), testees contre le catalogue

Strategie de resolution du nom (arret au premier succes):
1. correspondance exacte d'un alias, hypothese par hypothese
2. correspondance exacte apres suppression des diacritiques
3. premier resultat du catalogue pour le nom du fichier (faible confiance)
"""

from typing import Optional

from loguru import logger

from chiprr.core.exceptions import NoCatalogMatchError, NoEpisodeInfoError
from chiprr.core.ports.catalog import CatalogEntry, CatalogLookup
from chiprr.core.value_objects.match_result import MatchResult
from chiprr.core.value_objects.path_segment import ParsedSegment
from chiprr.utils.helpers import normalize_accents


def resolve_episode(segments: list[ParsedSegment]) -> Optional[tuple[int, int]]:
    """
    Determine la saison et l'episode a utiliser.

    Le fichier est prioritaire. Sinon, les repertoires sont parcourus du plus
    proche du fichier au plus eloigne, et le premier qui porte une saison ET
    un episode est retenu.

    Returns:
        Tuple (saison, episode), ou None si aucun segment n'en porte
    """
    for segment in reversed(segments):
        if segment.has_episode_info:
            return segment.season, segment.episode
    return None


def build_name_hypotheses(
    segments: list[ParsedSegment], min_directory_name_length: int = 3
) -> list[str]:
    """
    Construit la liste ordonnee des noms de serie a essayer.

    Ordre: nom du fichier, puis noms des repertoires du plus proche au plus
    eloigne. Les noms de repertoire trop courts ("tv", "home") et les noms
    vides sont ignores, les doublons ne sont gardes qu'a leur premiere position.
    """
    hypotheses: list[str] = []
    for segment in reversed(segments):
        name = segment.best_effort_show_name
        if not name:
            continue
        if not segment.is_file and len(name) <= min_directory_name_length:
            continue
        if name not in hypotheses:
            hypotheses.append(name)
    return hypotheses


def find_exact_alias(name: str, candidates: list[CatalogEntry]) -> Optional[CatalogEntry]:
    """Retourne le premier candidat dont un alias est exactement le nom (casse ignoree)."""
    wanted = name.lower()
    for candidate in candidates:
        if wanted in candidate.alternate_names:
            return candidate
    return None


def find_alias_without_diacritics(
    name: str, candidates: list[CatalogEntry]
) -> Optional[CatalogEntry]:
    """Comme find_exact_alias, en ignorant les accents des deux cotes."""
    wanted = normalize_accents(name.lower())
    for candidate in candidates:
        aliases = {normalize_accents(alias) for alias in candidate.alternate_names}
        if wanted in aliases:
            return candidate
    return None


class ShowMatcherService:
    """
    Service de resolution du nom de serie et du numero d'episode.

    Ne depend que d'une capacite de recherche `lookup(nom) -> candidats`.
    La memoisation globale des reponses est du ressort du client catalogue ;
    le service ne fait que reutiliser les reponses deja obtenues pendant un
    meme appel a match().
    """

    MIN_DIRECTORY_NAME_LENGTH: int = 3
    """Les noms de repertoire de cette longueur ou moins ne sont pas essayes."""

    def __init__(self, lookup: CatalogLookup) -> None:
        """
        Initialise le service.

        Args:
            lookup: Fonction async de recherche dans le catalogue
        """
        self._lookup = lookup

    async def match(self, segments: list[ParsedSegment]) -> MatchResult:
        """
        Resout l'identite d'un episode a partir des segments de son chemin.

        Args:
            segments: Resultat de PathParserService.parse(), racine -> fichier

        Returns:
            MatchResult avec le nom canonique, la saison et l'episode

        Raises:
            NoEpisodeInfoError: Si aucun segment ne porte saison et episode
            NoCatalogMatchError: Si le catalogue ne retourne aucun candidat
        """
        if not segments:
            raise NoEpisodeInfoError("")

        file_segment = segments[-1]
        episode_info = resolve_episode(segments)
        if episode_info is None:
            raise NoEpisodeInfoError(file_segment.raw_name)
        season, episode = episode_info

        hypotheses = build_name_hypotheses(segments, self.MIN_DIRECTORY_NAME_LENGTH)
        responses: dict[str, list[CatalogEntry]] = {}

        show_name = await self._resolve_show_name(file_segment, hypotheses, responses)
        logger.debug(
            f"Episode identifie : {show_name} S{season:02d}E{episode:02d} "
            f"({file_segment.raw_name})"
        )
        return MatchResult(show_name=show_name, season=season, episode=episode)

    async def _resolve_show_name(
        self,
        file_segment: ParsedSegment,
        hypotheses: list[str],
        responses: dict[str, list[CatalogEntry]],
    ) -> str:
        """Parcourt les strategies de resolution jusqu'au premier succes."""
        for name in hypotheses:
            candidate = find_exact_alias(name, await self._search(name, responses))
            if candidate is not None:
                logger.debug(f"Correspondance exacte : {name!r} -> {candidate.canonical_name!r}")
                return candidate.canonical_name

        logger.debug(f"Aucune correspondance exacte pour {hypotheses}, essai sans diacritiques")
        for name in hypotheses:
            candidate = find_alias_without_diacritics(
                name, await self._search(name, responses)
            )
            if candidate is not None:
                logger.debug(
                    f"Correspondance sans diacritiques : {name!r} -> {candidate.canonical_name!r}"
                )
                return candidate.canonical_name

        fallback_name = file_segment.best_effort_show_name or (
            hypotheses[0] if hypotheses else ""
        )
        if not fallback_name:
            raise NoCatalogMatchError(file_segment.raw_name)

        candidates = await self._search(fallback_name, responses)
        if not candidates:
            logger.error(f"Aucune serie trouvee pour : {fallback_name!r}")
            raise NoCatalogMatchError(fallback_name)

        first = candidates[0]
        logger.warning(
            f"Pas de correspondance exacte pour {fallback_name!r}, "
            f"utilisation du premier resultat : {first.canonical_name!r}"
        )
        return first.canonical_name

    async def _search(
        self, name: str, responses: dict[str, list[CatalogEntry]]
    ) -> list[CatalogEntry]:
        """Interroge le catalogue, une seule fois par nom pour un meme fichier."""
        if name not in responses:
            responses[name] = await self._lookup(name)
        return responses[name]
