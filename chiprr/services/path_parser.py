"""
Service d'inference d'episode depuis un chemin de fichier video.

PathParserService decoupe un chemin en segments (repertoires puis fichier) et
interprete chaque segment independamment :
- extraction de la saison et de l'episode (S01E05, 1x05, Cap.105, E05, S03...)
- nettoyage du nom pour obtenir un nom de serie "au mieux"

Chaque etape du nettoyage est une fonction pure, l'ordre du pipeline compte :
1. troncature avant le marqueur d'episode
2. suppression des blocs entre crochets/parentheses/accolades/chevrons
3. normalisation des espaces autour des tirets
4. points -> espaces (si les points sont frequents)
5. underscores -> espaces (si les underscores sont frequents)
6. suppression des marqueurs de qualite (720p, x264, WEB-DL...)
7. fusion des espaces
8. conservation du titre avant " - " (retire les titres d'episode)
9. mise en minuscules
puis retrait des separateurs residuels en debut/fin de nom.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from chiprr.core.ports.parser import IPathParser
from chiprr.core.value_objects.path_segment import (
    ParsedSegment,
    PathSegment,
    SegmentType,
)
from chiprr.utils.constants import QUALITY_TOKENS

# Patterns de saison/episode, dans l'ordre de priorite
EPISODE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # S01E01, S1E1, s07e105
    re.compile(r"s(?P<season>\d{1,2})e(?P<episode>\d{1,3})", re.IGNORECASE),
    # 1x01, 01x01, 7x05
    re.compile(r"(?P<season>\d{1,2})x(?P<episode>\d{1,3})", re.IGNORECASE),
    # Cap.101, Cap101, Capitulo 101 (convention des releases espagnoles)
    re.compile(
        r"cap(?:itulo)?\.?\s*(?P<season>\d{1,2})(?P<episode>\d{2})", re.IGNORECASE
    ),
    # Cap.05 (episode seul)
    re.compile(r"cap(?:itulo)?\.?\s*(?P<episode>\d{1,2})", re.IGNORECASE),
    # E01, Ep01, Episode 1 (episode seul)
    re.compile(r"(?:e|ep|episode)\.?\s*(?P<episode>\d{1,3})", re.IGNORECASE),
    # One Punch Man S03 - E01 (saison seule, dernier recours)
    re.compile(r"s(?P<season>\d{1,2})", re.IGNORECASE),
)

# Extension de fichier: point + 2 a 10 caracteres alphanumeriques
_EXTENSION = re.compile(r"\.[a-zA-Z0-9]{2,10}$")

# En dessous de cette position, un marqueur d'episode fait partie du nom (ex: "E01")
EPISODE_MARKER_MIN_OFFSET = 4

_DANGLING_BRACKET = re.compile(r"[(\[<]$")

_BRACKETED_SPANS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\[[^\]]*\]"),
    re.compile(r"\([^)]*\)"),
    re.compile(r"\{[^}]*\}"),
    re.compile(r"<[^>]*>"),
)

_DASH_SPACING = re.compile(r"(\w)\s+-\s+(\w)")

# Proportion au-dela de laquelle un separateur remplace les espaces (Breaking.Bad.S01E01)
SEPARATOR_DENSITY_THRESHOLD = 0.07

_QUALITY_TOKENS = re.compile(
    r"\b(?:" + "|".join(re.escape(token) for token in QUALITY_TOKENS) + r")\b",
    re.IGNORECASE,
)

_WHITESPACE = re.compile(r"\s+")

# Titre "propre": pas d'espaces consecutifs ni de debris avant le premier " - "
_TITLE_PREFIX = re.compile(r"(?:\S\s?)+")

_TITLE_SEPARATOR = " - "

_EDGE_GARBAGE = re.compile(r"^[-.]|[-.]$")


@dataclass(frozen=True)
class EpisodeMatch:
    """
    Saison et episode trouves dans un texte.

    Attributs:
        season: Numero de saison
        episode: Numero d'episode
        matched_strings: Sous-chaines reconnues, dans l'ordre des patterns
    """

    season: int
    episode: int
    matched_strings: tuple[str, ...]


def split_path(file_path: Union[str, Path]) -> list[str]:
    """
    Decoupe un chemin en elements, de la racine vers le fichier.

    Le chemin est normalise (., .., separateurs redondants) et la racine
    (/, C:\\) est exclue.
    """
    normalized = Path(os.path.normpath(os.fspath(file_path)))
    return [part for part in normalized.parts if part not in (normalized.anchor, ".")]


def segment_path(file_path: Union[str, Path]) -> list[PathSegment]:
    """
    Decoupe un chemin en PathSegment types (DIRECTORY... puis FILE).

    Raises:
        ValueError: Si le chemin ne contient aucun element
    """
    parts = split_path(file_path)
    if not parts:
        raise ValueError(f"Chemin vide ou sans nom de fichier : {file_path!r}")

    last_index = len(parts) - 1
    return [
        PathSegment(
            raw_name=part,
            type=SegmentType.FILE if index == last_index else SegmentType.DIRECTORY,
            index=index,
        )
        for index, part in enumerate(parts)
    ]


def strip_extension(filename: str) -> str:
    """Retire l'extension d'un nom de fichier (.mkv, .mp4...)."""
    return _EXTENSION.sub("", filename).strip()


def find_episode_and_season(text: str) -> Optional[EpisodeMatch]:
    """
    Cherche une saison et un episode dans un texte.

    Les patterns sont essayes dans l'ordre. Chaque pattern ne retient que sa
    premiere occurrence, et une valeur deja trouvee n'est pas ecrasee par un
    pattern moins prioritaire. La recherche s'arrete des que la saison et
    l'episode sont connus.

    Args:
        text: Nom brut d'un element de chemin

    Returns:
        EpisodeMatch si saison ET episode ont ete trouves, None sinon
    """
    season: Optional[int] = None
    episode: Optional[int] = None
    matched_strings: list[str] = []

    for pattern in EPISODE_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue

        matched_strings.append(match.group(0))
        groups = match.groupdict()
        if season is None and groups.get("season") is not None:
            season = int(groups["season"])
        if episode is None and groups.get("episode") is not None:
            episode = int(groups["episode"])

        if season is not None and episode is not None:
            return EpisodeMatch(
                season=season,
                episode=episode,
                matched_strings=tuple(matched_strings),
            )

    return None


def truncate_at_episode_marker(text: str, matched_strings: Sequence[str]) -> str:
    """
    Coupe le texte juste avant le premier marqueur d'episode.

    Un marqueur situe dans les premiers caracteres est ignore pour ne pas
    vider un nom comme "E01". Un crochet ouvrant laisse en fin de chaine
    est retire.
    """
    positions = [
        position
        for position in (text.find(matched) for matched in matched_strings)
        if position > EPISODE_MARKER_MIN_OFFSET
    ]
    if not positions:
        return text
    return _DANGLING_BRACKET.sub("", text[: min(positions)])


def strip_bracketed_spans(text: str) -> str:
    """Supprime tout ce qui est entre [], (), {} et <>."""
    for pattern in _BRACKETED_SPANS:
        text = pattern.sub("", text)
    return text


def normalize_dash_spacing(text: str) -> str:
    """Normalise "Show  -  Title" en "Show - Title"."""
    return _DASH_SPACING.sub(r"\1 - \2", text)


def replace_dense_separator(text: str, separator: str, reference: str) -> str:
    """
    Remplace un separateur par des espaces s'il est frequent dans le texte de reference.

    Distingue un nom de release pointé (Breaking.Bad.S01E01) d'un titre
    contenant simplement un point (Mr. Robot).

    Args:
        text: Texte en cours de nettoyage
        separator: Caractere a remplacer ("." ou "_")
        reference: Texte original, avant nettoyage, sur lequel la densite est mesuree
    """
    if not reference:
        return text
    if reference.count(separator) / len(reference) > SEPARATOR_DENSITY_THRESHOLD:
        return text.replace(separator, " ")
    return text


def strip_quality_tokens(text: str) -> str:
    """Supprime les marqueurs de qualite/codec (720p, x264, WEB-DL...)."""
    return _QUALITY_TOKENS.sub("", text)


def collapse_whitespace(text: str) -> str:
    """Fusionne les espaces consecutifs et retire ceux de debut/fin."""
    return _WHITESPACE.sub(" ", text).strip()


def keep_title_prefix(text: str) -> str:
    """
    Conserve uniquement la partie avant le premier " - ".

    Retire les titres d'episode ("The Office - Christmas Party"), sauf si
    le prefixe ne ressemble pas a un titre.
    """
    if _TITLE_SEPARATOR not in text:
        return text
    prefix = text.split(_TITLE_SEPARATOR)[0]
    if _TITLE_PREFIX.fullmatch(prefix):
        return prefix
    return text


def clean_show_name(text: str, matched_strings: Sequence[str] = ()) -> str:
    """
    Applique le pipeline de nettoyage pour obtenir un nom de serie.

    Args:
        text: Nom de l'element (sans extension pour un fichier)
        matched_strings: Marqueurs d'episode trouves dans l'element

    Returns:
        Nom nettoye, en minuscules
    """
    steps = (
        ("troncature", lambda s: truncate_at_episode_marker(s, matched_strings)),
        ("crochets", strip_bracketed_spans),
        ("tirets", normalize_dash_spacing),
        ("points", lambda s: replace_dense_separator(s, ".", reference=text)),
        ("underscores", lambda s: replace_dense_separator(s, "_", reference=text)),
        ("qualite", strip_quality_tokens),
        ("espaces", collapse_whitespace),
        ("titre", keep_title_prefix),
        ("minuscules", str.lower),
    )

    name = text
    for label, step in steps:
        name = step(name)
        logger.debug(f"Nettoyage de {text!r} [{label}] -> {name!r}")
    return name


def trim_garbage(text: str) -> str:
    """Retire les tirets, points et espaces residuels en debut et fin de nom."""
    previous = None
    while previous != text:
        previous = text
        text = _EDGE_GARBAGE.sub("", text.strip()).strip()
    return text


class PathParserService(IPathParser):
    """
    Service d'inference de serie/saison/episode depuis un chemin.

    Chaque segment est analyse sans dependre des autres : les repertoires
    portent souvent le vrai nom de la serie alors que le fichier porte le
    bruit du groupe de release, ou l'inverse. Le matcher essaiera ensuite
    chaque nom comme hypothese independante.
    """

    def parse(self, file_path: Union[str, Path]) -> list[ParsedSegment]:
        """
        Analyse un chemin de fichier video.

        Args:
            file_path: Chemin du fichier

        Returns:
            Un ParsedSegment par element, de la racine vers le fichier
        """
        segments = [self._parse_segment(segment) for segment in segment_path(file_path)]
        logger.debug(f"Chemin analyse : {file_path} -> {len(segments)} segment(s)")
        return segments

    def _parse_segment(self, segment: PathSegment) -> ParsedSegment:
        """Interprete un element de chemin isole."""
        text = segment.raw_name
        if segment.type == SegmentType.FILE:
            text = strip_extension(text)

        # Les marqueurs ne servent au nettoyage que si saison ET episode sont trouves
        episode_match = find_episode_and_season(segment.raw_name)
        matched_strings = episode_match.matched_strings if episode_match else ()

        show_name = trim_garbage(clean_show_name(text, matched_strings))

        return ParsedSegment(
            raw_name=segment.raw_name,
            best_effort_show_name=show_name,
            season=episode_match.season if episode_match else None,
            episode=episode_match.episode if episode_match else None,
            type=segment.type,
            index=segment.index,
        )
