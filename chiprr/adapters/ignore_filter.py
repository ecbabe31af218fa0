"""
Filtre d'exclusion base sur les fichiers .chiprrignore.

Un fichier .chiprrignore peut etre place dans n'importe quel repertoire sous
le repertoire d'entree. Il s'applique a tout ce qui se trouve en dessous.

Syntaxe (proche de gitignore):
- fichier vide : tout le contenu du repertoire est ignore
- lignes vides et lignes commencant par # : ignorees
- !motif : re-inclut ce qu'un motif precedent excluait
- motif/ : ne s'applique qu'aux repertoires
- motif contenant / : relatif au repertoire du .chiprrignore
- autre motif : compare a chaque element du chemin (*.nfo, sample, Extras)

La derniere regle qui correspond l'emporte, les fichiers les plus profonds
etant lus en dernier.
"""

from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Optional

from loguru import logger

from chiprr.utils.constants import IGNORE_FILENAME


@dataclass(frozen=True)
class IgnoreRule:
    """Regle issue d'une ligne de .chiprrignore."""

    pattern: str
    negated: bool = False
    directory_only: bool = False
    anchored: bool = False

    def matches(self, parts: tuple[str, ...]) -> bool:
        """
        Teste la regle sur un chemin relatif au repertoire du .chiprrignore.

        Args:
            parts: Elements du chemin, le dernier etant le fichier
        """
        # Les elements testables: tous, ou seulement les repertoires parents
        limit = len(parts) - 1 if self.directory_only else len(parts)

        if self.anchored:
            return any(
                fnmatchcase("/".join(parts[: index + 1]), self.pattern)
                for index in range(limit)
            )
        return any(fnmatchcase(part, self.pattern) for part in parts[:limit])


def parse_ignore_rules(content: str) -> list[IgnoreRule]:
    """Convertit le contenu d'un .chiprrignore en liste de regles."""
    rules = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        negated = line.startswith("!")
        if negated:
            line = line[1:]

        directory_only = line.endswith("/")
        line = line.rstrip("/")

        anchored = "/" in line
        line = line.lstrip("/")

        if line:
            rules.append(
                IgnoreRule(
                    pattern=line,
                    negated=negated,
                    directory_only=directory_only,
                    anchored=anchored,
                )
            )
    return rules


class IgnoreFilter:
    """
    Decide si un fichier doit etre ignore d'apres les .chiprrignore.

    Les fichiers d'exclusion sont relus a chaque appel : en mode surveillance
    une modification est prise en compte sans redemarrage.
    """

    def __init__(self, ignore_filename: str = IGNORE_FILENAME) -> None:
        self._ignore_filename = ignore_filename

    def should_ignore(self, file_path: Path, base_path: Path) -> bool:
        """
        Indique si file_path est exclu par un .chiprrignore.

        Args:
            file_path: Fichier a tester
            base_path: Repertoire d'entree (aucun .chiprrignore au-dessus n'est lu)

        Returns:
            True si le fichier doit etre ignore
        """
        if file_path.name == self._ignore_filename:
            return True

        try:
            relative = file_path.relative_to(base_path)
        except ValueError:
            logger.warning(f"{file_path} n'est pas sous {base_path}, aucun filtre applique")
            return False

        ignored = False
        directory = base_path
        parts = relative.parts
        # Du repertoire d'entree vers le repertoire du fichier
        for depth in range(len(parts)):
            rules = self._load_rules(directory)
            if rules is not None:
                if not rules:
                    logger.debug(f"{relative} ignore : {self._ignore_filename} vide dans {directory}")
                    return True
                for rule in rules:
                    if rule.matches(parts[depth:]):
                        ignored = not rule.negated
            if depth < len(parts) - 1:
                directory = directory / parts[depth]

        if ignored:
            logger.debug(f"{relative} ignore par une regle {self._ignore_filename}")
        return ignored

    def _load_rules(self, directory: Path) -> Optional[list[IgnoreRule]]:
        """
        Lit le .chiprrignore d'un repertoire.

        Returns:
            None si absent, liste vide si le fichier est vide (tout ignorer),
            sinon les regles
        """
        ignore_file = directory / self._ignore_filename
        if not ignore_file.is_file():
            return None

        content = ignore_file.read_text(encoding="utf-8")
        if not content.strip():
            return []

        rules = parse_ignore_rules(content)
        # Un fichier ne contenant que des commentaires ne doit pas tout ignorer
        if not rules:
            return None
        return rules
