"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- SegmentType : Nature d'un element de chemin (fichier ou repertoire)
- PathSegment : Element brut d'un chemin
- ParsedSegment : Interpretation d'un element de chemin (nom, saison, episode)
- MatchResult : Resultat final du rapprochement avec le catalogue
"""

from chiprr.core.value_objects.match_result import MatchResult
from chiprr.core.value_objects.path_segment import (
    ParsedSegment,
    PathSegment,
    SegmentType,
)

__all__ = [
    "SegmentType",
    "PathSegment",
    "ParsedSegment",
    "MatchResult",
]
