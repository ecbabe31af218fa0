"""
Fixtures pytest partagees pour les tests chiprr.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de IFileSystem
- Faux catalogue en memoire (lookup async)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from chiprr.config import Settings
from chiprr.core.ports.catalog import CatalogEntry
from chiprr.core.ports.file_system import IFileSystem


class FakeCatalog:
    """
    Catalogue en memoire : nom recherche -> candidats.

    Enregistre chaque requete recue dans `queries`.
    """

    def __init__(self, responses: dict[str, list[CatalogEntry]] | None = None) -> None:
        self.responses = responses or {}
        self.queries: list[str] = []

    async def search_show(self, query: str) -> list[CatalogEntry]:
        self.queries.append(query)
        return list(self.responses.get(query, []))


def make_entry(entry_id: str, name: str, *aliases: str) -> CatalogEntry:
    """CatalogEntry dont les alias contiennent le nom et les alias fournis."""
    return CatalogEntry(
        id=entry_id,
        canonical_name=name,
        alternate_names=frozenset({name.lower(), *(alias.lower() for alias in aliases)}),
    )


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.is_video_file.return_value = True
    mock.create_hard_link.return_value = True
    return mock


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    """Catalogue vide, a remplir dans chaque test via `responses`."""
    return FakeCatalog()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour creer une structure de repertoires
    isolee pour chaque test.
    """
    input_dir = tmp_path / "downloads"
    sorted_dir = tmp_path / "sorted"
    input_dir.mkdir(parents=True)
    sorted_dir.mkdir(parents=True)

    return Settings(
        _env_file=None,
        input_dir=input_dir,
        sorted_dir=sorted_dir,
        tmdb_token="test_token",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "logs" / "chiprr.log",
    )
