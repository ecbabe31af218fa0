"""
Tests unitaires pour CatalogCache.

Ces tests verifient:
- Stockage et recuperation de valeurs
- TTL differencies pour recherche (24h) et traductions (7j)
- Persistance entre deux instances
"""

from pathlib import Path

import pytest

from chiprr.adapters.api.cache import CatalogCache
from chiprr.core.ports.catalog import CatalogEntry


class TestCatalogCache:
    """Tests pour la classe CatalogCache."""

    @pytest.fixture
    def cache(self, tmp_path: Path) -> CatalogCache:
        """Cree un cache avec un repertoire temporaire."""
        cache = CatalogCache(cache_dir=tmp_path / "test_cache")
        yield cache
        cache.close()

    @pytest.mark.asyncio
    async def test_get_returns_none_for_missing_key(self, cache: CatalogCache) -> None:
        """get() retourne None pour une cle inexistante."""
        assert await cache.get("tmdb:search_show:inconnue") is None

    @pytest.mark.asyncio
    async def test_stores_catalog_entries(self, cache: CatalogCache) -> None:
        """Les CatalogEntry sont stockees et relues a l'identique."""
        entries = [
            CatalogEntry(
                id="71446",
                canonical_name="Money Heist",
                alternate_names=frozenset({"money heist", "la casa de papel"}),
            )
        ]

        await cache.set_search("tmdb:search_show:la casa de papel", entries)

        assert await cache.get("tmdb:search_show:la casa de papel") == entries

    def test_search_ttl_uses_24_hours(self) -> None:
        """SEARCH_TTL est defini a 24 heures (86400 secondes)."""
        assert CatalogCache.SEARCH_TTL == 86400

    def test_translations_ttl_uses_7_days(self) -> None:
        """TRANSLATIONS_TTL est defini a 7 jours (604800 secondes)."""
        assert CatalogCache.TRANSLATIONS_TTL == 604800

    @pytest.mark.asyncio
    async def test_set_translations_round_trip(self, cache: CatalogCache) -> None:
        """set_translations() stocke un tuple de noms."""
        await cache.set_translations("tmdb:translations:71446", ("Haus des Geldes",))
        assert await cache.get("tmdb:translations:71446") == ("Haus des Geldes",)

    @pytest.mark.asyncio
    async def test_empty_list_is_a_cached_value(self, cache: CatalogCache) -> None:
        """Une recherche sans resultat est mise en cache (liste vide, pas None)."""
        await cache.set_search("tmdb:search_show:zzz", [])
        assert await cache.get("tmdb:search_show:zzz") == []

    @pytest.mark.asyncio
    async def test_values_persist_across_instances(self, tmp_path: Path) -> None:
        """Le cache disque survit a la fermeture."""
        first = CatalogCache(cache_dir=tmp_path / "persist")
        await first.set_search("tmdb:search_show:dark", ["x"])
        first.close()

        second = CatalogCache(cache_dir=tmp_path / "persist")
        try:
            assert await second.get("tmdb:search_show:dark") == ["x"]
        finally:
            second.close()
