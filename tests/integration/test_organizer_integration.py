"""
Tests d'integration de l'organisation avec les vrais adaptateurs.

Ces tests utilisent les implementations reelles (pas de mocks) du systeme de
fichiers, du filtre .chiprrignore, du parser et du matcher. Seul le catalogue
TMDB est remplace par un catalogue en memoire.
"""

import os
from pathlib import Path

import pytest

from chiprr.adapters.file_system import FileSystemAdapter
from chiprr.adapters.ignore_filter import IgnoreFilter
from chiprr.services.organizer import OrganizerService, OrganizeStatus
from chiprr.services.path_parser import PathParserService
from chiprr.services.scanner import ScannerService
from chiprr.services.show_matcher import ShowMatcherService
from tests.conftest import FakeCatalog, make_entry


@pytest.fixture
def downloads(tmp_path: Path) -> Path:
    """Repertoire de telechargements avec quelques releases."""
    root = tmp_path / "downloads"
    releases = {
        "Breaking.Bad.S01E03.720p.BluRay.x264-DEMAND.mkv": b"bb",
        "La Casa de Papel/La Casa de Papel 2x03.mp4": b"lcdp",
        "Peaky Blinders (Proper) - Temporada 1 [HDTV 720p][Cap.105]/PB 1x05 [HDTV].mkv": b"pb",
        "Samples/Breaking.Bad.S01E03.sample.mkv": b"sample",
        "notes.txt": b"txt",
        "random.mkv": b"random",
    }
    for relative, content in releases.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    (root / ".chiprrignore").write_text("# echantillons\nSamples/\n")
    return root


@pytest.fixture
def catalog() -> FakeCatalog:
    breaking_bad = make_entry("1396", "Breaking Bad")
    money_heist = make_entry("71446", "Money Heist", "la casa de papel")
    return FakeCatalog(
        {
            "breaking bad": [breaking_bad],
            "la casa de papel": [money_heist],
            "peaky blinders": [make_entry("60574", "Peaky Blinders")],
        }
    )


class TestOrganizeFlow:
    """Flow complet : scan, analyse, rapprochement, lien physique."""

    @pytest.mark.asyncio
    async def test_scan_and_organize(
        self, downloads: Path, catalog: FakeCatalog, tmp_path: Path
    ) -> None:
        file_system = FileSystemAdapter()
        sorted_dir = tmp_path / "sorted"
        scanner = ScannerService(file_system=file_system, ignore_filter=IgnoreFilter())
        organizer = OrganizerService(
            parser=PathParserService(),
            matcher=ShowMatcherService(catalog.search_show),
            file_system=file_system,
            sorted_dir=sorted_dir,
        )

        paths = list(scanner.scan(downloads))
        report = await organizer.organize_many(paths)

        assert {path.name for path in paths} == {
            "Breaking.Bad.S01E03.720p.BluRay.x264-DEMAND.mkv",
            "La Casa de Papel 2x03.mp4",
            "PB 1x05 [HDTV].mkv",
            "random.mkv",
        }
        assert (report.linked, report.skipped, report.failed) == (3, 1, 0)

        expected = {
            sorted_dir / "Breaking Bad" / "Season 1" / "Breaking Bad S01E03.mkv": b"bb",
            sorted_dir / "Money Heist" / "Season 2" / "Money Heist S02E03.mp4": b"lcdp",
            sorted_dir / "Peaky Blinders" / "Season 1" / "Peaky Blinders S01E05.mkv": b"pb",
        }
        for destination, content in expected.items():
            assert destination.read_bytes() == content

        source = downloads / "Breaking.Bad.S01E03.720p.BluRay.x264-DEMAND.mkv"
        linked = sorted_dir / "Breaking Bad" / "Season 1" / "Breaking Bad S01E03.mkv"
        assert os.path.samefile(source, linked)

    @pytest.mark.asyncio
    async def test_second_run_is_idempotent(
        self, downloads: Path, catalog: FakeCatalog, tmp_path: Path
    ) -> None:
        file_system = FileSystemAdapter()
        scanner = ScannerService(file_system=file_system, ignore_filter=IgnoreFilter())
        organizer = OrganizerService(
            parser=PathParserService(),
            matcher=ShowMatcherService(catalog.search_show),
            file_system=file_system,
            sorted_dir=tmp_path / "sorted",
        )

        await organizer.organize_many(list(scanner.scan(downloads)))
        report = await organizer.organize_many(list(scanner.scan(downloads)))

        assert (report.linked, report.already_linked, report.failed) == (0, 3, 0)
