"""
Tests unitaires pour les fonctions de nommage des episodes.
"""

from pathlib import Path

import pytest

from chiprr.core.value_objects.match_result import MatchResult
from chiprr.services.renamer import (
    MAX_FILENAME_LENGTH,
    build_episode_destination,
    format_season_directory,
    generate_episode_filename,
    sanitize_for_filesystem,
)


class TestSanitizeForFilesystem:
    """Tests de sanitize_for_filesystem."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Money Heist", "Money Heist"),
            ("Marvel's Agents of S.H.I.E.L.D", "Marvel's Agents of S.H.I.E.L.D"),
            ("Star Wars: Andor", "Star Wars- Andor"),
            ("Face/Off", "Face-Off"),
            ("What If?", "What If..."),
            ("Who? Why?", "Who... Why..."),
        ],
    )
    def test_sanitize(self, text: str, expected: str) -> None:
        assert sanitize_for_filesystem(text) == expected

    def test_empty_string(self) -> None:
        assert sanitize_for_filesystem("") == ""

    def test_truncates_long_names(self) -> None:
        assert len(sanitize_for_filesystem("a" * 300)) == MAX_FILENAME_LENGTH


class TestEpisodeNaming:
    def test_season_directory_is_not_padded(self) -> None:
        assert format_season_directory(2) == "Season 2"
        assert format_season_directory(12) == "Season 12"

    def test_episode_filename(self) -> None:
        match = MatchResult(show_name="Money Heist", season=2, episode=3)
        assert generate_episode_filename(match, ".mkv") == "Money Heist S02E03.mkv"

    def test_episode_filename_accepts_extension_without_dot(self) -> None:
        match = MatchResult(show_name="Dark", season=1, episode=10)
        assert generate_episode_filename(match, "mp4") == "Dark S01E10.mp4"

    def test_episode_filename_with_three_digit_episode(self) -> None:
        match = MatchResult(show_name="One Piece", season=1, episode=105)
        assert generate_episode_filename(match, ".mkv") == "One Piece S01E105.mkv"

    def test_destination(self) -> None:
        match = MatchResult(show_name="Star Wars: Andor", season=1, episode=4)

        destination = build_episode_destination(Path("/sorted"), match, ".mkv")

        assert destination == Path(
            "/sorted/Star Wars- Andor/Season 1/Star Wars- Andor S01E04.mkv"
        )
