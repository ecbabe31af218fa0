"""
Tests unitaires pour la configuration (Settings) et le niveau de log.
"""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from chiprr.config import Settings, require_settings
from chiprr.core.exceptions import ConfigurationError
from chiprr.logging_config import level_for_verbosity


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Retire les variables CHIPRR_ de l'environnement du test."""
    for name in list(os.environ):
        if name.startswith("CHIPRR_"):
            monkeypatch.delenv(name)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.input_dir is None
        assert settings.sorted_dir is None
        assert settings.tmdb_token is None
        assert not settings.tmdb_enabled
        assert settings.max_concurrent_files == 4
        assert settings.log_level == "INFO"
        assert settings.cache_dir == Path(".cache/tmdb")

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHIPRR_INPUT_DIR", "~/downloads")
        monkeypatch.setenv("CHIPRR_TMDB_TOKEN", "abc")
        monkeypatch.setenv("CHIPRR_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.input_dir == Path.home() / "downloads"
        assert settings.tmdb_enabled
        assert settings.log_level == "DEBUG"

    def test_empty_path_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHIPRR_SORTED_DIR", "")

        assert Settings(_env_file=None).sorted_dir is None

    def test_max_concurrent_files_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_concurrent_files=0)


class TestRequireSettings:
    def test_passes_when_present(self, test_settings: Settings) -> None:
        require_settings(test_settings, "input_dir", "sorted_dir", "tmdb_token")

    def test_lists_missing_variables(self) -> None:
        settings = Settings(_env_file=None, input_dir=Path("/downloads"))

        with pytest.raises(ConfigurationError) as exc_info:
            require_settings(settings, "input_dir", "sorted_dir", "tmdb_token")

        message = str(exc_info.value)
        assert "CHIPRR_SORTED_DIR" in message
        assert "CHIPRR_TMDB_TOKEN" in message
        assert "CHIPRR_INPUT_DIR" not in message


class TestLevelForVerbosity:
    @pytest.mark.parametrize(
        "verbose, quiet, expected",
        [
            (0, False, "INFO"),
            (1, False, "DEBUG"),
            (2, False, "DEBUG"),
            (0, True, "ERROR"),
            (2, True, "ERROR"),
        ],
    )
    def test_levels(self, verbose: int, quiet: bool, expected: str) -> None:
        assert level_for_verbosity("INFO", verbose, quiet) == expected
