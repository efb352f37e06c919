"""
Tests for Settings.
"""

import logging
import os

import pytest

from file_manager.config.settings import Settings
from file_manager.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "FILE_MANAGER_LOG_LEVEL",
        "FILE_MANAGER_CHUNK_SIZE",
        "FILE_MANAGER_BROTLI_QUALITY",
        "FILE_MANAGER_START_DIR",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == logging.WARNING
        assert settings.chunk_size == 64 * 1024
        assert settings.brotli_quality == 11
        assert settings.start_dir == os.path.expanduser("~")

    def test_overrides(self, monkeypatch, temp_directory):
        monkeypatch.setenv("FILE_MANAGER_LOG_LEVEL", "debug")
        monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "1024")
        monkeypatch.setenv("FILE_MANAGER_BROTLI_QUALITY", "4")
        monkeypatch.setenv("FILE_MANAGER_START_DIR", temp_directory)

        settings = Settings()

        assert settings.log_level == logging.DEBUG
        assert settings.chunk_size == 1024
        assert settings.brotli_quality == 4
        assert settings.start_dir == temp_directory

    @pytest.mark.parametrize("value", ["0", "-5", "abc"])
    def test_invalid_chunk_size(self, monkeypatch, value):
        monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", value)

        with pytest.raises(ConfigurationError, match="FILE_MANAGER_CHUNK_SIZE"):
            Settings()

    def test_brotli_quality_out_of_range(self, monkeypatch):
        monkeypatch.setenv("FILE_MANAGER_BROTLI_QUALITY", "12")

        with pytest.raises(ConfigurationError, match="must be <= 11"):
            Settings()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("FILE_MANAGER_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError, match="not a valid logging level"):
            Settings()

    def test_start_dir_must_exist(self, monkeypatch, temp_directory):
        monkeypatch.setenv(
            "FILE_MANAGER_START_DIR", os.path.join(temp_directory, "test1.txt")
        )

        with pytest.raises(ConfigurationError, match="is not a directory"):
            Settings()
