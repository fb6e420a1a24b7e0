"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from crossfs.config import Settings


class TestSettingsDefaults:
    """Tests for default settings."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings()
        assert settings.platform == "auto"
        assert settings.encoding == "utf-8"
        assert settings.log_level == "WARNING"

    def test_log_level_is_uppercased(self) -> None:
        """Test log levels are case-insensitive."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_values(self) -> None:
        """Test invalid values raise ValueError."""
        with pytest.raises(ValueError):
            Settings(platform="amiga")  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            Settings(log_level="LOUD")

    def test_unknown_keys_rejected(self) -> None:
        """Test typos in settings are not silently ignored."""
        with pytest.raises(ValueError):
            Settings.model_validate({"platfrom": "posix"})


class TestSettingsFromFile:
    """Tests for Settings.from_file."""

    def test_from_file(self, tmp_path: Path) -> None:
        """Test loading YAML."""
        config = tmp_path / "crossfs.yaml"
        config.write_text("platform: windows\nencoding: latin-1\n")

        settings = Settings.from_file(config)

        assert settings.platform == "windows"
        assert settings.encoding == "latin-1"

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file gives defaults."""
        config = tmp_path / "crossfs.yaml"
        config.write_text("")
        assert Settings.from_file(config) == Settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Settings.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ValueError."""
        config = tmp_path / "crossfs.yaml"
        config.write_text("platform: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid settings file"):
            Settings.from_file(config)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test a YAML list is rejected."""
        config = tmp_path / "crossfs.yaml"
        config.write_text("- posix\n")
        with pytest.raises(ValueError, match="mapping"):
            Settings.from_file(config)


class TestSettingsLoad:
    """Tests for merging file and environment."""

    def test_from_env(self) -> None:
        """Test environment variables are read."""
        settings = Settings.from_env({"CROSSFS_PLATFORM": "posix", "CROSSFS_LOG_LEVEL": "info"})
        assert settings.platform == "posix"
        assert settings.log_level == "INFO"

    def test_env_wins_over_file(self, tmp_path: Path) -> None:
        """Test environment values override file values."""
        config = tmp_path / "crossfs.yaml"
        config.write_text("platform: windows\nencoding: latin-1\n")

        settings = Settings.load(config, environ={"CROSSFS_PLATFORM": "posix"})

        assert settings.platform == "posix"
        assert settings.encoding == "latin-1"

    def test_empty_env_values_ignored(self) -> None:
        """Test empty variables do not override."""
        assert Settings.load(environ={"CROSSFS_ENCODING": ""}).encoding == "utf-8"

    def test_load_reads_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the process environment is the default source."""
        monkeypatch.setenv("CROSSFS_ENCODING", "utf-16")
        assert Settings.load().encoding == "utf-16"
