"""Tests for recordkeeper/config.py."""

import sys
from pathlib import Path

import pytest

# Add parent dir to path so recordkeeper is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))

from recordkeeper.config import DEFAULT_OUTPUT, Config, PathConfig

ENV_VARS = [
    "RECORDKEEPER_LIBRARY_NAME",
    "RECORDKEEPER_OUTPUT",
    "RECORDKEEPER_MUSIC_DIR",
    "RECORDKEEPER_WORKERS",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear recordkeeper variables and point dotenv at an empty file."""
    for name in ENV_VARS:
        # setenv first so values loaded by dotenv are undone at teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text("", encoding="utf-8")
    return env_file


class TestFromEnvironment:
    """Tests for Config.from_environment()."""

    def test_defaults(self, clean_env):
        config = Config.from_environment(clean_env)

        assert config.library_name == "Library"
        assert config.max_workers == 4
        assert config.paths.output_file == Path(DEFAULT_OUTPUT)
        assert config.paths.music_dir is None

    def test_environment_values(self, clean_env, monkeypatch, tmp_path):
        monkeypatch.setenv("RECORDKEEPER_LIBRARY_NAME", "City Library")
        monkeypatch.setenv("RECORDKEEPER_OUTPUT", str(tmp_path / "out.json"))
        monkeypatch.setenv("RECORDKEEPER_MUSIC_DIR", str(tmp_path))
        monkeypatch.setenv("RECORDKEEPER_WORKERS", "8")

        config = Config.from_environment(clean_env)

        assert config.library_name == "City Library"
        assert config.paths.output_file == tmp_path / "out.json"
        assert config.paths.music_dir == tmp_path
        assert config.max_workers == 8

    def test_env_file(self, clean_env):
        clean_env.write_text("RECORDKEEPER_LIBRARY_NAME=From File\n", encoding="utf-8")
        config = Config.from_environment(clean_env)
        assert config.library_name == "From File"

    def test_invalid_workers(self, clean_env, monkeypatch):
        monkeypatch.setenv("RECORDKEEPER_WORKERS", "many")
        with pytest.raises(ValueError, match="must be an integer"):
            Config.from_environment(clean_env)

    def test_zero_workers(self, clean_env, monkeypatch):
        monkeypatch.setenv("RECORDKEEPER_WORKERS", "0")
        with pytest.raises(ValueError, match="at least 1"):
            Config.from_environment(clean_env)


class TestValidate:
    """Tests for Config.validate()."""

    def test_missing_music_dir(self, tmp_path):
        config = Config(paths=PathConfig(output_file=tmp_path / "out.json",
                                         music_dir=tmp_path / "missing"))
        with pytest.raises(ValueError, match="Music directory not found"):
            config.validate()

    def test_valid(self, tmp_path):
        config = Config(paths=PathConfig(output_file=tmp_path / "out.json", music_dir=tmp_path))
        config.validate()
