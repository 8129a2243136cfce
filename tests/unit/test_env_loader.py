"""Tests for .env file discovery and loading."""

import os

import pytest

from love_cli.config.env_loader import EnvFileLoader


@pytest.fixture
def dirs(tmp_path):
    home = tmp_path / "home"
    work = tmp_path / "repo" / "sub"
    home.mkdir()
    work.mkdir(parents=True)
    (tmp_path / "repo" / ".git").mkdir()
    return home, work


class TestEnvFileLoader:
    """Test cases for EnvFileLoader."""

    def test_finds_file_in_working_directory(self, dirs):
        home, work = dirs
        (work / ".env").write_text("LOVE_SENDER=hammy\n")

        loader = EnvFileLoader(work, home)

        assert loader._find_env_file() == work / ".env"

    def test_prefers_love_dir(self, dirs):
        home, work = dirs
        (work / ".env").write_text("LOVE_SENDER=hammy\n")
        (work / ".love").mkdir()
        (work / ".love" / ".env").write_text("LOVE_SENDER=darwin\n")

        loader = EnvFileLoader(work, home)

        assert loader._find_env_file() == work / ".love" / ".env"

    def test_searches_up_to_git_root(self, dirs):
        home, work = dirs
        (work.parent / ".env").write_text("LOVE_SENDER=hammy\n")

        assert EnvFileLoader(work, home)._find_env_file() == work.parent / ".env"

    def test_falls_back_to_home(self, dirs):
        home, work = dirs
        (home / ".env").write_text("LOVE_SENDER=hammy\n")

        assert EnvFileLoader(work, home)._find_env_file() == home / ".env"

    def test_nothing_found(self, dirs):
        home, work = dirs
        loader = EnvFileLoader(work, home)

        assert loader.load_env_file() is None
        assert loader.get_loaded_file() is None
        assert loader.get_loaded_vars() == {}

    def test_load_does_not_override(self, dirs, monkeypatch):
        home, work = dirs
        env_file = work / ".env"
        env_file.write_text("LOVE_SENDER=hammy\nLOVE_API_KEY=from-file\n")
        monkeypatch.setenv("LOVE_API_KEY", "from-env")
        monkeypatch.delenv("LOVE_SENDER", raising=False)

        loader = EnvFileLoader(work, home)

        try:
            assert loader.load_env_file() == env_file
            assert os.environ["LOVE_SENDER"] == "hammy"
            assert os.environ["LOVE_API_KEY"] == "from-env"
            assert loader.get_loaded_vars() == {"LOVE_SENDER": "hammy", "LOVE_API_KEY": "from-file"}
        finally:
            # load_dotenv writes to os.environ directly
            os.environ.pop("LOVE_SENDER", None)

    def test_explicit_missing_file(self, dirs):
        home, work = dirs
        loader = EnvFileLoader(work, home)

        with pytest.raises(FileNotFoundError):
            loader.load_env_file(work / "missing.env")

    def test_create_example_env_file(self, dirs):
        home, work = dirs
        loader = EnvFileLoader(work, home)

        path = loader.create_example_env_file()

        assert path == work / ".love" / ".env"
        assert "LOVE_API_KEY=" in path.read_text()
        with pytest.raises(FileExistsError):
            loader.create_example_env_file()
