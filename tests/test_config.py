"""Tests for dok settings."""

from pathlib import Path

from dok.config import DEFAULT_UPDATE_BASE_URL, SWARM_SERVICE_LABEL, Settings, get_settings


class TestSettings:
    """Test settings configuration."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Test defaults without environment overrides."""
        monkeypatch.chdir(tmp_path)
        settings = get_settings()
        assert settings.docker_bin == "docker"
        assert settings.swarm_label == SWARM_SERVICE_LABEL
        assert settings.update_base_url == DEFAULT_UPDATE_BASE_URL
        assert settings.install_path is None
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        """Test DOK_ prefixed variables."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DOK_DOCKER_BIN", "podman")
        monkeypatch.setenv("DOK_INSTALL_PATH", "/usr/local/bin/dok")
        settings = get_settings()
        assert settings.docker_bin == "podman"
        assert settings.install_path == Path("/usr/local/bin/dok")

    def test_env_file(self, monkeypatch, tmp_path):
        """Test settings loaded from a .env file in the working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("DOK_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        assert get_settings().log_level == "DEBUG"

    def test_explicit_env_file_disabled(self, monkeypatch, tmp_path):
        """Test that `_env_file=None` ignores .env."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("DOK_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        assert Settings(_env_file=None).log_level == "WARNING"
