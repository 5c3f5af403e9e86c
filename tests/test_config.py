"""Tests for settings and the per-user .env file."""

from pathlib import Path

from core import config
from core.config import AppSettings, _parse_env_lines, get_user_config_dir, write_user_env_vars


class TestAppSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        settings = AppSettings(_env_file=None)

        assert settings.java_path == "java"
        assert settings.installer_jar is None
        assert settings.main_class == "OptiFineInstaller"
        assert settings.installer_factory == "adapters.java_installer:build_installer"
        assert settings.exit_nonzero_on_failure is False
        assert settings.log_to_console is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("OPTIFINE_LAUNCHER_JAVA_PATH", "/usr/lib/jvm/bin/java")
        monkeypatch.setenv("OPTIFINE_LAUNCHER_INSTALLER_JAR", "/jars/OptiFine.jar")
        monkeypatch.setenv("OPTIFINE_LAUNCHER_EXTRA_CLASSPATH", '["/bridge"]')
        monkeypatch.setenv("OPTIFINE_LAUNCHER_EXIT_NONZERO_ON_FAILURE", "true")

        settings = AppSettings(_env_file=None)

        assert settings.java_path == "/usr/lib/jvm/bin/java"
        assert settings.installer_jar == Path("/jars/OptiFine.jar")
        assert settings.extra_classpath == [Path("/bridge")]
        assert settings.exit_nonzero_on_failure is True

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("OPTIFINE_LAUNCHER_MAIN_CLASS=optifine.Installer\n", encoding="utf-8")

        settings = AppSettings(_env_file=env_file)

        assert settings.main_class == "optifine.Installer"

    def test_log_file_default_in_user_dir(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path / "cfg")

        assert AppSettings(_env_file=None).resolved_log_file() == tmp_path / "cfg" / "launcher.log"


def test_user_config_dir_respects_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "optifine-launcher"


def test_parse_env_lines_skips_comments_and_quotes():
    text = '# header\n# C=commented\n\nA=1\nB = "two"\nnot a pair\n=empty\n'

    assert _parse_env_lines(text) == {"A": "1", "B": "two"}


def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    monkeypatch.setattr(config, "get_user_env_file", lambda: env_path)

    write_user_env_vars({"OPTIFINE_LAUNCHER_JAVA_PATH": "java"})
    write_user_env_vars({"OPTIFINE_LAUNCHER_INSTALLER_JAR": "/o.jar", "IGNORED": None})

    assert _parse_env_lines(env_path.read_text(encoding="utf-8")) == {
        "OPTIFINE_LAUNCHER_INSTALLER_JAR": "/o.jar",
        "OPTIFINE_LAUNCHER_JAVA_PATH": "java",
    }
