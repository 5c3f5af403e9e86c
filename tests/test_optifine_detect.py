"""Tests for OptiFine install detection and version ids."""

import json

import pytest

from adapters.optifine_detect import detect_optifine_install, parse_version_id


def _make_version(mc, version_id, jar=True, config=True):
    folder = mc / "versions" / version_id
    folder.mkdir(parents=True)
    if jar:
        (folder / f"{version_id}.jar").write_bytes(b"")
    if config:
        (folder / f"{version_id}.json").write_text(
            json.dumps({"id": version_id, "mainClass": "net.minecraft.launchwrapper.Launch"}),
            encoding="utf-8",
        )
    return folder


class TestDetect:
    """Test scanning the versions directory."""

    def test_detects_complete_install(self, tmp_path):
        _make_version(tmp_path, "1.16.5")
        folder = _make_version(tmp_path, "1.16.5-OptiFine_HD_U_G8")

        install = detect_optifine_install(tmp_path, "1.16.5")

        assert install.version == "1.16.5-OptiFine_HD_U_G8"
        assert install.jar == folder / "1.16.5-OptiFine_HD_U_G8.jar"
        assert install.config["mainClass"] == "net.minecraft.launchwrapper.Launch"

    def test_no_versions_directory(self, tmp_path):
        assert detect_optifine_install(tmp_path, "1.16.5") is None

    def test_other_version_only(self, tmp_path):
        _make_version(tmp_path, "1.12.2-OptiFine_HD_U_G5")

        assert detect_optifine_install(tmp_path, "1.16.5") is None

    @pytest.mark.parametrize("jar,config", [(False, True), (True, False)])
    def test_incomplete_install(self, tmp_path, jar, config):
        _make_version(tmp_path, "1.16.5-OptiFine_HD_U_G8", jar=jar, config=config)

        assert detect_optifine_install(tmp_path, "1.16.5") is None


class TestParseVersionId:
    """Test deriving version ids from installer names."""

    def test_installer_file_name(self):
        assert parse_version_id("1.16.5", "OptiFine_1.16.5_HD_U_G8.jar") == "1.16.5-OptiFine_HD_U_G8"

    def test_download_link(self):
        target = "https://optifine.net/download?f=OptiFine_1.12.2_HD_U_G5.jar"

        assert parse_version_id("1.12.2", target) == "1.12.2-OptiFine_HD_U_G5"

    def test_not_an_installer(self):
        with pytest.raises(ValueError):
            parse_version_id("1.16.5", "forge-installer.jar")
