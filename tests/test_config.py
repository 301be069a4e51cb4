"""Tests for settings and the VirtualBox config path."""

import sys
from pathlib import Path

from vboxctl.config import Settings, config_file_path


class TestSettingsFromEnv:
    """Tests for Settings.from_env()."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.default_command == "help"
        assert settings.editor == "vi"
        assert settings.ostype == sys.platform
        assert settings.vboxmanage == "VBoxManage"

    def test_overrides(self):
        settings = Settings.from_env({
            "VBOXCTL_DEFAULT_COMMAND": "status",
            "EDITOR": "nano",
            "OSTYPE": "darwin23",
            "VBOXCTL_VBOXMANAGE": "/opt/vbox/VBoxManage",
        })
        assert settings.default_command == "status"
        assert settings.editor == "nano"
        assert settings.ostype == "darwin23"
        assert settings.vboxmanage == "/opt/vbox/VBoxManage"

    def test_empty_values_fall_back(self):
        settings = Settings.from_env({"VBOXCTL_DEFAULT_COMMAND": "", "EDITOR": ""})
        assert settings.default_command == "help"
        assert settings.editor == "vi"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("VBOXCTL_DEFAULT_COMMAND", "list")
        assert Settings.from_env().default_command == "list"


class TestConfigFilePath:
    """Tests for config_file_path()."""

    def test_darwin(self):
        path = config_file_path("darwin23", home=Path("/Users/me"))
        assert path == Path("/Users/me/Library/VirtualBox/VirtualBox.xml")

    def test_linux(self):
        path = config_file_path("linux-gnu", home=Path("/home/me"))
        assert path == Path("/home/me/.config/VirtualBox/VirtualBox.xml")

    def test_sys_platform_values(self):
        home = Path("/h")
        assert config_file_path("darwin", home) != config_file_path("linux", home)

    def test_defaults_to_user_home(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert config_file_path("linux").parent.parent.parent == tmp_path
