"""Settings read from the environment once at startup."""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_COMMAND = "help"
DEFAULT_EDITOR = "vi"
DEFAULT_VBOXMANAGE = "VBoxManage"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration."""

    default_command: str = DEFAULT_COMMAND
    editor: str = DEFAULT_EDITOR
    ostype: str = sys.platform
    vboxmanage: str = DEFAULT_VBOXMANAGE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            default_command=env.get("VBOXCTL_DEFAULT_COMMAND") or DEFAULT_COMMAND,
            editor=env.get("EDITOR") or DEFAULT_EDITOR,
            ostype=env.get("OSTYPE") or sys.platform,
            vboxmanage=env.get("VBOXCTL_VBOXMANAGE") or DEFAULT_VBOXMANAGE,
        )


def config_file_path(ostype: str, home: Path | None = None) -> Path:
    """Location of the VirtualBox global configuration file.

    macOS keeps it under ~/Library, everything else follows XDG.
    """
    home = home or Path.home()
    if ostype.lower().startswith("darwin"):
        return home / "Library" / "VirtualBox" / "VirtualBox.xml"
    return home / ".config" / "VirtualBox" / "VirtualBox.xml"
