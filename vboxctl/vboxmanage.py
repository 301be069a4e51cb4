"""VBoxManage invocation.

Every call to the external tool goes through VBoxManage so that each
command line is traced under --debug and failures surface uniformly as
ExternalToolFailure.
"""

import logging
import shlex
import subprocess

from .errors import ExternalToolFailure, ToolNotFound

logger = logging.getLogger(__name__)


class VBoxManage:
    """Thin wrapper around the VBoxManage executable."""

    def __init__(self, executable: str = "VBoxManage"):
        self.executable = executable

    def _command(self, args) -> list[str]:
        cmd = [self.executable, *args]
        logger.debug("Running: %s", shlex.join(cmd))
        return cmd

    def run(self, *args: str) -> None:
        """Run VBoxManage with output passed through to the terminal."""
        cmd = self._command(args)
        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError:
            raise ToolNotFound(cmd) from None
        except subprocess.CalledProcessError as e:
            logger.debug("%s exited with %d", self.executable, e.returncode)
            raise ExternalToolFailure(cmd, e.returncode) from e

    def capture(self, *args: str) -> str:
        """Run VBoxManage and return its stdout. Stderr reaches the user."""
        cmd = self._command(args)
        try:
            result = subprocess.run(cmd, check=True, stdout=subprocess.PIPE, text=True)
        except FileNotFoundError:
            raise ToolNotFound(cmd) from None
        except subprocess.CalledProcessError as e:
            logger.debug("%s exited with %d", self.executable, e.returncode)
            raise ExternalToolFailure(cmd, e.returncode) from e
        return result.stdout

    # --- VM lifecycle ---

    def start(self, vm: str, headless: bool = False) -> None:
        args = ["startvm", vm]
        if headless:
            args += ["--type", "headless"]
        self.run(*args)

    def control(self, vm: str, action: str, *extra: str) -> None:
        """controlvm <vm> <action> [...]"""
        self.run("controlvm", vm, action, *extra)

    def show(self, vm: str) -> None:
        self.run("showvminfo", vm)

    def vm_info(self, vm: str) -> str:
        return self.capture("showvminfo", vm)

    def running_vms(self) -> str:
        return self.capture("list", "runningvms")

    def is_running(self, vm: str) -> bool:
        """Check whether a VM, by name or UUID, is currently running.

        Lines of 'list runningvms' look like: "name" {uuid}
        """
        for line in self.running_vms().splitlines():
            name, _, uuid = line.rpartition(" ")
            if vm in (name.strip('"'), uuid.strip("{}")):
                return True
        return False
