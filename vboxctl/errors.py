"""Exception hierarchy for vboxctl."""


class VBoxCtlError(Exception):
    """Base exception for vboxctl errors."""


class UsageError(VBoxCtlError):
    """A required argument is missing or a subcommand is not recognized."""

    def __init__(self, message: str, usage: str | None = None):
        self.usage = usage
        super().__init__(message)


class CommandNotFound(VBoxCtlError):
    """Requested command is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown command: '{name}'\nRun 'vboxctl commands' to see what is available."
        )


class ExternalToolFailure(VBoxCtlError):
    """VBoxManage exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, message: str | None = None):
        self.command = command
        self.returncode = returncode
        super().__init__(message or f"{command[0]} exited with status {returncode}")


class ToolNotFound(ExternalToolFailure):
    """VBoxManage could not be executed at all."""

    def __init__(self, command: list[str]):
        super().__init__(
            command, 127,
            f"{command[0]} not found. Install VirtualBox or set VBOXCTL_VBOXMANAGE.",
        )


class EditorError(VBoxCtlError):
    """The configured editor could not be started or exited with an error."""
