"""Command registry - maps command names to their handlers."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

from .errors import CommandNotFound

if TYPE_CHECKING:
    from .config import Settings
    from .vboxmanage import VBoxManage


@dataclass(frozen=True)
class Command:
    """A named, invocable command."""

    name: str
    handler: Callable[[list[str], "Context"], None]
    summary: str
    usage: str

    def __call__(self, args: list[str], ctx: "Context") -> None:
        self.handler(list(args), ctx)


class CommandRegistry:
    """Read-only lookup of commands by exact name."""

    def __init__(self, commands: Iterable[Command]):
        self._commands: dict[str, Command] = {}
        for cmd in commands:
            if cmd.name in self._commands:
                raise ValueError(f"Duplicate command: {cmd.name}")
            self._commands[cmd.name] = cmd

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> list[str]:
        """All command names, sorted."""
        return sorted(self._commands)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def resolve(self, name: str, default: str) -> Command:
        """Find the command for name, falling back to default when empty.

        Raises CommandNotFound if nothing is registered under the name.
        """
        name = name or default
        cmd = self._commands.get(name)
        if cmd is None:
            raise CommandNotFound(name)
        return cmd


@dataclass(frozen=True)
class Context:
    """Everything a handler needs, built once per run."""

    settings: "Settings"
    registry: CommandRegistry
    tool: "VBoxManage"
