"""Command table and the informational commands."""

import shlex
import subprocess

from .. import __version__
from ..commands.forwarding import cmd_forwarding
from ..commands.status import cmd_list, cmd_status
from ..commands.vm import (
    cmd_kill,
    cmd_pause,
    cmd_reset,
    cmd_resume,
    cmd_show,
    cmd_start,
    cmd_stop,
)
from ..config import config_file_path
from ..errors import CommandNotFound, EditorError
from ..registry import Command, CommandRegistry, Context

PROG = "vboxctl"


def cmd_commands(args: list[str], ctx: Context) -> None:
    """List available commands; --raw prints just the names."""
    names = ctx.registry.names()
    if "--raw" in args:
        print("\n".join(names))
        return

    width = max(len(name) for name in names)
    print("Commands:")
    for name in names:
        print(f"  {name.ljust(width)}  {ctx.registry.get(name).summary}")


def cmd_help(args: list[str], ctx: Context) -> None:
    if not args:
        print(usage(ctx.registry))
        return

    cmd = ctx.registry.get(args[0])
    if cmd is None:
        raise CommandNotFound(args[0])
    print(f"Usage: {cmd.usage}\n\n{cmd.summary}")


def cmd_version(args: list[str], ctx: Context) -> None:
    print(f"{PROG} {__version__}")


def cmd_config(args: list[str], ctx: Context) -> None:
    """Print the VirtualBox config file path, or open it in $EDITOR."""
    path = config_file_path(ctx.settings.ostype)
    if "--path" in args:
        print(path)
        return

    # EDITOR may carry flags, e.g. "code --wait"
    editor = shlex.split(ctx.settings.editor)
    if not editor:
        raise EditorError("EDITOR is empty")
    try:
        returncode = subprocess.call([*editor, str(path)])
    except FileNotFoundError:
        raise EditorError(f"Editor not found: {editor[0]}") from None
    if returncode != 0:
        raise EditorError(f"{editor[0]} exited with status {returncode}")


def cmd_manage(args: list[str], ctx: Context) -> None:
    """Pass arguments straight through to VBoxManage."""
    ctx.tool.run(*args)


def usage(registry: CommandRegistry) -> str:
    """Full usage text built from the command table."""
    lines = [f"Usage: {PROG} [--debug] <command> [<args>...]", ""]
    lines += [f"  {registry.get(name).usage}" for name in registry.names()]
    lines += ["", f"Run '{PROG} help <command>' for details on one command."]
    return "\n".join(lines)


def build_registry() -> CommandRegistry:
    """The fixed catalog of vboxctl commands."""
    return CommandRegistry([
        Command("commands", cmd_commands, "List available commands",
                f"{PROG} commands [--raw]"),
        Command("config", cmd_config, "Open the VirtualBox configuration file (or print its path)",
                f"{PROG} config [--path]"),
        Command("forwarding", cmd_forwarding, "Add, list or delete NAT port-forwarding rules",
                f"{PROG} forwarding add <vm-name> <rule-name> <port>\n"
                f"  {PROG} forwarding list <vm-name>\n"
                f"  {PROG} forwarding delete <vm-name> <rule-name>"),
        Command("help", cmd_help, "Show usage for all commands or one command",
                f"{PROG} help [<command>]"),
        Command("kill", cmd_kill, "Power off a VM immediately",
                f"{PROG} kill (<name>|<uuid>)"),
        Command("list", cmd_list, "List all VMs, running VMs, or VMs with their state",
                f"{PROG} list [running|status]"),
        Command("manage", cmd_manage, "Run VBoxManage with the given arguments",
                f"{PROG} manage [<tool-option>...] <tool-command>"),
        Command("pause", cmd_pause, "Pause a running VM",
                f"{PROG} pause (<name>|<uuid>)"),
        Command("reset", cmd_reset, "Hard reset a VM",
                f"{PROG} reset (<name>|<uuid>)"),
        Command("resume", cmd_resume, "Resume a paused VM",
                f"{PROG} resume (<name>|<uuid>)"),
        Command("show", cmd_show, "Show detailed VM information",
                f"{PROG} show (<name>|<uuid>)"),
        Command("start", cmd_start, "Start a VM, optionally without a window",
                f"{PROG} start (<name>|<uuid>) [--headless]"),
        Command("status", cmd_status, "Show the state of one VM or all VMs",
                f"{PROG} status [(<name>|<uuid>) [--long|-l]]"),
        Command("stop", cmd_stop, "Save the VM state and stop it",
                f"{PROG} stop (<name>|<uuid>)"),
        Command("halt", cmd_stop, "Save the VM state and stop it (alias of stop)",
                f"{PROG} halt (<name>|<uuid>)"),
        Command("version", cmd_version, "Show version",
                f"{PROG} version"),
    ])
