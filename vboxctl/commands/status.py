"""Status and listing commands."""

import logging

from .. import status
from ..registry import Context

logger = logging.getLogger(__name__)

LONG_FLAGS = ("--long", "-l")


def cmd_status(args: list[str], ctx: Context) -> None:
    """Show one VM's state, or every VM's state when no VM is given."""
    if not args or args[0] in LONG_FLAGS:
        cmd_list(["status"], ctx)
        return

    vm = args[0]
    long = any(flag in args[1:] for flag in LONG_FLAGS)
    state = status.extract_state(ctx.tool.vm_info(vm), long=long)
    print(status.annotate(state))


def cmd_list(args: list[str], ctx: Context) -> None:
    """List VMs: all, running, or with their states."""
    mode = args[0] if args else ""

    if not mode:
        ctx.tool.run("list", "vms")
    elif mode == "running":
        ctx.tool.run("list", "runningvms")
    elif mode == "status":
        pairs = status.parse_vm_states(ctx.tool.capture("list", "vms", "-l"))
        logger.debug("Found %d VMs", len(pairs))
        if pairs:
            print(status.format_vm_states(pairs))
    else:
        # Anything else is a VBoxManage list type: ostypes, hdds, ...
        ctx.tool.run("list", *args)
