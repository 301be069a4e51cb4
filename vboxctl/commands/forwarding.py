"""NAT port-forwarding commands."""

import logging

from ..errors import UsageError
from ..registry import Context
from ..status import forwarding_rules
from . import require_arg

logger = logging.getLogger(__name__)

NIC = "1"
HOST_IP = "127.0.0.1"


def make_rule(name: str, port: str, protocol: str = "tcp") -> str:
    """Build a natpf rule: name,proto,host-ip,host-port,guest-ip,guest-port."""
    return f"{name},{protocol},{HOST_IP},{port},,{port}"


def _apply(ctx: Context, vm: str, *rule_args: str) -> None:
    """Change a forwarding rule, live if the VM is running."""
    if ctx.tool.is_running(vm):
        logger.debug("'%s' is running, using controlvm", vm)
        ctx.tool.control(vm, f"natpf{NIC}", *rule_args)
    else:
        ctx.tool.run("modifyvm", vm, f"--natpf{NIC}", *rule_args)


def parse_port(port: str) -> int:
    """Validate a TCP port number."""
    try:
        number = int(port)
    except ValueError:
        raise UsageError(f"Invalid port: {port}") from None
    if not port.isascii() or not 1 <= number <= 65535:
        raise UsageError(f"Invalid port: {port}")
    return number


def forwarding_add(args: list[str], ctx: Context) -> None:
    vm = require_arg(args, 0, "VM name")
    name = require_arg(args, 1, "rule name")
    port = str(parse_port(require_arg(args, 2, "port")))
    _apply(ctx, vm, make_rule(name, port))
    print(f"Forwarding {HOST_IP}:{port} -> {vm}:{port} ({name})")


def forwarding_list(args: list[str], ctx: Context) -> None:
    vm = require_arg(args, 0, "VM name")
    for line in forwarding_rules(ctx.tool.vm_info(vm)):
        print(line)


def forwarding_delete(args: list[str], ctx: Context) -> None:
    vm = require_arg(args, 0, "VM name")
    name = require_arg(args, 1, "rule name")
    _apply(ctx, vm, "delete", name)
    print(f"Deleted rule '{name}' from {vm}")


SUBCOMMANDS = {
    "add": forwarding_add,
    "list": forwarding_list,
    "delete": forwarding_delete,
}


def cmd_forwarding(args: list[str], ctx: Context) -> None:
    """Dispatch 'forwarding <add|list|delete> ...'."""
    sub = args[0] if args else ""
    handler = SUBCOMMANDS.get(sub)
    if handler is None:
        message = f"Unknown forwarding subcommand: '{sub}'" if sub else "Missing forwarding subcommand"
        raise UsageError(message)
    handler(args[1:], ctx)
