"""Command handlers.

Every handler takes the command's argument list and the run Context.
"""

from ..errors import UsageError


def require_arg(args: list[str], index: int, what: str) -> str:
    """Return args[index] or raise UsageError naming the missing argument."""
    if len(args) <= index or not args[index]:
        raise UsageError(f"Missing {what}")
    return args[index]


def require_vm(args: list[str]) -> str:
    return require_arg(args, 0, "VM name or UUID")
