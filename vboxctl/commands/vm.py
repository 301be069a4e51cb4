"""VM lifecycle commands - start, stop, kill, pause, resume, reset, show."""

from ..output import log_step, log_success
from ..registry import Context
from . import require_vm


def cmd_start(args: list[str], ctx: Context) -> None:
    """Start a VM, optionally without a console window."""
    vm = require_vm(args)
    headless = "--headless" in args[1:]
    log_step(f"Starting '{vm}'{' (headless)' if headless else ''}...")
    ctx.tool.start(vm, headless=headless)
    log_success(f"'{vm}' started")


def cmd_stop(args: list[str], ctx: Context) -> None:
    """Save the VM state and stop it."""
    vm = require_vm(args)
    log_step(f"Saving state of '{vm}'...")
    ctx.tool.control(vm, "savestate")
    log_success(f"'{vm}' stopped")


def cmd_kill(args: list[str], ctx: Context) -> None:
    """Hard power-off, like pulling the plug."""
    vm = require_vm(args)
    ctx.tool.control(vm, "poweroff")
    log_success(f"'{vm}' powered off")


def cmd_pause(args: list[str], ctx: Context) -> None:
    vm = require_vm(args)
    ctx.tool.control(vm, "pause")
    log_success(f"'{vm}' paused")


def cmd_resume(args: list[str], ctx: Context) -> None:
    vm = require_vm(args)
    ctx.tool.control(vm, "resume")
    log_success(f"'{vm}' resumed")


def cmd_reset(args: list[str], ctx: Context) -> None:
    vm = require_vm(args)
    ctx.tool.control(vm, "reset")
    log_success(f"'{vm}' reset")


def cmd_show(args: list[str], ctx: Context) -> None:
    ctx.tool.show(require_vm(args))
