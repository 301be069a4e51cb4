"""Command-line interface for vboxctl."""

import logging
import sys

from ..config import Settings
from ..errors import ExternalToolFailure, ToolNotFound, UsageError, VBoxCtlError
from ..output import configure_logging, die
from ..registry import Context
from ..vboxmanage import VBoxManage

from .args import parse_args
from .handlers import build_registry

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    invocation = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(invocation.debug)

    settings = Settings.from_env()
    registry = build_registry()
    ctx = Context(settings=settings, registry=registry, tool=VBoxManage(settings.vboxmanage))
    logger.debug("Invocation: %s", invocation)

    cmd = None
    try:
        cmd = registry.resolve(invocation.command, settings.default_command)
        cmd(list(invocation.args), ctx)

    except UsageError as e:
        usage = e.usage or (cmd.usage if cmd else None)
        if usage:
            print(f"Usage: {usage}", file=sys.stderr)
        die(str(e))
    except ToolNotFound as e:
        die(str(e))
    except ExternalToolFailure as e:
        # VBoxManage has already reported the problem on stderr.
        logger.debug("%s", e)
        sys.exit(1)
    except VBoxCtlError as e:
        die(str(e))
