"""Terminal output formatting."""

import logging
import os
import sys

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
NC = "\033[0m"


def _paint(color: str, text: str, stream) -> str:
    """Wrap text in color codes when the stream is a terminal."""
    if os.environ.get("NO_COLOR") or not stream.isatty():
        return text
    return f"{color}{text}{NC}"


def log_step(msg: str) -> None:
    """Log a step in progress."""
    print(_paint(YELLOW, f"-> {msg}", sys.stdout))


def log_success(msg: str) -> None:
    """Log a successful operation."""
    print(_paint(GREEN, f"OK {msg}", sys.stdout))


def log_error(msg: str) -> None:
    """Log an error to stderr."""
    print(_paint(RED, f"ERROR: {msg}", sys.stderr), file=sys.stderr)


def die(msg: str) -> None:
    """Log error and exit."""
    log_error(msg)
    sys.exit(1)


def configure_logging(debug: bool = False) -> None:
    """Send vboxctl diagnostics to stderr when debugging is enabled."""
    logger = logging.getLogger("vboxctl")
    if not debug:
        logger.setLevel(logging.WARNING)
        return

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[debug] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
