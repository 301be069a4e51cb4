"""Argument parsing for the vboxctl CLI.

Command arguments are free-form (flags like --headless belong to individual
commands and 'manage' forwards anything verbatim), so argv is not handed to
argparse subparsers. Instead the tokens are scanned in order, the same way a
git-style wrapper picks out its subcommand: the first token that is not a
global flag names the command and everything after it belongs to that
command.
"""

from dataclasses import dataclass, field

DEBUG_FLAG = "--debug"

# Global flags that set the command name directly.
COMMAND_FLAGS = {
    "-h": "help",
    "--help": "help",
    "--version": "version",
}


@dataclass(frozen=True)
class Invocation:
    """Parsed command line."""

    command: str = ""
    args: tuple[str, ...] = field(default_factory=tuple)
    debug: bool = False


def parse_args(argv: list[str]) -> Invocation:
    """Split argv into (command, command args, debug flag).

    --debug is honoured in any position. The first other token names the
    command; everything after it is passed to the command untouched.
    """
    command = ""
    args: list[str] = []
    debug = False

    for token in argv:
        if token == DEBUG_FLAG:
            debug = True
        elif command:
            args.append(token)
        else:
            command = COMMAND_FLAGS.get(token, token)

    return Invocation(command=command, args=tuple(args), debug=debug)
