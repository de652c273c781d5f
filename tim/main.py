"""Entry point of the tim command."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from tim import actions
from tim.cli import Command, InvalidFlagError, command_string, parse_args

FLAG_PREFIX = "-"

FLAGS = {
    "f": "file",
    "-file": "file",
    "d": "directory",
    "-dir": "directory",
    "-directory": "directory",
    "g": "git",
    "-git": "git",
    "-debug": "debug",
    "-filter-git": "filter-git",
}

SILENT_FLAGS = frozenset({"debug", "filter-git"})

SUBCOMMANDS: dict[str, Callable[[Command], None]] = {
    "add": actions.add,
    "copy": actions.copy,
    "plate": actions.copy,
    "edit": actions.edit,
    "set": actions.edit,
    "list": actions.list_sources,
    "ls": actions.list_sources,
    "rm": actions.remove,
    "help": actions.show_help,
    "testwrite": actions.write_sample,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run tim with ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        actions.show_help(Command())
        return 0

    try:
        command = parse_args(["tim", *args], FLAG_PREFIX, FLAGS, SILENT_FLAGS)
    except InvalidFlagError as err:
        print(err)
        return 0

    if "debug" in command.flags:
        print(command_string(command))
        print("flags detected:")
        for key, value in command.flags.items():
            print("\t", key, value)

    if not command.options:
        actions.show_help(command)
        return 0

    name = command.options[0]
    action = SUBCOMMANDS.get(name)
    if action is None:
        print(f"tim - unrecognized action {name}", file=sys.stderr)
        return 2

    try:
        action(command)
    except actions.ActionAborted as err:
        message = str(err)
        if message:
            print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())