"""Parsing of command-line arguments into options and flags."""

from __future__ import annotations

from collections.abc import Container, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass
class Command:
    """Positional options and named flags taken from the command line."""

    options: list[str] = field(default_factory=list)
    flags: dict[str, str] = field(default_factory=dict)


class InvalidFlagError(ValueError):
    """Raised when an argument cannot be read as a known flag."""


def command_string(command: Command) -> str:
    """Render a command as a short human-readable summary."""
    options = " ".join(command.options)
    flags = " ".join(f"{key}:{value}" for key, value in sorted(command.flags.items()))
    return f"Command{{[{options}], map[{flags}]}}"


def _flag_name(arg: str, prefix: str, valid_flags: Mapping[str, str]) -> str | None:
    """Return the canonical flag name for ``arg``, or None if it is not a flag."""
    if not arg.startswith(prefix):
        return None
    name = valid_flags.get(arg[len(prefix):])
    if not name:
        raise InvalidFlagError(f'tim - Invalid flag "{arg}"')
    return name


def parse_args(
    args: Sequence[str],
    flag_prefix: str,
    valid_flags: Mapping[str, str],
    silents: Container[str],
) -> Command:
    """Split ``args`` (program name first) into options and flags.

    Flags named in ``silents`` take no value and are recorded as ``"true"``;
    every other flag takes the argument that follows it as its value.
    """
    options: list[str] = []
    flags: dict[str, str] = {}
    remaining = iter(args[1:])
    for arg in remaining:
        if arg == "":
            raise InvalidFlagError("tim - empty argument")
        name = _flag_name(arg, flag_prefix, valid_flags)
        if name is None:
            options.append(arg)
        elif name in silents:
            flags[name] = "true"
        else:
            try:
                flags[name] = next(remaining)
            except StopIteration:
                raise InvalidFlagError(f'tim - flag "{arg}" expects a value') from None
    return Command(options, flags)