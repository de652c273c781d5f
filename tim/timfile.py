"""Storage of named template sources in the user's ``.timfile``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

TIMFILE_NAME = ".timfile"


@dataclass(frozen=True)
class Source:
    """A template source: its kind (git, file or dir) and where it lives."""

    type: str
    value: str


def timfile_path() -> Path:
    """Return the location of the timfile in the user's home directory."""
    return Path.home() / TIMFILE_NAME


def parse_line(line: str) -> tuple[str, Source]:
    """Parse a ``name=type,value`` line; raise ValueError if it is malformed."""
    parts = line.split("=")
    if len(parts) != 2:
        raise ValueError(f"improperly formatted source: {line!r}")
    name, rest = parts
    fields = rest.split(",")
    if len(fields) != 2:
        raise ValueError(f"improperly formatted source: {line!r}")
    return name, Source(fields[0], fields[1])


def format_source(source: Source) -> str:
    """Render a source as ``type,value``."""
    return f"{source.type},{source.value}"


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read(path: Path | str | None = None) -> dict[str, Source]:
    """Read all sources, creating an empty timfile if none exists.

    Malformed lines are reported and skipped.
    """
    target = Path(path) if path is not None else timfile_path()
    target.touch(exist_ok=True)
    sources: dict[str, Source] = {}
    for line in _lines(target.read_text()):
        try:
            name, source = parse_line(line)
        except ValueError:
            print(f'improperly formatted source was found:\n\t"{line}"')
            continue
        sources[name] = source
    return sources


def write(sources: dict[str, Source], path: Path | str | None = None) -> None:
    """Replace the timfile's contents with ``sources``."""
    target = Path(path) if path is not None else timfile_path()
    with target.open("w") as handle:
        for name, source in sources.items():
            handle.write(f"{name}={format_source(source)}\n")