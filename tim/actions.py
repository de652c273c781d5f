"""The subcommands of tim: managing template sources and copying them."""

from __future__ import annotations

import os
import subprocess

from tim import files, timfile
from tim.cli import Command
from tim.timfile import Source

ANSI_BLUE = "\x1b[34m"
ANSI_BOLD = "\x1b[22m"
ANSI_GREEN = "\x1b[32m"
ANSI_MAGENTA = "\x1b[35m"
ANSI_RESET = "\x1b[0m"
ANSI_WHITE = "\x1b[37m"
ANSI_YELLOW = "\x1b[33m"

GIT_WARNING = (
    "\x1b[31mwarning: tim cannot verify the integrity of git urls, make sure you "
    "have the correct url and proper read access\x1b[0m"
)

INVALID_ARGUMENTS = "tim - invalid number of arguments"
SKIPPING = "skipping..."

HELP_TEXT = "\n".join(
    [
        "usage: tim <cmd> [-f | --file] [-d | --dir | --directory]\n\t\t [-h | --help] [-g | --git]",
        "",
        "modifying sources:",
        "\tadd\t\tadd a template to tim",
        "\tedit | set\tchange the source for a template",
        "\tlist | ls\tls: list templates and their sources",
        "\tremove | rm\tremove a template from tim",
        "\tcopy | plate\tcopy a source to a given path",
        "\thelp\t\tshow this list",
        "",
        "example usage:",
        "\ttim add <NAME> --dir <PATH>",
        "\ttim set <NAME> <URL>",
        "\ttim plate <NAME> <PATH>",
    ]
)

_TYPE_COLOURS = {
    "git": ANSI_YELLOW,
    "dir": ANSI_BLUE,
    "file": ANSI_MAGENTA,
}


class ActionAborted(Exception):
    """Raised when an action stops early; the message is meant for the user."""


def _yellow(text: str) -> str:
    return f"{ANSI_YELLOW}{text}{ANSI_RESET}"


def confirm_action(msg: str) -> bool:
    """Ask a yes/no question on the terminal; only "y" or "Y" counts as yes."""
    response = input(msg)
    return response in ("y", "Y")


def _confirm_or_abort(msg: str) -> None:
    if not confirm_action(msg):
        raise ActionAborted(SKIPPING)


def add(command: Command) -> None:
    """Register a new template source, asking before replacing one."""
    stype, value = get_source(command)
    if len(command.options) < 2:
        raise ActionAborted(INVALID_ARGUMENTS)

    name = command.options[1]
    sources = timfile.read()
    if name in sources:
        _confirm_or_abort(
            _yellow(f'source "{name}" already exists, would you like to replace it? (y/N)')
        )

    sources[name] = Source(stype, value)
    timfile.write(sources)
    print(f'{ANSI_GREEN}added "{value}" to templates!{ANSI_RESET}')


def _copy_git(value: str, dest: str, filter_git: bool) -> None:
    if not filter_git:
        try:
            files.git_clone(value, dest)
        except (subprocess.CalledProcessError, OSError) as err:
            raise ActionAborted(
                _yellow(f'git encountered an error while copying source "{err}"')
            ) from err
        return

    try:
        tmp = files.temp_git(value)
    except (subprocess.CalledProcessError, OSError) as err:
        raise ActionAborted(
            f"{ANSI_YELLOW}error making temporary git clone:\n{err}\n{ANSI_RESET}"
        ) from err
    print("copying cleaned source...")
    try:
        files.copy_dir(tmp, dest)
    except OSError as err:
        raise ActionAborted(
            f"{ANSI_YELLOW}error copying files from temporary clone:\n{err}\n{ANSI_RESET}"
        ) from err
    _clean(tmp)


def _clean(tmp: os.PathLike[str] | str) -> None:
    print("cleaning temporary directory...")
    try:
        files.clean_tmp()
    except OSError as err:
        raise ActionAborted(
            f'{ANSI_YELLOW}there was an issue removing the temporary directory "{tmp}":\n'
            f"{ANSI_RESET}{err}"
        ) from err


def _existing_path(value: str) -> str:
    valid, full = path_exists(value)
    if not valid:
        raise ActionAborted(
            f"Invalid path found: {value}\n" + _yellow(f'source had invalid path "{full}"')
        )
    return full


def copy(command: Command) -> None:
    """Copy the named source to a destination path."""
    if len(command.options) != 3:
        raise ActionAborted(INVALID_ARGUMENTS)

    _, name, dest = command.options
    filter_git = "filter-git" in command.flags

    sources = timfile.read()
    source = sources.get(name)
    if source is None:
        raise ActionAborted(_yellow(f'could not find source "{name}"'))

    if source.type == "git":
        _copy_git(source.value, dest, filter_git)
    elif source.type == "file":
        files.copy_file(_existing_path(source.value), dest)
    elif source.type == "dir":
        src = _existing_path(source.value)
        if filter_git:
            tmp = files.temp_copy(src)
            print("copying cleaned source...")
            files.copy_dir(tmp, dest)
            _clean(tmp)
        else:
            files.copy_dir(src, dest)
    else:
        raise ActionAborted(
            f'tim - found an unexpected source type {source.type} for source "{name}"'
        )


def edit(command: Command) -> None:
    """Change (or create) a template source after confirmation."""
    stype, value = get_source(command)
    if len(command.options) < 2:
        raise ActionAborted(INVALID_ARGUMENTS)

    name = command.options[1]
    sources = timfile.read()
    exists = name in sources
    if exists:
        question = f'are you sure you want to replace source "{name}"? (y/N)'
    else:
        question = f'source "{name}" does not yet exist, would you like to replace it? (y/N)'
    _confirm_or_abort(_yellow(question))

    sources[name] = Source(stype, value)
    timfile.write(sources)
    if exists:
        print(f'{ANSI_GREEN}modified source "{value}"!{ANSI_RESET}')
    else:
        print(f'{ANSI_GREEN}added "{value}" to templates!{ANSI_RESET}')


def list_sources(command: Command) -> None:
    """Print every registered source, sorted by name."""
    print("tim sources:")
    sources = timfile.read()
    for name in sorted(sources):
        print(describe_source(name, sources[name]))


def remove(command: Command) -> None:
    """Delete a template source after confirmation."""
    sources = timfile.read()
    if len(command.options) != 2:
        raise ActionAborted("not enough arguments, expected\n\t- tim add <src>")

    name = command.options[1]
    if name not in sources:
        raise ActionAborted(_yellow(f'could not find source "{name}"'))

    _confirm_or_abort(_yellow(f'are you sure you want to delete source "{name}"? (y/N)'))
    del sources[name]
    timfile.write(sources)


def show_help(command: Command) -> None:
    """Print the usage summary."""
    print(HELP_TEXT)


def write_sample(command: Command) -> None:
    """Overwrite the timfile with a small set of sample sources."""
    timfile.write(
        {
            "hello": Source("git", "world"),
            "test": Source("file", "/home/user/booglydooglydoo"),
            "dadadadir": Source("dir", "/home/user/awooga/"),
        }
    )


def describe_source(name: str, source: Source) -> str:
    """Return the coloured listing line for one source."""
    label = f"{ANSI_BOLD}{ANSI_GREEN}{name:<15}{ANSI_RESET}"
    colour = _TYPE_COLOURS.get(source.type)
    kind = f"{colour}{source.type:<8}{ANSI_RESET}" if colour else ""
    return f"\t- {label}{kind}{source.value}"


def get_source(command: Command) -> tuple[str, str]:
    """Work out the source type and location a command describes."""
    flags = command.flags
    given = [kind for kind in ("directory", "file", "git") if kind in flags]
    if len(given) > 1:
        raise ActionAborted("tim - you cannot specify more than one type of source")

    if not given:
        if len(command.options) != 3:
            raise ActionAborted(INVALID_ARGUMENTS)
        return "git", command.options[2]

    kind = given[0]
    if kind == "git":
        print(GIT_WARNING)
        return "git", flags["git"]

    value = flags[kind]
    valid, full = path_exists(value)
    if not valid:
        raise ActionAborted(f"Invalid path found: {value}")
    return ("dir" if kind == "directory" else "file"), full


def path_exists(p: str) -> tuple[bool, str]:
    """Return whether ``p`` exists, and its absolute, normalised form."""
    clean = os.path.normpath(p)
    full = clean if os.path.isabs(clean) else os.path.normpath(os.path.join(os.getcwd(), clean))
    return os.path.exists(full), full