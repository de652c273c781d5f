"""Copying of files, directories and git repositories used as templates."""

from __future__ import annotations

import os
import shutil
import stat
import subprocess
import tempfile
from pathlib import Path


def tim_tmp() -> Path:
    """Return the scratch directory used for temporary copies."""
    return Path(tempfile.gettempdir()) / "tim"


def copy_file(src: Path | str, dest: Path | str) -> Path:
    """Copy a file with its permissions; into ``dest`` if it is a directory.

    Returns the path written to.
    """
    src = Path(src)
    dest = Path(dest)
    target = dest / src.name if dest.is_dir() else dest
    with src.open("rb") as reader, target.open("wb") as writer:
        shutil.copyfileobj(reader, writer)
    os.chmod(target, stat.S_IMODE(src.stat().st_mode))
    return target


def copy_dir(src: Path | str, dest: Path | str) -> None:
    """Recursively copy the directory ``src`` to ``dest``."""
    src = Path(src)
    dest = Path(dest)
    info = src.stat()
    if not stat.S_ISDIR(info.st_mode):
        raise NotADirectoryError(f'source path "{src}" was not a directory')
    dest.mkdir(mode=stat.S_IMODE(info.st_mode), parents=True, exist_ok=True)
    with os.scandir(src) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            target = dest / entry.name
            if entry.is_dir(follow_symlinks=False):
                copy_dir(entry.path, target)
            else:
                copy_file(entry.path, target)


def git_clone(src: str, dest: Path | str) -> None:
    """Clone the repository ``src`` into ``dest`` with git.

    Raises CalledProcessError if git fails.
    """
    print(f'using git to copy source "{src}"')
    args = ["git", "clone", src, str(dest)]
    print(" ".join(args))
    subprocess.run(args, check=True)


def _remove_git_dir(root: Path) -> None:
    git_dir = root / ".git"
    if git_dir.is_dir() and not git_dir.is_symlink():
        shutil.rmtree(git_dir)
    elif git_dir.exists() or git_dir.is_symlink():
        git_dir.unlink()


def temp_copy(src: Path | str) -> Path:
    """Copy ``src`` to the scratch directory without its ``.git`` directory."""
    dest = tim_tmp()
    copy_dir(src, dest)
    _remove_git_dir(dest)
    return dest


def temp_git(src: str) -> Path:
    """Clone ``src`` to the scratch directory and drop its ``.git`` directory."""
    dest = tim_tmp()
    git_clone(src, dest)
    _remove_git_dir(dest)
    return dest


def clean_tmp() -> None:
    """Remove the scratch directory if it exists."""
    tmp = tim_tmp()
    if tmp.exists():
        shutil.rmtree(tmp)