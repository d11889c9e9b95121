"""Git Hook Installation"""

import os
import stat
from enum import Enum
from pathlib import Path

from gitfluff.errors import GitError
from gitfluff.git.repo import locate_git_dir


class HookKind(Enum):
    COMMIT_MSG = "commit-msg"

    @property
    def filename(self) -> str:
        return self.value


def hook_script(kind: HookKind, write: bool = False) -> str:
    command = 'exec gitfluff lint --from-file "$1"'
    if write:
        command += ' --write'
    return f"#!/bin/sh\n{command}\n"


def _make_executable(path: Path) -> None:
    try:
        mode = path.stat().st_mode
        os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        raise GitError(f"failed to set executable permissions on {path}") from e


def install_hook(start_dir: Path, kind: HookKind, write: bool = False, force: bool = False) -> Path:
    """Write the hook script into the repository's hooks directory."""
    git_dir = locate_git_dir(start_dir)
    hooks_dir = git_dir / "hooks"
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GitError(f"failed to ensure hooks directory at {hooks_dir}") from e

    hook_path = hooks_dir / kind.filename
    if hook_path.exists() and not force:
        raise GitError(
            f"hook `{kind.filename}` already exists at {hook_path} (use --force to overwrite)"
        )

    try:
        hook_path.write_text(hook_script(kind, write), encoding='utf-8')
    except OSError as e:
        raise GitError(f"failed to write hook to {hook_path}") from e
    _make_executable(hook_path)
    return hook_path
