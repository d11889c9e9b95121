"""Git Integration Package"""

from gitfluff.errors import GitError
from gitfluff.git.hooks import HookKind, hook_script, install_hook
from gitfluff.git.repo import is_merge_in_progress, locate_git_dir, resolve_gitdir_file

__all__ = [
    "GitError",
    "HookKind",
    "hook_script",
    "install_hook",
    "is_merge_in_progress",
    "locate_git_dir",
    "resolve_gitdir_file",
]
