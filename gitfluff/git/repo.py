"""Git Repository Discovery - find the git dir without shelling out."""

from pathlib import Path

from gitfluff.errors import GitError

GITDIR_PREFIX = "gitdir:"


def resolve_gitdir_file(git_file: Path) -> Path:
    """Follow a `.git` file (worktrees, submodules) to the real git dir."""
    try:
        content = git_file.read_text(encoding='utf-8').strip()
    except OSError as e:
        raise GitError(f"failed to read gitdir file {git_file}") from e

    if not content.startswith(GITDIR_PREFIX):
        raise GitError(f"unexpected gitdir file format in {git_file}")

    path = Path(content[len(GITDIR_PREFIX):].strip())
    if path.is_absolute():
        return path
    return (git_file.parent / path).resolve()


def locate_git_dir(start_dir: Path) -> Path:
    """Walk up from start_dir until a `.git` directory or file is found."""
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / ".git"
        if candidate.is_dir():
            return candidate
        if candidate.is_file():
            return resolve_gitdir_file(candidate)
    raise GitError(f"no .git directory found from {start_dir}")


def is_merge_in_progress(start_dir: Path) -> bool:
    """True while git is recording a merge commit (MERGE_HEAD exists)."""
    try:
        git_dir = locate_git_dir(start_dir)
    except GitError:
        return False
    return (git_dir / "MERGE_HEAD").exists()
