"""Exception hierarchy shared by every gitfluff layer."""


class GitfluffError(Exception):
    """Base class for errors that abort a gitfluff command."""
    pass


class ConfigError(GitfluffError):
    """Raised when presets, config files or CLI flags can't be resolved."""
    pass


class GitError(GitfluffError):
    """Raised when git repository operations fail."""
    pass


class MessageSourceError(GitfluffError):
    """Raised when the commit message can't be read."""
    pass
