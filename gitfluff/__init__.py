"""
gitfluff

Commit message linter and cleaner for git commit-msg hooks.
"""

__version__ = "1.0.0"
