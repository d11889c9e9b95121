"""Command Line Interface Package"""

from gitfluff.cli.main import main, run

__all__ = ["main", "run"]
