"""Commit Message Lint Engine Package"""

from gitfluff.lint.base import BodyPolicy, Findings, LintOptions, LintOutcome, Severity
from gitfluff.lint.cleanup import apply_autofix, apply_cleanup, run_pipeline
from gitfluff.lint.engine import evaluate_message, lint_message
from gitfluff.lint.parser import FooterEntry, ParsedMessage, parse_message
from gitfluff.lint.rules import (
    CleanupRule,
    ExcludeRule,
    HeaderPattern,
    InvalidPattern,
    build_cleanup_rule,
    build_exclude_rule,
    build_header_pattern,
)

__all__ = [
    "BodyPolicy",
    "Severity",
    "Findings",
    "LintOptions",
    "LintOutcome",
    "HeaderPattern",
    "ExcludeRule",
    "CleanupRule",
    "InvalidPattern",
    "build_header_pattern",
    "build_exclude_rule",
    "build_cleanup_rule",
    "FooterEntry",
    "ParsedMessage",
    "parse_message",
    "apply_cleanup",
    "apply_autofix",
    "run_pipeline",
    "evaluate_message",
    "lint_message",
]
