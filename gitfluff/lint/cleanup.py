"""Cleanup/Autofix Engine - Ordered, deterministic message rewrites."""

import re
from typing import Callable, Iterable

from gitfluff.lint.base import LintOptions
from gitfluff.lint.parser import parse_message
from gitfluff.lint.rules import CleanupRule

# Upper bound on full pipeline rounds while waiting for the text to settle
MAX_ROUNDS = 5

TRAILING_WHITESPACE_RE = re.compile(r'[ \t]+$', re.MULTILINE)
LEADING_BLANK_LINES_RE = re.compile(r'\A(?:[ \t]*\n)+')
TRAILING_BLANK_LINES_RE = re.compile(r'\n{2,}\Z')
EXCESS_BLANK_LINES_RE = re.compile(r'\n{3,}')


def apply_cleanup(text: str, rules: Iterable[CleanupRule]) -> tuple[str, list[str]]:
    """Run each rule in order over the whole text."""
    current = text
    summaries = []
    for rule in rules:
        replaced = rule.apply(current)
        if replaced != current:
            summaries.append(rule.summary)
            current = replaced
    return current, summaries


def _normalize_line_endings(text: str) -> str:
    return text.replace('\r\n', '\n')


def _trim_trailing_whitespace(text: str) -> str:
    return TRAILING_WHITESPACE_RE.sub('', text)


def _trim_leading_blank_lines(text: str) -> str:
    return LEADING_BLANK_LINES_RE.sub('', text)


def _trim_trailing_blank_lines(text: str) -> str:
    return TRAILING_BLANK_LINES_RE.sub('\n', text)


def _collapse_blank_lines(text: str) -> str:
    return EXCESS_BLANK_LINES_RE.sub('\n\n', text)


def _separate_header(text: str) -> str:
    lines = text.split('\n')
    if len(lines) > 1 and lines[1].strip():
        lines.insert(1, '')
    return '\n'.join(lines)


def _separate_footers(text: str) -> str:
    parsed = parse_message(text)
    start = parsed.footer_start
    if not parsed.footers or parsed.footer_separated or start is None or start < 2:
        return text
    lines = text.split('\n')
    lines.insert(start, '')
    return '\n'.join(lines)


AutofixStep = tuple[str, Callable[[str], str]]

AUTOFIX_STEPS: tuple[AutofixStep, ...] = (
    ("Normalize line endings to LF", _normalize_line_endings),
    ("Trim trailing whitespace", _trim_trailing_whitespace),
    ("Trim leading blank lines", _trim_leading_blank_lines),
    ("Trim trailing blank lines", _trim_trailing_blank_lines),
    ("Collapse consecutive blank lines", _collapse_blank_lines),
)

SPEC_AUTOFIX_STEPS: tuple[AutofixStep, ...] = (
    ("Insert blank line after the header", _separate_header),
    ("Insert blank line before the footer block", _separate_footers),
)


def apply_autofix(text: str, enforce_spec: bool = False) -> tuple[str, list[str]]:
    """Built-in whitespace and structure normalization."""
    steps = AUTOFIX_STEPS + SPEC_AUTOFIX_STEPS if enforce_spec else AUTOFIX_STEPS
    current = text
    summaries = []
    for description, fix in steps:
        fixed = fix(current)
        if fixed != current:
            summaries.append(description)
            current = fixed
    return current, summaries


def run_pipeline(text: str, options: LintOptions) -> tuple[str, list[str]]:
    """Cleanup rules then autofix, repeated until the text stops changing.

    Summaries are de-duplicated and keep the order of first application, so
    running the pipeline again on its output yields no summaries at all.

    Only rule sets that settle within MAX_ROUNDS get that guarantee. A rule
    that keeps growing its own output (`a` -> `aa`) is cut off after
    MAX_ROUNDS rounds, and a second run will rewrite the text again.
    """
    current = text
    summaries: list[str] = []
    for _ in range(MAX_ROUNDS):
        rewritten, applied = apply_cleanup(current, options.cleanup_rules)
        if options.autofix:
            rewritten, fixed = apply_autofix(rewritten, options.enforce_spec)
            applied += fixed
        if rewritten == current:
            break
        for summary in applied:
            if summary not in summaries:
                summaries.append(summary)
        current = rewritten
    return current, summaries
