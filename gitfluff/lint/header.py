"""Header Validator - Check the first line against pattern and grammar."""

import re
from dataclasses import dataclass

from gitfluff.lint.base import LintOptions
from gitfluff.lint.casing import FORBIDDEN_CASES, forbidden_case

EMPTY_HEADER = "Commit message header must not be empty"
PATTERN_MISMATCH = "Commit message does not match required pattern"
GRAMMAR_MISMATCH = "Commit message header must follow `type(scope): description`"
EMPTY_SCOPE = "Commit message scope must not be empty"
EMPTY_DESCRIPTION = "Commit message description must not be empty"
TRAILING_PERIOD = "Commit message subject must not end with a period"
FORBIDDEN_CASE = "Commit message subject must not be " + ", ".join(name for name, _ in FORBIDDEN_CASES)

HEADER_RE = re.compile(
    r'^(?P<type>\w+)'
    r'(?:\((?P<scope>[^()]*)\))?'
    r'(?P<breaking>!)?'
    r':(?: (?P<description>.*))?$'
)


@dataclass
class ConventionalHeader:
    """A header split into its `type(scope)!: description` parts."""
    type: str
    scope: str | None = None
    breaking: bool = False
    description: str = ""


def decompose_header(header: str) -> ConventionalHeader | None:
    match = HEADER_RE.match(header.strip())
    if not match:
        return None
    return ConventionalHeader(
        type=match.group('type'),
        scope=match.group('scope'),
        breaking=match.group('breaking') is not None,
        description=(match.group('description') or "").strip(),
    )


def is_empty_header(header: str) -> bool:
    return not header.strip()


def validate_header(header: str, options: LintOptions) -> list[str]:
    """Violations for a non-empty header line."""
    violations = []
    header = header.strip()

    pattern = options.header_pattern
    pattern_failed = pattern is not None and not pattern.matches(header)
    if pattern_failed:
        violations.append(pattern.description or PATTERN_MISMATCH)

    if not options.enforce_spec:
        return violations

    parts = decompose_header(header)
    if parts is None:
        if not pattern_failed:
            violations.append(GRAMMAR_MISMATCH)
        return violations

    if parts.scope is not None and not parts.scope.strip():
        violations.append(EMPTY_SCOPE)
    violations.extend(validate_subject(parts.description))
    return violations


def validate_subject(subject: str) -> list[str]:
    if not subject:
        return [EMPTY_DESCRIPTION]
    violations = []
    if subject.endswith('.'):
        violations.append(TRAILING_PERIOD)
    if forbidden_case(subject):
        violations.append(FORBIDDEN_CASE)
    return violations
