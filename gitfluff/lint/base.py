"""Lint Options, Outcomes and Shared Types"""

from dataclasses import dataclass, field
from enum import Enum

from gitfluff.lint.rules import CleanupRule, ExcludeRule, HeaderPattern


class BodyPolicy(Enum):
    """Shape the body of a message must have."""
    ANY = "any"
    SINGLE_LINE = "single-line"
    REQUIRE_BODY = "require-body"


class Severity(Enum):
    """How a structural finding is reported."""
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class LintOptions:
    """Fully resolved rules for one or more lint runs. Never mutated."""
    header_pattern: HeaderPattern | None = None
    exclude_rules: tuple[ExcludeRule, ...] = ()
    cleanup_rules: tuple[CleanupRule, ...] = ()
    body_policy: BodyPolicy = BodyPolicy.ANY
    enforce_spec: bool = False
    autofix: bool = False
    separation_severity: Severity = Severity.WARNING


@dataclass
class Findings:
    """Violations and warnings from a single validation pass."""
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add(self, message: str, severity: Severity) -> None:
        if severity is Severity.ERROR:
            self.violations.append(message)
        else:
            self.warnings.append(message)

    def extend(self, other: 'Findings') -> None:
        self.violations.extend(other.violations)
        self.warnings.extend(other.warnings)


@dataclass
class LintOutcome:
    """Result of linting one message: both passes plus the rewrite."""
    violations_before: list[str]
    violations_after: list[str]
    cleaned_message: str
    cleanup_summaries: list[str] = field(default_factory=list)
    warnings_before: list[str] = field(default_factory=list)
    warnings_after: list[str] = field(default_factory=list)
