"""Rule Compiler - Turn raw pattern strings into reusable rules."""

import re
from dataclasses import dataclass

from gitfluff.errors import GitfluffError


class InvalidPattern(GitfluffError):
    """Raised when a configured regex does not compile."""

    def __init__(self, kind: str, pattern: str, cause: re.error):
        self.kind = kind
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"invalid {kind} regex `{pattern}`: {cause}")


@dataclass(frozen=True)
class HeaderPattern:
    """Pattern the first line of a message must match."""
    regex: re.Pattern
    description: str | None = None

    def matches(self, header: str) -> bool:
        return self.regex.search(header) is not None


@dataclass(frozen=True)
class ExcludeRule:
    """Pattern that must not appear anywhere in the message."""
    regex: re.Pattern
    message: str | None = None
    pattern_source: str = ""

    @property
    def violation(self) -> str:
        if self.message:
            return self.message
        return f"Commit message matches excluded pattern `{self.pattern_source}`"


@dataclass(frozen=True)
class CleanupRule:
    """Regex rewrite applied to the whole message, replace-all."""
    regex: re.Pattern
    replace: str = ""
    description: str | None = None
    pattern_source: str = ""

    @property
    def summary(self) -> str:
        return self.description or f"Applied cleanup `{self.pattern_source}`"

    def apply(self, text: str) -> str:
        # Callable replacement keeps the text literal (no \1 or \g<name> expansion)
        return self.regex.sub(lambda _match: self.replace, text)


def _compile(kind: str, pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(kind, pattern, e) from e


def build_header_pattern(pattern: str, description: str | None = None) -> HeaderPattern:
    return HeaderPattern(regex=_compile("message pattern", pattern), description=description)


def build_exclude_rule(pattern: str, message: str | None = None) -> ExcludeRule:
    return ExcludeRule(
        regex=_compile("exclude", pattern),
        message=message,
        pattern_source=pattern,
    )


def build_cleanup_rule(find: str, replace: str = "", description: str | None = None) -> CleanupRule:
    return CleanupRule(
        regex=_compile("cleanup", find),
        replace=replace,
        description=description,
        pattern_source=find,
    )
