"""Structural Parser - Split a commit message into header, body and footers.

The footer block is found by scanning the message backward: footers are the
trailing `Token: value` / `Token #value` entries, and their values may wrap
onto continuation lines that don't look like footers themselves. Indented
continuation lines may also follow a blank line.
"""

import re
from dataclasses import dataclass, field

FOOTER_LINE_RE = re.compile(r'^(?P<token>[^:\n]+?)(?::(?: |$)| #)(?P<value>.*)$')
FOOTER_TOKEN_RE = re.compile(r'^[A-Za-z0-9-]+$')
BREAKING_CHANGE = 'BREAKING CHANGE'


@dataclass
class FooterEntry:
    """A single `token: value` trailer."""
    token: str
    value: str = ""

    @property
    def is_breaking_change(self) -> bool:
        return is_breaking_change_token(self.token)


@dataclass
class ParsedMessage:
    """Sections of one commit message. Built fresh for every lint pass."""
    header: str
    body: list[str] = field(default_factory=list)
    footers: list[FooterEntry] = field(default_factory=list)
    footer_separated: bool = True
    footer_start: int | None = None  # line index within the whole message

    @property
    def has_body(self) -> bool:
        return any(line.strip() for line in self.body)

    @property
    def body_separated(self) -> bool:
        """True when the body is empty or starts after a blank line."""
        if not self.has_body:
            return True
        return not self.body[0].strip()


def normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n')


def is_breaking_change_token(token: str) -> bool:
    return token.replace('-', ' ').upper() == BREAKING_CHANGE


def is_footer_token(token: str) -> bool:
    if not token:
        return False
    return is_breaking_change_token(token) or FOOTER_TOKEN_RE.match(token) is not None


def match_footer_line(line: str) -> tuple[str, str] | None:
    """Return (token, value) if the line starts a footer entry."""
    match = FOOTER_LINE_RE.match(line)
    if not match or not is_footer_token(match.group('token')):
        return None
    return match.group('token'), match.group('value')


def is_footer_line(line: str) -> bool:
    return match_footer_line(line) is not None


def _paragraphs(lines: list[str]) -> list[tuple[int, int]]:
    """(start, end) spans of blank-line separated paragraphs."""
    spans = []
    start = None
    for idx, line in enumerate(lines):
        if line.strip():
            if start is None:
                start = idx
        elif start is not None:
            spans.append((start, idx))
            start = None
    if start is not None:
        spans.append((start, len(lines)))
    return spans


def _is_continuation(line: str) -> bool:
    return line[:1] in (' ', '\t')


def _topmost_footer_line(lines: list[str], start: int, end: int) -> int | None:
    found = None
    for idx in range(end - 1, start - 1, -1):
        if is_footer_line(lines[idx]):
            found = idx
    return found


def find_footer_start(lines: list[str]) -> int | None:
    """Index of the first line of the trailing footer block, if any."""
    paragraphs = _paragraphs(lines)
    start = None
    position = len(paragraphs)
    # Trailing paragraphs of indented lines continue the value of the footer above them
    while position > 0:
        position -= 1
        para_start, para_end = paragraphs[position]
        start = _topmost_footer_line(lines, para_start, para_end)
        if start is not None:
            break
        if not all(_is_continuation(lines[idx]) for idx in range(para_start, para_end)):
            return None
    if start is None:
        return None

    # Earlier paragraphs only join a block that is itself paragraph-aligned
    tops = {para_start for para_start, _ in paragraphs}
    for para_start, _ in reversed(paragraphs[:position]):
        if start not in tops:
            break
        if not is_footer_line(lines[para_start]):
            break
        start = para_start
    return start


def parse_footers(lines: list[str]) -> list[FooterEntry] | None:
    """Parse a footer block top-to-bottom. None if it isn't a valid block."""
    entries: list[FooterEntry] = []
    for line in lines:
        matched = match_footer_line(line)
        if matched:
            token, value = matched
            entries.append(FooterEntry(token=token, value=value))
        elif not entries:
            return None
        else:
            entries[-1].value += '\n' + line
    for entry in entries:
        entry.value = entry.value.rstrip()
    return entries


def _strip_trailing_blank(lines: list[str]) -> list[str]:
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1
    return lines[:end]


def parse_message(text: str) -> ParsedMessage:
    lines = normalize_newlines(text).split('\n')
    header, rest = lines[0], _strip_trailing_blank(lines[1:])

    start = find_footer_start(rest)
    if start is None:
        return ParsedMessage(header=header, body=rest)

    footers = parse_footers(rest[start:])
    if footers is None:
        return ParsedMessage(header=header, body=rest)

    return ParsedMessage(
        header=header,
        body=_strip_trailing_blank(rest[:start]),
        footers=footers,
        footer_separated=start > 0 and not rest[start - 1].strip(),
        footer_start=start + 1,
    )
