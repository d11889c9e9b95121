"""CLI Utility Functions"""

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gitfluff.errors import MessageSourceError

NO_SOURCE = "no commit message source provided (pass COMMIT_FILE, --from-file, --stdin, or --message)"


class MessageSource(Enum):
    FILE = "file"
    STDIN = "stdin"
    LITERAL = "literal"


@dataclass
class MessageData:
    """The message being linted and where it came from."""
    text: str
    source: MessageSource
    path: Path | None = None


def _read_file(path: Path) -> str:
    try:
        # newline='' keeps CRLF so the engine decides how to normalize it
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MessageSourceError(f"failed to read commit message from {path}") from e


def load_message(args: argparse.Namespace) -> MessageData:
    """Read the commit message from whichever source was requested."""
    path = args.from_file or args.commit_file
    given = [bool(args.from_file), bool(args.commit_file), args.stdin, args.message is not None]
    if sum(given) > 1:
        raise MessageSourceError("pass only one of COMMIT_FILE, --from-file, --stdin, or --message")

    if path is not None:
        return MessageData(text=_read_file(path), source=MessageSource.FILE, path=path)
    if args.stdin:
        try:
            return MessageData(text=sys.stdin.read(), source=MessageSource.STDIN)
        except (OSError, UnicodeDecodeError) as e:
            raise MessageSourceError("failed to read commit message from stdin") from e
    if args.message is not None:
        return MessageData(text=args.message, source=MessageSource.LITERAL)
    raise MessageSourceError(NO_SOURCE)


def write_cleaned(message: MessageData, cleaned: str) -> None:
    """Write the cleaned message back to its file, or to stdout."""
    if message.source is MessageSource.FILE:
        if cleaned == message.text:
            return
        try:
            with open(message.path, 'w', encoding='utf-8', newline='') as f:
                f.write(cleaned)
        except OSError as e:
            raise MessageSourceError(f"failed to write cleaned commit message to {message.path}") from e
    else:
        sys.stdout.write(cleaned)
        sys.stdout.flush()


def format_error(err: BaseException) -> str:
    """Error text followed by its chain of causes."""
    parts = [str(err)]
    cause = err.__cause__
    while cause is not None:
        parts.append(f"  caused by: {cause}")
        cause = cause.__cause__
    return '\n'.join(parts)
