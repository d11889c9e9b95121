"""Terminal Output Formatting Package"""

import os
import sys
from enum import Enum
from typing import TextIO


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'


class ColorMode(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _supports_color(stream: TextIO = sys.stdout) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'


def _colorize(text: str, *codes: str, enabled: bool | None = None) -> str:
    if not (COLORS_ENABLED if enabled is None else enabled):
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


class Reporter:
    """Writes `gitfluff: <level>: <message>` diagnostics to stderr."""

    LEVEL_COLORS = {
        'error': Colors.RED,
        'warning': Colors.YELLOW,
        'info': Colors.CYAN,
        'debug': Colors.DIM,
    }

    def __init__(self, mode: ColorMode = ColorMode.AUTO, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stderr
        if mode is ColorMode.ALWAYS:
            self.color = True
        elif mode is ColorMode.NEVER:
            self.color = False
        else:
            self.color = _supports_color(self._stream)

    def _write(self, level: str, message: str) -> None:
        label = _colorize(level, self.LEVEL_COLORS[level], enabled=self.color)
        print(f"gitfluff: {label}: {message}", file=self._stream)

    def error(self, message: str) -> None:
        self._write('error', message)

    def warning(self, message: str) -> None:
        self._write('warning', message)

    def info(self, message: str) -> None:
        self._write('info', message)

    def debug(self, message: str) -> None:
        self._write('debug', message)


__all__ = [
    "Colors", "ColorMode", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success",
    "Reporter",
]
