"""CLI Argument Parsing"""

import argparse
from pathlib import Path

import argcomplete

from gitfluff import __version__
from gitfluff.git import HookKind
from gitfluff.output import ColorMode
from gitfluff.presets import PRESETS


def _add_lint_parser(subparsers) -> None:
    lint = subparsers.add_parser(
        'lint',
        help='Lint (and optionally clean) a commit message',
        description='Check a commit message against presets, config rules and CLI rules',
        epilog='Example: gitfluff lint .git/COMMIT_EDITMSG --write',
    )

    # Message source
    source = lint.add_mutually_exclusive_group()
    source.add_argument('--from-file', type=Path, metavar='PATH', help='Read the message from a file')
    source.add_argument('--stdin', action='store_true', help='Read the message from standard input')
    source.add_argument('--message', type=str, metavar='TEXT', help='Lint a literal message')
    lint.add_argument('commit_file', type=Path, nargs='?', metavar='COMMIT_FILE',
                      help='Path to the commit message file (positional for commit-msg hooks)')

    # Rules
    lint.add_argument('--preset', type=str, metavar='NAME', help=f"Rule preset: {', '.join(PRESETS)}")
    lint.add_argument('--msg-pattern', '--message-pattern', dest='msg_pattern', type=str, metavar='REGEX',
                      help='Override the Conventional Commits check with a custom regex')
    lint.add_argument('--msg-pattern-description', '--message-description', dest='msg_pattern_description',
                      type=str, metavar='TEXT', help='Error text shown when the pattern does not match')
    lint.add_argument('--exclude', action='append', default=[], metavar='PATTERN[:MESSAGE]',
                      help='Reject messages matching PATTERN (repeatable)')
    lint.add_argument('--cleanup', action='append', default=[], metavar='FIND->REPLACE',
                      help='Rewrite FIND with REPLACE (repeatable)')
    lint.add_argument('--cleanup-pattern', type=str, metavar='REGEX',
                      help='Regex used to sanitize commit messages (replacement defaults to empty)')
    lint.add_argument('--cleanup-replacement', type=str, metavar='TEXT', help='Replacement for --cleanup-pattern')
    lint.add_argument('--cleanup-description', type=str, metavar='TEXT', help='Summary for --cleanup-pattern')
    body = lint.add_mutually_exclusive_group()
    body.add_argument('--single-line', action='store_true', help='Reject anything after the header')
    body.add_argument('--require-body', action='store_true', help='Require a body after a blank line')
    lint.add_argument('--separation', type=str, choices=['warning', 'error'],
                      help='Severity for missing blank lines before body/footers')
    lint.add_argument('--no-autofix', action='store_true', help='Disable built-in whitespace/structure fixes')
    lint.add_argument('--config', type=Path, metavar='PATH', help='Config file (default: nearest .gitfluff.toml)')

    # Output
    lint.add_argument('--write', action='store_true', help='Write the cleaned message back')
    lint.add_argument('--exit-nonzero-on-rewrite', action='store_true',
                      help='Exit with code 1 if --write rewrote the message (even if it becomes valid)')
    lint.add_argument('--color', type=ColorMode, choices=list(ColorMode), default=ColorMode.AUTO,
                      metavar='{auto,always,never}', help='Control ANSI color output (auto uses TTY detection)')
    lint.add_argument('--verbose', action='store_true', help='Show resolved rules and config source')


def _add_hook_parser(subparsers) -> None:
    hook = subparsers.add_parser('hook', help='Manage git hooks')
    hook_commands = hook.add_subparsers(dest='hook_command', required=True)
    install = hook_commands.add_parser('install', help='Install a git hook that runs gitfluff')
    install.add_argument('kind', type=HookKind, choices=list(HookKind), metavar='{commit-msg}')
    install.add_argument('--write', action='store_true', help='Hook rewrites the message in place')
    install.add_argument('--force', action='store_true', help='Overwrite an existing hook')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gitfluff',
        description='Lint and clean up commit messages',
        epilog='Example: gitfluff hook install commit-msg --write',
    )
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True)
    _add_lint_parser(subparsers)
    _add_hook_parser(subparsers)
    subparsers.add_parser('presets', help='List available presets')
    subparsers.add_parser('completion', help='Show how to enable shell tab completion')
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
