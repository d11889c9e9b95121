"""CLI Main Entry Point"""

import sys
from pathlib import Path

from gitfluff.cli.args import parse_args
from gitfluff.cli.commands import display_presets, run_hook_install, run_install_completion
from gitfluff.cli.utils import format_error, load_message, write_cleaned
from gitfluff.config import load_config
from gitfluff.config.resolve import LintSettings, ResolvedOptions, resolve_options
from gitfluff.errors import ConfigError, GitfluffError
from gitfluff.git import is_merge_in_progress
from gitfluff.lint import LintOutcome, lint_message
from gitfluff.output import Reporter, error

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def _settings_from_args(args) -> LintSettings:
    if (args.cleanup_replacement is not None or args.cleanup_description is not None) \
            and args.cleanup_pattern is None:
        raise ConfigError("--cleanup-replacement and --cleanup-description require --cleanup-pattern")

    return LintSettings(
        preset=args.preset,
        msg_pattern=args.msg_pattern,
        msg_pattern_description=args.msg_pattern_description,
        excludes=args.exclude,
        cleanups=args.cleanup,
        cleanup_pattern=args.cleanup_pattern,
        cleanup_replacement=args.cleanup_replacement,
        cleanup_description=args.cleanup_description,
        single_line=args.single_line,
        require_body=args.require_body,
        separation=args.separation,
        no_autofix=args.no_autofix,
        write=args.write,
        exit_nonzero_on_rewrite=args.exit_nonzero_on_rewrite,
    )


def _print_verbose_stats(reporter: Reporter, config_path: Path | None, resolved: ResolvedOptions) -> None:
    options = resolved.options
    reporter.debug(f"config: {config_path or 'none (no .gitfluff.toml found)'}")
    reporter.debug(f"preset: {resolved.preset.name}")
    if options.header_pattern is not None:
        reporter.debug(f"header pattern: {options.header_pattern.regex.pattern}")
    reporter.debug(f"body policy: {options.body_policy.value}, conventional grammar: "
                   f"{'on' if options.enforce_spec else 'off'}, "
                   f"separation: {options.separation_severity.value}")
    reporter.debug(f"rules: {len(options.exclude_rules)} exclude, {len(options.cleanup_rules)} cleanup, "
                   f"autofix {'on' if options.autofix else 'off'}")


def _report_outcome(reporter: Reporter, outcome: LintOutcome, write: bool) -> list[str]:
    """Print findings and cleanup notes. Returns the violations that count."""
    for violation in outcome.violations_before:
        reporter.error(violation)

    label = "applied cleanup" if write else "cleanup available"
    for summary in outcome.cleanup_summaries:
        reporter.info(f"{label}: {summary}")

    if not write:
        active, warnings = outcome.violations_before, outcome.warnings_before
    else:
        active, warnings = outcome.violations_after, outcome.warnings_after
        # Rewrite broke a message that was fine before
        if not outcome.violations_before:
            for violation in outcome.violations_after:
                reporter.error(violation)

    for message in warnings:
        reporter.warning(message)
    return active


def run_lint(args) -> int:
    message = load_message(args)
    cwd = Path.cwd()
    if is_merge_in_progress(cwd):
        return EXIT_OK

    reporter = Reporter(args.color)
    loaded = load_config(args.config, cwd)
    config_path, file_config = loaded if loaded else (None, None)
    resolved = resolve_options(_settings_from_args(args), file_config)
    if args.verbose:
        _print_verbose_stats(reporter, config_path, resolved)

    outcome = lint_message(message.text, resolved.options)
    active = _report_outcome(reporter, outcome, resolved.write)

    did_rewrite = resolved.write and outcome.cleaned_message != message.text
    if resolved.write:
        write_cleaned(message, outcome.cleaned_message)

    if active:
        return EXIT_VIOLATIONS
    if did_rewrite and resolved.exit_nonzero_on_rewrite:
        reporter.info("commit message was rewritten; please re-run the commit to review changes")
        return EXIT_VIOLATIONS
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        if args.command == 'lint':
            return run_lint(args)
        if args.command == 'hook':
            return run_hook_install(args.kind, args.write, args.force)
        if args.command == 'presets':
            return display_presets()
        return run_install_completion()
    except GitfluffError as e:
        print(f"gitfluff: {error('error')}: {format_error(e)}", file=sys.stderr)
        return EXIT_ERROR


def run() -> None:
    sys.exit(main())
