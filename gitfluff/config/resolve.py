"""Resolve presets, config files and CLI flags into LintOptions.

Every setting is merged in the same order, lowest precedence first:
built-in default < preset < config file < command line.
"""

from dataclasses import dataclass, field
from typing import Optional

from gitfluff.config import FileConfig
from gitfluff.errors import ConfigError
from gitfluff.lint import (
    BodyPolicy,
    LintOptions,
    Severity,
    build_cleanup_rule,
    build_exclude_rule,
    build_header_pattern,
)
from gitfluff.lint.rules import CleanupRule, ExcludeRule, HeaderPattern
from gitfluff.presets import AI_CLEANUP_RULES, AI_EXCLUDE_RULES, DEFAULT_PRESET, Preset, resolve_preset


@dataclass
class LintSettings:
    """Command-line layer. `None`/empty means "not given"."""
    preset: Optional[str] = None
    msg_pattern: Optional[str] = None
    msg_pattern_description: Optional[str] = None
    excludes: list[str] = field(default_factory=list)
    cleanups: list[str] = field(default_factory=list)
    cleanup_pattern: Optional[str] = None
    cleanup_replacement: Optional[str] = None
    cleanup_description: Optional[str] = None
    single_line: bool = False
    require_body: bool = False
    separation: Optional[str] = None
    no_autofix: bool = False
    write: bool = False
    exit_nonzero_on_rewrite: bool = False


@dataclass(frozen=True)
class ResolvedOptions:
    """Everything a lint run needs, after merging all layers."""
    preset: Preset
    options: LintOptions
    write: bool = False
    exit_nonzero_on_rewrite: bool = False


def first_set(*values):
    """First value that isn't None, scanning from highest precedence."""
    for value in values:
        if value is not None:
            return value
    return None


def parse_exclude_arg(raw: str) -> tuple[str, Optional[str]]:
    """`PATTERN[:MESSAGE]` -> (pattern, message)."""
    pattern, sep, message = raw.partition(':')
    if not sep or not message:
        return pattern, None
    return pattern, message


def parse_cleanup_arg(raw: str) -> tuple[str, str]:
    """`FIND->REPLACE` -> (find, replace)."""
    find, sep, replace = raw.partition('->')
    if not sep:
        raise ConfigError(f"cleanup argument must use `find->replace` format (got `{raw}`)")
    return find, replace


def _resolve_preset(settings: LintSettings, file_config: Optional[FileConfig]) -> Preset:
    name = first_set(settings.preset, file_config.preset if file_config else None, DEFAULT_PRESET)
    preset = resolve_preset(name)
    if preset is None:
        raise ConfigError(f"unknown preset `{name}`")
    return preset


def _resolve_header(
    preset: Preset, settings: LintSettings, file_config: Optional[FileConfig]
) -> tuple[HeaderPattern, bool]:
    """Header pattern and whether the conventional grammar is still enforced."""
    pattern = build_header_pattern(preset.message_pattern, preset.description)
    enforce_spec = preset.enforce_spec

    rule = file_config.rules.message if file_config else None
    if rule is not None:
        pattern = build_header_pattern(rule.pattern, rule.description)
        enforce_spec = False

    if settings.msg_pattern is not None:
        description = first_set(
            settings.msg_pattern_description,
            f"Commit message must match pattern `{settings.msg_pattern}`",
        )
        pattern = build_header_pattern(settings.msg_pattern, description)
        enforce_spec = False
    elif settings.msg_pattern_description is not None:
        pattern = HeaderPattern(regex=pattern.regex, description=settings.msg_pattern_description)

    return pattern, enforce_spec


def _resolve_body_policy(
    preset: Preset, settings: LintSettings, file_config: Optional[FileConfig]
) -> BodyPolicy:
    policy = preset.body_policy

    if file_config is not None:
        rules = file_config.rules
        if rules.single_line and rules.require_body:
            raise ConfigError("configuration cannot enable both `single_line` and `require_body` rules")
        if rules.single_line:
            policy = BodyPolicy.SINGLE_LINE
        elif rules.require_body:
            policy = BodyPolicy.REQUIRE_BODY
        elif rules.single_line is False and policy is BodyPolicy.SINGLE_LINE:
            policy = BodyPolicy.ANY
        elif rules.require_body is False and policy is BodyPolicy.REQUIRE_BODY:
            policy = BodyPolicy.ANY

    if settings.single_line and settings.require_body:
        raise ConfigError("`--single-line` and `--require-body` cannot be combined")
    if settings.single_line:
        policy = BodyPolicy.SINGLE_LINE
    elif settings.require_body:
        policy = BodyPolicy.REQUIRE_BODY
    return policy


def _resolve_excludes(settings: LintSettings, file_config: Optional[FileConfig]) -> list[ExcludeRule]:
    rules = []
    if file_config is not None:
        rules += [build_exclude_rule(e.pattern, e.message) for e in file_config.rules.excludes]
    for raw in settings.excludes:
        rules.append(build_exclude_rule(*parse_exclude_arg(raw)))
    rules += [build_exclude_rule(pattern, message) for pattern, message in AI_EXCLUDE_RULES]
    return rules


def _resolve_cleanups(settings: LintSettings, file_config: Optional[FileConfig]) -> list[CleanupRule]:
    rules = []
    if file_config is not None:
        rules += [build_cleanup_rule(c.find, c.replace, c.description) for c in file_config.rules.cleanup]
    for raw in settings.cleanups:
        rules.append(build_cleanup_rule(*parse_cleanup_arg(raw)))
    if settings.cleanup_pattern is not None:
        rules.append(build_cleanup_rule(
            settings.cleanup_pattern,
            settings.cleanup_replacement or "",
            settings.cleanup_description,
        ))
    rules += [build_cleanup_rule(find, replace, desc) for find, replace, desc in AI_CLEANUP_RULES]
    return rules


def _resolve_severity(settings: LintSettings, file_config: Optional[FileConfig]) -> Severity:
    name = first_set(
        settings.separation,
        file_config.rules.separation if file_config else None,
        Severity.WARNING.value,
    )
    try:
        return Severity(name)
    except ValueError:
        raise ConfigError(f"unknown separation severity `{name}` (use 'warning' or 'error')")


def resolve_options(settings: LintSettings, file_config: Optional[FileConfig] = None) -> ResolvedOptions:
    """Merge every layer into one ResolvedOptions, compiling all rules.

    Raises ConfigError or InvalidPattern before any message is linted.
    """
    rules = file_config.rules if file_config else None
    preset = _resolve_preset(settings, file_config)
    header_pattern, enforce_spec = _resolve_header(preset, settings, file_config)

    options = LintOptions(
        header_pattern=header_pattern,
        exclude_rules=tuple(_resolve_excludes(settings, file_config)),
        cleanup_rules=tuple(_resolve_cleanups(settings, file_config)),
        body_policy=_resolve_body_policy(preset, settings, file_config),
        enforce_spec=enforce_spec,
        autofix=first_set(
            False if settings.no_autofix else None,
            rules.autofix if rules else None,
            True,
        ),
        separation_severity=_resolve_severity(settings, file_config),
    )

    return ResolvedOptions(
        preset=preset,
        options=options,
        write=settings.write or bool(file_config and file_config.write),
        exit_nonzero_on_rewrite=settings.exit_nonzero_on_rewrite or bool(rules and rules.exit_nonzero_on_rewrite),
    )
