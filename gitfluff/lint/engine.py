"""Lint Orchestrator - evaluate, rewrite, evaluate again."""

from gitfluff.lint.base import Findings, LintOptions, LintOutcome
from gitfluff.lint.cleanup import run_pipeline
from gitfluff.lint.header import EMPTY_HEADER, is_empty_header, validate_header
from gitfluff.lint.parser import normalize_newlines, parse_message
from gitfluff.lint.policy import validate_body, validate_footers


def evaluate_message(message: str, options: LintOptions) -> Findings:
    """Run every validator over one version of the message."""
    parsed = parse_message(message)
    if is_empty_header(parsed.header):
        return Findings(violations=[EMPTY_HEADER])

    findings = Findings()
    text = normalize_newlines(message)
    for rule in options.exclude_rules:
        if rule.regex.search(text):
            findings.violations.append(rule.violation)

    findings.violations.extend(validate_header(parsed.header, options))
    findings.extend(validate_body(parsed, options))
    if options.enforce_spec:
        findings.violations.extend(validate_footers(parsed))
    return findings


def lint_message(message: str, options: LintOptions) -> LintOutcome:
    before = evaluate_message(message, options)
    cleaned, summaries = run_pipeline(message, options)
    after = evaluate_message(cleaned, options)

    return LintOutcome(
        violations_before=before.violations,
        violations_after=after.violations,
        cleaned_message=cleaned,
        cleanup_summaries=summaries,
        warnings_before=before.warnings,
        warnings_after=after.warnings,
    )
