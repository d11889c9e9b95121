"""Body/Footer Policy Validator"""

from gitfluff.lint.base import BodyPolicy, Findings, LintOptions
from gitfluff.lint.parser import BREAKING_CHANGE, FOOTER_TOKEN_RE, ParsedMessage

SINGLE_LINE = "Commit message must be a single line"
BODY_REQUIRED = "Commit message must include a body after a blank line"
BODY_NEEDS_BLANK_LINE = "Commit message body must begin with a blank line after the description"
BODY_NOT_SEPARATED = "Commit message body must be separated from the header by a blank line"
FOOTER_NOT_SEPARATED = "Commit message footer must be separated from the body by a blank line"
FOOTER_AFTER_HEADER = "Commit message footer must be separated from the header by a blank line"
EMPTY_FOOTER_TOKEN = "Commit message footer token must not be empty"
BREAKING_CHANGE_SPELLING = "BREAKING CHANGE footer token must be spelled `BREAKING CHANGE` or `BREAKING-CHANGE`"
BREAKING_CHANGE_EMPTY = "BREAKING CHANGE footer must include a description"

BREAKING_CHANGE_TOKENS = (BREAKING_CHANGE, 'BREAKING-CHANGE')


def validate_body(parsed: ParsedMessage, options: LintOptions) -> Findings:
    findings = Findings()
    policy_flagged_separator = False

    if options.body_policy is BodyPolicy.SINGLE_LINE:
        if parsed.has_body or parsed.footers:
            findings.violations.append(SINGLE_LINE)
    elif options.body_policy is BodyPolicy.REQUIRE_BODY:
        if not parsed.has_body:
            findings.violations.append(BODY_REQUIRED)
        elif not parsed.body_separated:
            findings.violations.append(BODY_NEEDS_BLANK_LINE)
            policy_flagged_separator = True

    if options.enforce_spec:
        severity = options.separation_severity
        if not parsed.body_separated and not policy_flagged_separator:
            findings.add(BODY_NOT_SEPARATED, severity)
        if parsed.footers and not parsed.footer_separated:
            findings.add(FOOTER_NOT_SEPARATED if parsed.has_body else FOOTER_AFTER_HEADER, severity)

    return findings


def validate_footers(parsed: ParsedMessage) -> list[str]:
    violations = []
    for footer in parsed.footers:
        token = footer.token
        if not token.strip():
            violations.append(EMPTY_FOOTER_TOKEN)
        elif footer.is_breaking_change:
            if token not in BREAKING_CHANGE_TOKENS:
                violations.append(BREAKING_CHANGE_SPELLING)
            if not footer.value.strip():
                violations.append(BREAKING_CHANGE_EMPTY)
        elif not FOOTER_TOKEN_RE.match(token):
            violations.append(
                f"Commit message footer token `{token}` must contain only letters, digits and hyphens"
            )
    return violations
