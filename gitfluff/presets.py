"""Named Rule Presets and Built-in Rule Tables"""

from dataclasses import dataclass

from gitfluff.lint.base import BodyPolicy

# Mirrors commitlint's default headerPattern, except that the type must be non-empty
CONVENTIONAL_PATTERN = r'^(?P<type>\w+)(\((?P<scope>.*)\))?(?P<breaking>!)?: (?P<description>.+)$'
SIMPLE_PATTERN = r'^[A-Za-z][^\n]+$'

DEFAULT_PRESET = "conventional"


@dataclass(frozen=True)
class Preset:
    """Header pattern and body policy bundled under a name."""
    name: str
    message_pattern: str
    description: str
    body_policy: BodyPolicy = BodyPolicy.ANY
    enforce_spec: bool = False


PRESETS = {
    "conventional": Preset(
        name="conventional",
        message_pattern=CONVENTIONAL_PATTERN,
        description="Conventional Commits header (AI signatures are cleaned automatically)",
        body_policy=BodyPolicy.ANY,
        enforce_spec=True,
    ),
    "conventional-body": Preset(
        name="conventional-body",
        message_pattern=CONVENTIONAL_PATTERN,
        description="Conventional Commits header with a required body section",
        body_policy=BodyPolicy.REQUIRE_BODY,
        enforce_spec=True,
    ),
    "simple": Preset(
        name="simple",
        message_pattern=SIMPLE_PATTERN,
        description="Single-line summary starting with a letter",
        body_policy=BodyPolicy.SINGLE_LINE,
        enforce_spec=False,
    ),
}

PRESET_ALIASES = {
    "default": "conventional",
    "conventional_detailed": "conventional-body",
    "conventional-with-body": "conventional-body",
    "simple-single-line": "simple",
}


def resolve_preset(name: str) -> Preset | None:
    key = name.lower()
    return PRESETS.get(PRESET_ALIASES.get(key, key))


# (pattern, violation message)
AI_EXCLUDE_RULES: tuple[tuple[str, str], ...] = (
    (
        r'(?mi)^Co-Authored-By:.*(?:Claude|Anthropic|ChatGPT|GPT|OpenAI).*$',
        "Remove AI co-author attribution lines",
    ),
    (
        '\U0001F916 Generated with',
        "Remove AI generation notices from commit messages",
    ),
)

# (find, replace, description)
AI_CLEANUP_RULES: tuple[tuple[str, str, str], ...] = (
    (
        r'(?ims)\n?\s*(?:\U0001F916\s*)?Generated with.*?(?:Co-Authored-By:.*(?:Claude|Anthropic).*(?:\n\s*<[^>\n]+>)?)+\s*',
        '\n',
        "Remove Claude Code attribution block",
    ),
    (r'(?m)^.*\U0001F916 Generated with.*\n?', '', "Remove AI generation banner"),
    (r'(?mi)^Generated with Claude.*\n?', '', "Remove plain Claude generation banner"),
    (r'(?mi)^Co-Authored-By:.*(?:Claude|Anthropic).*\n?', '', "Drop Co-Authored-By lines referencing AI assistants"),
    (r'(?mi)^-\s*Claude.*\n?', '', "Remove Claude bullet entries"),
    (r'(?s)\A\s*\n+', '', "Trim leading blank lines introduced by cleanup"),
    (r'(?s)\n\s*\n\Z', '\n', "Trim trailing blank lines introduced by cleanup"),
    (r'\n{3,}', '\n\n', "Collapse excessive blank lines"),
)
