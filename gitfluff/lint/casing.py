"""Subject casing predicates.

Each predicate looks at one shape only, so a subject can satisfy several.
Words are split on whitespace; "capitalized" means the first character is an
upper-case letter and no later character is.
"""


def _has_upper(text: str) -> bool:
    return any(ch.isupper() for ch in text)


def _is_capitalized(word: str) -> bool:
    return word[:1].isupper() and not _has_upper(word[1:])


def is_upper_case(subject: str) -> bool:
    """Has letters and none of them are lower-case: `ADD LOGIN`."""
    has_letters = any(ch.isalpha() for ch in subject)
    return has_letters and not any(ch.islower() for ch in subject)


def is_pascal_case(subject: str) -> bool:
    """Single token starting upper-case and mixing case: `AddLogin`."""
    if not subject or any(ch.isspace() for ch in subject):
        return False
    return subject[0].isupper() and any(ch.islower() for ch in subject)


def is_sentence_case(subject: str) -> bool:
    """First word capitalized, the rest lower-case: `Add login page`."""
    words = subject.split()
    if len(words) < 2:
        return False
    return _is_capitalized(words[0]) and not any(_has_upper(word) for word in words[1:])


def is_start_case(subject: str) -> bool:
    """Every word capitalized: `Add Login Page`."""
    words = subject.split()
    if len(words) < 2:
        return False
    return all(_is_capitalized(word) for word in words)


# Checked in this order
FORBIDDEN_CASES = (
    ("sentence-case", is_sentence_case),
    ("start-case", is_start_case),
    ("pascal-case", is_pascal_case),
    ("upper-case", is_upper_case),
)


def forbidden_case(subject: str) -> str | None:
    """Name of the first forbidden casing the subject uses, if any."""
    for name, predicate in FORBIDDEN_CASES:
        if predicate(subject):
            return name
    return None
