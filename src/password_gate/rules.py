"""Password policy rules.

Every rule takes the original password and the active PolicyConfig and
returns an error message, or None when the password satisfies it. Rules
never raise and never see each other's results.
"""

import enum
import re
from collections.abc import Callable
from itertools import groupby

from password_gate.config import PolicyConfig

Rule = Callable[[str, PolicyConfig], str | None]


class CharacterClass(str, enum.Enum):
    lowercase = "lowercase"
    uppercase = "uppercase"
    digit = "digit"
    special = "special"


# ASCII ranges only: anything outside them, accented letters included, is special
_CLASS_PATTERNS: dict[CharacterClass, re.Pattern[str]] = {
    CharacterClass.lowercase: re.compile(r"[a-z]"),
    CharacterClass.uppercase: re.compile(r"[A-Z]"),
    CharacterClass.digit:     re.compile(r"[0-9]"),
    CharacterClass.special:   re.compile(r"[^a-zA-Z0-9]"),
}


def character_classes(password: str) -> set[CharacterClass]:
    """Return the character classes with at least one character present."""
    return {
        cls for cls, pattern in _CLASS_PATTERNS.items()
        if pattern.search(password)
    }


def longest_run(password: str) -> int:
    """Length of the longest run of one repeated character (0 for '')."""
    return max((sum(1 for _ in group) for _, group in groupby(password)), default=0)


def check_min_length(password: str, config: PolicyConfig) -> str | None:
    if len(password) < config.min_length:
        return f"Password must be at least {config.min_length} characters long"
    return None


def check_max_length(password: str, config: PolicyConfig) -> str | None:
    if len(password) > config.max_length:
        return f"Password must not exceed {config.max_length} characters"
    return None


def check_character_classes(password: str, config: PolicyConfig) -> str | None:
    if len(character_classes(password)) < config.min_classes_required:
        return (
            f"Password must contain at least {config.min_classes_required} "
            "of the following: lowercase letters, uppercase letters, "
            "numbers, special characters"
        )
    return None


def check_denylist(password: str, config: PolicyConfig) -> str | None:
    # Exact match on the whole password, not a substring search
    if password.lower() in config.denylist:
        return "Password is too common and has been found in data breaches"
    return None


def check_repeated_characters(password: str, config: PolicyConfig) -> str | None:
    if longest_run(password) > config.max_consecutive_repeat:
        return (
            "Password cannot contain the same character repeated more than "
            f"{config.max_consecutive_repeat} times consecutively"
        )
    return None


def check_banned_substrings(password: str, config: PolicyConfig) -> str | None:
    """Report only the first banned word found, in configured order."""
    lowered = password.lower()
    for word in config.banned_substrings:
        if word in lowered:
            return f'Password cannot contain common words like "{word}"'
    return None


# Evaluation order; errors are reported in this order
RULES: tuple[Rule, ...] = (
    check_min_length,
    check_max_length,
    check_character_classes,
    check_denylist,
    check_repeated_characters,
    check_banned_substrings,
)
