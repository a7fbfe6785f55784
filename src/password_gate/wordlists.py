"""Bundled password denylist and dictionary words, plus an on-disk loader."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Breach-exposed passwords, compared against the whole lower-cased password
COMMON_PASSWORDS: frozenset[str] = frozenset({
    "123456", "1234567", "12345678", "123456789", "1234567890",
    "111111", "000000", "123123", "654321", "666666", "121212",
    "password", "password1", "password12", "password123", "password123!",
    "password1!", "passw0rd", "p@ssw0rd", "p@ssword", "p@ssw0rd1",
    "qwerty", "qwerty123", "qwertyuiop", "qwerty123!", "azerty",
    "abc123", "abc12345", "abcd1234", "1q2w3e4r", "1qaz2wsx", "zaq12wsx",
    "letmein", "letmein1", "letmein123", "welcome", "welcome1",
    "welcome123", "welcome123!", "admin", "admin123", "admin123!",
    "administrator", "root", "toor", "login", "guest", "changeme",
    "iloveyou", "princess", "sunshine", "football", "baseball",
    "monkey", "dragon", "master", "shadow", "superman", "batman",
    "trustno1", "starwars", "whatever", "michael", "jennifer",
    "mustang", "summer2024", "winter2024", "spring2024", "autumn2024",
    "summer2025", "winter2025", "qazwsx", "zxcvbnm", "asdfghjkl",
    "secret", "secret123", "hello123", "freedom", "charlie",
})

# Checked in this order; the first hit is the one reported
BANNED_SUBSTRINGS: tuple[str, ...] = (
    "password",
    "admin",
    "user",
    "login",
    "welcome",
    "test",
    "guest",
)


def load_wordlist(path: str | Path) -> list[str]:
    """Read one word per line, skipping blank lines and ``#`` comments.

    Order is preserved and duplicates are dropped after their first
    occurrence. Raises FileNotFoundError if the file does not exist.
    """
    words: list[str] = []
    seen: set[str] = set()
    with open(path, encoding="utf-8") as fh:
        for line in fh:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            if word in seen:
                continue
            seen.add(word)
            words.append(word)

    logger.info("Loaded %d entries from %s", len(words), path)
    return words
