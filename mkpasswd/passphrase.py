import sys
import logging
from typing import List, Optional, TextIO

from mkpasswd.entropy import RandomSource, SystemRandomSource
from mkpasswd.wordlist import WORDS

logger = logging.getLogger(__name__)

WORDS_PER_PHRASE = 6

SEPARATOR_NONE = ""
SEPARATOR_DASH = "-"
SEPARATOR_SPACE = " "
SEPARATORS = (SEPARATOR_NONE, SEPARATOR_DASH, SEPARATOR_SPACE)


def word_for_value(value: int) -> str:
    """Map a random 32-bit value onto a dictionary word."""
    return WORDS[value % len(WORDS)]


def generate_words(source: RandomSource, count: int = WORDS_PER_PHRASE) -> List[str]:
    """Draw one word per slot from an already opened source."""
    if count < 1:
        raise ValueError("Count must be a positive integer")
    return [word_for_value(source.next_uint32()) for _ in range(count)]


def generate_passphrase(
    separator: str = SEPARATOR_NONE, source: Optional[RandomSource] = None
) -> str:
    """Generate a single passphrase, opening and closing the source."""
    if separator not in SEPARATORS:
        raise ValueError(f"Unsupported separator: {separator!r}")
    if source is None:
        source = SystemRandomSource()

    with source:
        words = generate_words(source)
    logger.debug(f"Drew {len(words)} words from {source.name}")
    return separator.join(words)


def generate_and_print(
    separator: str = SEPARATOR_NONE,
    source: Optional[RandomSource] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Generate one passphrase and write it as a single line."""
    passphrase = generate_passphrase(separator, source)
    print(passphrase, file=stream or sys.stdout)
