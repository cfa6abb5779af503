import os
from typing import Tuple

WORDLIST_SIZE = 2048
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 4

WORDLIST_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "wordlist.txt")


def load_wordlist(filepath: str) -> Tuple[str, ...]:
    """Load the passphrase dictionary from a file, one word per line."""
    words = []
    with open(filepath, encoding="ascii") as wordlist:
        for line in wordlist:
            word = line.strip()
            if word:
                words.append(word)

    if len(words) != WORDLIST_SIZE:
        raise ValueError(
            f"Wordlist {filepath} has {len(words)} words, expected {WORDLIST_SIZE}"
        )
    for word in words:
        if not (MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH and word.isalpha()):
            raise ValueError(f"Invalid word {word!r} in wordlist: {filepath}")
    if len(set(words)) != WORDLIST_SIZE:
        raise ValueError(f"Duplicate words in wordlist: {filepath}")
    return tuple(words)


# Loaded once at import; never mutated.
WORDS = load_wordlist(WORDLIST_PATH)
