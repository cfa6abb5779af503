"""Six-word passphrases drawn from a fixed 2048-word dictionary."""
from mkpasswd.entropy import (
    DeviceRandomSource,
    EntropyError,
    EntropyReadFailure,
    EntropySourceUnavailable,
    RandomSource,
    SystemRandomSource,
)
from mkpasswd.passphrase import (
    WORDS_PER_PHRASE,
    generate_and_print,
    generate_passphrase,
    generate_words,
    word_for_value,
)
from mkpasswd.wordlist import WORDS, load_wordlist

__version__ = "1.0.0"
