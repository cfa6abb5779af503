import pytest

from mkpasswd.wordlist import WORDLIST_SIZE, WORDS, load_wordlist


def test_wordlist_has_2048_unique_words():
    assert len(WORDS) == WORDLIST_SIZE == 2048
    assert len(set(WORDS)) == 2048


def test_wordlist_words_are_three_or_four_letters():
    for word in WORDS:
        assert 3 <= len(word) <= 4
        assert word.isalpha()


def test_wordlist_order_is_fixed():
    assert WORDS[:6] == ("Abe", "Abed", "Abel", "Abet", "Able", "Abut")
    assert WORDS[-1] == "Zoo"


def test_wordlist_is_immutable():
    assert isinstance(WORDS, tuple)


def test_load_wordlist_rejects_wrong_size(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("Abe\nAbed\n")

    with pytest.raises(ValueError) as exc:
        load_wordlist(str(path))

    assert "expected 2048" in str(exc.value)


def test_load_wordlist_rejects_long_words(tmp_path):
    path = tmp_path / "long.txt"
    path.write_text("\n".join(list(WORDS[:-1]) + ["Zebra"]) + "\n")

    with pytest.raises(ValueError) as exc:
        load_wordlist(str(path))

    assert "Zebra" in str(exc.value)


def test_load_wordlist_rejects_duplicates(tmp_path):
    path = tmp_path / "dupes.txt"
    path.write_text("\n".join(list(WORDS[:-1]) + ["Abe"]) + "\n")

    with pytest.raises(ValueError):
        load_wordlist(str(path))


def test_load_wordlist_skips_blank_lines(tmp_path):
    path = tmp_path / "blanks.txt"
    path.write_text("\n\n".join(WORDS) + "\n\n")

    assert load_wordlist(str(path)) == WORDS
