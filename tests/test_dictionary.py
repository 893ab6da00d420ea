from pathlib import Path

import pytest
from packages.dictionary import BaseDictionary, create_dictionary, get_dictionary_ids, register
from packages.dictionary.wordfreq_backend import DEFAULT_MIN_ZIPF


def test_registry_ids():
    assert get_dictionary_ids() == ["wordfreq", "wordlist"]

def test_unknown_id_raises():
    with pytest.raises(ValueError, match="Unknown dictionary id"):
        create_dictionary("klingon")

def test_register_rejects_duplicates_and_missing_id():
    class Dup(BaseDictionary):
        id = "wordlist"

    class NoId(BaseDictionary):
        id = ""

    with pytest.raises(ValueError, match="Duplicate"):
        register(Dup)
    with pytest.raises(ValueError, match="non-empty"):
        register(NoId)

def test_wordlist_from_file(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("Worm\nmilk  \n\n", encoding="utf-8")
    d = create_dictionary("wordlist", path=p)
    assert d.is_real_word("worm") and d.is_real_word("milk")
    assert not d.is_real_word("slim")

def test_wordlist_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        create_dictionary("wordlist", path=tmp_path / "missing.txt")

def test_wordlist_needs_source():
    with pytest.raises(ValueError):
        create_dictionary("wordlist")

@pytest.mark.parametrize("word,expected", [
    ("worm", True),
    ("milk", True),
    ("skim", True),
    ("zqxjvk", False),
])
def test_wordfreq_backend(word, expected):
    d = create_dictionary("wordfreq")
    assert d.language == "en"
    assert d.is_real_word(word) is expected

@pytest.mark.parametrize("jumble", ["iwrm", "mlrs", "lwrs", "rmls"])
def test_wordfreq_default_rejects_letter_jumbles(jumble):
    assert create_dictionary("wordfreq").is_real_word(jumble) is False

def test_wordfreq_default_threshold():
    d = create_dictionary("wordfreq")
    assert d.min_zipf == DEFAULT_MIN_ZIPF > 0

def test_wordfreq_threshold():
    strict = create_dictionary("wordfreq", min_zipf=8.0)
    assert strict.is_real_word("the") is False
    with pytest.raises(ValueError):
        create_dictionary("wordfreq", min_zipf=-1)
