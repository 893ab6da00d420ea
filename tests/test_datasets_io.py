from pathlib import Path

import pytest
from packages.datasets import load_start_words, load_words, read_lines, START_WORDS_PATH


def test_read_lines_strips_crlf(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"silkworm\r\nmountain  \r\n")
    assert read_lines(p) == ["silkworm", "mountain  "]

def test_load_words_trims_lowercases_drops_blanks(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm  \n\n   \nNOTEBOOK\t\n", encoding="utf-8")
    assert load_words(p) == ["silkworm", "notebook"]

def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_start_words(tmp_path / "nope.txt")

def test_empty_file_gives_empty_list(tmp_path: Path):
    p = tmp_path / "empty.txt"
    p.write_text("", encoding="utf-8")
    assert load_start_words(p) == []

def test_bundled_start_words():
    assert START_WORDS_PATH.exists()
    words = load_start_words()
    assert len(words) > 100
    assert "silkworm" in words
    assert all(w == w.strip().lower() and w.isalpha() for w in words)
