from .io import read_lines, load_words, load_start_words, START_WORDS_PATH

__all__ = ["read_lines", "load_words", "load_start_words", "START_WORDS_PATH"]
