from __future__ import annotations
from pathlib import Path
from typing import List

# Start words shipped with the package (one root word per line).
START_WORDS_PATH = Path(__file__).resolve().parent / "data" / "start.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def load_start_words(p: Path | str | None = None) -> List[str]:
    """
    Load candidate root words, defaulting to the bundled start.txt.

    A missing or unreadable file is a deployment defect: the error propagates
    and no round can be started. An existing but empty file yields [].
    """
    return load_words(START_WORDS_PATH if p is None else p)
