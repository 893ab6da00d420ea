from .letters import normalize, uses_root_word_letters
from .state import GameState
from .validation import (
    Accepted,
    Empty,
    ErrorKind,
    Rejected,
    ValidationOutcome,
    validate,
)
from .roots import FALLBACK_ROOT_WORD, select_root_word
from .session import GameSession

__all__ = [
    "normalize", "uses_root_word_letters", "GameState",
    "Accepted", "Rejected", "Empty", "ErrorKind", "ValidationOutcome", "validate",
    "FALLBACK_ROOT_WORD", "select_root_word", "GameSession",
]
