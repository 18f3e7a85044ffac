"""
Word games core - puzzle generation and letter scoring.
"""

from .dictionary import Dictionary, load_dictionary
from .evaluation import LetterStatus, evaluate, merge_keyboard_statuses
from .exceptions import (
    ContractViolation,
    DictionaryTooSmall,
    ExhaustedSearch,
    InvalidGuess,
    PuzzleError,
)
from .generators import generate_puzzle, find_combination, find_jackpot_words
from .game_loop import JackpotSession, WordleSession

__all__ = [
    "Dictionary",
    "load_dictionary",
    "LetterStatus",
    "evaluate",
    "merge_keyboard_statuses",
    "generate_puzzle",
    "find_combination",
    "find_jackpot_words",
    "JackpotSession",
    "WordleSession",
    "PuzzleError",
    "ExhaustedSearch",
    "ContractViolation",
    "DictionaryTooSmall",
    "InvalidGuess",
]
