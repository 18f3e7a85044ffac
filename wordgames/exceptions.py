"""Exception hierarchy for puzzle generation and play."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base exception for every failure raised by the puzzle core."""


class ExhaustedSearch(PuzzleError):
    """Raised when no puzzle satisfied the constraints within the attempt budget."""

    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class ContractViolation(PuzzleError, ValueError):
    """Raised when a caller passes arguments outside the documented contract."""


class DictionaryTooSmall(PuzzleError):
    """Raised when a dictionary can never satisfy a generator's structural constraints."""


class DictionaryLoadError(PuzzleError):
    """Raised when a word list file cannot be read or holds no usable words."""


class InvalidGuess(PuzzleError):
    """Raised when a session refuses a player's word."""

    def __init__(self, message: str, reason: str = "invalid"):
        super().__init__(message)
        self.reason = reason
