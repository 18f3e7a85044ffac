"""
Play-state wrappers around generated puzzles.

Generated puzzles are frozen; a session copies what it needs to mutate
(current words, move counters, keyboard colours) so the puzzle itself
can be handed to several sessions or re-rendered at will.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Deque, Dict, List, Sequence

from .dictionary import Dictionary
from .evaluation import LetterStatus, evaluate, is_solved, merge_keyboard_statuses
from .exceptions import ContractViolation, InvalidGuess
from .generators.base import RandomSource, pick
from .generators.jackpot import JackpotPuzzle
from .utils import normalize_word, replace_letter_at

logger = logging.getLogger(__name__)

MAX_GUESSES = 6
MAX_HISTORY_SIZE = 50
MAX_SECRET_ATTEMPTS = 100


class Status(str, Enum):
    playing = "playing"
    won = "won"
    lost = "lost"


class WordHistory:
    """Most-recent-first list of secret words already played (in memory only)."""

    def __init__(self, max_size: int = MAX_HISTORY_SIZE, words: Sequence[str] = ()):
        if max_size < 1:
            raise ContractViolation(f"max_size must be at least 1, got {max_size}")
        self._words: Deque[str] = deque(words, maxlen=max_size)

    def add(self, word: str) -> None:
        self._words.appendleft(word)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def words(self) -> List[str]:
        return list(self._words)


def pick_secret_word(
    words: Sequence[str],
    history: WordHistory,
    rng: RandomSource,
    max_attempts: int = MAX_SECRET_ATTEMPTS,
) -> str:
    """
    Draw a word not played recently.
    After `max_attempts` misses any word is accepted, so a small list never blocks a new game.
    """
    if not words:
        raise ContractViolation("Cannot pick a secret word from an empty list")
    for _ in range(max_attempts):
        word = pick(rng, words)
        if word not in history:
            return word
    logger.debug("Every draw was in the history, falling back to any word")
    return pick(rng, words)


class WordleSession:
    """One Wordle game: guesses scored against a secret target."""

    def __init__(self, target: str, dictionary: Dictionary, max_guesses: int = MAX_GUESSES):
        target = normalize_word(target)
        if len(target) != dictionary.word_length:
            raise ContractViolation(
                f"Target {target!r} must have {dictionary.word_length} letters"
            )
        if max_guesses < 1:
            raise ContractViolation(f"max_guesses must be at least 1, got {max_guesses}")
        self.target = target
        self.dictionary = dictionary
        self.max_guesses = max_guesses
        self.guesses: List[str] = []
        self.results: List[List[LetterStatus]] = []
        self.keyboard: Dict[str, LetterStatus] = {}
        self.status = Status.playing

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - len(self.guesses)

    def guess(self, word: str) -> List[LetterStatus]:
        """
        Score a guess and advance the game.

        Raises:
            InvalidGuess: If the game is over, the word has the wrong length,
                or it is not in the dictionary. Rejected guesses do not count.
        """
        if self.status is not Status.playing:
            raise InvalidGuess("The game is over", reason="game_over")
        word = normalize_word(word)
        if len(word) != self.dictionary.word_length:
            raise InvalidGuess(
                f"The word must have {self.dictionary.word_length} letters", reason="length"
            )
        if word not in self.dictionary:
            raise InvalidGuess(f"{word} is not in the word list", reason="unknown_word")

        statuses = evaluate(word, self.target)
        self.guesses.append(word)
        self.results.append(statuses)
        self.keyboard = merge_keyboard_statuses(self.keyboard, word, statuses)

        if is_solved(statuses):
            self.status = Status.won
        elif len(self.guesses) >= self.max_guesses:
            self.status = Status.lost
        return statuses


class JackpotSession:
    """
    One Jackpot game: the player swaps letters within a column until every
    row spells its original word again.
    """

    def __init__(self, puzzle: JackpotPuzzle, dictionary: Dictionary):
        self.puzzle = puzzle
        self.dictionary = dictionary
        self.current: List[str] = puzzle.currents
        self.moves = 0
        self.status = Status.won if self._solved() else Status.playing

    @property
    def valid(self) -> List[bool]:
        return [w in self.dictionary for w in self.current]

    def _solved(self) -> bool:
        return self.current == self.puzzle.originals

    def swap(self, column: int, row_a: int, row_b: int) -> bool:
        """
        Swap the letters of two rows in one column.
        Returns False (and counts no move) for a same-row swap or a finished game.
        """
        rows = len(self.current)
        width = self.dictionary.word_length
        if not 0 <= column < width:
            raise ContractViolation(f"Column {column} outside 0..{width - 1}")
        for row in (row_a, row_b):
            if not 0 <= row < rows:
                raise ContractViolation(f"Row {row} outside 0..{rows - 1}")
        if self.status is Status.won or row_a == row_b:
            return False

        a, b = self.current[row_a], self.current[row_b]
        self.current[row_a] = replace_letter_at(a, column, b[column])
        self.current[row_b] = replace_letter_at(b, column, a[column])
        self.moves += 1

        if self._solved():
            self.status = Status.won
            logger.info("Jackpot solved in %d move(s)", self.moves)
        return True

    def to_dict(self) -> List[Dict[str, object]]:
        return [
            {"original": o, "current": c, "valid": v}
            for o, c, v in zip(self.puzzle.originals, self.current, self.valid)
        ]
