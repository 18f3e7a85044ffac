"""
Jackpot puzzle generator.

N words are picked so that no column repeats a letter; then every column
but the first is shuffled across rows. The player restores the words by
swapping letters inside a column. A column may keep one row's letter in
place (a fixed point), but only a limited number of columns may do so,
otherwise the puzzle would solve itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from tenacity import RetryError

from ..dictionary import Dictionary
from ..exceptions import ContractViolation, DictionaryTooSmall, ExhaustedSearch
from ..utils import RARE_LETTERS, count_rare_letters, replace_letter_at
from .base import (
    DEFAULT_MAX_ATTEMPTS,
    RandomSource,
    RejectedDraw,
    bounded_retrying,
    default_random_source,
    pick,
    shuffled,
)

logger = logging.getLogger(__name__)

MIN_WORDS = 3
MAX_WORDS = 5
ANCHOR_COLUMN = 0
MAX_PERMUTATION_ATTEMPTS = 1000
# Chance of keeping a one-fixed-point permutation while the budget allows it
SINGLE_FIXED_POINT_CHANCE = 0.2

Permutation = Tuple[int, ...]


@dataclass(frozen=True)
class JackpotWord:
    original: str
    current: str
    valid: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"original": self.original, "current": self.current, "valid": self.valid}


@dataclass(frozen=True)
class JackpotPuzzle:
    """
    Generated Jackpot set.

    `permutations[col][row]` is the index of the original word whose letter
    row `row` shows in column `col`. Column 0 is always the identity.
    """
    words: Tuple[JackpotWord, ...]
    permutations: Tuple[Permutation, ...]
    attempts: int = 1

    @property
    def originals(self) -> List[str]:
        return [w.original for w in self.words]

    @property
    def currents(self) -> List[str]:
        return [w.current for w in self.words]

    def to_dict(self) -> List[Dict[str, Any]]:
        return [w.to_dict() for w in self.words]


def count_fixed_points(permutation: Sequence[int]) -> int:
    return sum(1 for i, src in enumerate(permutation) if i == src)


def columns_distinct(words: Sequence[str], column: int) -> bool:
    """True when every word has a different letter at `column`."""
    return len({w[column] for w in words}) == len(words)


def apply_permutations(words: Sequence[str], permutations: Sequence[Permutation]) -> List[str]:
    """Build the shuffled rows: row i, column c takes words[permutations[c][i]][c]."""
    shuffled_words = list(words)
    for col, perm in enumerate(permutations):
        for row, src in enumerate(perm):
            shuffled_words[row] = replace_letter_at(shuffled_words[row], col, words[src][col])
    return shuffled_words


def restore(puzzle: JackpotPuzzle) -> List[str]:
    """Undo every column permutation of the puzzle and return the original words."""
    current = puzzle.currents
    restored = list(current)
    for col, perm in enumerate(puzzle.permutations):
        for row, src in enumerate(perm):
            restored[src] = replace_letter_at(restored[src], col, current[row][col])
    return restored


def validate_word_count(word_count: int) -> None:
    if not MIN_WORDS <= word_count <= MAX_WORDS:
        raise ContractViolation(
            f"Word count must be between {MIN_WORDS} and {MAX_WORDS}, got {word_count}"
        )


class JackpotGenerator:
    """Picks N column-distinct words and scrambles their columns."""

    def __init__(
        self,
        dictionary: Dictionary,
        word_count: int = MIN_WORDS,
        rng: Optional[RandomSource] = None,
        rare_letters: Iterable[str] = RARE_LETTERS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        max_permutation_attempts: int = MAX_PERMUTATION_ATTEMPTS,
        single_fixed_point_chance: float = SINGLE_FIXED_POINT_CHANCE,
    ):
        validate_word_count(word_count)
        if max_attempts < 1 or max_permutation_attempts < 1:
            raise ContractViolation("Attempt limits must be at least 1")
        if not 0.0 <= single_fixed_point_chance <= 1.0:
            raise ContractViolation(
                f"single_fixed_point_chance must be within [0, 1], got {single_fixed_point_chance}"
            )
        self.dictionary = dictionary
        self.word_count = word_count
        self.rng = rng if rng is not None else default_random_source()
        self.rare_letters = frozenset(rare_letters)
        self.max_attempts = max_attempts
        self.max_permutation_attempts = max_permutation_attempts
        self.single_fixed_point_chance = single_fixed_point_chance

    def check_dictionary(self) -> None:
        n = self.word_count
        if len(self.dictionary) < n:
            raise DictionaryTooSmall(
                f"Jackpot with {n} words needs at least {n} distinct words, "
                f"dictionary has {len(self.dictionary)}"
            )
        for col in range(self.dictionary.word_length):
            letters = self.dictionary.letters_at(col)
            if len(letters) < n:
                raise DictionaryTooSmall(
                    f"Column {col} only offers {len(letters)} distinct letters, {n} needed"
                )

    # Selection phase

    def _draw_words(self) -> List[str]:
        words = [pick(self.rng, self.dictionary.words) for _ in range(self.word_count)]
        if len(set(words)) != len(words):
            raise RejectedDraw("duplicate word")
        if not all(columns_distinct(words, c) for c in range(self.dictionary.word_length)):
            raise RejectedDraw("a column repeats a letter")
        if count_rare_letters("".join(words), self.rare_letters) < self.word_count:
            raise RejectedDraw("not enough rare letters")
        return words

    def select_words(self) -> Tuple[List[str], int]:
        """Draw words until the selection constraints hold. Returns (words, attempts)."""
        self.check_dictionary()
        try:
            for attempt in bounded_retrying(self.max_attempts):
                with attempt:
                    words = self._draw_words()
        except RetryError as e:
            logger.warning("Jackpot selection gave up after %d attempts", self.max_attempts)
            raise ExhaustedSearch(
                f"No set of {self.word_count} Jackpot words found in {self.max_attempts} attempts",
                attempts=self.max_attempts,
            ) from e
        return words, attempt.retry_state.attempt_number

    # Shuffle phase

    def _draw_permutation(self, budget: int) -> Tuple[Permutation, int]:
        identity = list(range(self.word_count))
        candidate = shuffled(self.rng, identity)
        fixed = count_fixed_points(candidate)
        if fixed == 0:
            return tuple(candidate), budget
        if fixed == 1 and budget > 0 and self.rng.random() < self.single_fixed_point_chance:
            return tuple(candidate), budget - 1
        raise RejectedDraw(f"{fixed} fixed point(s)")

    def find_column_permutation(self, budget: int) -> Tuple[Permutation, int]:
        """
        Pick one column's row permutation.

        Returns the permutation and the remaining single-fixed-point budget.
        """
        try:
            for attempt in bounded_retrying(self.max_permutation_attempts):
                with attempt:
                    perm, budget = self._draw_permutation(budget)
        except RetryError as e:
            raise ExhaustedSearch(
                f"No column permutation found in {self.max_permutation_attempts} attempts",
                attempts=self.max_permutation_attempts,
            ) from e
        return perm, budget

    def shuffle(self, words: Sequence[str]) -> Tuple[List[str], Tuple[Permutation, ...]]:
        """Scramble every column but the anchor. Returns (shuffled words, permutations)."""
        budget = self.word_count - 1
        permutations: List[Permutation] = []
        for col in range(self.dictionary.word_length):
            if col == ANCHOR_COLUMN:
                permutations.append(tuple(range(self.word_count)))
                continue
            perm, budget = self.find_column_permutation(budget)
            permutations.append(perm)
            logger.debug("Column %d permutation %s, budget left %d", col, perm, budget)
        return apply_permutations(words, permutations), tuple(permutations)

    def generate(self) -> JackpotPuzzle:
        """
        Select and scramble one Jackpot set.

        Raises:
            DictionaryTooSmall: If the dictionary can never offer N column-distinct words
            ExhaustedSearch: If selection or a column permutation runs out of attempts
        """
        originals, attempts = self.select_words()
        currents, permutations = self.shuffle(originals)
        logger.info("Jackpot words found after %d attempt(s): %s", attempts, " ".join(originals))
        words = tuple(
            JackpotWord(original=o, current=c, valid=c in self.dictionary)
            for o, c in zip(originals, currents)
        )
        return JackpotPuzzle(words=words, permutations=permutations, attempts=attempts)

    def to_records(self, puzzle: JackpotPuzzle) -> List[Dict[str, Any]]:
        return puzzle.to_dict()


def find_jackpot_words(
    dictionary: Dictionary,
    word_count: int = MIN_WORDS,
    rng: Optional[RandomSource] = None,
    **kwargs,
) -> List[Dict[str, Any]]:
    """Convenience wrapper returning the plain {original, current, valid} list."""
    return JackpotGenerator(dictionary, word_count=word_count, rng=rng, **kwargs).generate().to_dict()
