"""
Hashtag puzzle generator: four words crossing in a `#`.

The search draws H1 freely, then V1 and H2 from the linking-letter buckets
so that their shared cells agree by construction. V2 has to fit both
horizontal words at once and is looked up in the intersection of two
buckets. Draws that are too bland (few rare letters) are thrown away.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from tenacity import RetryError

from ..dictionary import Dictionary
from ..exceptions import ContractViolation, DictionaryTooSmall, ExhaustedSearch
from ..grid import LINK_INDEX, OPPOSITE_INDEX, ROLE_ORDER, Grid, Role, build_grid, free_indices
from ..utils import RARE_LETTERS, count_rare_letters, letters_at
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

# Rare letters required in H1 + H2 + V1 before V2 is even looked up
PARTIAL_MIN_RARE = 2
# Rare letters required in the finished combination
MIN_RARE = 3


@dataclass(frozen=True)
class HashtagWord:
    word: str
    role: Role


@dataclass(frozen=True)
class HashtagPuzzle:
    """Four words tagged H1, H2, V1, V2."""
    words: Tuple[HashtagWord, ...]
    rare_score: int
    attempts: int = 1

    def by_role(self) -> Dict[Role, str]:
        return {w.role: w.word for w in self.words}

    def word(self, role: Role) -> str:
        return self.by_role()[role]

    def grid(self) -> Grid:
        return build_grid(self.by_role())

    def to_dict(self) -> List[Dict[str, str]]:
        return [{"word": w.word, "role": w.role.value} for w in self.words]


class HashtagGenerator:
    """Random constrained search for a `#` crossword."""

    def __init__(
        self,
        dictionary: Dictionary,
        rng: Optional[RandomSource] = None,
        rare_letters: Iterable[str] = RARE_LETTERS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        partial_min_rare: int = PARTIAL_MIN_RARE,
        min_rare: int = MIN_RARE,
    ):
        """
        Args:
            dictionary: Words allowed both across and down
            rng: Random source (defaults to an unseeded random.Random)
            rare_letters: Letters counted by the interest score
            max_attempts: Number of (H1, V1, H2) draws before giving up
            partial_min_rare: Score needed before looking for V2
            min_rare: Score needed for the full combination
        """
        if dictionary.word_length != 5:
            raise ContractViolation("The # lattice needs 5-letter words")
        if max_attempts < 1:
            raise ContractViolation(f"max_attempts must be at least 1, got {max_attempts}")
        self.dictionary = dictionary
        self.rng = rng if rng is not None else default_random_source()
        self.rare_letters = frozenset(rare_letters)
        self.max_attempts = max_attempts
        self.partial_min_rare = partial_min_rare
        self.min_rare = min_rare

    def _rare(self, letters: Iterable[str]) -> int:
        return count_rare_letters(letters, self.rare_letters)

    def check_dictionary(self) -> None:
        """
        Reject dictionaries that can never yield a combination.

        Raises:
            DictionaryTooSmall: Fewer than four words, or no word whose
                opposite-end letter opens a linking bucket (no H2 can ever
                follow a V1).
        """
        if len(self.dictionary) < len(ROLE_ORDER):
            raise DictionaryTooSmall(
                f"Hashtag needs at least {len(ROLE_ORDER)} distinct words, "
                f"dictionary has {len(self.dictionary)}"
            )
        buckets = self.dictionary.partition(LINK_INDEX)
        if not any(w[OPPOSITE_INDEX] in buckets for w in self.dictionary):
            raise DictionaryTooSmall(
                "No word's letter at position "
                f"{OPPOSITE_INDEX} matches any word's letter at position {LINK_INDEX}"
            )

    def _draw(self) -> Tuple[Dict[Role, str], int]:
        d = self.dictionary
        h1 = pick(self.rng, d.words)
        v1 = pick(self.rng, d.bucket(LINK_INDEX, h1[LINK_INDEX]))
        h2 = pick(self.rng, d.bucket(LINK_INDEX, v1[OPPOSITE_INDEX]))
        if len({h1, v1, h2}) < 3:
            raise RejectedDraw("repeated word")

        score = self._rare(h1) + self._rare(h2) + self._rare(letters_at(v1, free_indices()))
        if score < self.partial_min_rare:
            raise RejectedDraw("not enough rare letters")

        candidates = [
            w for w in d.bucket(LINK_INDEX, h1[OPPOSITE_INDEX])
            if w[OPPOSITE_INDEX] == h2[OPPOSITE_INDEX] and w not in (h1, v1, h2)
        ]
        # every V2 is tried once, in random order
        for v2 in shuffled(self.rng, candidates):
            total = score + self._rare(letters_at(v2, free_indices()))
            if total >= self.min_rare:
                return {Role.H1: h1, Role.H2: h2, Role.V1: v1, Role.V2: v2}, total
        raise RejectedDraw("no V2 reaches the rare letter threshold")

    def generate(self) -> HashtagPuzzle:
        """
        Find one combination.

        Raises:
            DictionaryTooSmall: If the dictionary is structurally unusable
            ExhaustedSearch: If `max_attempts` draws were all rejected
        """
        self.check_dictionary()
        try:
            for attempt in bounded_retrying(self.max_attempts):
                with attempt:
                    words, score = self._draw()
        except RetryError as e:
            logger.warning("Hashtag search gave up after %d attempts", self.max_attempts)
            raise ExhaustedSearch(
                f"No Hashtag combination found in {self.max_attempts} attempts",
                attempts=self.max_attempts,
            ) from e

        attempts = attempt.retry_state.attempt_number
        logger.info("Hashtag combination found after %d attempt(s): %s",
                    attempts, " ".join(words[r] for r in ROLE_ORDER))
        return HashtagPuzzle(
            words=tuple(HashtagWord(words[r], r) for r in ROLE_ORDER),
            rare_score=score,
            attempts=attempts,
        )

    def to_records(self, puzzle: HashtagPuzzle) -> List[Dict[str, Any]]:
        return puzzle.to_dict()


def find_combination(dictionary: Dictionary, rng: Optional[RandomSource] = None, **kwargs) -> List[Dict[str, str]]:
    """Convenience wrapper returning the plain {word, role} list."""
    return HashtagGenerator(dictionary, rng=rng, **kwargs).generate().to_dict()
