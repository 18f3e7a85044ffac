from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt

from ..exceptions import ContractViolation

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 10_000


class RandomSource(Protocol):
    """Anything with a random() method returning a float in [0, 1). random.Random qualifies."""

    def random(self) -> float:
        ...


@runtime_checkable
class PuzzleGenerator(Protocol):
    """Protocol defining the interface every puzzle generator implements."""

    def generate(self) -> Any:
        """
        Build one puzzle.

        Raises:
            ExhaustedSearch: If no puzzle fits within the attempt budget
            DictionaryTooSmall: If the dictionary can never fit the constraints
        """
        ...

    def to_records(self, puzzle: Any) -> List[Dict[str, Any]]:
        """Plain dict records handed to the rendering layer."""
        ...


class RejectedDraw(Exception):
    """Internal signal: the current draw broke a constraint, try again."""


def default_random_source(seed: Optional[int] = None) -> random.Random:
    """Production random source; seeded when reproducible puzzles are wanted."""
    return random.Random(seed)


def pick(rng: RandomSource, items: Sequence[T]) -> T:
    """Uniform choice driven by the injected random source."""
    if not items:
        raise RejectedDraw("nothing to pick from")
    index = int(rng.random() * len(items))
    # guards against sources returning exactly 1.0
    return items[min(index, len(items) - 1)]


def shuffled(rng: RandomSource, items: Sequence[T]) -> List[T]:
    """Fisher-Yates shuffle of a copy of `items`."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = min(int(rng.random() * (i + 1)), i)
        out[i], out[j] = out[j], out[i]
    return out


def bounded_retrying(max_attempts: int) -> Retrying:
    """
    Retry controller shared by the generators.
    Only RejectedDraw triggers another attempt; after `max_attempts` tenacity
    raises RetryError, which callers turn into ExhaustedSearch.
    """
    if max_attempts < 1:
        raise ContractViolation(f"max_attempts must be at least 1, got {max_attempts}")
    return Retrying(
        stop=stop_after_attempt(max_attempts),
        retry=retry_if_exception_type(RejectedDraw),
    )
