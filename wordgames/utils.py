"""
Utility functions for normalizing and inspecting words.
"""

import re
import unicodedata
from typing import Iterable, List, Optional

from .exceptions import ContractViolation

WORD_LENGTH = 5

# Letters that make a puzzle more interesting to solve
RARE_LETTERS = frozenset("PGBVHFQYXJKWZ")

_WORD_RE = re.compile(r"^[A-Z]+$")


def normalize_word(word: str) -> str:
    """
    Uppercase a word and strip accents (BÊCHE -> BECHE).
    Surrounding whitespace is removed; inner characters are kept as-is.
    """
    decomposed = unicodedata.normalize("NFKD", word.strip())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.upper()


def is_valid_word(word: str, length: Optional[int] = WORD_LENGTH) -> bool:
    """True if the word only holds A-Z letters and, when given, has the expected length."""
    if length is not None and len(word) != length:
        return False
    return bool(_WORD_RE.match(word))


def count_rare_letters(letters: Iterable[str], rare_letters: Iterable[str] = RARE_LETTERS) -> int:
    """Count how many of the given letters belong to the rare letter set."""
    rare = rare_letters if isinstance(rare_letters, (set, frozenset)) else frozenset(rare_letters)
    return sum(1 for letter in letters if letter in rare)


def replace_letter_at(word: str, index: int, letter: str) -> str:
    """Return a copy of `word` with the letter at `index` replaced."""
    if index < 0 or index >= len(word):
        raise ContractViolation(f"Index {index} out of bounds for word of length {len(word)}")
    return word[:index] + letter + word[index + 1:]


def letters_at(word: str, indices: Iterable[int]) -> List[str]:
    """Pick the letters of `word` at the given positions."""
    picked = []
    for i in indices:
        if i < 0 or i >= len(word):
            raise ContractViolation(f"Index {i} out of bounds for word of length {len(word)}")
        picked.append(word[i])
    return picked
