"""
Letter-status scoring shared by every game.
"""

from collections import Counter
from enum import Enum
from typing import Dict, List, Mapping, Sequence

from .exceptions import ContractViolation


class LetterStatus(str, Enum):
    correct = "correct"
    present = "present"
    absent = "absent"


# Higher rank wins when the same letter shows up with several statuses
_RANK = {
    LetterStatus.absent: 0,
    LetterStatus.present: 1,
    LetterStatus.correct: 2,
}


def evaluate(candidate: str, target: str) -> List[LetterStatus]:
    """
    Classify each letter of `candidate` against `target`.

    Exact matches are marked first and consume their letter; the remaining
    positions are marked present only while the target still holds an unused
    copy of that letter. A letter is therefore never reported more often than
    it appears in the target.
    """
    if len(candidate) != len(target):
        raise ContractViolation(
            f"Cannot compare {candidate!r} with {target!r}: lengths differ"
        )

    statuses = [LetterStatus.absent] * len(target)
    remaining = Counter(target)

    for i, (c, t) in enumerate(zip(candidate, target)):
        if c == t:
            statuses[i] = LetterStatus.correct
            remaining[c] -= 1

    for i, c in enumerate(candidate):
        if statuses[i] is LetterStatus.correct:
            continue
        if remaining[c] > 0:
            statuses[i] = LetterStatus.present
            remaining[c] -= 1

    return statuses


def is_solved(statuses: Sequence[LetterStatus]) -> bool:
    return bool(statuses) and all(s is LetterStatus.correct for s in statuses)


def merge_keyboard_statuses(
    used: Mapping[str, LetterStatus],
    candidate: str,
    statuses: Sequence[LetterStatus],
) -> Dict[str, LetterStatus]:
    """
    Fold one scored guess into the keyboard's letter -> status map.
    A letter's status only moves up (absent -> present -> correct).
    """
    if len(candidate) != len(statuses):
        raise ContractViolation("One status per letter is required")
    merged = dict(used)
    for letter, status in zip(candidate, statuses):
        previous = merged.get(letter)
        if previous is None or _RANK[status] > _RANK[previous]:
            merged[letter] = status
    return merged


def format_statuses(statuses: Sequence[LetterStatus]) -> List[str]:
    """Plain string tags, as handed to a renderer."""
    return [s.value for s in statuses]
