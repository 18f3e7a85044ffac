"""Unit tests for letter-status scoring."""

from collections import Counter

import pytest

from wordgames.evaluation import (
    LetterStatus,
    evaluate,
    format_statuses,
    is_solved,
    merge_keyboard_statuses,
)
from wordgames.exceptions import ContractViolation

C, P, A = LetterStatus.correct, LetterStatus.present, LetterStatus.absent


def _marked_counts(candidate, statuses):
    return Counter(l for l, s in zip(candidate, statuses) if s is not A)


def test_exact_match_is_all_correct():
    assert evaluate("CRANE", "CRANE") == [C, C, C, C, C]


def test_no_common_letter_is_all_absent():
    assert evaluate("BUMPY", "CRANE") == [A, A, A, A, A]


def test_duplicate_letters_never_overcount():
    statuses = evaluate("ALLEY", "LLAMA")
    assert statuses == [P, C, P, A, A]
    marked = _marked_counts("ALLEY", statuses)
    target = Counter("LLAMA")
    assert all(marked[l] <= target[l] for l in marked)


def test_correct_position_takes_priority_over_earlier_present():
    # both E of THEME are taken by exact matches, the other E are absent
    assert evaluate("SPEED", "ABIDE") == [A, A, P, A, P]
    assert evaluate("EEEEE", "THEME") == [A, A, C, A, C]


def test_extra_copies_beyond_target_are_absent():
    assert evaluate("LLLLL", "HELLO") == [A, A, C, C, A]


@pytest.mark.parametrize(
    "candidate,target",
    [("ALLEY", "LLAMA"), ("GACHE", "BECHE"), ("SOIES", "SIEGE"), ("AAAAA", "ABACA")],
)
def test_marks_bounded_by_target_multiset(candidate, target):
    marked = _marked_counts(candidate, evaluate(candidate, target))
    target_counts = Counter(target)
    for letter, count in marked.items():
        assert count <= target_counts[letter]


def test_length_mismatch_is_contract_violation():
    with pytest.raises(ContractViolation):
        evaluate("ABC", "ABCDE")


def test_is_solved():
    assert is_solved([C] * 5)
    assert not is_solved([C, C, P, C, C])
    assert not is_solved([])


def test_keyboard_statuses_only_upgrade():
    used = merge_keyboard_statuses({}, "ALLEY", [P, C, P, A, A])
    assert used["A"] is P
    assert used["L"] is C  # best status among both L's
    assert used["E"] is A

    used = merge_keyboard_statuses(used, "LEAPT", [A, P, C, A, A])
    assert used["L"] is C
    assert used["E"] is P
    assert used["A"] is C
    assert used["P"] is A


def test_format_statuses_returns_plain_tags():
    assert format_statuses([C, P, A]) == ["correct", "present", "absent"]
