"""Unit tests for the # lattice."""

import pytest

from wordgames.evaluation import LetterStatus
from wordgames.exceptions import ContractViolation
from wordgames.grid import (
    Role,
    build_grid,
    cells_of,
    evaluate_placement,
    intersections,
    intersections_hold,
)

WORDS = {Role.H1: "LOYAL", Role.H2: "BECHE", Role.V1: "SOIES", Role.V2: "GACHE"}


def test_four_intersections_on_rows_and_columns_1_and_3():
    cells = sorted(pos for _, _, pos in intersections())
    assert cells == [(1, 1), (1, 3), (3, 1), (3, 3)]


def test_cells_of_roles():
    assert cells_of(Role.H2) == [(3, c) for c in range(5)]
    assert cells_of(Role.V1) == [(r, 1) for r in range(5)]


def test_build_grid_round_trips_words():
    grid = build_grid(WORDS)
    assert grid.words() == WORDS
    assert intersections_hold(WORDS)
    assert len(grid.filled_positions()) == 16


def test_intersection_cells_have_two_owners():
    grid = build_grid(WORDS)
    assert grid.cell((1, 1)).owners == frozenset({Role.H1, Role.V1})
    assert grid.cell((1, 1)).letter == "O"
    assert grid.cell((3, 3)).letter == "H"
    assert grid.cell((0, 1)).owners == frozenset({Role.V1})
    assert grid.cell((0, 0)) is None


def test_conflicting_words_are_rejected():
    bad = dict(WORDS, **{Role.V2: "GICHE"})
    assert not intersections_hold(bad)
    with pytest.raises(ContractViolation):
        build_grid(bad)


def test_render():
    assert build_grid(WORDS).render(empty=".") == "\n".join([
        ".S.G.",
        "LOYAL",
        ".I.C.",
        "BECHE",
        ".S.E.",
    ])


def test_swap_and_evaluate_placement():
    grid = build_grid(WORDS)
    swapped = grid.swap((1, 0), (3, 0))  # L <-> B
    assert swapped.word(Role.H1) == "BOYAL"
    assert swapped.word(Role.H2) == "LECHE"
    assert swapped.word(Role.V1) == "SOIES"

    scores = evaluate_placement(swapped, WORDS)
    assert scores[Role.H1][0] is LetterStatus.absent
    assert scores[Role.H1][1:] == [LetterStatus.correct] * 4
    assert scores[Role.V2] == [LetterStatus.correct] * 5


def test_swap_empty_cell_is_rejected():
    with pytest.raises(ContractViolation):
        build_grid(WORDS).swap((0, 0), (1, 1))


def test_cell_outside_grid():
    with pytest.raises(ContractViolation):
        build_grid(WORDS).cell((5, 0))
