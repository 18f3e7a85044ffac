"""
The 5x5 `#` lattice used by the Hashtag game.

    . V1 . V2 .
    H1 H1 H1 H1 H1      <- row 1
    . V1 . V2 .
    H2 H2 H2 H2 H2      <- row 3
    . V1 . V2 .

Horizontal words sit on rows 1 and 3, vertical words on columns 1 and 3,
so every horizontal/vertical pair shares exactly one cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from .evaluation import LetterStatus, evaluate
from .exceptions import ContractViolation

GRID_SIZE = 5

# Position inside a word where it crosses its first / second perpendicular word
LINK_INDEX = 1
OPPOSITE_INDEX = 3


class Role(str, Enum):
    H1 = "H1"
    H2 = "H2"
    V1 = "V1"
    V2 = "V2"

    @property
    def horizontal(self) -> bool:
        return self in (Role.H1, Role.H2)


ROLE_ORDER = (Role.H1, Role.H2, Role.V1, Role.V2)
ROW_OF = {Role.H1: LINK_INDEX, Role.H2: OPPOSITE_INDEX}
COL_OF = {Role.V1: LINK_INDEX, Role.V2: OPPOSITE_INDEX}

Position = Tuple[int, int]


def cells_of(role: Role) -> List[Position]:
    """Grid coordinates (row, col) covered by a word, in reading order."""
    if role.horizontal:
        row = ROW_OF[role]
        return [(row, c) for c in range(GRID_SIZE)]
    col = COL_OF[role]
    return [(r, col) for r in range(GRID_SIZE)]


def intersections() -> List[Tuple[Role, Role, Position]]:
    """Every (horizontal, vertical, cell) crossing of the lattice."""
    return [
        (h, v, (ROW_OF[h], COL_OF[v]))
        for h in (Role.H1, Role.H2)
        for v in (Role.V1, Role.V2)
    ]


def free_indices() -> Tuple[int, ...]:
    """Positions of a word that no perpendicular word crosses."""
    return tuple(i for i in range(GRID_SIZE) if i not in (LINK_INDEX, OPPOSITE_INDEX))


@dataclass(frozen=True)
class Cell:
    letter: str
    owners: FrozenSet[Role]


class Grid:
    """Sparse 5x5 matrix of cells; empty squares are None."""

    def __init__(self, cells: List[List[Optional[Cell]]]):
        if len(cells) != GRID_SIZE or any(len(row) != GRID_SIZE for row in cells):
            raise ContractViolation(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")
        self._cells = [list(row) for row in cells]

    def cell(self, position: Position) -> Optional[Cell]:
        row, col = position
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise ContractViolation(f"Position {position} is outside the grid")
        return self._cells[row][col]

    def word(self, role: Role) -> str:
        """Read a word back from the cells it owns."""
        letters = []
        for pos in cells_of(role):
            cell = self.cell(pos)
            if cell is None:
                raise ContractViolation(f"Cell {pos} of {role.value} is empty")
            letters.append(cell.letter)
        return "".join(letters)

    def words(self) -> Dict[Role, str]:
        return {role: self.word(role) for role in ROLE_ORDER}

    def filled_positions(self) -> List[Position]:
        return [
            (r, c)
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
            if self._cells[r][c] is not None
        ]

    def swap(self, a: Position, b: Position) -> "Grid":
        """
        New grid with the letters of two filled cells exchanged.
        Ownership stays with the squares, only the letters move.
        """
        cell_a, cell_b = self.cell(a), self.cell(b)
        if cell_a is None or cell_b is None:
            raise ContractViolation(f"Cannot swap {a} and {b}: both cells must hold a letter")
        cells = [list(row) for row in self._cells]
        cells[a[0]][a[1]] = Cell(cell_b.letter, cell_a.owners)
        cells[b[0]][b[1]] = Cell(cell_a.letter, cell_b.owners)
        return Grid(cells)

    def render(self, empty: str = " ") -> str:
        lines = []
        for row in self._cells:
            lines.append("".join(cell.letter if cell else empty for cell in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def build_grid(words: Mapping[Role, str]) -> Grid:
    """
    Lay four words out on the lattice.

    Raises:
        ContractViolation: If a role is missing, a word has the wrong length,
            or two words disagree on a shared cell.
    """
    cells: List[List[Optional[Cell]]] = [[None] * GRID_SIZE for _ in range(GRID_SIZE)]
    for role in ROLE_ORDER:
        if role not in words:
            raise ContractViolation(f"Missing word for role {role.value}")
        word = words[role]
        if len(word) != GRID_SIZE:
            raise ContractViolation(f"{role.value} word {word!r} must have {GRID_SIZE} letters")
        for letter, (r, c) in zip(word, cells_of(role)):
            current = cells[r][c]
            if current is None:
                cells[r][c] = Cell(letter, frozenset({role}))
            elif current.letter != letter:
                owner = next(iter(current.owners))
                raise ContractViolation(
                    f"{role.value} {word!r} puts {letter!r} at {(r, c)} "
                    f"where {owner.value} has {current.letter!r}"
                )
            else:
                cells[r][c] = Cell(letter, current.owners | {role})
    return Grid(cells)


def intersections_hold(words: Mapping[Role, str]) -> bool:
    """True when every crossing cell carries the same letter in both words."""
    for h, v, (row, col) in intersections():
        if words[h][col] != words[v][row]:
            return False
    return True


def evaluate_placement(grid: Grid, solution: Mapping[Role, str]) -> Dict[Role, List[LetterStatus]]:
    """Score each word currently spelled on the grid against the solution."""
    return {role: evaluate(grid.word(role), solution[role]) for role in ROLE_ORDER}
