"""Board topology for Nine Men's Morris.

Points are numbered as follows::

    0----------1----------2
    |  8-------9------10  |
    |  |  16--17--18  |   |
    7--15-23      19--11--3
    |  |  22--21--20  |   |
    |  14-----13------12  |
    6----------5----------4
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .pieces import Color

POINT_COUNT = 24

Mill = Tuple[int, int, int]

# Each triple is listed in board order so consecutive points are adjacent.
MILLS: Tuple[Mill, ...] = (
    (0, 1, 2),
    (2, 3, 4),
    (4, 5, 6),
    (6, 7, 0),
    (8, 9, 10),
    (10, 11, 12),
    (12, 13, 14),
    (14, 15, 8),
    (16, 17, 18),
    (18, 19, 20),
    (20, 21, 22),
    (22, 23, 16),
    (1, 9, 17),
    (3, 11, 19),
    (5, 13, 21),
    (7, 15, 23),
)


def _build_adjacency(mills: Iterable[Mill]) -> Dict[int, FrozenSet[int]]:
    links: Dict[int, set] = {point: set() for point in range(POINT_COUNT)}
    for first, middle, last in mills:
        links[first].add(middle)
        links[middle].update((first, last))
        links[last].add(middle)
    return {point: frozenset(neighbours) for point, neighbours in links.items()}


ADJACENCY: Dict[int, FrozenSet[int]] = _build_adjacency(MILLS)

MILLS_THROUGH: Dict[int, Tuple[Mill, ...]] = {
    point: tuple(mill for mill in MILLS if point in mill) for point in range(POINT_COUNT)
}

# Character position of each point in the render_board grid, as (row, column).
_CELLS: List[Tuple[int, int]] = [
    (0, 0), (0, 11), (0, 22), (3, 22), (6, 22), (6, 11), (6, 0), (3, 0),
    (1, 3), (1, 11), (1, 19), (3, 19), (5, 19), (5, 11), (5, 3), (3, 3),
    (2, 7), (2, 11), (2, 15), (3, 15), (4, 15), (4, 11), (4, 7), (3, 7),
]


def is_valid_point(point: int) -> bool:
    return 0 <= point < POINT_COUNT


def neighbors(point: int) -> FrozenSet[int]:
    return ADJACENCY[point]


def are_adjacent(first: int, second: int) -> bool:
    return second in ADJACENCY[first]


def mills_through(point: int) -> Tuple[Mill, ...]:
    """Return the two mills that contain ``point``."""
    return MILLS_THROUGH[point]


def render_board(points: Sequence[Optional[Color]], empty: str = ".") -> str:
    """Return a text picture of the board with pieces drawn on the points."""
    if len(points) != POINT_COUNT:
        raise ValueError(f"Board must have exactly {POINT_COUNT} points.")
    rows = [
        "+----------+----------+",
        "|  +-------+-------+  |",
        "|  |   +---+---+   |  |",
        "+--+---+       +---+--+",
        "|  |   +---+---+   |  |",
        "|  +-------+-------+  |",
        "+----------+----------+",
    ]
    grid = [list(row) for row in rows]
    for point, piece in enumerate(points):
        row, column = _CELLS[point]
        grid[row][column] = piece.symbol if piece is not None else empty
    return "\n".join("".join(row) for row in grid)
