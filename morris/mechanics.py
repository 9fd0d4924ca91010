"""Mill detection and legality helpers for Nine Men's Morris."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .board import POINT_COUNT, mills_through, neighbors
from .pieces import Color

Board = Sequence[Optional[Color]]


def count_pieces(board: Board, color: Color) -> int:
    return sum(1 for piece in board if piece is color)


def has_empty_point(board: Board) -> bool:
    return any(piece is None for piece in board)


def forms_mill(board: Board, point: int, color: Color) -> bool:
    """Return True if ``color`` holds all three points of a mill through ``point``."""
    return any(all(board[p] is color for p in mill) for mill in mills_through(point))


def in_mill(board: Board, point: int) -> bool:
    piece = board[point]
    return piece is not None and forms_mill(board, point, piece)


def all_in_mills(board: Board, color: Color) -> bool:
    return all(in_mill(board, point) for point in range(POINT_COUNT) if board[point] is color)


def can_remove(board: Board, point: int, owner: Color) -> bool:
    """Return True if the ``owner`` piece at ``point`` may be captured.

    Pieces standing in a mill are protected unless every piece of that
    colour stands in a mill.
    """
    if board[point] is not owner:
        return False
    return not in_mill(board, point) or all_in_mills(board, owner)


def removable_points(board: Board, owner: Color) -> List[int]:
    return [point for point in range(POINT_COUNT) if can_remove(board, point, owner)]


def can_slide(board: Board, color: Color) -> bool:
    """Return True if some ``color`` piece has an empty neighbouring point."""
    return any(
        board[point] is color and any(board[n] is None for n in neighbors(point))
        for point in range(POINT_COUNT)
    )


def has_legal_action(board: Board, color: Color, *, unplaced: int, flying: bool) -> bool:
    """Return True if ``color`` can place or move a piece on ``board``."""
    if unplaced > 0:
        return has_empty_point(board)
    if flying:
        return count_pieces(board, color) > 0 and has_empty_point(board)
    return can_slide(board, color)
