#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Board module for the Ataxx engine.

This module provides the value types shared by the rules engine and the AI:
cell states, players, positions, moves and the board itself. A Board wraps a
read-only numpy array, so every transformation has to produce a new Board and
a caller holding an older snapshot never sees it change.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, List, NamedTuple, Sequence

import numpy as np

from ataxx.ai.constants import BOARD_SIZE, MAX_MOVE_DISTANCE


class Piece(IntEnum):
    WALL = -1
    EMPTY = 0
    PLAYER_1 = 1
    PLAYER_2 = 2


class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


class Position(NamedTuple):
    row: int
    col: int


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def chebyshev_distance(a: Position, b: Position) -> int:
    return max(abs(a.row - b.row), abs(a.col - b.col))


class MoveKind(str, Enum):
    CLONE = "clone"
    JUMP = "jump"


@dataclass(frozen=True)
class Move:
    """A single Ataxx move.

    The kind is never chosen by the caller: a destination one step away is a
    clone, two steps away is a jump.

    Raises:
        ValueError: If the two positions are not 1 or 2 steps apart.
    """
    from_pos: Position
    to_pos: Position

    def __post_init__(self):
        object.__setattr__(self, "from_pos", Position(*self.from_pos))
        object.__setattr__(self, "to_pos", Position(*self.to_pos))
        distance = chebyshev_distance(self.from_pos, self.to_pos)
        if not 1 <= distance <= MAX_MOVE_DISTANCE:
            raise ValueError(
                f"Invalid move distance {distance}: from_pos={self.from_pos}, to_pos={self.to_pos}"
            )

    @property
    def kind(self) -> MoveKind:
        if chebyshev_distance(self.from_pos, self.to_pos) == 1:
            return MoveKind.CLONE
        return MoveKind.JUMP

    def __str__(self):
        return f"{self.kind.value} {tuple(self.from_pos)}->{tuple(self.to_pos)}"


class Board:
    """Immutable N x N grid of Piece values."""

    SYMBOLS = {Piece.WALL: "#", Piece.EMPTY: ".", Piece.PLAYER_1: "X", Piece.PLAYER_2: "O"}

    def __init__(self, cells: np.ndarray):
        """Wrap a cell array.

        Args:
            cells: BOARD_SIZE x BOARD_SIZE integer array of Piece values.
                The array is copied, the caller keeps ownership of its own.
        """
        cells = np.array(cells, dtype=np.int8)
        if cells.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {cells.shape}")
        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from nested lists, validating shape and cell values.

        Raises:
            ValueError: If the grid is not BOARD_SIZE x BOARD_SIZE or holds a
                value that is not a Piece.
        """
        if not isinstance(rows, (list, tuple)) or len(rows) != BOARD_SIZE:
            raise ValueError("Invalid board")
        for row in rows:
            if not isinstance(row, (list, tuple)) or len(row) != BOARD_SIZE:
                raise ValueError("Invalid board")
        valid_values = {int(piece) for piece in Piece}
        if not all(cell in valid_values for row in rows for cell in row):
            raise ValueError("Invalid board: unknown cell value")
        return cls(np.array(rows, dtype=np.int8))

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def size(self) -> int:
        return BOARD_SIZE

    def __getitem__(self, pos) -> Piece:
        row, col = pos
        if not is_valid_position(row, col):
            raise IndexError(f"Position out of bounds: {(row, col)}")
        return Piece(int(self._cells[row, col]))

    def copy_cells(self) -> np.ndarray:
        """Return a writeable copy of the cells for building the next board."""
        return self._cells.copy()

    def positions_of(self, piece: int) -> Iterator[Position]:
        for r, c in zip(*np.nonzero(self._cells == piece)):
            yield Position(int(r), int(c))

    def count(self, piece: int) -> int:
        return int(np.sum(self._cells == piece))

    def to_rows(self) -> List[List[int]]:
        return self._cells.tolist()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self):
        return hash(self._cells.tobytes())

    def __repr__(self):
        return f"Board({self.to_rows()})"

    def __str__(self):
        header = "   " + " ".join(str(c) for c in range(BOARD_SIZE))
        lines = [header]
        for r in range(BOARD_SIZE):
            symbols = " ".join(self.SYMBOLS[Piece(int(cell))] for cell in self._cells[r])
            lines.append(f"{r}  {symbols}")
        return "\n".join(lines)


def initialize_board() -> Board:
    """Create the standard starting board with the four corners seeded."""
    cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    cells[0][0] = cells[BOARD_SIZE - 1][BOARD_SIZE - 1] = Piece.PLAYER_1
    cells[0][BOARD_SIZE - 1] = cells[BOARD_SIZE - 1][0] = Piece.PLAYER_2
    return Board(cells)
