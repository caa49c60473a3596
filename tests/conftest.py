"""
Shared pytest fixtures for the Ataxx engine tests.

Boards are built from a sparse mapping of position -> piece so each test only
spells out the cells it cares about.
"""
import random
from typing import Dict, Tuple

import numpy as np
import pytest

from ataxx.ai.board import Board, Piece
from ataxx.ai.constants import BOARD_SIZE


def make_board(pieces: Dict[Tuple[int, int], int]) -> Board:
    cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for (r, c), piece in pieces.items():
        cells[r, c] = piece
    return Board(cells)


def walled_in(corner: Tuple[int, int], piece: int) -> Dict[Tuple[int, int], int]:
    """A piece at ``corner`` with every cell within two steps turned into a wall."""
    r0, c0 = corner
    pieces = {}
    for r in range(r0 - 2, r0 + 3):
        for c in range(c0 - 2, c0 + 3):
            if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
                pieces[(r, c)] = Piece.WALL
    pieces[corner] = piece
    return pieces


def merge(*layouts: Dict[Tuple[int, int], int]) -> Dict[Tuple[int, int], int]:
    merged = {}
    for layout in layouts:
        merged.update(layout)
    return merged


class FixedRandom(random.Random):
    """Random source whose gate draw always returns ``value``; shuffles stay seeded."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self):
        return self.value

    # Keeps choice() and shuffle() on getrandbits instead of random()
    def getrandbits(self, k):
        return super().getrandbits(k)


# Half-filled position used across the rules and search tests
# 0 = empty, 1 = player one, 2 = player two
HALF_FILLED = [
    [1, 1, 1, 0, 0, 0, 2],
    [1, 1, 0, 0, 0, 2, 2],
    [1, 0, 0, 0, 2, 2, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 2, 2, 0, 0, 0, 1],
    [2, 2, 0, 0, 0, 1, 1],
    [2, 0, 0, 0, 1, 1, 1],
]


@pytest.fixture
def half_filled_board() -> Board:
    return Board.from_rows(HALF_FILLED)


@pytest.fixture
def capture_board() -> Board:
    """Player one at (0,0); jumping to (2,2) flips all three player two pieces."""
    return make_board({
        (0, 0): Piece.PLAYER_1,
        (2, 3): Piece.PLAYER_2,
        (3, 2): Piece.PLAYER_2,
        (3, 3): Piece.PLAYER_2,
    })


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
