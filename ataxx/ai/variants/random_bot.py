import random
from typing import Optional

from ataxx.ai.ataxx_env import get_valid_moves
from ataxx.ai.board import Board, Move, Player


class RandomBot:
    def __init__(self, board: Board, player: Player, rng: Optional[random.Random] = None):
        self.board = board
        self.player = player
        self.rng = rng or random.Random()

    def run(self) -> Optional[Move]:
        moves = get_valid_moves(self.board, self.player)
        return self.rng.choice(moves) if moves else None
