import random
from typing import List, Optional

from ataxx.ai.ataxx_env import calculate_scores, get_valid_moves, make_move
from ataxx.ai.board import Board, Move, Player


class GreedyBot:
    """One-ply lookahead: play the move with the best resulting piece difference."""

    def __init__(self, board: Board, player: Player, rng: Optional[random.Random] = None):
        self.board = board
        self.player = player
        self.rng = rng or random.Random()

    def run(self) -> Optional[Move]:
        moves = get_valid_moves(self.board, self.player)
        if not moves:
            return None

        # Shuffled so equal-valued moves are not picked in a fixed order
        self.rng.shuffle(moves)
        return self.best_of(moves)

    def best_of(self, moves: List[Move]) -> Optional[Move]:
        best_move = None
        best_diff = float('-inf')
        for move in moves:
            diff = self.score_diff(make_move(self.board, move, self.player))
            if diff > best_diff:
                best_diff = diff
                best_move = move
        return best_move

    def score_diff(self, board: Board) -> int:
        score = calculate_scores(board)
        return score.of(self.player) - score.of(self.player.opponent)
