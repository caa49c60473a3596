import logging
import random
from typing import List, Optional

from ataxx.ai.ataxx_env import calculate_scores, get_valid_moves, make_move
from ataxx.ai.board import Board, Move, Player
from ataxx.ai.constants import LOSS_SCORE, MINIMAX_DEPTH, WIN_SCORE

logger = logging.getLogger(__name__)


class FullMinimax:
    def __init__(self, board: Board, player: Player, depth: int = MINIMAX_DEPTH,
                 rng: Optional[random.Random] = None):
        """
        Minimax with alpha-beta pruning for Ataxx.

        Args:
            board: Board to search from.
            player: Player the search plays for.
            depth: Search depth in plies, counting the root move (default 2).
            rng: Source used to shuffle root candidates.

        Raises:
            ValueError: If depth is less than 1.
        """
        if depth < 1:
            raise ValueError("Depth must be at least 1")

        self.board = board
        self.player = player
        self.depth = depth
        self.rng = rng or random.Random()

    def run(self) -> Optional[Move]:
        """
        Pick the root move with the highest minimax value.

        Returns:
            Optional[Move]: Best move, or None if the player has no moves.
        """
        moves = get_valid_moves(self.board, self.player)
        if not moves:
            return None

        self.rng.shuffle(moves)
        best_move, best_score = self.best_of(moves)
        logger.debug("Minimax picked %s with value %s", best_move, best_score)
        return best_move

    def best_of(self, moves: List[Move]):
        """Scan root candidates in order; the first strict maximum wins."""
        best_score = float('-inf')
        best_move = None
        for move in moves:
            score = self.root_value(move)
            if score > best_score:
                best_score = score
                best_move = move
        return best_move, best_score

    def root_value(self, move: Move) -> float:
        next_board = make_move(self.board, move, self.player)
        return self.minimax(next_board, self.depth - 1, float('-inf'), float('inf'), False)

    def minimax(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
        """
        Alpha-beta minimax.

        A side with no legal moves is evaluated on the spot; passes are not
        searched.

        Args:
            board: Current board.
            depth: Remaining depth.
            alpha: Lower bound for pruning.
            beta: Upper bound for pruning.
            maximizing: True on self.player's turn, False on the opponent's.

        Returns:
            float: Value of the board for self.player.
        """
        if depth == 0:
            return self.evaluate(board)

        mover = self.player if maximizing else self.player.opponent
        moves = get_valid_moves(board, mover)
        if not moves:
            return self.evaluate(board)

        if maximizing:
            max_eval = float('-inf')
            for move in moves:
                eval_score = self.minimax(make_move(board, move, mover), depth - 1, alpha, beta, False)
                max_eval = max(max_eval, eval_score)
                alpha = max(alpha, eval_score)
                if beta <= alpha:
                    break
            return max_eval

        min_eval = float('inf')
        for move in moves:
            eval_score = self.minimax(make_move(board, move, mover), depth - 1, alpha, beta, True)
            min_eval = min(min_eval, eval_score)
            beta = min(beta, eval_score)
            if beta <= alpha:
                break
        return min_eval

    def evaluate(self, board: Board) -> int:
        """Piece difference for self.player, with elimination scored as a win or loss."""
        score = calculate_scores(board)
        own = score.of(self.player)
        opp = score.of(self.player.opponent)
        if opp == 0:
            return WIN_SCORE
        if own == 0:
            return LOSS_SCORE
        return own - opp
