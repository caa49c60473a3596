import logging
import random
from typing import Optional

from ataxx.ai.ataxx_env import has_valid_moves
from ataxx.ai.board import Board, Move, Player
from ataxx.ai.constants import (
    DIFFICULTY_LABELS,
    GREEDY_MAX_DIFFICULTY,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    MINIMAX_DEPTH,
    RANDOMNESS_CEILING,
    RANDOMNESS_STEP,
)
from ataxx.ai.variants.full_minimax import FullMinimax
from ataxx.ai.variants.greedy_bot import GreedyBot
from ataxx.ai.variants.random_bot import RandomBot

logger = logging.getLogger(__name__)


def _check_difficulty(difficulty: int) -> None:
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValueError(f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {difficulty}")


def randomness_chance(difficulty: int) -> float:
    """Probability of a deliberate random move: 0.6 at level 1, 0.3 at level 2, else 0."""
    return max(0.0, (RANDOMNESS_CEILING - difficulty) * RANDOMNESS_STEP)


def difficulty_label(difficulty: int) -> str:
    _check_difficulty(difficulty)
    return DIFFICULTY_LABELS[difficulty]


def create_bot(board: Board, player: Player, difficulty: int, rng: Optional[random.Random] = None):
    """Strategy for a difficulty, ignoring the randomness gate."""
    _check_difficulty(difficulty)
    if difficulty <= GREEDY_MAX_DIFFICULTY:
        return GreedyBot(board, player, rng=rng)
    return FullMinimax(board, player, depth=MINIMAX_DEPTH, rng=rng)


def choose_move(board: Board, player: Player, difficulty: int,
                rng: Optional[random.Random] = None) -> Optional[Move]:
    """Pick the AI move for player at the given difficulty.

    Args:
        board: Current board.
        player: Player to move.
        difficulty: Level from 1 to 10.
        rng: Random source; pass a seeded one for reproducible play.

    Returns:
        The chosen move, or None when player has no legal move and must pass.

    Raises:
        ValueError: If difficulty is outside 1..10.
    """
    _check_difficulty(difficulty)
    rng = rng or random.Random()

    if not has_valid_moves(board, player):
        logger.debug("Player %d has no legal moves", player)
        return None

    if rng.random() < randomness_chance(difficulty):
        move = RandomBot(board, player, rng=rng).run()
        logger.debug("Level %d random move: %s", difficulty, move)
        return move

    bot = create_bot(board, player, difficulty, rng=rng)
    move = bot.run()
    logger.debug("Level %d %s move: %s", difficulty, type(bot).__name__, move)
    return move
