#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Turn controller for Ataxx.

Decides who plays next after a move. A player without legal moves is
skipped; when the player who just moved is stuck as well the game ends on the
current piece count even though the board may still have empty cells.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ataxx.ai.ataxx_env import (
    Winner,
    calculate_scores,
    check_game_over,
    get_valid_moves,
    winner_by_score,
)
from ataxx.ai.board import Board, Move, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Resolved turn boundary.

    Attributes:
        player: Player to act next. On a terminal result this is the player
            whose turn it would have been.
        valid_moves: Cached legal moves of ``player`` (empty when terminal).
        is_over: True when the game has ended.
        winner: Player, ``"draw"`` or None while the game is running.
        skipped: Player that had to pass during this transition, if any.
    """
    player: Player
    valid_moves: List[Move] = field(default_factory=list)
    is_over: bool = False
    winner: Winner = None
    skipped: Optional[Player] = None


def advance_turn(board: Board, just_moved: Player) -> TurnResult:
    """Resolve the next turn after ``just_moved`` played onto ``board``.

    Args:
        board: Board after the move.
        just_moved: Player who made the move.

    Returns:
        TurnResult: The next active player with its moves, or a terminal result.
    """
    next_player = just_moved.opponent
    moves = get_valid_moves(board, next_player)
    if moves:
        return TurnResult(player=next_player, valid_moves=moves)

    outcome = check_game_over(board)
    if outcome.is_over:
        logger.info("Game over, winner: %s", outcome.winner)
        return TurnResult(player=next_player, is_over=True, winner=outcome.winner)

    logger.info("Player %d has no moves, skipped", next_player)
    moves = get_valid_moves(board, just_moved)
    if not moves:
        winner = winner_by_score(calculate_scores(board))
        logger.info("Both players are stuck, winner: %s", winner)
        return TurnResult(player=just_moved, is_over=True, winner=winner, skipped=next_player)

    return TurnResult(player=just_moved, valid_moves=moves, skipped=next_player)


def start_turn(board: Board, player: Player = Player.ONE) -> TurnResult:
    """Resolve the opening turn of a game where ``player`` moves first."""
    outcome = check_game_over(board)
    if outcome.is_over:
        return TurnResult(player=player, is_over=True, winner=outcome.winner)
    # Treat the opening as if the opponent had just moved, so a stuck first
    # player is skipped the same way as mid-game.
    return advance_turn(board, player.opponent)
