#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Self-play between two AI difficulty levels.

Usage:
    python -m ataxx.ai.game_simulation --first-difficulty 3 --second-difficulty 9 --number-games 10
"""
import argparse
import logging
import random
import time
from typing import Dict, Optional

from ataxx.ai.ataxx_env import calculate_scores, make_move, winner_by_score
from ataxx.ai.board import Player, initialize_board
from ataxx.ai.bot_factory import choose_move, difficulty_label
from ataxx.ai.constants import DRAW
from ataxx.ai.turn import advance_turn, start_turn

logger = logging.getLogger(__name__)


def play_game(difficulties: Dict[Player, int], rng: random.Random, max_moves: int = 500):
    """Play one game and return (winner, number of moves).

    A game still running after max_moves is scored on the current piece count.
    """
    board = initialize_board()
    turn = start_turn(board)
    moves = 0
    while not turn.is_over and moves < max_moves:
        player = turn.player
        move = choose_move(board, player, difficulties[player], rng=rng)
        if move is None:
            turn = advance_turn(board, player)
            continue
        board = make_move(board, move, player)
        moves += 1
        logger.debug("Move %d: player %d %s\n%s", moves, player, move, board)
        turn = advance_turn(board, player)

    if turn.is_over:
        return turn.winner, moves
    score = calculate_scores(board)
    logger.warning("Game stopped after %d moves, scoring %s", moves, score.as_dict())
    return winner_by_score(score), moves


def main(first_difficulty=3, second_difficulty=9, number_games=10, seed: Optional[int] = None):
    """Run a series of games, swapping colours after each one.

    Args:
        first_difficulty: Level of the first bot.
        second_difficulty: Level of the second bot.
        number_games: Number of games to play.
        seed: Seed for reproducible runs.
    """
    rng = random.Random(seed)
    names = {
        "first": f"Level {first_difficulty} ({difficulty_label(first_difficulty)})",
        "second": f"Level {second_difficulty} ({difficulty_label(second_difficulty)})",
    }
    results = {"first": 0, "second": 0, DRAW: 0}
    first_is_p1 = True

    print("\n=== Ataxx Self-Play ===")
    print(f"{names['first']} vs {names['second']}, {number_games} games\n")

    for i in range(number_games):
        seats = {Player.ONE: "first", Player.TWO: "second"} if first_is_p1 else {Player.ONE: "second", Player.TWO: "first"}
        difficulties = {
            player: first_difficulty if seat == "first" else second_difficulty
            for player, seat in seats.items()
        }

        begin = time.time()
        winner, moves = play_game(difficulties, rng)
        elapsed = time.time() - begin

        result = DRAW if winner == DRAW else seats[winner]
        results[result] += 1
        logger.info("Game %d: %s in %d moves (%.2fs)", i + 1, result, moves, elapsed)
        print(f"Game {i + 1}/{number_games}: "
              f"{'Draw' if result == DRAW else names[result] + ' wins'} in {moves} moves ({elapsed:.2f}s)")

        first_is_p1 = not first_is_p1

    print("\n=== Final Results ===")
    print(f"{names['first']} wins: {results['first']}")
    print(f"{names['second']} wins: {results['second']}")
    print(f"Draws: {results[DRAW]}")
    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Run Ataxx self-play between two difficulty levels')
    parser.add_argument('--first-difficulty', type=int, default=3,
                        help='Difficulty of the first bot (1-10)')
    parser.add_argument('--second-difficulty', type=int, default=9,
                        help='Difficulty of the second bot (1-10)')
    parser.add_argument('--number-games', type=int, default=10,
                        help='Number of games to play')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level')

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(message)s')
    main(args.first_difficulty, args.second_difficulty, args.number_games, args.seed)
