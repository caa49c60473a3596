from ataxx.ai.ataxx_env import get_valid_moves
from ataxx.ai.board import Piece, Player, initialize_board
from ataxx.ai.constants import DRAW
from ataxx.ai.turn import advance_turn, start_turn
from conftest import make_board, merge, walled_in


def test_start_turn_player_one_first():
    turn = start_turn(initialize_board())
    assert turn.player is Player.ONE
    assert len(turn.valid_moves) == 16
    assert not turn.is_over
    assert turn.skipped is None


def test_turn_alternates_when_opponent_can_move():
    board = initialize_board()
    turn = advance_turn(board, Player.ONE)
    assert turn.player is Player.TWO
    assert turn.valid_moves == get_valid_moves(board, Player.TWO)
    assert not turn.is_over
    assert turn.winner is None


def test_stuck_opponent_is_skipped():
    board = make_board(merge(walled_in((6, 6), Piece.PLAYER_2), {(0, 0): Piece.PLAYER_1}))
    turn = advance_turn(board, Player.ONE)
    assert turn.player is Player.ONE
    assert turn.skipped is Player.TWO
    assert turn.valid_moves == get_valid_moves(board, Player.ONE)
    assert not turn.is_over


def test_elimination_ends_game():
    board = make_board({(2, 2): Piece.PLAYER_1, (2, 3): Piece.PLAYER_1})
    turn = advance_turn(board, Player.ONE)
    assert turn.is_over
    assert turn.winner is Player.ONE
    assert turn.valid_moves == []
    assert turn.skipped is None


def test_full_board_ends_game():
    pieces = {(r, c): Piece.PLAYER_1 for r in range(7) for c in range(7)}
    pieces[(3, 3)] = Piece.PLAYER_2
    turn = advance_turn(make_board(pieces), Player.ONE)
    assert turn.is_over
    assert turn.winner is Player.ONE


def test_both_stuck_ends_game_on_score():
    walls = {(r, c): Piece.WALL for r in range(3, 7) for c in range(3, 7)}
    block = {(r, c): Piece.PLAYER_2 for r in (5, 6) for c in (5, 6)}
    board = make_board(merge(walled_in((0, 0), Piece.PLAYER_1), walls, block))
    assert board.count(Piece.EMPTY) > 0

    turn = advance_turn(board, Player.TWO)
    assert turn.is_over
    assert turn.winner is Player.TWO
    assert turn.skipped is Player.ONE
    assert turn.valid_moves == []


def test_both_stuck_with_equal_pieces_is_draw():
    board = make_board(merge(walled_in((0, 0), Piece.PLAYER_1), walled_in((6, 6), Piece.PLAYER_2)))
    turn = advance_turn(board, Player.ONE)
    assert turn.is_over
    assert turn.winner == DRAW


def test_start_turn_skips_stuck_first_player():
    board = make_board(merge(walled_in((0, 0), Piece.PLAYER_1), {(6, 6): Piece.PLAYER_2}))
    turn = start_turn(board)
    assert turn.player is Player.TWO
    assert turn.skipped is Player.ONE
    assert turn.valid_moves


def test_start_turn_on_decided_board():
    turn = start_turn(make_board({(3, 3): Piece.PLAYER_2}))
    assert turn.is_over
    assert turn.winner is Player.TWO
