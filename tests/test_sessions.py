import random
import threading

import pytest

from ataxx.ai.ataxx_env import make_move
from ataxx.ai.board import Move, Piece, Player, Position
from ataxx.ai.turn import advance_turn
from ataxx.models.game import GameConfig
from ataxx.sessions import (
    GameNotFoundError,
    GameOverError,
    GameSession,
    IllegalMoveError,
    NotYourTurnError,
    SessionStore,
)
from conftest import make_board, merge, walled_in

OPENING = Move(Position(0, 0), Position(1, 1))


def ai_session(difficulty=5, board=None):
    return GameSession(GameConfig(mode="AI", difficulty=difficulty), rng=random.Random(7), board=board)


def test_new_session_starts_with_player_one():
    session = ai_session()
    assert session.current_player is Player.ONE
    assert len(session.valid_moves) == 16
    assert not session.is_game_over
    assert session.score.p1 == 2 and session.score.p2 == 2
    assert not session.is_ai_turn


def test_human_move_hands_turn_to_ai():
    session = ai_session()
    session.play(OPENING)
    assert session.board[1, 1] == Piece.PLAYER_1
    assert session.last_move == OPENING
    assert session.current_player is Player.TWO
    assert session.is_ai_turn
    with pytest.raises(NotYourTurnError):
        session.play(OPENING)


@pytest.mark.parametrize("difficulty", [1, 6, 10])
def test_bot_move_returns_turn(difficulty):
    session = ai_session(difficulty)
    session.play(OPENING)
    move = session.play_bot()
    assert move is not None
    assert session.last_move == move
    assert session.board[move.to_pos] == Piece.PLAYER_2
    assert session.current_player is Player.ONE


def test_bot_refuses_human_turn():
    with pytest.raises(NotYourTurnError):
        ai_session().play_bot()


def test_illegal_move_rejected():
    session = ai_session()
    with pytest.raises(IllegalMoveError):
        session.play(Move(Position(3, 3), Position(4, 4)))
    assert session.current_player is Player.ONE


def test_pvp_alternates_humans():
    session = GameSession(GameConfig(mode="PVP"))
    session.play(OPENING)
    assert session.current_player is Player.TWO
    assert not session.is_ai_turn
    session.play(Move(Position(0, 6), Position(1, 5)))
    assert session.current_player is Player.ONE
    with pytest.raises(NotYourTurnError):
        session.play_bot()


def test_elimination_finishes_session():
    board = make_board({(0, 0): Piece.PLAYER_1, (1, 1): Piece.PLAYER_2})
    session = ai_session(board=board)
    session.play(Move(Position(0, 0), Position(0, 1)))
    assert session.is_game_over
    assert session.winner is Player.ONE
    assert session.score.p2 == 0
    with pytest.raises(GameOverError):
        session.play(Move(Position(0, 1), Position(0, 2)))
    with pytest.raises(GameOverError):
        session.play_bot()


def test_stuck_ai_is_skipped():
    board = make_board(merge(walled_in((6, 6), Piece.PLAYER_2), {(0, 0): Piece.PLAYER_1}))
    session = ai_session(board=board)
    session.play(OPENING)
    assert session.skipped_player is Player.TWO
    assert session.current_player is Player.ONE
    assert not session.is_ai_turn


def test_store_lifecycle():
    store = SessionStore()
    session = store.create(GameConfig(mode="AI", difficulty=8))
    assert store.get(session.game_id) is session
    store.delete(session.game_id)
    with pytest.raises(GameNotFoundError):
        store.get(session.game_id)
    with pytest.raises(GameNotFoundError):
        store.delete(session.game_id)


def test_config_is_frozen_and_bounded():
    config = GameConfig(mode="AI", difficulty=3)
    with pytest.raises(Exception):
        config.difficulty = 4
    with pytest.raises(Exception):
        GameConfig(mode="AI", difficulty=11)
    assert GameConfig().difficulty == 5


def test_snapshot_is_stable_after_later_moves():
    session = ai_session()
    before = session.snapshot()
    session.play(OPENING)
    assert before.current_player is Player.ONE
    assert len(before.valid_moves) == 16
    assert before.board[1, 1] == Piece.EMPTY
    assert before.last_move is None

    after = session.snapshot()
    assert after.current_player is Player.TWO
    assert after.board == session.board
    assert after.last_move == OPENING


def test_snapshot_waits_for_running_move():
    session = ai_session()
    taken = []
    with session._lock:
        reader = threading.Thread(target=lambda: taken.append(session.snapshot()))
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()
        session.board = make_move(session.board, OPENING, Player.ONE)
        session.last_move = OPENING
        session._apply_turn(advance_turn(session.board, Player.ONE))
    reader.join()
    assert taken[0].last_move == OPENING
    assert taken[0].current_player is Player.TWO


def test_store_evicts_least_recently_used():
    store = SessionStore(max_sessions=2)
    first = store.create(GameConfig(mode="AI", difficulty=3))
    second = store.create(GameConfig(mode="PVP"))
    store.get(first.game_id)
    third = store.create(GameConfig(mode="AI", difficulty=9))
    assert len(store) == 2
    assert store.get(first.game_id) is first
    assert store.get(third.game_id) is third
    with pytest.raises(GameNotFoundError):
        store.get(second.game_id)
