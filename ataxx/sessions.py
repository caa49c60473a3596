"""
In-process game sessions.

A GameSession owns the state of one game (board, active player, cached legal
moves, winner) and drives it through the rules engine the same way for human
and AI moves. In AI mode the computer always plays Player 2.
"""
import logging
import random
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

from ataxx.ai.ataxx_env import Score, Winner, calculate_scores, make_move
from ataxx.ai.board import Board, Move, Player, initialize_board
from ataxx.ai.bot_factory import choose_move
from ataxx.ai.turn import TurnResult, advance_turn, start_turn
from ataxx.config import get_settings
from ataxx.models.game import GameConfig

logger = logging.getLogger(__name__)

AI_PLAYER = Player.TWO


class GameError(Exception):
    pass


class GameNotFoundError(GameError):
    pass


class GameOverError(GameError):
    pass


class NotYourTurnError(GameError):
    pass


class IllegalMoveError(GameError):
    pass


@dataclass(frozen=True)
class SessionState:
    """Consistent view of a session taken under its lock."""
    board: Board
    current_player: Player
    valid_moves: List[Move]
    is_game_over: bool
    winner: Winner
    skipped_player: Optional[Player]
    score: Score
    last_move: Optional[Move]


class GameSession:
    def __init__(self, config: GameConfig, game_id: Optional[str] = None,
                 rng: Optional[random.Random] = None, board: Optional[Board] = None):
        self.game_id = game_id or uuid.uuid4().hex
        self.config = config
        self.rng = rng or random.Random()
        self.board = board if board is not None else initialize_board()
        self.last_move: Optional[Move] = None
        self._lock = threading.Lock()
        self._apply_turn(start_turn(self.board))

    def _apply_turn(self, turn: TurnResult) -> None:
        self.current_player = turn.player
        self.valid_moves = turn.valid_moves
        self.is_game_over = turn.is_over
        self.winner = turn.winner
        self.skipped_player = turn.skipped
        self.score = calculate_scores(self.board)
        if turn.skipped is not None:
            logger.info("Game %s: player %d has no moves, skipped", self.game_id, turn.skipped)
        if turn.is_over:
            logger.info("Game %s finished, winner: %s, score: %s", self.game_id, turn.winner, self.score.as_dict())

    @property
    def is_ai_turn(self) -> bool:
        return (self.config.mode == "AI" and not self.is_game_over
                and self.current_player == AI_PLAYER)

    def snapshot(self) -> SessionState:
        with self._lock:
            return SessionState(
                board=self.board,
                current_player=self.current_player,
                valid_moves=list(self.valid_moves),
                is_game_over=self.is_game_over,
                winner=self.winner,
                skipped_player=self.skipped_player,
                score=self.score,
                last_move=self.last_move,
            )

    def play(self, move: Move) -> None:
        """Apply a human move for the current player.

        Raises:
            GameOverError: The game has already ended.
            NotYourTurnError: It is the computer's turn.
            IllegalMoveError: The move is not one of the cached legal moves.
        """
        with self._lock:
            self._check_human_move(move)
            self._play(move)

    def _check_human_move(self, move: Move) -> None:
        if self.is_game_over:
            raise GameOverError("Game is over")
        if self.is_ai_turn:
            raise NotYourTurnError("Waiting for the computer to move")
        if move not in self.valid_moves:
            raise IllegalMoveError(f"Invalid move: {move}")

    def play_bot(self) -> Optional[Move]:
        """Let the computer play its turn; returns None when it had to pass."""
        with self._lock:
            if self.is_game_over:
                raise GameOverError("Game is over")
            if not self.is_ai_turn:
                raise NotYourTurnError("It is not the computer's turn")

            move = choose_move(self.board, self.current_player, self.config.difficulty, rng=self.rng)
            if move is None:
                self.last_move = None
                self._apply_turn(advance_turn(self.board, self.current_player))
            else:
                self._play(move)
            return move

    def _play(self, move: Move) -> None:
        mover = self.current_player
        self.board = make_move(self.board, move, mover)
        self.last_move = move
        self._apply_turn(advance_turn(self.board, mover))


class SessionStore:
    """Sessions held in memory, capped at max_sessions.

    Once the cap is reached, creating a game evicts the least recently used
    one. Sessions are never persisted.
    """

    def __init__(self, max_sessions: Optional[int] = None):
        self.max_sessions = max_sessions or get_settings().max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def create(self, config: GameConfig) -> GameSession:
        seed = get_settings().ai_seed
        session = GameSession(config, rng=random.Random(seed))
        with self._lock:
            self._sessions[session.game_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Game %s evicted, store is full (%d)", evicted, self.max_sessions)
        logger.info("Game %s started: mode=%s difficulty=%d", session.game_id, config.mode, config.difficulty)
        return session

    def get(self, game_id: str) -> GameSession:
        with self._lock:
            session = self._sessions.get(game_id)
            if session is not None:
                self._sessions.move_to_end(game_id)
        if session is None:
            raise GameNotFoundError(f"Game not found: {game_id}")
        return session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def delete(self, game_id: str) -> None:
        with self._lock:
            if self._sessions.pop(game_id, None) is None:
                raise GameNotFoundError(f"Game not found: {game_id}")


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    return SessionStore()
