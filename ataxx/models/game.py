# ataxx/models/game.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional, Union

from ataxx.ai.ataxx_env import Score, Winner
from ataxx.ai.board import Board, Move, Position
from ataxx.ai.constants import BOARD_SIZE, DRAW, MAX_DIFFICULTY, MIN_DIFFICULTY
from ataxx.config import get_settings

PlayerNumber = Literal[1, 2]
WinnerValue = Optional[Union[PlayerNumber, Literal["draw"]]]


def winner_to_wire(winner: Winner) -> WinnerValue:
    if winner is None or winner == DRAW:
        return winner
    return int(winner)


class PositionModel(BaseModel):
    row: int = Field(ge=0, lt=BOARD_SIZE)
    col: int = Field(ge=0, lt=BOARD_SIZE)


class MoveModel(BaseModel):
    from_pos: PositionModel
    to_pos: PositionModel
    kind: Optional[Literal["clone", "jump"]] = None

    @classmethod
    def from_move(cls, move: Move) -> "MoveModel":
        return cls(
            from_pos=PositionModel(row=move.from_pos.row, col=move.from_pos.col),
            to_pos=PositionModel(row=move.to_pos.row, col=move.to_pos.col),
            kind=move.kind.value,
        )

    def to_move(self) -> Move:
        """Raises ValueError when the positions are not 1 or 2 steps apart,
        or when a sent kind disagrees with the distance."""
        move = Move(Position(self.from_pos.row, self.from_pos.col), Position(self.to_pos.row, self.to_pos.col))
        if self.kind is not None and self.kind != move.kind.value:
            raise ValueError(f"Move {move} is a {move.kind.value}, not a {self.kind}")
        return move


class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["AI", "PVP"] = "AI"
    difficulty: int = Field(default_factory=lambda: get_settings().default_difficulty, ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY,
                            validate_default=True)


class ScoreModel(BaseModel):
    p1: int
    p2: int
    empty: int

    @classmethod
    def from_score(cls, score: Score) -> "ScoreModel":
        return cls(**score.as_dict())


class GameStateModel(BaseModel):
    board: List[List[int]]
    current_player: PlayerNumber
    winner: WinnerValue = None
    score: ScoreModel
    valid_moves: List[MoveModel]
    is_game_over: bool
    last_move: Optional[MoveModel] = None
    skipped_player: Optional[PlayerNumber] = None


class GameResponse(BaseModel):
    game_id: str
    config: GameConfig
    difficulty_label: Optional[str] = None
    state: GameStateModel


class BoardRequest(BaseModel):
    board: List[List[int]]

    @field_validator("board")
    @classmethod
    def validate_board(cls, rows: List[List[int]]) -> List[List[int]]:
        Board.from_rows(rows)
        return rows


class LegalMovesRequest(BoardRequest):
    player: PlayerNumber


class ApplyMoveRequest(BoardRequest):
    move: MoveModel
    player: PlayerNumber


class BotMoveRequest(BoardRequest):
    player: PlayerNumber
    difficulty: int = Field(default_factory=lambda: get_settings().default_difficulty, ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY,
                            validate_default=True)
    seed: Optional[int] = None


class EvaluateResponse(BaseModel):
    score: ScoreModel
    is_over: bool
    winner: WinnerValue = None


class ApplyMoveResponse(EvaluateResponse):
    board: List[List[int]]
