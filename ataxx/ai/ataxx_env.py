from dataclasses import dataclass
from typing import List, Optional, Union

from ataxx.ai.board import Board, Move, MoveKind, Piece, Player, Position, is_valid_position
from ataxx.ai.constants import DRAW, MOVE_OFFSETS, NEIGHBOR_OFFSETS

Winner = Union[Player, str, None]


@dataclass(frozen=True)
class Score:
    p1: int
    p2: int
    empty: int
    wall: int = 0

    def of(self, player: Player) -> int:
        return self.p1 if player == Player.ONE else self.p2

    def as_dict(self):
        return {"p1": self.p1, "p2": self.p2, "empty": self.empty}


@dataclass(frozen=True)
class GameOutcome:
    is_over: bool
    winner: Winner = None


def get_valid_moves(board: Board, player: Player) -> List[Move]:
    """All clone and jump moves for player, row-major by origin then offset."""
    moves = []
    for r, c in board.positions_of(player):
        for dr, dc in MOVE_OFFSETS:
            to_r, to_c = r + dr, c + dc
            if is_valid_position(to_r, to_c) and board.cells[to_r, to_c] == Piece.EMPTY:
                moves.append(Move(Position(r, c), Position(to_r, to_c)))
    return moves


def has_valid_moves(board: Board, player: Player) -> bool:
    for r, c in board.positions_of(player):
        for dr, dc in MOVE_OFFSETS:
            to_r, to_c = r + dr, c + dc
            if is_valid_position(to_r, to_c) and board.cells[to_r, to_c] == Piece.EMPTY:
                return True
    return False


def make_move(board: Board, move: Move, player: Player) -> Board:
    """Apply move for player and return the resulting board.

    The move is expected to come from get_valid_moves for the same board and
    player; legality is not re-checked. The input board is left untouched.
    """
    to_row, to_col = move.to_pos
    from_row, from_col = move.from_pos
    if not (is_valid_position(to_row, to_col) and is_valid_position(from_row, from_col)):
        raise IndexError(f"Move out of bounds: {move}")

    cells = board.copy_cells()
    cells[to_row, to_col] = player
    if move.kind is MoveKind.JUMP:
        cells[from_row, from_col] = Piece.EMPTY

    opponent = player.opponent
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = to_row + dr, to_col + dc
        if is_valid_position(nr, nc) and cells[nr, nc] == opponent:
            cells[nr, nc] = player
    return Board(cells)


def calculate_scores(board: Board) -> Score:
    return Score(
        p1=board.count(Piece.PLAYER_1),
        p2=board.count(Piece.PLAYER_2),
        empty=board.count(Piece.EMPTY),
        wall=board.count(Piece.WALL),
    )


def winner_by_score(score: Score) -> Winner:
    if score.p1 > score.p2:
        return Player.ONE
    if score.p2 > score.p1:
        return Player.TWO
    return DRAW


def check_game_over(board: Board, score: Optional[Score] = None) -> GameOutcome:
    """Elimination and full-board check.

    Both players being stuck on a board with empty cells is not detected here;
    see turn.advance_turn.
    """
    if score is None:
        score = calculate_scores(board)
    if score.p1 == 0:
        return GameOutcome(True, Player.TWO)
    if score.p2 == 0:
        return GameOutcome(True, Player.ONE)
    if score.empty == 0:
        return GameOutcome(True, winner_by_score(score))
    return GameOutcome(False, None)
