import random

from fastapi import APIRouter, HTTPException

from ataxx.ai.ataxx_env import calculate_scores, check_game_over, get_valid_moves, make_move
from ataxx.ai.board import Board, Player
from ataxx.ai.bot_factory import choose_move, difficulty_label
from ataxx.models.game import (
    ApplyMoveRequest,
    ApplyMoveResponse,
    BoardRequest,
    BotMoveRequest,
    EvaluateResponse,
    GameConfig,
    GameResponse,
    GameStateModel,
    LegalMovesRequest,
    MoveModel,
    ScoreModel,
    winner_to_wire,
)
from ataxx.sessions import (
    GameNotFoundError,
    GameOverError,
    GameSession,
    IllegalMoveError,
    NotYourTurnError,
    get_session_store,
)

router = APIRouter()


def session_response(session: GameSession) -> GameResponse:
    snapshot = session.snapshot()
    state = GameStateModel(
        board=snapshot.board.to_rows(),
        current_player=int(snapshot.current_player),
        winner=winner_to_wire(snapshot.winner),
        score=ScoreModel.from_score(snapshot.score),
        valid_moves=[MoveModel.from_move(m) for m in snapshot.valid_moves],
        is_game_over=snapshot.is_game_over,
        last_move=MoveModel.from_move(snapshot.last_move) if snapshot.last_move else None,
        skipped_player=int(snapshot.skipped_player) if snapshot.skipped_player else None,
    )
    label = difficulty_label(session.config.difficulty) if session.config.mode == "AI" else None
    return GameResponse(game_id=session.game_id, config=session.config, difficulty_label=label, state=state)


def _get_session(game_id: str) -> GameSession:
    try:
        return get_session_store().get(game_id)
    except GameNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/games/", response_model=GameResponse)
def create_game(config: GameConfig):
    return session_response(get_session_store().create(config))


@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(game_id: str):
    return session_response(_get_session(game_id))


@router.delete("/games/{game_id}")
def delete_game(game_id: str):
    try:
        get_session_store().delete(game_id)
    except GameNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Game deleted"}


@router.post("/games/{game_id}/moves", response_model=GameResponse)
def play_move(game_id: str, move: MoveModel):
    session = _get_session(game_id)
    try:
        session.play(move.to_move())
    except (GameOverError, NotYourTurnError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (IllegalMoveError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return session_response(session)


@router.post("/games/{game_id}/bot-move", response_model=GameResponse)
def play_bot_move(game_id: str):
    session = _get_session(game_id)
    try:
        session.play_bot()
    except (GameOverError, NotYourTurnError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session_response(session)


@router.post("/legal-moves/")
def legal_moves(request: LegalMovesRequest):
    board = Board.from_rows(request.board)
    moves = get_valid_moves(board, Player(request.player))
    return {"legal_moves": [MoveModel.from_move(m) for m in moves]}


@router.post("/apply-move/", response_model=ApplyMoveResponse)
def apply_move(request: ApplyMoveRequest):
    board = Board.from_rows(request.board)
    player = Player(request.player)
    try:
        move = request.move.to_move()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if move not in get_valid_moves(board, player):
        raise HTTPException(status_code=400, detail=f"Invalid move: {move}")

    new_board = make_move(board, move, player)
    score = calculate_scores(new_board)
    outcome = check_game_over(new_board, score)
    return ApplyMoveResponse(
        board=new_board.to_rows(),
        score=ScoreModel.from_score(score),
        is_over=outcome.is_over,
        winner=winner_to_wire(outcome.winner),
    )


@router.post("/bot-move/")
def bot_move(request: BotMoveRequest):
    board = Board.from_rows(request.board)
    rng = random.Random(request.seed) if request.seed is not None else None
    move = choose_move(board, Player(request.player), request.difficulty, rng=rng)
    if move is None:
        raise HTTPException(status_code=404, detail="No valid move found")
    return {"move": MoveModel.from_move(move)}


@router.post("/evaluate/", response_model=EvaluateResponse)
def evaluate(request: BoardRequest):
    board = Board.from_rows(request.board)
    score = calculate_scores(board)
    outcome = check_game_over(board, score)
    return EvaluateResponse(
        score=ScoreModel.from_score(score),
        is_over=outcome.is_over,
        winner=winner_to_wire(outcome.winner),
    )
