from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from .error import (
    exception_handler,
    fen_error_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from .session import InMemorySessionStore
from ...config import Settings, load_settings
from ...engine.fen import FenError
from ...engine.game import GameState


logger = logging.getLogger(__name__)


class PositionRequest(BaseModel):
    fen: str = Field(..., min_length=1, description="Six-field FEN string")


class CreateSessionRequest(BaseModel):
    fen: Optional[str] = Field(default=None, description="FEN string, start position if omitted")


class CreateSessionResponse(BaseModel):
    game_id: str
    fen: str


class MovesResponse(BaseModel):
    fen: str
    side_to_move: str
    moves: list[str]
    count: int


class CastlingState(BaseModel):
    white_kingside: bool
    white_queenside: bool
    black_kingside: bool
    black_queenside: bool


class SessionState(BaseModel):
    game_id: str
    fen: str
    current_player: str
    turn: int
    castling: CastlingState
    game_result: str
    moves: list[str]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="Chess Move Generator API", version="0.1.0")

    logging.basicConfig(level=settings.log_level)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(FenError, fen_error_handler)
    app.add_exception_handler(Exception, exception_handler)

    store = InMemorySessionStore()
    app.state.sessions = store

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/moves", response_model=MovesResponse)
    async def moves(req: PositionRequest) -> MovesResponse:
        state = GameState.from_fen(req.fen)
        uci = [m.to_uci() for m in state.generate_moves()]
        return MovesResponse(
            fen=state.to_fen(),
            side_to_move=state.current_player.value,
            moves=uci,
            count=len(uci),
        )

    @app.post("/api/games", response_model=CreateSessionResponse)
    async def create_game(req: Optional[CreateSessionRequest] = None) -> CreateSessionResponse:
        fen = req.fen if req is not None and req.fen else settings.default_fen
        state = GameState.from_fen(fen)
        game_id = store.create(state)
        logger.info("created session %s", game_id)
        return CreateSessionResponse(game_id=game_id, fen=state.to_fen())

    @app.get("/api/games/{game_id}/state", response_model=SessionState)
    async def get_state(game_id: str) -> SessionState:
        return _session_state(game_id, _require_state(store, game_id))

    @app.post("/api/games/{game_id}/position", response_model=SessionState)
    async def set_position(game_id: str, req: PositionRequest) -> SessionState:
        _require_state(store, game_id)
        state = GameState.from_fen(req.fen)
        store.set(game_id, state)
        return _session_state(game_id, state)

    @app.delete("/api/games/{game_id}")
    async def delete_game(game_id: str) -> Dict[str, str]:
        if not store.delete(game_id):
            raise HTTPException(status_code=404, detail="game not found")
        logger.info("deleted session %s", game_id)
        return {"deleted": game_id}

    return app


def _require_state(store: InMemorySessionStore, game_id: str) -> GameState:
    state = store.get(game_id)
    if state is None:
        raise HTTPException(status_code=404, detail="game not found")
    return state


def _session_state(game_id: str, state: GameState) -> SessionState:
    rights = state.board.castling_rights
    return SessionState(
        game_id=game_id,
        fen=state.to_fen(),
        current_player=state.current_player.value,
        turn=state.turn,
        castling=CastlingState(
            white_kingside=rights.white_kingside,
            white_queenside=rights.white_queenside,
            black_kingside=rights.black_kingside,
            black_queenside=rights.black_queenside,
        ),
        game_result=state.game_result.value,
        moves=[m.to_uci() for m in state.generate_moves()],
    )
