'''
Mastermind color-code API

Endpoints:
GET  /palette                 -> standard + extra colors
POST /games                   -> start a game
GET  /games/{id}              -> read state & history
POST /games/{id}/guess        -> submit a guess
POST /games/{id}/restart      -> new secret, same id (optionally new settings)
GET  /games/{id}/secret       -> "show code" toggle; never changes the game
DELETE /games/{id}            -> drop a game from memory

Games live in memory only (GameStore).
'''

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import GameConfiguration, configure
from .errors import GameOver, InvalidConfiguration, InvalidInput
from .palette import DEFAULT_PALETTE, EXTRA_COLORS, PaletteColor, extend_palette
from .session import Attempt, GameState, reveal_secret
from .settings import get_settings
from .store import GameStore

from .schemas import (
    AttemptOut,
    ConfigOut,
    GameStateOut,
    GuessRequest,
    GuessResponse,
    NewGameRequest,
    NewGameResponse,
    PaletteColorOut,
    PaletteOut,
    SecretOut,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mastermind API", version="3.0.0")

# Allow everything in dev so the docs and front-end work easily
if settings.app_env == "local":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

_store = GameStore()

def get_store() -> GameStore:
    return _store

# ---------------- DTO helpers ----------------

def _color_out(color: PaletteColor) -> PaletteColorOut:
    return PaletteColorOut(key=color.key, label=color.label, hex=color.hex)

def _config_out(config: GameConfiguration) -> ConfigOut:
    return ConfigOut(
        length=config.length,
        max_attempts=config.max_attempts,
        allow_duplicates=config.allow_duplicates,
        palette=[_color_out(c) for c in config.palette],
    )

def _attempt_out(attempt: Attempt) -> AttemptOut:
    return AttemptOut(guess=list(attempt.guess), exact=attempt.exact, partial=attempt.partial)

def _state_out(game_id: str, state: GameState) -> GameStateOut:
    return GameStateOut(
        game_id=game_id,
        status=state.status,
        attempts_used=state.attempts_used,
        attempts_left=state.attempts_left,
        history=[_attempt_out(a) for a in state.history],
        config=_config_out(state.config),
        secret=list(state.secret) if state.is_over else None,
    )

def _build_config(payload: Optional[NewGameRequest], base: GameConfiguration) -> GameConfiguration:
    """Fill whatever the request left out from `base`."""
    payload = payload or NewGameRequest()
    if payload.palette is not None:
        palette = tuple(
            PaletteColor(key=c.key, label=c.label or c.key.upper(), hex=c.hex) for c in payload.palette
        )
    else:
        palette = base.palette
    if payload.extra_colors:
        palette = extend_palette(palette, EXTRA_COLORS)

    try:
        return configure(
            length=payload.length if payload.length is not None else base.length,
            max_attempts=payload.max_attempts if payload.max_attempts is not None else base.max_attempts,
            allow_duplicates=(
                payload.allow_duplicates if payload.allow_duplicates is not None else base.allow_duplicates
            ),
            palette=palette,
        )
    except InvalidConfiguration as ic:
        raise HTTPException(status_code=422, detail=str(ic))

def _require_session(store: GameStore, game_id: str):
    session = store.get(game_id)
    if session is None or session.state is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return session

# ---------------- Routes ----------------

@app.get("/palette", response_model=PaletteOut, summary="List available colors")
def get_palette() -> PaletteOut:
    return PaletteOut(
        default=[_color_out(c) for c in DEFAULT_PALETTE],
        extra=[_color_out(c) for c in EXTRA_COLORS],
    )

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    payload: Optional[NewGameRequest] = None,
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    config = _build_config(payload, settings.default_configuration())
    game_id, session = store.create(config)
    state = session.state
    return NewGameResponse(
        game_id=game_id,
        status=state.status,
        attempts_left=state.attempts_left,
        config=_config_out(config),
    )

@app.get("/games/{game_id}", response_model=GameStateOut, summary="Get current game state")
def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameStateOut:
    session = _require_session(store, game_id)
    return _state_out(game_id, session.state)

@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    session = _require_session(store, game_id)
    try:
        attempt, state = session.submit_guess(payload.guess)
    except GameOver as go:
        raise HTTPException(status_code=409, detail=str(go))
    except InvalidInput as ii:
        logger.info("Rejected guess for game %s: %s", game_id, ii)
        raise HTTPException(status_code=400, detail=str(ii))

    return GuessResponse(
        attempt=_attempt_out(attempt),
        status=state.status,
        attempts_left=state.attempts_left,
        secret=list(state.secret) if state.is_over else None,
        note=(f"Game {state.status}. No more guesses allowed."
              if state.is_over else None),
    )

@app.post("/games/{game_id}/restart", response_model=NewGameResponse, summary="Start over with a new secret")
def restart_game(
    game_id: str,
    payload: Optional[NewGameRequest] = None,
    store: GameStore = Depends(get_store),
) -> NewGameResponse:
    session = _require_session(store, game_id)
    config = _build_config(payload, session.config) if payload is not None else None
    state = store.restart(game_id, config)
    return NewGameResponse(
        game_id=game_id,
        status=state.status,
        attempts_left=state.attempts_left,
        config=_config_out(state.config),
    )

@app.get("/games/{game_id}/secret", response_model=SecretOut, summary="Reveal the secret code")
def show_secret(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> SecretOut:
    # one snapshot so status and secret always belong to the same game
    state = _require_session(store, game_id).state
    return SecretOut(game_id=game_id, status=state.status, secret=list(reveal_secret(state)))

@app.delete("/games/{game_id}", summary="Forget a game")
def delete_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> dict:
    if not store.delete(game_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return {"message": "Game deleted."}
