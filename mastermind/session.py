"""
Game session state machine.

States: in_progress -> won | lost (both terminal). The only way out of a
terminal state is start(), which builds a brand new GameState.

The transitions are plain functions over immutable GameState values:
  start(config)             -> GameState
  submit_guess(state, code) -> (Attempt, GameState)
  reveal_secret(state)      -> Code
A failed call raises and never hands back a half-updated state.

GameSession wraps those functions for a UI that wants one mutable handle,
with a lock so only one mutation runs at a time.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from threading import RLock
from typing import Any, Optional, Sequence, Tuple

from .config import GameConfiguration
from .engine import Feedback, is_win, score_guess
from .errors import GameOver, InvalidConfiguration, InvalidInput
from .generator import generate_code
from .types import Code, GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attempt:
    guess: Code
    feedback: Feedback

    @property
    def exact(self) -> int:
        return self.feedback.exact

    @property
    def partial(self) -> int:
        return self.feedback.partial


@dataclass(frozen=True)
class GameState:
    config: GameConfiguration
    secret: Code = field(repr=False)
    history: Tuple[Attempt, ...] = ()
    status: GameStatus = "in_progress"

    @property
    def attempts_used(self) -> int:
        return len(self.history)

    @property
    def attempts_left(self) -> int:
        return self.config.max_attempts - len(self.history)

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    @property
    def last_attempt(self) -> Optional[Attempt]:
        return self.history[-1] if self.history else None

    @property
    def current_attempt_number(self) -> int:
        # "attempt N of A" while playing
        return len(self.history) + 1


def start(config: GameConfiguration, rng: Optional[random.Random] = None) -> GameState:
    if not isinstance(config, GameConfiguration):
        raise InvalidConfiguration("start() needs a GameConfiguration; build one with configure().")

    secret = generate_code(config.palette, config.length, config.allow_duplicates, rng=rng)
    logger.info(
        "Game started: length=%d attempts=%d duplicates=%s palette=%d",
        config.length,
        config.max_attempts,
        config.allow_duplicates,
        len(config.palette),
    )
    return GameState(config=config, secret=secret)


def _normalize_guess(config: GameConfiguration, guess: Any) -> Code:
    if isinstance(guess, str) or not isinstance(guess, Sequence):
        raise InvalidInput("Guess must be a list of palette keys.")

    code = tuple(guess)

    # unset slots (UI placeholders) come first so the message is useful
    for index, color in enumerate(code):
        if color is None or color == "":
            raise InvalidInput(f"Slot {index + 1} is empty; fill every slot before guessing.")

    if len(code) != config.length:
        raise InvalidInput(f"Guess must have exactly {config.length} colors for this game.")

    allowed = set(config.keys)
    for color in code:
        if not isinstance(color, str) or color not in allowed:
            raise InvalidInput(f"Color {color!r} is not in the palette.")

    return code


def submit_guess(state: GameState, guess: Sequence[Any]) -> Tuple[Attempt, GameState]:
    if state.status != "in_progress":
        raise GameOver(state.status)

    config = state.config
    code = _normalize_guess(config, guess)

    attempt = Attempt(guess=code, feedback=score_guess(state.secret, code))
    history = state.history + (attempt,)

    # Decide the new status, win first
    if is_win(state.secret, code):
        status: GameStatus = "won"
    elif len(history) == config.max_attempts:
        status = "lost"
    else:
        status = "in_progress"

    logger.debug(
        "Guess %d/%d scored exact=%d partial=%d",
        len(history),
        config.max_attempts,
        attempt.exact,
        attempt.partial,
    )
    if status != "in_progress":
        logger.info("Game %s after %d attempt(s)", status, len(history))

    return attempt, replace(state, history=history, status=status)


def reveal_secret(state: GameState) -> Code:
    # Read-only; showing the code does not end or change the game
    return state.secret


class GameSession:
    """One player's game, replaced wholesale on every transition."""

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._lock = RLock()
        self._rng = rng
        self._state: Optional[GameState] = None
        if config is not None:
            self.start(config)

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    @property
    def config(self) -> Optional[GameConfiguration]:
        return self._state.config if self._state else None

    def start(self, config: Optional[GameConfiguration] = None) -> GameState:
        """Start a new game; with no config, replay the current configuration."""
        with self._lock:
            if config is None:
                if self._state is None:
                    raise InvalidConfiguration("No configuration to start a game with.")
                config = self._state.config
            self._state = start(config, rng=self._rng)
            return self._state

    def submit_guess(self, guess: Sequence[Any]) -> Tuple[Attempt, GameState]:
        with self._lock:
            attempt, new_state = submit_guess(self._require_state(), guess)
            self._state = new_state
            return attempt, new_state

    def reveal_secret(self) -> Code:
        with self._lock:
            return reveal_secret(self._require_state())

    def _require_state(self) -> GameState:
        if self._state is None:
            raise InvalidInput("No game in progress; call start() first.")
        return self._state
