"""
In-memory store
Holds game sessions in memory, keyed by game id.
Nothing survives a restart of the process.
"""

import logging
import random
from threading import RLock
from typing import Dict, Optional, Sequence, Tuple
from uuid import uuid4

from .config import GameConfiguration
from .session import Attempt, GameSession, GameState

logger = logging.getLogger(__name__)


class GameStore:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._games: Dict[str, GameSession] = {}
        self._lock = RLock()
        self._rng = rng

    def create(self, config: GameConfiguration) -> Tuple[str, GameSession]:
        new_id = str(uuid4())
        session = GameSession(config, rng=self._rng)
        with self._lock:
            self._games[new_id] = session
        logger.info("Created game %s", new_id)
        return new_id, session

    def get(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: Sequence[Optional[str]]) -> Optional[Tuple[Attempt, GameState]]:
        session = self.get(game_id)
        if session is None:
            return None
        # Session raises InvalidInput for bad or late guesses; state stays as it was
        return session.submit_guess(attempt)

    def restart(self, game_id: str, config: Optional[GameConfiguration] = None) -> Optional[GameState]:
        session = self.get(game_id)
        if session is None:
            return None
        logger.info("Restarting game %s", game_id)
        return session.start(config)

    def delete(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None
