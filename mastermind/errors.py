"""
Errors raised by the game core.

All are ValueError subclasses so the HTTP layer can keep turning
ValueError into a 4xx response.
"""


class InvalidConfiguration(ValueError):
    """Bad length/attempts/palette passed to configure() or start()."""


class InvalidInput(ValueError):
    """Malformed or out-of-turn guess. Game state is left untouched."""


class GameOver(InvalidInput):
    """Guess submitted after the game was already won or lost."""

    def __init__(self, status: str) -> None:
        super().__init__(f"Game {status}. No more guesses allowed.")
        self.status = status
