"""
Labels for clarity.
"""

from typing import Literal, Tuple

ColorKey = str  # short palette key, ex. "r"
Code = Tuple[ColorKey, ...]  # secret or guess, fixed length per game
GameStatus = Literal["in_progress", "won", "lost"]
