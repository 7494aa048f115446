"""
Pure game logic (no HTTP, no storage).
We compute two feedback numbers for each guess:
- exact: how many positions hold the right color in the right place
- partial: how many more colors are present in the secret but sit in the
  wrong place (colors already counted as exact are not counted again)

Duplicates are fine in both the secret and the guess.
"""

from collections import Counter
from typing import NamedTuple, Sequence

from .errors import InvalidInput
from .types import ColorKey


class Feedback(NamedTuple):
    exact: int
    partial: int


def score_guess(secret: Sequence[ColorKey], guess: Sequence[ColorKey]) -> Feedback:
    """
    Example:
      secret = [r, r, b, g]
      guess  = [r, b, b, y]
      exact   = 1  (the first r)
      overlap = min(2,1) for r + min(1,2) for b = 2
      partial = overlap - exact = 1
      Returns Feedback(exact=1, partial=1)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise InvalidInput("Secret and guess must be the same non-zero length.")

    # 1. Count exact position matches
    exact = sum(1 for s, g in zip(secret, guess) if s == g)

    # 2. Count every position, exact ones included
    secret_counts = Counter(secret)
    guess_counts = Counter(guess)

    # 3. Overlap is the sum of the smaller count for each color
    overlap = 0
    for color in secret_counts.keys() | guess_counts.keys():
        overlap += min(secret_counts[color], guess_counts[color])

    # 4. overlap >= exact always holds; the floor keeps partial non-negative anyway
    return Feedback(exact=exact, partial=max(0, overlap - exact))


def is_win(secret: Sequence[ColorKey], guess: Sequence[ColorKey]) -> bool:
    """
    Win = all colors match in order, for all positions.
    Works for any length, as long as lengths match.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False
    return all(s == g for s, g in zip(secret, guess))
