"""Rounding shared by every 0-100 score."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up: 62.5 -> 63, -0.5 -> 0.

    Unlike ``round()``, which sends halves to the even neighbour.
    """
    return math.floor(value + 0.5)


def clamp_score(value: int) -> int:
    """Clamp a score into the closed range 0-100."""
    return max(0, min(100, value))
