"""Spatial queries over the static map and the evasion heuristic.

``nearest`` and ``farthest`` accept either bare coordinates or any record
carrying a ``pos``; ties go to the first candidate encountered.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from kutulu_bot.core.grid import Grid, empty_cells_within
from kutulu_bot.core.models import ActiveHostile, ControlledUnit, Vector2
from kutulu_bot.errors import EmptyInputError, NoEscapeError

T = TypeVar("T")

# Locality bound for retreat cells: roughly what a unit can cover in one turn.
EVASION_RADIUS = 4

_MISSING = object()


def _position(candidate: object) -> Vector2:
    if isinstance(candidate, Vector2):
        return candidate
    return candidate.pos  # type: ignore[attr-defined]


def nearest(origin: Vector2, candidates: Iterable[T]) -> T:
    """Return the candidate closest to *origin* (Manhattan)."""
    best = min(candidates, key=lambda c: origin.manhattan(_position(c)), default=_MISSING)
    if best is _MISSING:
        raise EmptyInputError(f"no candidates for nearest to {origin}")
    return best  # type: ignore[return-value]


def farthest(origin: Vector2, candidates: Iterable[T]) -> T:
    """Return the candidate farthest from *origin* (Manhattan)."""
    best = max(candidates, key=lambda c: origin.manhattan(_position(c)), default=_MISSING)
    if best is _MISSING:
        raise EmptyInputError(f"no candidates for farthest from {origin}")
    return best  # type: ignore[return-value]


def away_from_nearest_hostile(
    grid: Grid,
    me: ControlledUnit,
    hostiles: list[ActiveHostile],
) -> Vector2:
    """Pick the empty cell near *me* that is farthest from the closest hostile.

    Only the single nearest hostile is considered, and only cells within
    ``EVASION_RADIUS`` of *me*. Walls between *me* and the cell are ignored.
    """
    threat = nearest(me.pos, hostiles)
    try:
        return farthest(threat.pos, empty_cells_within(grid, me.pos, EVASION_RADIUS))
    except EmptyInputError:
        raise NoEscapeError(
            f"no empty cell within {EVASION_RADIUS} of {me.pos}"
        ) from None
