"""Failures surfaced by board generation.

None of these are retried internally: a caller that wants another outcome
calls ``generate`` again, usually with a larger complexity limit.
"""

from __future__ import annotations


class GenerationError(RuntimeError):
    """Base class for every terminal failure of a ``generate`` call."""


class InvalidSize(GenerationError, ValueError):
    """The requested board is too small to have any interior tile."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Board size must be at least 3, got {size}.")
        self.size = size


class NoQualifyingPath(GenerationError):
    """Every carved path exceeds the complexity limit, or nothing was carved."""

    def __init__(self, complexity_limit: float, shortest: int = 0) -> None:
        if shortest:
            msg = (
                f"No carved path fits complexity {complexity_limit} "
                f"(shortest live path has {shortest} tiles)."
            )
        else:
            msg = f"No path was carved for complexity {complexity_limit}."
        super().__init__(msg)
        self.complexity_limit = complexity_limit
        self.shortest = shortest


class NoBoundaryTiles(GenerationError):
    """The chosen path has no member with at most one path neighbour."""

    def __init__(self, path_id: int) -> None:
        super().__init__(f"Path {path_id} has no boundary tiles.")
        self.path_id = path_id
