from __future__ import annotations

from collections import deque
from typing import List, Set, Tuple

from models import Board, Coordinate


class FirstRng:
    """Random source that always draws the first remaining candidate."""

    def randrange(self, n: int) -> int:
        assert n > 0
        return 0


def reachable_from(board: Board, start: Coordinate) -> Set[Coordinate]:
    """Walkable tiles connected to ``start`` through orthogonal steps."""
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for n in ((x, y - 1), (x, y + 1), (x + 1, y), (x - 1, y)):
            if n not in seen and board.is_walkable(n):
                seen.add(n)
                q.append(n)
    return seen


class RecordingRng:
    """Wraps a random source and remembers every ``randrange`` draw."""

    def __init__(self, rng) -> None:
        self.rng = rng
        self.draws: List[Tuple[int, int]] = []

    def randrange(self, n: int) -> int:
        value = self.rng.randrange(n)
        self.draws.append((n, value))
        return value


class ReplayRng:
    """Plays back draws recorded by ``RecordingRng``, checking each range."""

    def __init__(self, draws: List[Tuple[int, int]]) -> None:
        self.draws = list(draws)

    def randrange(self, n: int) -> int:
        expected_n, value = self.draws.pop(0)
        assert n == expected_n
        return value
