from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from utils import clamp_float, clamp_int

Coordinate = Tuple[int, int]  # 1-based (x, y)


class TileKind(IntEnum):
    """Semantic role of one board cell.

    The integer values are the digits used by the text view and the
    hand-authored board literals.
    """

    HOLE = 0
    PATH = 1
    SWITCH_OFF = 2
    SWITCH_ON = 3
    EXIT = 4

    @property
    def walkable(self) -> bool:
        return self is not TileKind.HOLE

    @property
    def is_switch(self) -> bool:
        return self in (TileKind.SWITCH_OFF, TileKind.SWITCH_ON)


@dataclass(frozen=True)
class BoardGrid:
    """Read-only tile lookup by 1-based (x, y)."""

    rows: Tuple[Tuple[TileKind, ...], ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 1 <= x <= self.width and 1 <= y <= self.height

    def __getitem__(self, coord: Coordinate) -> TileKind:
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside a {self.width}x{self.height} board")
        x, y = coord
        return self.rows[y - 1][x - 1]

    def coordinates(self) -> Iterator[Coordinate]:
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                yield (x, y)


@dataclass(frozen=True)
class Board:
    """A finished board: tiles plus the player's start coordinate.

    Exit and switch locations are encoded in the tile kinds.
    """

    grid: BoardGrid
    start: Coordinate

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def exit(self) -> Optional[Coordinate]:
        for coord in self.grid.coordinates():
            if self.grid[coord] is TileKind.EXIT:
                return coord
        return None

    def switches(self) -> List[Coordinate]:
        return [c for c in self.grid.coordinates() if self.grid[c].is_switch]

    def rows(self) -> Tuple[Tuple[TileKind, ...], ...]:
        return self.grid.rows

    def is_walkable(self, coord: Coordinate) -> bool:
        """Out-of-bounds counts as a hole, the player falls either way."""
        return self.grid.in_bounds(coord) and self.grid[coord].walkable


@dataclass(frozen=True)
class LibraryConfig:
    """Shape of the board library: how many boards and how hard they get.

    Generated board ``k`` (1-based, counted over the whole library) is
    ``size_base + k * size_step`` tiles wide with a complexity limit of
    ``complexity_base + k * complexity_step``.
    """

    total: int
    size_base: int
    size_step: int
    complexity_base: float
    complexity_step: float
    seed: Optional[int]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], min_total: int = 0) -> "LibraryConfig":
        if not isinstance(raw, dict):
            raw = {}

        seed_raw = raw.get("seed")
        try:
            seed = None if seed_raw is None else int(seed_raw)
        except (TypeError, ValueError):
            seed = None

        return cls(
            total=max(min_total, int(raw.get("total", 100))),
            size_base=clamp_int(int(raw.get("size_base", 10)), 3, 150),
            size_step=clamp_int(int(raw.get("size_step", 1)), 0, 10),
            complexity_base=clamp_float(float(raw.get("complexity_base", 10)), 0.0, 1e6),
            complexity_step=clamp_float(float(raw.get("complexity_step", 1.5)), 0.0, 1e3),
            seed=seed,
        )

    def size_for(self, index: int) -> int:
        return self.size_base + index * self.size_step

    def complexity_for(self, index: int) -> float:
        return self.complexity_base + index * self.complexity_step
