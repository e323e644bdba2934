"""
board_generator.py

Procedurally generates square lightpath boards.

Per generated board:
- Starts from an all-hole grid
- Carves path tiles at random interior positions, merging neighbouring paths,
  as long as no path grows past the complexity limit
- Keeps the longest path that fits the limit
- Puts the start (a light-on switch) and the exit on the two path ends that
  are furthest apart
- Turns the path tiles next to the start into light-off switches

Key properties:
- The outer ring is always holes
- The chosen path has at most ``complexity_limit`` tiles
- Paths never loop back onto themselves (a tile touching one path twice is
  never carved)
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Sequence, Tuple

from errors import InvalidSize, NoBoundaryTiles, NoQualifyingPath
from models import Board, BoardGrid, Coordinate, TileKind
from utils import manhattan

logger = logging.getLogger(__name__)

MIN_SIZE = 3
NO_PATH = 0

# N, S, E, W. Duplicate and degree checks depend on this order staying fixed.
NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = ((0, -1), (0, 1), (1, 0), (-1, 0))


# ----------------------------
# Grid
# ----------------------------


class Grid:
    """Mutable square board under construction.

    Holds the tile kinds and, in parallel, the id of the path each tile
    belongs to. Path ids are only written through ``PathRegistry``.
    """

    def __init__(self, size: int) -> None:
        if size < MIN_SIZE:
            raise InvalidSize(size)
        self.size = size
        self.tiles: List[List[TileKind]] = [
            [TileKind.HOLE for _ in range(size)] for _ in range(size)
        ]
        self._path_ids: List[List[int]] = [[NO_PATH] * size for _ in range(size)]

    @classmethod
    def create(cls, size: int) -> "Grid":
        return cls(size)

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 1 <= x <= self.size and 1 <= y <= self.size

    def is_interior(self, coord: Coordinate) -> bool:
        x, y = coord
        return 2 <= x <= self.size - 1 and 2 <= y <= self.size - 1

    def _check(self, coord: Coordinate) -> None:
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside a {self.size}x{self.size} grid")

    def get(self, coord: Coordinate) -> TileKind:
        self._check(coord)
        x, y = coord
        return self.tiles[y - 1][x - 1]

    def set(self, coord: Coordinate, kind: TileKind) -> None:
        self._check(coord)
        x, y = coord
        self.tiles[y - 1][x - 1] = kind

    def path_id(self, coord: Coordinate) -> int:
        self._check(coord)
        x, y = coord
        return self._path_ids[y - 1][x - 1]

    def _assign(self, coord: Coordinate, path_id: int) -> None:
        x, y = coord
        self._path_ids[y - 1][x - 1] = path_id

    def neighbors4(self, coord: Coordinate) -> List[Coordinate]:
        x, y = coord
        out: List[Coordinate] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            n = (x + dx, y + dy)
            if self.in_bounds(n):
                out.append(n)
        return out

    def coordinates(self) -> Iterator[Coordinate]:
        for y in range(1, self.size + 1):
            for x in range(1, self.size + 1):
                yield (x, y)

    def freeze(self) -> BoardGrid:
        return BoardGrid(rows=tuple(tuple(row) for row in self.tiles))


# ----------------------------
# Path bookkeeping
# ----------------------------


class PathRegistry:
    """Arena of paths indexed by a monotonically increasing id.

    Merging folds an old path into a newer one and leaves the old slot empty.
    Ids are never reused within a run, so an id seen earlier stays valid.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        # slot 0 is the "no path" id and is never live
        self._paths: List[List[Coordinate]] = [[]]

    def __len__(self) -> int:
        return len(self._paths) - 1

    def new_path(self, seed: Coordinate) -> int:
        if self.grid.path_id(seed) != NO_PATH:
            raise ValueError(f"{seed} already belongs to path {self.grid.path_id(seed)}")
        path_id = len(self._paths)
        self._paths.append([seed])
        self.grid.set(seed, TileKind.PATH)
        self.grid._assign(seed, path_id)
        return path_id

    def append(self, old: int, new: int) -> None:
        if not self.is_live(new):
            raise ValueError(f"cannot merge into path {new}, it is not live")
        if old == new:
            return
        moved = self._paths[old]
        for coord in moved:
            self.grid._assign(coord, new)
        self._paths[new].extend(moved)
        self._paths[old] = []

    def is_live(self, path_id: int) -> bool:
        return NO_PATH < path_id < len(self._paths) and bool(self._paths[path_id])

    def length(self, path_id: int) -> int:
        if path_id <= NO_PATH or path_id >= len(self._paths):
            return 0
        return len(self._paths[path_id])

    def members(self, path_id: int) -> Tuple[Coordinate, ...]:
        if path_id <= NO_PATH or path_id >= len(self._paths):
            return ()
        return tuple(self._paths[path_id])

    def live_ids(self) -> List[int]:
        return [pid for pid in range(1, len(self._paths)) if self._paths[pid]]


# ----------------------------
# Carving
# ----------------------------


def has_nonzero_duplicate(values: Sequence[int]) -> bool:
    """True if some non-zero value occurs more than once."""
    seen = set()
    for v in values:
        if v == NO_PATH:
            continue
        if v in seen:
            return True
        seen.add(v)
    return False


class PathCarver:
    """Turns random interior holes into path tiles until none are left to try.

    A hole is carved unless it would touch the same path twice (that would
    close a loop) or the paths it joins already hold more tiles than the
    complexity limit allows. Every carve starts a fresh path at the tile and
    folds all neighbouring paths into it.
    """

    def __init__(
        self,
        grid: Grid,
        registry: PathRegistry,
        complexity_limit: float,
        rng: random.Random,
    ) -> None:
        self.grid = grid
        self.registry = registry
        self.complexity_limit = complexity_limit
        self.rng = rng

    def candidates(self) -> List[Coordinate]:
        return [
            (x, y)
            for y in range(2, self.grid.size)
            for x in range(2, self.grid.size)
            if self.grid.get((x, y)) is TileKind.HOLE
        ]

    def carve(self) -> int:
        """Visit every candidate once in random order; return how many were carved."""
        pending = self.candidates()
        visited = len(pending)
        carved = 0
        while pending:
            idx = self.rng.randrange(len(pending))
            coord = pending[idx]
            # swap-remove, order of the rest does not matter
            pending[idx] = pending[-1]
            pending.pop()
            if self.try_carve(coord):
                carved += 1

        logger.debug(
            "carved %s of %s candidates into %s live paths (limit %s)",
            carved,
            visited,
            len(self.registry.live_ids()),
            self.complexity_limit,
        )
        return carved

    def neighbor_path_ids(self, coord: Coordinate) -> List[int]:
        x, y = coord
        ids: List[int] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            n = (x + dx, y + dy)
            ids.append(self.grid.path_id(n) if self.grid.in_bounds(n) else NO_PATH)
        return ids

    def try_carve(self, coord: Coordinate) -> bool:
        if not self.grid.is_interior(coord) or self.grid.get(coord) is not TileKind.HOLE:
            return False

        neighbor_ids = self.neighbor_path_ids(coord)
        if has_nonzero_duplicate(neighbor_ids):
            return False

        joined = [pid for pid in neighbor_ids if pid != NO_PATH]
        resulting_complexity = sum(self.registry.length(pid) for pid in joined)
        if resulting_complexity > self.complexity_limit:
            return False

        new_id = self.registry.new_path(coord)
        for pid in joined:
            self.registry.append(pid, new_id)
        return True


# ----------------------------
# Endpoints + switches
# ----------------------------


class EndpointSelector:
    """Picks start and exit among the ends of the chosen path."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def boundary(self, members: Sequence[Coordinate]) -> List[Coordinate]:
        ends: List[Coordinate] = []
        for coord in members:
            degree = sum(
                1 for n in self.grid.neighbors4(coord) if self.grid.get(n).walkable
            )
            if degree <= 1:
                ends.append(coord)
        return ends

    def select(self, path_id: int, members: Sequence[Coordinate]) -> Tuple[Coordinate, Coordinate]:
        ends = self.boundary(members)
        if not ends:
            raise NoBoundaryTiles(path_id)

        best = (ends[0], ends[0])
        best_dist = 0
        for a in ends:
            for b in ends:
                d = manhattan(a, b)
                if d > best_dist:
                    best, best_dist = (a, b), d
        return best


class SwitchPlacer:
    """Turns the path tiles right next to the start into light-off switches."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def place(self, start: Coordinate) -> List[Coordinate]:
        placed: List[Coordinate] = []
        for n in self.grid.neighbors4(start):
            if self.grid.get(n) is TileKind.PATH:
                self.grid.set(n, TileKind.SWITCH_OFF)
                placed.append(n)
        return placed


# ----------------------------
# Generator orchestration
# ----------------------------


class BoardGenerator:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        # process-wide generator (the one random.seed() seeds) unless injected
        self.rng = rng if rng is not None else random._inst

    def generate(self, size: int, complexity_limit: float) -> Board:
        grid = Grid.create(size)
        registry = PathRegistry(grid)
        PathCarver(grid, registry, complexity_limit, self.rng).carve()

        path_id = self.choose_path(registry, complexity_limit)
        members = registry.members(path_id)

        start, exit_ = EndpointSelector(grid).select(path_id, members)
        grid.set(start, TileKind.SWITCH_ON)
        grid.set(exit_, TileKind.EXIT)
        switches = SwitchPlacer(grid).place(start)

        logger.debug(
            "board %sx%s: path %s with %s tiles, start %s, exit %s, %s switches",
            size,
            size,
            path_id,
            len(members),
            start,
            exit_,
            len(switches),
        )
        return Board(grid=grid.freeze(), start=start)

    @staticmethod
    def choose_path(registry: PathRegistry, complexity_limit: float) -> int:
        live = registry.live_ids()
        # sorted() is stable, so equal lengths keep allocation order
        ranked = sorted(live, key=registry.length, reverse=True)
        for pid in ranked:
            if registry.length(pid) <= complexity_limit:
                return pid
        shortest = min((registry.length(pid) for pid in live), default=0)
        raise NoQualifyingPath(complexity_limit, shortest)


def generate(
    size: int, complexity_limit: float, rng: Optional[random.Random] = None
) -> Board:
    """Return a ``size`` x ``size`` board whose route needs at most ``complexity_limit`` tiles."""
    return BoardGenerator(rng).generate(size, complexity_limit)
