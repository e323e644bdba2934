import pytest

from board_generator import Grid, PathRegistry
from errors import GenerationError, InvalidSize
from models import TileKind


def test_new_grid_is_all_holes():
    grid = Grid.create(4)
    assert grid.size == 4
    assert all(grid.get(c) is TileKind.HOLE for c in grid.coordinates())
    assert all(grid.path_id(c) == 0 for c in grid.coordinates())


@pytest.mark.parametrize("size", [-1, 0, 1, 2])
def test_too_small_grid_is_rejected(size):
    with pytest.raises(InvalidSize) as excinfo:
        Grid.create(size)
    assert isinstance(excinfo.value, GenerationError)
    assert isinstance(excinfo.value, ValueError)


def test_get_and_set_use_one_based_xy():
    grid = Grid.create(5)
    grid.set((4, 2), TileKind.EXIT)
    assert grid.get((4, 2)) is TileKind.EXIT
    # row-major storage: y picks the row, x the column
    assert grid.tiles[1][3] is TileKind.EXIT
    assert grid.get((2, 4)) is TileKind.HOLE


@pytest.mark.parametrize("coord", [(0, 1), (1, 0), (6, 1), (1, 6), (0, 0)])
def test_out_of_bounds_access_raises(coord):
    grid = Grid.create(5)
    with pytest.raises(IndexError):
        grid.get(coord)
    with pytest.raises(IndexError):
        grid.set(coord, TileKind.PATH)


def test_neighbors4_order_is_north_south_east_west():
    grid = Grid.create(5)
    assert grid.neighbors4((3, 3)) == [(3, 2), (3, 4), (4, 3), (2, 3)]


def test_neighbors4_omits_out_of_bounds():
    grid = Grid.create(5)
    assert grid.neighbors4((1, 1)) == [(1, 2), (2, 1)]
    assert grid.neighbors4((5, 3)) == [(5, 2), (5, 4), (4, 3)]


def test_interior_excludes_outer_ring():
    grid = Grid.create(4)
    interior = [c for c in grid.coordinates() if grid.is_interior(c)]
    assert interior == [(2, 2), (3, 2), (2, 3), (3, 3)]


def test_freeze_snapshots_tiles():
    grid = Grid.create(3)
    PathRegistry(grid).new_path((2, 2))
    frozen = grid.freeze()
    grid.set((2, 2), TileKind.HOLE)
    assert frozen[(2, 2)] is TileKind.PATH
    assert frozen.width == frozen.height == 3
