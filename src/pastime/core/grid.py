"""Pure grid helpers shared by every game - no I/O dependencies."""

from collections import deque
from typing import Callable, Iterator, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Coord = tuple[int, int]
Grid = tuple[tuple[T, ...], ...]

ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
SURROUNDING = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def dimensions(grid: Sequence[Sequence]) -> tuple[int, int]:
    """Return (rows, cols). An empty grid is 0x0."""
    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def in_bounds(grid: Sequence[Sequence], row: int, col: int) -> bool:
    rows, cols = dimensions(grid)
    return 0 <= row < rows and 0 <= col < cols


def cells(grid: Sequence[Sequence]) -> Iterator[Coord]:
    """Yield every coordinate in row-major order."""
    rows, cols = dimensions(grid)
    for row in range(rows):
        for col in range(cols):
            yield row, col


def make_grid(rows: int, cols: int, fill: Callable[[int, int], T]) -> Grid:
    """Build an immutable grid, calling fill(row, col) for every cell."""
    return tuple(tuple(fill(r, c) for c in range(cols)) for r in range(rows))


def freeze(grid: Sequence[Sequence[T]]) -> Grid:
    """Convert any nested sequence into a tuple-of-tuples grid."""
    return tuple(tuple(row) for row in grid)


def thaw(grid: Sequence[Sequence[T]]) -> list[list[T]]:
    """Deep-copy a grid into mutable lists."""
    return [list(row) for row in grid]


def map_grid(grid: Sequence[Sequence[T]], fn: Callable[[T], U]) -> Grid:
    return tuple(tuple(fn(cell) for cell in row) for row in grid)


def replace_cell(grid: Grid, row: int, col: int, value: T) -> Grid:
    """Return a new grid with one cell replaced. Untouched rows are shared."""
    updated = list(grid[row])
    updated[col] = value
    return grid[:row] + (tuple(updated),) + grid[row + 1:]


def _neighbors(grid: Sequence[Sequence], row: int, col: int, offsets) -> list[Coord]:
    return [
        (row + dr, col + dc)
        for dr, dc in offsets
        if in_bounds(grid, row + dr, col + dc)
    ]


def neighbors4(grid: Sequence[Sequence], row: int, col: int) -> list[Coord]:
    """Orthogonal in-bounds neighbours (up to 4)."""
    return _neighbors(grid, row, col, ORTHOGONAL)


def neighbors8(grid: Sequence[Sequence], row: int, col: int) -> list[Coord]:
    """Orthogonal and diagonal in-bounds neighbours (up to 8)."""
    return _neighbors(grid, row, col, SURROUNDING)


def flood_fill(
    grid: Sequence[Sequence],
    start: Coord,
    is_passable: Callable[[int, int], bool],
    neighbors: Callable[[Sequence[Sequence], int, int], list[Coord]] = neighbors4,
) -> set[Coord]:
    """
    Breadth-first connected component of passable cells containing start.

    Returns an empty set when start itself is not passable.
    """
    row, col = start
    if not in_bounds(grid, row, col) or not is_passable(row, col):
        return set()

    visited = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for nr, nc in neighbors(grid, r, c):
            if (nr, nc) not in visited and is_passable(nr, nc):
                visited.add((nr, nc))
                queue.append((nr, nc))
    return visited


def rotate90(grid: Sequence[Sequence[T]]) -> Grid:
    """Rotate a grid 90 degrees clockwise."""
    if not grid:
        return ()
    return tuple(zip(*reversed(grid)))
