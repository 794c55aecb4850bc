"""Breadth- and depth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

Cell = tuple[int, int]

_FOUR: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EIGHT: tuple[Cell, ...] = _FOUR + ((-1, 1), (1, 1), (1, -1), (-1, -1))


def _shape(grid: Sequence[Sequence[Any]]) -> tuple[int, int]:
    return len(grid), (len(grid[0]) if grid else 0)


def _neighbours(
    row: int, col: int, height: int, width: int, steps: tuple[Cell, ...] = _FOUR
) -> Iterator[Cell]:
    for dr, dc in steps:
        r, c = row + dr, col + dc
        if 0 <= r < height and 0 <= c < width:
            yield r, c


def _border(height: int, width: int) -> Iterator[Cell]:
    for r in range(height):
        for c in range(width):
            if r in (0, height - 1) or c in (0, width - 1):
                yield r, c


def _reach(
    height: int, width: int, starts: Iterable[Cell], passable: Callable[[int, int], bool]
) -> set[Cell]:
    """All cells connected four-ways to a passable start through passable cells."""
    seen = {cell for cell in starts if passable(*cell)}
    stack = list(seen)
    while stack:
        row, col = stack.pop()
        for cell in _neighbours(row, col, height, width):
            if cell not in seen and passable(*cell):
                seen.add(cell)
                stack.append(cell)
    return seen


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left beside a rotten one (2); -1 if never."""
    height, width = _shape(grid)
    queue: deque[tuple[int, int, int]] = deque()
    rotten: set[Cell] = set()
    fresh = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 2:
                queue.append((r, c, 0))
                rotten.add((r, c))
            elif cell == 1:
                fresh += 1
    if fresh == 0:
        return 0
    if not queue:
        return -1
    minutes = 0
    while queue and fresh:
        r, c, t = queue.popleft()
        for nr, nc in _neighbours(r, c, height, width):
            if grid[nr][nc] == 1 and (nr, nc) not in rotten:
                rotten.add((nr, nc))
                queue.append((nr, nc, t + 1))
                minutes = max(minutes, t + 1)
                fresh -= 1
    return -1 if fresh else minutes


def count_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (1) from which the border cannot be reached."""
    height, width = _shape(grid)
    escaped = _reach(height, width, _border(height, width), lambda r, c: grid[r][c] == 1)
    return sum(
        1
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == 1 and (r, c) not in escaped
    )


def shortest_clear_path(grid: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest eight-way path of zeros from top-left to bottom-right, or -1."""
    height, width = _shape(grid)
    target = (height - 1, width - 1)
    if grid[0][0] == 1 or grid[target[0]][target[1]] == 1:
        return -1
    seen = {(0, 0)}
    queue = deque([(0, 0, 1)])
    while queue:
        r, c, dist = queue.popleft()
        if (r, c) == target:
            return dist
        for cell in _neighbours(r, c, height, width, _EIGHT):
            if cell not in seen and grid[cell[0]][cell[1]] == 0:
                seen.add(cell)
                queue.append((cell[0], cell[1], dist + 1))
    return -1


def capture_surrounded(board: list[list[str]]) -> None:
    """Turn every 'O' region that does not touch the border into 'X', in place."""
    height, width = _shape(board)
    safe = _reach(height, width, _border(height, width), lambda r, c: board[r][c] == "O")
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == "O" and (r, c) not in safe:
                row[c] = "X"


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of four-way connected regions of '1' cells."""
    height, width = _shape(grid)
    seen: set[Cell] = set()
    islands = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == "1" and (r, c) not in seen:
                islands += 1
                seen |= _reach(height, width, [(r, c)], lambda i, j: grid[i][j] == "1")
    return islands


def nearest_zero_distances(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance of each cell to its nearest 0; -1 where no 0 exists."""
    height, width = _shape(matrix)
    distance = [[0 if cell == 0 else -1 for cell in row] for row in matrix]
    queue = deque(
        (r, c) for r, row in enumerate(matrix) for c, cell in enumerate(row) if cell == 0
    )
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, height, width):
            if distance[nr][nc] == -1:
                distance[nr][nc] = distance[r][c] + 1
                queue.append((nr, nc))
    return distance


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """A copy of the image with the region holding (row, col) painted ``color``."""
    filled = [list(line) for line in image]
    previous = filled[row][col]
    if previous == color:
        return filled
    height, width = _shape(filled)
    for r, c in _reach(height, width, [(row, col)], lambda i, j: filled[i][j] == previous):
        filled[r][c] = color
    return filled