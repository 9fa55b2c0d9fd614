"""Path finding through a grid maze, depth first and breadth first."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Cell = tuple[int, int]

MAZE: list[list[int]] = [
    [0, 1, 0, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 1, 0],
]

_DFS_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_BFS_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _open_neighbours(maze: Sequence[Sequence[int]], cell: Cell, directions):
    rows, cols = len(maze), len(maze[0])
    row, col = cell
    for d_row, d_col in directions:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols and maze[r][c] != 1:
            yield (r, c)


def _goal(maze: Sequence[Sequence[int]], goal: Cell | None) -> Cell:
    return goal if goal is not None else (len(maze) - 1, len(maze[0]) - 1)


def dfs_path(maze: Sequence[Sequence[int]], start: Cell = (0, 0), goal: Cell | None = None) -> list[Cell] | None:
    """Find a path from start to goal by depth-first search.

    Walls are cells holding 1. Returns the cells from start to goal, or
    None when the goal cannot be reached. The goal defaults to the
    bottom-right cell.
    """
    target = _goal(maze, goal)
    visited = {start}
    stack = [(start, _open_neighbours(maze, start, _DFS_DIRECTIONS))]
    while stack:
        cell, neighbours = stack[-1]
        if cell == target:
            return [frame[0] for frame in stack]
        following = next((n for n in neighbours if n not in visited), None)
        if following is None:
            stack.pop()
            continue
        visited.add(following)
        stack.append((following, _open_neighbours(maze, following, _DFS_DIRECTIONS)))
    return None


def bfs_path(maze: Sequence[Sequence[int]], start: Cell = (0, 0), goal: Cell | None = None) -> list[Cell] | None:
    """Find a shortest path from start to goal by breadth-first search.

    Returns the cells from start to goal, or None when unreachable.
    """
    target = _goal(maze, goal)
    parent: dict[Cell, Cell | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == target:
            path = []
            current: Cell | None = cell
            while current is not None:
                path.append(current)
                current = parent[current]
            path.reverse()
            return path
        for neighbour in _open_neighbours(maze, cell, _BFS_DIRECTIONS):
            if neighbour not in parent:
                parent[neighbour] = cell
                queue.append(neighbour)
    return None


def format_path(path: Sequence[Cell] | None) -> str:
    """Render a path goal first, one ``(row, col)`` per line.

    A missing path renders as ``No path!``.
    """
    if path is None:
        return "No path!\n"
    return "".join(f"({row}, {col})\n" for row, col in reversed(path))