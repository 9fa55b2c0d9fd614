"""Josephus elimination simulated with a circular queue."""

from __future__ import annotations

from collections import deque


def eliminate(total: int, interval: int) -> tuple[list[int], int]:
    """Count people 1..total around a circle, removing every interval-th.

    Returns the removed ids in order and the id of the survivor.
    """
    if total < 1:
        raise ValueError("total must be at least 1")
    if interval < 1:
        raise ValueError("interval must be at least 1")
    circle = deque(range(1, total + 1))
    removed: list[int] = []
    while len(circle) > 1:
        circle.rotate(-(interval - 1))
        removed.append(circle.popleft())
    return removed, circle[0]


def report(total: int = 50, interval: int = 5) -> list[str]:
    """Return the elimination report lines, ending with the survivor."""
    removed, survivor = eliminate(total, interval)
    return [f"淘汰: {person}" for person in removed] + [f"最后剩下的人是: {survivor}"]