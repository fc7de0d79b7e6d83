"""Sample points and the deterministic choice of which k of them to use."""

from dataclasses import dataclass

from core.errors import InsufficientPoints


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y


def select_points(pool, k: int) -> list[Point]:
    """Pick k points with distinct x, lowest x first.

    The pool is sorted by x (stable, so among equal x the point the pool
    presented first wins) and scanned until k distinct x values are kept.
    """
    if k < 1:
        raise ValueError("k must be >= 1")

    chosen = []
    seen = set()
    for p in sorted(pool, key=lambda p: p.x):
        if p.x in seen:
            continue
        seen.add(p.x)
        chosen.append(p)
        if len(chosen) == k:
            return chosen
    raise InsufficientPoints(required=k, available=len(chosen))
