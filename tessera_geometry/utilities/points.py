"""Random point source for plane triangulation."""

from typing import Optional, Tuple

import numpy as np

from tessera_geometry.models.point import Point2D


def generate_random_points(
    count: int,
    max_x: float,
    max_y: float,
    seed: Optional[int] = None,
) -> Tuple[Point2D, ...]:
    """
    Integer-valued random points in [0, max_x) x [0, max_y).

    Args:
        count: Number of points (negative values produce none)
        max_x: Exclusive upper bound for X, truncated to an integer
        max_y: Exclusive upper bound for Y, truncated to an integer
        seed: Seed for numpy's default generator (None = nondeterministic)

    Returns:
        Tuple of points; duplicates are possible

    Example:
        >>> points = generate_random_points(3, 800, 600, seed=7)
        >>> len(points)
        3
    """
    count = max(0, int(count))
    if count == 0:
        return ()

    rng = np.random.default_rng(seed)
    # Bounds below 1 collapse to a single column or row at 0
    xs = rng.integers(0, max(1, int(max_x)), size=count)
    ys = rng.integers(0, max(1, int(max_y)), size=count)

    return tuple(Point2D(x, y) for x, y in zip(xs.tolist(), ys.tolist()))
