"""Resolution matching for downloads."""

import math
from collections.abc import Sequence

from .wallpaper import Resolution


def resolution_distance(resolution: Resolution, target_width: int, target_height: int) -> float:
    """Euclidean distance between a resolution and the target dimensions.

    For reporting only; find_best_match compares squared integer distances.
    """
    width_diff = resolution.width - target_width
    height_diff = resolution.height - target_height
    return math.sqrt(width_diff * width_diff + height_diff * height_diff)


def find_best_match(
    available: Sequence[Resolution],
    target_width: int,
    target_height: int,
) -> Resolution | None:
    """Pick the resolution to serve for a requested size.

    An exact width/height match wins; otherwise the entry closest to the
    target by Euclidean distance. Ties go to the earliest entry in
    ``available``. Returns None when nothing is available.

    Targets are not validated: zero or negative dimensions still produce
    the nearest entry.
    """
    if not available:
        return None

    for resolution in available:
        if resolution.width == target_width and resolution.height == target_height:
            return resolution

    # exact integer key; min() keeps the first of equal keys
    return min(
        available,
        key=lambda r: (r.width - target_width) ** 2 + (r.height - target_height) ** 2,
    )
