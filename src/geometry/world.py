# geometry/world.py
from typing import NamedTuple, Optional, Sequence

from core.ray import Ray
from geometry.hittable import Hittable


class Hit(NamedTuple):
    surface: Hittable
    distance: float


def closest_intersection(ray: Ray, surfaces: Sequence[Hittable]) -> Optional[Hit]:
    """
    Tests the ray against every surface and returns the nearest hit.

    Misses and non-positive distances are discarded. When two surfaces are hit
    at exactly the same distance the one that comes first in `surfaces` wins.
    The scan only reads the surfaces, so it is safe to run from several
    threads at once.
    """
    closest = None
    for surface in surfaces:
        distance = surface.intersects(ray)
        if distance is None or distance <= 0:
            continue
        # strict comparison keeps the earlier surface on ties
        if closest is None or distance < closest.distance:
            closest = Hit(surface, distance)
    return closest
