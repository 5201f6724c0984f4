# geometry/hittable.py
from typing import Optional

from core.color import Color
from core.ray import Ray
from core.vector import Vector3


class Hittable:
    """
    Abstract class for surfaces that can be hit by a ray.

    The renderer only talks to a surface through this interface: the
    intersection test, the outward normal at a point, the unlit color at a
    point and the material that decides how the point is shaded.
    """
    material = None

    def intersects(self, ray: Ray) -> Optional[float]:
        """
        Returns the distance along the ray to the nearest hit, or None.
        Distances that are not strictly positive are never returned.
        """
        raise NotImplementedError("intersects() must be implemented by subclasses.")

    def normal_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("normal_at() must be implemented by subclasses.")

    def base_color_at(self, point: Vector3) -> Color:
        raise NotImplementedError("base_color_at() must be implemented by subclasses.")
