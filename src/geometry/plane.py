# geometry/plane.py
from typing import Optional

from core.color import Color
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable

PARALLEL_EPSILON = 1e-12


class Plane(Hittable):
    """
    An infinite plane through `point` with the given outward normal.
    """
    def __init__(self, point: Vector3, normal: Vector3, color: Color, material):
        if normal.length() == 0:
            raise ValueError("Plane normal must be non-zero")
        self.point = point
        self.normal = normal.normalize()
        self.color = Color.coerce(color)
        self.material = material

    def intersects(self, ray: Ray) -> Optional[float]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if t <= 0:
            return None
        return t

    def normal_at(self, point: Vector3) -> Vector3:
        return self.normal

    def base_color_at(self, point: Vector3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"Plane(point={self.point!r}, normal={self.normal!r})"
