# geometry/sphere.py
import math
from typing import Optional

from core.color import Color
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, color and material.
    """
    def __init__(self, center: Vector3, radius: float, color: Color, material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.color = Color.coerce(color)
        self.material = material

    def intersects(self, ray: Ray) -> Optional[float]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearest root in front of the origin; the far root covers rays starting inside
        root = (-half_b - sqrt_disc) / a
        if root <= 0:
            root = (-half_b + sqrt_disc) / a
            if root <= 0:
                return None
        return root

    def normal_at(self, point: Vector3) -> Vector3:
        return ((point - self.center) / self.radius).normalize()

    def base_color_at(self, point: Vector3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
