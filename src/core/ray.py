# core/ray.py
from core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and a unit-length direction.

    The direction is normalized on construction so every ray handed to the
    intersection and shading code satisfies the unit-length invariant.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        if direction.length() == 0:
            raise ValueError("Ray direction must be non-zero")
        self.origin = origin
        self.direction = direction.normalize()

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
