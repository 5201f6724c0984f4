# lights/spherical.py
import math

from core.color import Color
from core.vector import Vector3
from lights.light import Light


class SphericalLight(Light):
    """
    A point light radiating equally in every direction. Intensity falls off
    with the inverse square of the distance.
    """
    def __init__(self, position: Vector3, color: Color = Color.WHITE, intensity: float = 1.0):
        if intensity < 0:
            raise ValueError(f"intensity must be non-negative, got {intensity}")
        self.position = position
        self.color = Color.coerce(color)
        self.intensity = float(intensity)

    def direction_from(self, point: Vector3) -> Vector3:
        return self.position - point

    def distance_from(self, point: Vector3) -> float:
        return (self.position - point).length()

    def intensity_at(self, point: Vector3) -> float:
        r2 = (self.position - point).dot(self.position - point)
        if r2 == 0:
            return math.inf
        return self.intensity / (4.0 * math.pi * r2)

    def __repr__(self) -> str:
        return f"SphericalLight(position={self.position!r}, intensity={self.intensity})"
