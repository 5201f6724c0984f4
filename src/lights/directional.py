# lights/directional.py
import math

from core.color import Color
from core.vector import Vector3
from lights.light import Light


class DirectionalLight(Light):
    """
    A light infinitely far away, like the sun. `direction` is the direction
    the light travels in; every point sees it at the same intensity.
    """
    def __init__(self, direction: Vector3, color: Color = Color.WHITE, intensity: float = 1.0):
        if direction.length() == 0:
            raise ValueError("DirectionalLight direction must be non-zero")
        if intensity < 0:
            raise ValueError(f"intensity must be non-negative, got {intensity}")
        self.direction = direction.normalize()
        self.color = Color.coerce(color)
        self.intensity = float(intensity)

    def direction_from(self, point: Vector3) -> Vector3:
        return -self.direction

    def distance_from(self, point: Vector3) -> float:
        return math.inf

    def intensity_at(self, point: Vector3) -> float:
        return self.intensity

    def __repr__(self) -> str:
        return f"DirectionalLight(direction={self.direction!r}, intensity={self.intensity})"
