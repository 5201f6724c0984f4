# lights/light.py
from core.color import Color
from core.vector import Vector3


class Light:
    """
    Abstract light source as seen from a point being shaded.
    """
    color: Color = Color.WHITE
    intensity: float = 1.0

    def direction_from(self, point: Vector3) -> Vector3:
        """Direction from `point` toward the light. Not necessarily unit length."""
        raise NotImplementedError("direction_from() must be implemented by subclasses.")

    def distance_from(self, point: Vector3) -> float:
        raise NotImplementedError("distance_from() must be implemented by subclasses.")

    def intensity_at(self, point: Vector3) -> float:
        raise NotImplementedError("intensity_at() must be implemented by subclasses.")
