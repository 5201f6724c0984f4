# camera/camera.py
import math

from numba import njit

from core.ray import Ray
from core.vector import ORIGIN, Vector3


@njit(cache=False)
def primary_direction(x, y, width, height, fov_adjustment, aspect_ratio):
    """
    Maps the center of pixel (x, y) onto the image plane at z = -1 and
    returns the normalized direction through it as an (x, y, z) tuple.
    """
    # take center of pixel, normalize to (-1.0..1.0), then adjust for fov
    ray_x = (((x + 0.5) / width) * 2.0 - 1.0) * fov_adjustment
    ray_y = (1.0 - ((y + 0.5) / height) * 2.0) * fov_adjustment
    if width > height:
        ray_x *= aspect_ratio
    else:
        ray_y *= aspect_ratio
    l = math.sqrt(ray_x * ray_x + ray_y * ray_y + 1.0)
    return ray_x / l, ray_y / l, -1.0 / l


class Camera:
    """
    Pinhole camera at the world origin looking down -z.
    """
    def __init__(self, width: int, height: int, fov_adjustment: float, aspect_ratio: float):
        self.width = width
        self.height = height
        self.fov_adjustment = fov_adjustment
        self.aspect_ratio = aspect_ratio

    @classmethod
    def for_scene(cls, scene) -> "Camera":
        return cls(scene.width, scene.height, scene.fov_adjustment, scene.aspect_ratio)

    def get_ray(self, x: int, y: int) -> Ray:
        return primary_ray(x, y, self.width, self.height, self.fov_adjustment, self.aspect_ratio)


def primary_ray(x: int, y: int, width: int, height: int,
                fov_adjustment: float, aspect_ratio: float) -> Ray:
    dx, dy, dz = primary_direction(float(x), float(y), float(width), float(height),
                                   float(fov_adjustment), float(aspect_ratio))
    return Ray(ORIGIN, Vector3(dx, dy, dz))
