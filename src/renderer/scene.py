# renderer/scene.py
import math
from typing import Sequence, Tuple, Union

from core.color import Color
from geometry.hittable import Hittable
from lights.light import Light
from materials.material import Material, MaterialKind
from renderer.errors import SceneConfigError, UnknownMaterialError

DEFAULT_SIZE = 512
DEFAULT_FOV = 90


class Scene:
    """
    Everything a render reads: surfaces, lights, image size, field of view
    and background. The scene is frozen once constructed, so render workers
    share it without locking.

    Derived values computed once here:
      aspect_ratio    wider image side over narrower side
      fov_radians     field of view in radians
      fov_adjustment  tan(fov_radians / 2)
    """
    __slots__ = (
        "surfaces", "lights", "width", "height", "fov", "background_color",
        "aspect_ratio", "fov_radians", "fov_adjustment",
    )

    def __init__(self, surfaces: Sequence[Hittable], width: int = DEFAULT_SIZE,
                 height: int = DEFAULT_SIZE, fov: float = DEFAULT_FOV,
                 background_color: Union[Color, str, Tuple[float, float, float]] = "black",
                 lights: Sequence[Light] = ()):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise SceneConfigError(f"{name} must be a positive integer, got {value!r}")
        if isinstance(fov, bool) or not isinstance(fov, (int, float)) or not 0 < fov < 180:
            raise SceneConfigError(f"fov must be between 0 and 180 degrees, got {fov!r}")
        try:
            background = Color.coerce(background_color)
        except (ValueError, TypeError) as e:
            raise SceneConfigError(f"Invalid background color {background_color!r}") from e

        surfaces = tuple(surfaces)
        for surface in surfaces:
            material = getattr(surface, "material", None)
            if not isinstance(material, Material) or not isinstance(material.kind, MaterialKind):
                raise UnknownMaterialError(surface, material)

        object.__setattr__(self, "surfaces", surfaces)
        object.__setattr__(self, "lights", tuple(lights))
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "fov", float(fov))
        object.__setattr__(self, "background_color", background)
        object.__setattr__(self, "aspect_ratio", max(width, height) / min(width, height))
        fov_radians = math.radians(fov)
        object.__setattr__(self, "fov_radians", fov_radians)
        object.__setattr__(self, "fov_adjustment", math.tan(fov_radians / 2.0))

    def __setattr__(self, name, value):
        raise AttributeError(f"Scene is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Scene is immutable; cannot delete {name!r}")

    def __repr__(self) -> str:
        return (f"Scene({self.width}x{self.height}, fov={self.fov}, "
                f"surfaces={len(self.surfaces)}, lights={len(self.lights)})")
