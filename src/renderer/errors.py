# renderer/errors.py
from typing import List, Optional, Tuple


class RayTracerError(Exception):
    """Base class for every error raised by the renderer."""


class SceneConfigError(RayTracerError, ValueError):
    """Invalid scene options or scene file contents."""


class ShadingError(RayTracerError):
    """
    A surface could not be shaded. `kind` names the failure so callers can
    report it without parsing the message.
    """
    kind = "Shading"

    def __init__(self, message: str, surface=None):
        super().__init__(message)
        self.surface = surface


class UnknownMaterialError(ShadingError):
    kind = "UnknownMaterial"

    def __init__(self, surface, material):
        super().__init__(
            f"Surface {surface!r} has unsupported material {material!r}", surface
        )
        self.material = material


class RenderError(RayTracerError):
    """
    Raised after the pixel loop when one or more pixels failed to shade.
    """
    def __init__(self, failures: List[Tuple[int, int, ShadingError]], total: Optional[int] = None):
        x, y, first = failures[0]
        message = f"{len(failures)} pixel(s) failed to render"
        if total is not None:
            message += f" out of {total}"
        message += f"; first failure at ({x}, {y}): {first}"
        super().__init__(message)
        self.failures = failures
