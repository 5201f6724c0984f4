# renderer/scene_loader.py
"""Scene loading and validation from JSON scene files.

A scene file looks like:

    {
      "render": {"width": 320, "height": 240, "fov": 90, "background": "skyblue"},
      "surfaces": [
        {"type": "sphere", "center": [0, 0, -5], "radius": 1, "color": "#ff8000",
         "material": {"type": "diffuse", "albedo": 0.18}},
        {"type": "plane", "point": [0, -2, 0], "normal": [0, 1, 0], "color": [200, 200, 200],
         "material": {"preset": "polished"}}
      ],
      "lights": [
        {"type": "directional", "direction": [-0.25, -1, -1], "color": "white", "intensity": 20},
        {"type": "spherical", "position": [-2, 4, -3], "color": "#ff4040", "intensity": 10000}
      ]
    }
"""
import json
import logging
from typing import Any, Dict, List

from core.vector import Vector3
from geometry.plane import Plane
from geometry.sphere import Sphere
from lights.directional import DirectionalLight
from lights.spherical import SphericalLight
from materials.diffuse import Diffuse
from materials.presets import PRESETS
from materials.reflective import Reflective
from materials.refractive import Refractive
from renderer.errors import SceneConfigError
from renderer.scene import DEFAULT_FOV, DEFAULT_SIZE, Scene

logger = logging.getLogger(__name__)

SURFACE_FIELDS = {
    "sphere": ("center", "radius"),
    "plane": ("point", "normal"),
}
LIGHT_FIELDS = {
    "directional": ("direction",),
    "spherical": ("position",),
}
MATERIAL_FIELDS = {
    "diffuse": ("albedo",),
    "reflective": ("albedo", "reflectivity"),
    "refractive": ("refraction_index",),
}


def load_scene(json_path: str) -> Dict[str, Any]:
    """Load scene configuration from a JSON file."""
    try:
        with open(json_path, "r") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SceneConfigError(f"{json_path} is not valid JSON: {e}") from e


def _require(mapping: Dict[str, Any], fields, where: str) -> None:
    for field in fields:
        if field not in mapping:
            raise SceneConfigError(f"{where} is missing '{field}'")


def _check_vector(value, where: str) -> None:
    if (not isinstance(value, (list, tuple)) or len(value) != 3
            or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)):
        raise SceneConfigError(f"{where} must be a list of 3 numbers, got {value!r}")


def _validate_material(material: Any, where: str) -> None:
    if not isinstance(material, dict):
        raise SceneConfigError(f"{where} must be an object")
    if "preset" in material:
        if material["preset"] not in PRESETS:
            raise SceneConfigError(
                f"{where} has unknown preset {material['preset']!r}; "
                f"expected one of {sorted(PRESETS)}"
            )
        return
    kind = material.get("type")
    if kind not in MATERIAL_FIELDS:
        raise SceneConfigError(
            f"{where} has unknown type {kind!r}; expected one of {sorted(MATERIAL_FIELDS)}"
        )
    _require(material, MATERIAL_FIELDS[kind], where)


def validate_scene(scene: Dict[str, Any]) -> None:
    """Check the structure of a scene document, raising SceneConfigError on the first problem."""
    if not isinstance(scene, dict):
        raise SceneConfigError("Scene must be a JSON object")
    if "surfaces" not in scene:
        raise SceneConfigError("Scene must have surfaces")
    if not isinstance(scene["surfaces"], list):
        raise SceneConfigError("'surfaces' must be a list")
    if not isinstance(scene.get("lights", []), list):
        raise SceneConfigError("'lights' must be a list")
    if not isinstance(scene.get("render", {}), dict):
        raise SceneConfigError("'render' must be an object")

    for i, surface in enumerate(scene["surfaces"]):
        where = f"surfaces[{i}]"
        if not isinstance(surface, dict):
            raise SceneConfigError(f"{where} must be an object")
        kind = surface.get("type")
        if kind not in SURFACE_FIELDS:
            raise SceneConfigError(
                f"{where} has unknown type {kind!r}; expected one of {sorted(SURFACE_FIELDS)}"
            )
        _require(surface, SURFACE_FIELDS[kind] + ("material",), where)
        for field in SURFACE_FIELDS[kind]:
            if field != "radius":
                _check_vector(surface[field], f"{where}.{field}")
        _validate_material(surface["material"], f"{where}.material")

    for i, light in enumerate(scene.get("lights", [])):
        where = f"lights[{i}]"
        if not isinstance(light, dict):
            raise SceneConfigError(f"{where} must be an object")
        kind = light.get("type")
        if kind not in LIGHT_FIELDS:
            raise SceneConfigError(
                f"{where} has unknown type {kind!r}; expected one of {sorted(LIGHT_FIELDS)}"
            )
        _require(light, LIGHT_FIELDS[kind], where)
        for field in LIGHT_FIELDS[kind]:
            _check_vector(light[field], f"{where}.{field}")

    logger.debug("Scene validation passed")


def _build_material(data: Dict[str, Any]):
    if "preset" in data:
        return PRESETS[data["preset"]]()
    kind = data["type"]
    if kind == "diffuse":
        return Diffuse(data["albedo"])
    if kind == "reflective":
        return Reflective(data["albedo"], data["reflectivity"])
    return Refractive(data["refraction_index"], data.get("transparency", 1.0))


def _build_surface(data: Dict[str, Any]):
    material = _build_material(data["material"])
    color = data.get("color", "white")
    if data["type"] == "sphere":
        return Sphere(Vector3(*data["center"]), data["radius"], color, material)
    return Plane(Vector3(*data["point"]), Vector3(*data["normal"]), color, material)


def _build_light(data: Dict[str, Any]):
    color = data.get("color", "white")
    intensity = data.get("intensity", 1.0)
    if data["type"] == "directional":
        return DirectionalLight(Vector3(*data["direction"]), color, intensity)
    return SphericalLight(Vector3(*data["position"]), color, intensity)


def build_scene(scene: Dict[str, Any], **overrides) -> Scene:
    """
    Turn a validated scene document into a Scene. Keyword overrides
    (width, height, fov, background_color) win over the document's values.
    """
    validate_scene(scene)
    render = scene.get("render", {})
    options = {
        "width": render.get("width", DEFAULT_SIZE),
        "height": render.get("height", DEFAULT_SIZE),
        "fov": render.get("fov", DEFAULT_FOV),
        "background_color": render.get("background", "black"),
    }
    options.update({k: v for k, v in overrides.items() if v is not None})

    try:
        surfaces: List = [_build_surface(s) for s in scene["surfaces"]]
        lights: List = [_build_light(l) for l in scene.get("lights", [])]
    except (ValueError, TypeError) as e:
        raise SceneConfigError(f"Invalid scene parameter: {e}") from e

    result = Scene(surfaces, lights=lights, **options)
    logger.info("Built %r", result)
    return result
