"""Tests for scene construction, materials, lights and scene files."""

import json
import math
from pathlib import Path

import pytest

from core.color import Color
from core.vector import Vector3
from geometry.plane import Plane
from geometry.sphere import Sphere
from lights.directional import DirectionalLight
from lights.spherical import SphericalLight
from materials.diffuse import Diffuse
from materials.material import Material, MaterialKind
from materials.presets import PRESETS, RefractivePresets
from materials.reflective import Reflective
from materials.refractive import Refractive
from renderer.errors import SceneConfigError, UnknownMaterialError
from renderer.scene import DEFAULT_FOV, DEFAULT_SIZE, Scene
from renderer.scene_loader import build_scene, load_scene, validate_scene


class TestScene:

    def test_defaults(self):
        scene = Scene([])
        assert (scene.width, scene.height, scene.fov) == (512, 512, 90)
        assert scene.background_color == Color(0, 0, 0)
        assert scene.lights == ()

    def test_derived_values(self):
        scene = Scene([], width=640, height=480, fov=60)
        assert scene.aspect_ratio == pytest.approx(640 / 480)
        assert scene.fov_radians == pytest.approx(math.pi / 3)
        assert scene.fov_adjustment == pytest.approx(math.tan(math.pi / 6))

    def test_aspect_ratio_is_wider_over_narrower(self):
        assert Scene([], width=100, height=400).aspect_ratio == pytest.approx(4.0)

    def test_is_immutable(self, diffuse_sphere):
        scene = Scene([diffuse_sphere])
        with pytest.raises(AttributeError):
            scene.width = 10
        with pytest.raises(AttributeError):
            del scene.fov
        assert isinstance(scene.surfaces, tuple)

    @pytest.mark.parametrize("options", [
        {"width": 0}, {"height": -3}, {"width": 1.5}, {"width": True},
        {"fov": 0}, {"fov": 180}, {"fov": "wide"},
        {"background_color": "not-a-color"},
    ])
    def test_rejects_bad_options(self, options):
        with pytest.raises(SceneConfigError):
            Scene([], **options)

    def test_unknown_material_fails_construction(self, diffuse_sphere):
        diffuse_sphere.material = "shiny"
        with pytest.raises(UnknownMaterialError):
            Scene([diffuse_sphere])


class TestMaterials:

    def test_kinds(self):
        assert Diffuse(0.5).kind is MaterialKind.DIFFUSE
        assert Reflective(0.5, 0.5).kind is MaterialKind.REFLECTIVE
        assert Refractive(1.5).kind is MaterialKind.REFRACTIVE
        assert isinstance(Refractive(1.5), Material)

    @pytest.mark.parametrize("factory", [
        lambda: Diffuse(1.5),
        lambda: Diffuse(-0.1),
        lambda: Reflective(0.5, 1.2),
        lambda: Refractive(0),
        lambda: Refractive(1.5, transparency=2.0),
    ])
    def test_parameter_ranges(self, factory):
        with pytest.raises(ValueError):
            factory()

    def test_presets(self):
        assert RefractivePresets.glass().refraction_index == 1.52
        assert all(isinstance(make(), Material) for make in PRESETS.values())


class TestLights:

    def test_directional(self):
        light = DirectionalLight(Vector3(0, -2, 0), intensity=5.0)
        point = Vector3(1, 2, 3)
        assert light.direction_from(point) == Vector3(0, 1, 0)
        assert light.distance_from(point) == math.inf
        assert light.intensity_at(point) == 5.0
        assert light.color == Color.WHITE

    def test_spherical_inverse_square(self):
        light = SphericalLight(Vector3(0, 2, 0), "red", intensity=4 * math.pi)
        assert light.direction_from(Vector3(0, 0, 0)) == Vector3(0, 2, 0)
        assert light.distance_from(Vector3(0, 0, 0)) == pytest.approx(2.0)
        assert light.intensity_at(Vector3(0, 1, 0)) == pytest.approx(1.0)
        assert light.intensity_at(Vector3(0, 0, 0)) == pytest.approx(0.25)
        assert light.color == Color(255, 0, 0)

    def test_negative_intensity_rejected(self):
        with pytest.raises(ValueError):
            SphericalLight(Vector3(0, 0, 0), intensity=-1)


def scene_document():
    return {
        "render": {"width": 32, "height": 16, "fov": 75, "background": "#102030"},
        "surfaces": [
            {"type": "sphere", "center": [0, 0, -5], "radius": 1, "color": "#ff8000",
             "material": {"type": "diffuse", "albedo": 0.18}},
            {"type": "plane", "point": [0, -2, 0], "normal": [0, 1, 0], "color": [200, 200, 200],
             "material": {"preset": "polished"}},
            {"type": "sphere", "center": [2, 0, -4], "radius": 0.5,
             "material": {"type": "refractive", "refraction_index": 1.33, "transparency": 0.9}},
        ],
        "lights": [
            {"type": "directional", "direction": [0, -1, -1], "intensity": 5},
            {"type": "spherical", "position": [-2, 4, -3], "color": "red", "intensity": 1000},
        ],
    }


class TestSceneLoader:

    def test_build_scene(self):
        scene = build_scene(scene_document())
        assert (scene.width, scene.height, scene.fov) == (32, 16, 75)
        assert scene.background_color == Color(16, 32, 48)
        sphere, plane, water = scene.surfaces
        assert isinstance(sphere, Sphere) and isinstance(plane, Plane)
        assert sphere.color == Color(255, 128, 0)
        assert plane.material.kind is MaterialKind.REFLECTIVE
        assert water.material.refraction_index == 1.33
        assert water.color == Color.WHITE
        assert isinstance(scene.lights[0], DirectionalLight)
        assert isinstance(scene.lights[1], SphericalLight)

    def test_overrides_win(self):
        scene = build_scene(scene_document(), width=8, height=None, fov=45)
        assert (scene.width, scene.height, scene.fov) == (8, 16, 45)

    def test_missing_render_block_uses_scene_defaults(self):
        document = scene_document()
        del document["render"]
        scene = build_scene(document)
        assert (scene.width, scene.height, scene.fov) == (DEFAULT_SIZE, DEFAULT_SIZE, DEFAULT_FOV)

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(scene_document()))
        assert load_scene(str(path)) == scene_document()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ not json")
        with pytest.raises(SceneConfigError):
            load_scene(str(path))

    @pytest.mark.parametrize("mutate, message", [
        (lambda d: d.pop("surfaces"), "must have surfaces"),
        (lambda d: d["surfaces"][0].update(type="cube"), "unknown type 'cube'"),
        (lambda d: d["surfaces"][0].pop("radius"), "missing 'radius'"),
        (lambda d: d["surfaces"][1].update(normal=[0, 1]), "list of 3 numbers"),
        (lambda d: d["surfaces"][0]["material"].update(type="velvet"), "unknown type 'velvet'"),
        (lambda d: d["surfaces"][1]["material"].update(preset="chrome"), "unknown preset"),
        (lambda d: d["lights"][1].pop("position"), "missing 'position'"),
        (lambda d: d["lights"].append({"type": "area"}), "unknown type 'area'"),
    ])
    def test_validation_errors(self, mutate, message):
        document = scene_document()
        mutate(document)
        with pytest.raises(SceneConfigError, match=message):
            validate_scene(document)

    def test_bad_parameter_values(self):
        document = scene_document()
        document["surfaces"][0]["material"]["albedo"] = 3
        with pytest.raises(SceneConfigError):
            build_scene(document)


class TestShippedScenes:

    def test_showcase_is_valid(self):
        path = Path(__file__).resolve().parent.parent / "scenes" / "showcase.json"
        scene = build_scene(load_scene(str(path)), width=8, height=6)
        assert len(scene.surfaces) == 5
        assert len(scene.lights) == 2
