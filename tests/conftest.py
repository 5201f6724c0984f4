import pytest

from core.color import Color
from core.vector import Vector3
from geometry.plane import Plane
from geometry.sphere import Sphere
from lights.directional import DirectionalLight
from materials.diffuse import Diffuse


@pytest.fixture
def orange():
    return Color(255, 128, 0)


@pytest.fixture
def diffuse_sphere(orange):
    return Sphere(Vector3(0, 0, -5), 1.0, orange, Diffuse(albedo=0.9))


@pytest.fixture
def floor():
    return Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), Color(200, 200, 200), Diffuse(albedo=0.5))


@pytest.fixture
def sun():
    # straight down
    return DirectionalLight(Vector3(0, -1, 0), Color.WHITE, intensity=1.0)
