"""Tests for Vector3, Ray, Color and the reflect/refract helpers."""

import math

import pytest

from core.color import Color
from core.ray import Ray
from core.utils import reflect, refract
from core.vector import Vector3


class TestVector3:

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert -a == Vector3(-1, -2, -3)
        assert b / 2 == Vector3(2, 2.5, 3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)

    def test_normalize(self):
        v = Vector3(3, 4, 0).normalize()
        assert v.length() == pytest.approx(1.0)
        assert v.is_close(Vector3(0.6, 0.8, 0))

    def test_normalize_zero_vector(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)


class TestRay:

    def test_direction_is_normalized(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 3, 4))
        assert ray.direction.length() == pytest.approx(1.0, abs=1e-9)

    def test_at(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(1, 0, 0))
        assert ray.at(5) == Vector3(6, 2, 3)

    def test_zero_direction_rejected(self):
        with pytest.raises(ValueError):
            Ray(Vector3(0, 0, 0), Vector3(0, 0, 0))


class TestColor:

    def test_from_name(self):
        assert Color.from_name("black") == Color(0, 0, 0)
        assert Color.from_name("#ff8000") == Color(255, 128, 0)

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            Color.from_name("not-a-color")

    def test_coerce(self):
        assert Color.coerce((1, 2, 3)) == Color(1, 2, 3)
        assert Color.coerce("white") == Color.WHITE
        c = Color(4, 5, 6)
        assert Color.coerce(c) is c

    def test_component_product_is_normalized(self):
        orange = Color(255, 128, 0)
        assert orange * Color.WHITE == orange
        assert orange * Color.BLACK == Color.BLACK
        half = Color(127.5, 127.5, 127.5)
        assert (Color(200, 100, 50) * half).to_rgb() == (100, 50, 25)

    def test_scalar_product_and_sum(self):
        assert Color(10, 20, 30) * 2 == Color(20, 40, 60)
        assert 0.5 * Color(10, 20, 30) == Color(5, 10, 15)
        assert Color(1, 2, 3) + Color(4, 5, 6) == Color(5, 7, 9)

    def test_output_clamps_channels(self):
        assert Color(300, -5, 12.7).to_rgb() == (255, 0, 12)
        assert Color(300, 0, 0).to_hex() == "#ff0000"


class TestReflectRefract:

    def test_mirror_reflection(self):
        d = Vector3(1, -1, 0).normalize()
        r = reflect(d, Vector3(0, 1, 0))
        assert r.is_close(Vector3(1, 1, 0).normalize())
        assert r.length() == pytest.approx(1.0, abs=1e-9)

    def test_refraction_obeys_snell(self):
        sin_i = math.sin(math.radians(30))
        cos_i = math.cos(math.radians(30))
        d = Vector3(sin_i, 0, -cos_i)
        t = refract(d, Vector3(0, 0, 1), cos_i, 1.0 / 1.5)
        assert t.length() == pytest.approx(1.0, abs=1e-9)
        assert t.x == pytest.approx(sin_i / 1.5)
        assert t.z < 0

    def test_no_transmission_beyond_critical_angle(self):
        cos_i = math.cos(math.radians(60))
        d = Vector3(math.sin(math.radians(60)), 0, -cos_i)
        assert refract(d, Vector3(0, 0, 1), cos_i, 1.5) is None
