# renderer/shading.py
import math
from typing import Optional, Sequence

from numba import njit

from core.color import Color, MAX_CHANNEL
from core.ray import Ray
from core.utils import reflect, refract
from core.vector import Vector3
from geometry.hittable import Hittable
from geometry.world import closest_intersection
from lights.light import Light
from materials.material import Material, MaterialKind
from renderer.errors import UnknownMaterialError

# Offset along the surface normal for secondary ray origins.
SHADOW_BIAS = 1e-13
MAX_RECURSION_DEPTH = 10


@njit(cache=False)
def fresnel(i_dot_n, refraction_index):
    """
    Fraction of light reflected at a dielectric boundary.

    i_dot_n is the dot product of the unit incident direction with the
    outward surface normal; a positive value means the ray is leaving the
    medium. Returns exactly 1.0 on total internal reflection.
    """
    eta_i = 1.0
    eta_t = refraction_index
    if i_dot_n > 0.0:
        eta_i = eta_t
        eta_t = 1.0

    cos_i = abs(i_dot_n)
    if cos_i == 0.0:
        # grazing incidence reflects everything
        return 1.0
    sin_t = eta_i / eta_t * math.sqrt(max(1.0 - cos_i * cos_i, 0.0))
    if sin_t > 1.0:
        return 1.0

    cos_t = math.sqrt(max(1.0 - sin_t * sin_t, 0.0))
    r_s = ((eta_t * cos_i) - (eta_i * cos_t)) / ((eta_t * cos_i) + (eta_i * cos_t))
    r_p = ((eta_i * cos_i) - (eta_t * cos_t)) / ((eta_i * cos_i) + (eta_t * cos_t))
    return (r_s * r_s + r_p * r_p) / 2.0


class ShadingEngine:
    """
    Whitted-style recursive shading over a fixed set of surfaces and lights.

    The engine holds no mutable state, so one instance is shared by every
    render worker.
    """
    def __init__(self, surfaces: Sequence[Hittable], lights: Sequence[Light] = (),
                 max_depth: int = MAX_RECURSION_DEPTH, shadow_bias: float = SHADOW_BIAS):
        self.surfaces = tuple(surfaces)
        self.lights = tuple(lights)
        self.max_depth = max_depth
        self.shadow_bias = shadow_bias

    @classmethod
    def for_scene(cls, scene) -> "ShadingEngine":
        return cls(scene.surfaces, scene.lights)

    def shade(self, ray: Ray, surface: Hittable, distance: float, depth: int = 1) -> Color:
        """
        Color seen along `ray`, which hits `surface` at `distance`.
        Returns black once `depth` exceeds the recursion limit.
        """
        if depth > self.max_depth:
            return Color.BLACK

        hit_point = ray.origin + ray.direction * distance
        surface_normal = surface.normal_at(hit_point)
        material = surface.material
        kind = material.kind if isinstance(material, Material) else None

        if kind is MaterialKind.DIFFUSE:
            return self.diffuse_color(surface, hit_point, surface_normal)
        if kind is MaterialKind.REFLECTIVE:
            color = self.diffuse_color(surface, hit_point, surface_normal)
            return self.reflective_color(color, surface, hit_point, surface_normal, ray, depth)
        if kind is MaterialKind.REFRACTIVE:
            color = surface.base_color_at(hit_point)
            return self.refractive_color(color, surface, hit_point, surface_normal, ray, depth)
        raise UnknownMaterialError(surface, material)

    def trace(self, ray: Ray, depth: int) -> Optional[Color]:
        """Shade whatever `ray` hits first, or None if it escapes the scene."""
        hit = closest_intersection(ray, self.surfaces)
        if hit is None:
            return None
        return self.shade(ray, hit.surface, hit.distance, depth)

    def diffuse_color(self, surface: Hittable, hit_point: Vector3, surface_normal: Vector3) -> Color:
        surface_color = surface.base_color_at(hit_point)
        if not self.lights:
            return surface_color

        albedo = surface.material.albedo
        fill_color = Color.BLACK
        for light in self.lights:
            direction_to_light = light.direction_from(hit_point).normalize()
            shadow_ray = Ray(hit_point + surface_normal * self.shadow_bias, direction_to_light)
            occluder = closest_intersection(shadow_ray, self.surfaces)

            lit = occluder is None or occluder.distance > light.distance_from(hit_point)
            light_intensity = light.intensity_at(hit_point) if lit else 0.0
            light_power = max(surface_normal.dot(direction_to_light), 0.0) * light_intensity
            light_reflected = albedo / math.pi
            light_color = Color(
                *(min(c * light_power * light_reflected, MAX_CHANNEL)
                  for c in (light.color.r, light.color.g, light.color.b))
            )
            fill_color += light_color * surface_color
        return fill_color

    def reflective_color(self, current_color: Color, surface: Hittable, hit_point: Vector3,
                         surface_normal: Vector3, ray: Ray, depth: int) -> Color:
        reflectivity = surface.material.reflectivity
        reflection_ray = Ray(
            hit_point + surface_normal * self.shadow_bias,
            reflect(ray.direction, surface_normal)
        )
        reflected = self.trace(reflection_ray, depth + 1)
        if reflected is None:
            return current_color
        return current_color * (1.0 - reflectivity) + reflected * reflectivity

    def refractive_color(self, current_color: Color, surface: Hittable, hit_point: Vector3,
                         surface_normal: Vector3, ray: Ray, depth: int) -> Color:
        material = surface.material
        kr = fresnel(ray.direction.dot(surface_normal), material.refraction_index)
        if kr >= 1.0:
            # Total internal reflection at the boundary contributes nothing
            return Color.BLACK

        refraction_color = Color.BLACK
        ref_n = surface_normal
        eta_i, eta_t = 1.0, material.refraction_index
        i_dot_n = ray.direction.dot(surface_normal)
        if i_dot_n < 0.0:
            # entering from outside
            i_dot_n = -i_dot_n
        else:
            # leaving the medium: flip the normal and swap the indices
            ref_n = -ref_n
            eta_i, eta_t = eta_t, eta_i

        transmitted = refract(ray.direction, ref_n, i_dot_n, eta_i / eta_t)
        if transmitted is not None:
            transmission_ray = Ray(hit_point - ref_n * self.shadow_bias, transmitted)
            refracted = self.trace(transmission_ray, depth + 1)
            if refracted is not None:
                refraction_color = refracted

        reflection_ray = Ray(
            hit_point + surface_normal * self.shadow_bias,
            reflect(ray.direction, surface_normal)
        )
        reflection_color = self.trace(reflection_ray, depth + 1)
        if reflection_color is None:
            reflection_color = Color.BLACK

        c = reflection_color * kr + refraction_color * (1.0 - kr) * material.transparency
        return current_color * c
