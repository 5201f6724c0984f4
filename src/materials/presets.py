# materials/presets.py
from materials.diffuse import Diffuse
from materials.reflective import Reflective
from materials.refractive import Refractive


class DiffusePresets:
    """Common diffuse finishes."""

    @staticmethod
    def matte() -> Diffuse:
        return Diffuse(albedo=0.18)

    @staticmethod
    def chalk() -> Diffuse:
        return Diffuse(albedo=0.8)


class ReflectivePresets:
    """Mirror-like finishes."""

    @staticmethod
    def mirror() -> Reflective:
        return Reflective(albedo=0.0, reflectivity=1.0)

    @staticmethod
    def polished() -> Reflective:
        return Reflective(albedo=0.18, reflectivity=0.7)

    @staticmethod
    def glossy() -> Reflective:
        return Reflective(albedo=0.5, reflectivity=0.3)


class RefractivePresets:
    """Predefined dielectrics with realistic refractive indices."""

    @staticmethod
    def glass() -> Refractive:
        return Refractive(1.52)  # Common glass

    @staticmethod
    def water() -> Refractive:
        return Refractive(1.33)

    @staticmethod
    def diamond() -> Refractive:
        return Refractive(2.42)

    @staticmethod
    def frosted_glass() -> Refractive:
        return Refractive(1.52, transparency=0.6)


PRESETS = {
    "matte": DiffusePresets.matte,
    "chalk": DiffusePresets.chalk,
    "mirror": ReflectivePresets.mirror,
    "polished": ReflectivePresets.polished,
    "glossy": ReflectivePresets.glossy,
    "glass": RefractivePresets.glass,
    "water": RefractivePresets.water,
    "diamond": RefractivePresets.diamond,
    "frosted_glass": RefractivePresets.frosted_glass,
}
