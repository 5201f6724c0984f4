# materials/refractive.py
from materials.material import Material, MaterialKind


class Refractive(Material):
    """
    Dielectric such as glass or water. Light is split between a mirror
    reflection and a transmitted ray according to the Fresnel equations.
    """
    kind = MaterialKind.REFRACTIVE

    def __init__(self, refraction_index: float, transparency: float = 1.0):
        refraction_index = float(refraction_index)
        if refraction_index <= 0:
            raise ValueError(f"refraction_index must be positive, got {refraction_index}")
        self.refraction_index = refraction_index
        self.transparency = self._unit_interval("transparency", transparency)
