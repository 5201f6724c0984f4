# materials/reflective.py
from materials.material import Material, MaterialKind


class Reflective(Material):
    """
    Diffuse base blended with a perfect mirror reflection.
    reflectivity = 1.0 is a pure mirror, 0.0 is plain diffuse.
    """
    kind = MaterialKind.REFLECTIVE

    def __init__(self, albedo: float, reflectivity: float):
        self.albedo = self._unit_interval("albedo", albedo)
        self.reflectivity = self._unit_interval("reflectivity", reflectivity)
