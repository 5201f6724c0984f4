# materials/diffuse.py
from materials.material import Material, MaterialKind


class Diffuse(Material):
    """
    Lambertian diffuse material. The albedo is divided by pi when shading to
    normalize the BRDF.
    """
    kind = MaterialKind.DIFFUSE

    def __init__(self, albedo: float):
        self.albedo = self._unit_interval("albedo", albedo)
