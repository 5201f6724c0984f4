# materials/material.py
from enum import Enum


class MaterialKind(Enum):
    DIFFUSE = "diffuse"
    REFLECTIVE = "reflective"
    REFRACTIVE = "refractive"


class Material:
    """
    Abstract material class. Subclasses set `kind`, which the shading engine
    dispatches on, and validate their own parameters.
    """
    kind: MaterialKind = None

    @staticmethod
    def _unit_interval(name: str, value: float) -> float:
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be in [0, 1], got {value}")
        return value

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v}" for k, v in vars(self).items())
        return f"{self.__class__.__name__}({params})"
