# core/utils.py
import math
from typing import Optional

from core.vector import Vector3


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(v: Vector3, n: Vector3, i_dot_n: float, eta: float) -> Optional[Vector3]:
    """
    Bends v through a boundary with normal n (pointing against v) and
    relative index eta = eta_i / eta_t. i_dot_n is |v . n|.
    Returns None when no transmitted direction exists.
    """
    k = 1.0 - eta * eta * (1.0 - i_dot_n * i_dot_n)
    if k <= 0.0:
        return None
    return (v + n * i_dot_n) * eta - n * math.sqrt(k)
