from core.vector import Vector3, reflect, refract, schlick
from core.ray import Ray
from core.utils import make_rng, random_in_unit_circle, random_in_unit_sphere

__all__ = [
    "Vector3",
    "Ray",
    "reflect",
    "refract",
    "schlick",
    "make_rng",
    "random_in_unit_sphere",
    "random_in_unit_circle",
]
