# materials/lambertian.py
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material

class Lambertian(Material):
    """
    Ideal diffuse material. Never absorbs.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Vector3]:
        # Aim at a random point in the unit sphere tangent to the surface at rec.point.
        target = rec.point + rec.normal + random_in_unit_sphere(rng)
        scattered = Ray(rec.point.copy(), target - rec.point)
        return scattered, self.albedo.copy()

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
