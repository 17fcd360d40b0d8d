# materials/metal.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3, reflect
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Mirror-like material. Roughness perturbs the reflected direction and is
    expected in [0, 1], but is not clamped.
    """
    def __init__(self, albedo: Vector3, roughness: float = 0.0):
        self.albedo = albedo
        self.roughness = roughness

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalized(), rec.normal)
        scattered = Ray(rec.point.copy(), reflected + random_in_unit_sphere(rng) * self.roughness)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo.copy()

        return None  # Fuzzed below the surface: absorbed

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, roughness={self.roughness})"
