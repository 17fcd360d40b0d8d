# src/materials/dielectric.py
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3, reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear glass-like material that refracts or reflects, weighted by
    Schlick's Fresnel approximation. Never absorbs.
    """
    def __init__(self, refractive_index: float):
        if refractive_index <= 0:
            raise ValueError(f"refractive_index must be positive, got {refractive_index}")
        self.refractive_index = refractive_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Vector3]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        direction = ray_in.direction
        d_dot_n = direction.dot(rec.normal)

        # Sphere normals point outward, so a positive dot means we are leaving the medium
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.refractive_index
            cosine = self.refractive_index * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.refractive_index
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is not None and rng.random() >= schlick(cosine, self.refractive_index):
            return Ray(rec.point.copy(), refracted), attenuation

        # Total internal reflection, or the Fresnel coin flip chose reflection
        return Ray(rec.point.copy(), reflect(direction, rec.normal)), attenuation

    def __repr__(self) -> str:
        return f"Dielectric(refractive_index={self.refractive_index})"
