# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    The material may be shared with other primitives.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c

        # Tangent rays count as misses
        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Near root first so the visible surface wins
        for root in ((-b - sqrt_disc) / a, (-b + sqrt_disc) / a):
            if t_min < root < t_max:
                point = ray.point_at(root)
                normal = (point - self.center) / self.radius
                return HitRecord(point, normal, root, self.material)
        return None

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, material={self.material!r})"
