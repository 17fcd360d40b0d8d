# geometry/hittable.py
from typing import TYPE_CHECKING, Optional
from core.vector import Vector3
from core.ray import Ray

if TYPE_CHECKING:
    from materials.material import Material

class HitRecord:
    """
    Records details of a ray-object intersection.

    The normal is the surface's outward unit normal. It is not flipped to face
    the incoming ray; materials that care about orientation check the sign of
    dot(ray.direction, normal) themselves.
    """
    def __init__(self, point: Vector3, normal: Vector3, t: float,
                 material: "Material"):
        self.point = point        # Intersection point
        self.normal = normal      # Outward surface normal at the point
        self.t = t                # Ray parameter at intersection
        self.material = material  # Shared with the primitive, not copied

    @property
    def p(self) -> Vector3:
        return self.point

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, point={self.point!r}, "
                f"normal={self.normal!r}, material={self.material!r})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the nearest intersection with t strictly inside (t_min, t_max),
        or None when the ray misses.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
