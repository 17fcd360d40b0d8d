# renderer/path.py
from typing import Optional

from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from renderer.settings import TraceSettings

SKY_HORIZON = Vector3(1.0, 1.0, 1.0)
SKY_ZENITH = Vector3(0.5, 0.7, 1.0)

_DEFAULT_SETTINGS = TraceSettings()


def sky_color(ray: Ray) -> Vector3:
    """
    Background seen by rays that escape the scene: a vertical blend from
    white at the horizon to light blue straight up.
    """
    unit_direction = ray.direction.normalized()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON * (1.0 - t) + SKY_ZENITH * t


def ray_color(ray: Ray, world: Hittable, rng,
              settings: Optional[TraceSettings] = None) -> Vector3:
    """
    Estimates the linear radiance arriving along `ray` by following one random path.

    Each bounce multiplies the path throughput by the material's attenuation.
    The path ends on a miss (sky), on absorption (black) or when it hits a
    surface after `settings.max_depth` scatter events already happened (black).
    """
    if settings is None:
        settings = _DEFAULT_SETTINGS

    throughput = Vector3(1.0, 1.0, 1.0)
    depth = 0
    while True:
        rec = world.hit(ray, settings.t_min, settings.t_max)
        if rec is None:
            return throughput * sky_color(ray)
        if depth >= settings.max_depth:
            return Vector3(0.0, 0.0, 0.0)

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return Vector3(0.0, 0.0, 0.0)

        ray, attenuation = scattered
        throughput = throughput * attenuation
        depth += 1
