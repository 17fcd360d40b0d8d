# renderer/scene.py
import logging

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import DielectricPresets

logger = logging.getLogger(__name__)


def three_spheres_scene() -> HittableList:
    """
    A diffuse sphere flanked by metal and hollow glass spheres, resting on a
    large ground sphere. Framed by Camera.default().

    The hollow glass is a sphere with a negative-radius sphere inside it: the
    inner normals point inward, so the shell has walls of finite thickness.
    Both share one Dielectric instance.
    """
    glass = DielectricPresets.glass()
    world = HittableList()
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Vector3(0.8, 0.8, 0.0))))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), roughness=0.3)))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, glass))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), -0.45, glass))
    logger.debug("Built three-spheres scene with %d objects", len(world))
    return world
