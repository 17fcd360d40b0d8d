# camera/camera.py
import logging
import math
from core.vector import Vector3
from core.ray import Ray

logger = logging.getLogger(__name__)

class Camera:
    """
    Pinhole camera. The image plane is the rectangle spanned by `horizontal`
    and `vertical` from `lower_left_corner`; rays leave `origin` towards it.
    """
    def __init__(self, origin: Vector3, lower_left_corner: Vector3,
                 horizontal: Vector3, vertical: Vector3):
        self.origin = origin
        self.lower_left_corner = lower_left_corner
        self.horizontal = horizontal
        self.vertical = vertical

    @classmethod
    def default(cls) -> "Camera":
        """
        Camera at the origin looking down -z onto a 4x2 (2:1) viewport at z=-1.
        """
        return cls(
            origin=Vector3(0.0, 0.0, 0.0),
            lower_left_corner=Vector3(-2.0, -1.0, -1.0),
            horizontal=Vector3(4.0, 0.0, 0.0),
            vertical=Vector3(0.0, 2.0, 0.0),
        )

    @classmethod
    def look_from(cls, position: Vector3, yaw: float, pitch: float,
                  fov: float, aspect_ratio: float) -> "Camera":
        """
        Builds the image plane one unit in front of `position`.

        yaw and pitch are in radians (yaw=0, pitch=0 looks down -z); fov is the
        vertical field of view in radians.
        """
        global_up = Vector3(0, 1, 0)

        forward = Vector3(
            math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            -math.cos(yaw) * math.cos(pitch)
        ).normalized()

        # Degenerate when looking straight up or down
        right = forward.cross(global_up).normalized()
        up = right.cross(forward).normalized()

        viewport_height = 2.0 * math.tan(fov / 2)
        viewport_width = aspect_ratio * viewport_height

        horizontal = right * viewport_width
        vertical = up * viewport_height
        lower_left_corner = position + forward - horizontal * 0.5 - vertical * 0.5

        logger.debug("Camera at %r, forward %r, viewport %.3fx%.3f",
                     position, forward, viewport_width, viewport_height)
        return cls(position, lower_left_corner, horizontal, vertical)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Ray through the image-plane point (u, v); u, v in [0, 1] cover the
        viewport, values outside extrapolate the plane.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin.copy(), direction)
