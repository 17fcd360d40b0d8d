"""Unit tests for the Ray type."""

from core.ray import Ray
from core.vector import Vector3


class TestRay:
    def test_point_at(self):
        ray = Ray(Vector3(1.0, 2.0, 3.0), Vector3(0.0, 0.0, -2.0))
        assert ray.point_at(0.0) == Vector3(1.0, 2.0, 3.0)
        assert ray.point_at(1.5) == Vector3(1.0, 2.0, 0.0)
        assert ray.point_at(-1.0) == Vector3(1.0, 2.0, 5.0)

    def test_at_alias(self):
        ray = Ray(Vector3.zero(), Vector3(1.0, 1.0, 1.0))
        assert ray.at(2.0) == ray.point_at(2.0)

    def test_direction_not_normalized(self):
        direction = Vector3(0.0, 3.0, 4.0)
        ray = Ray(Vector3.zero(), direction)
        assert ray.direction is direction
        assert ray.direction.length() == 5.0
