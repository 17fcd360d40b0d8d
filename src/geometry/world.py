# src/geometry/world.py
import logging
from typing import Iterable, Iterator, List, Optional
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    An ordered collection of Hittable objects tested by linear scan.
    Lists can be nested, since a HittableList is itself Hittable.
    """
    def __init__(self, items: Optional[Iterable[Hittable]] = None):
        self.items: List[Hittable] = list(items) if items is not None else []

    def add(self, obj: Hittable):
        self.items.append(obj)
        logger.debug("Added %r (%d objects in scene)", obj, len(self.items))

    def clear(self):
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.items)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.items:
            # Later objects can only replace the result with a strictly nearer hit
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
