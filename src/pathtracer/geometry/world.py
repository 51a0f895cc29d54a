# geometry/world.py
from typing import Iterator, List, Optional
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    An insertion-ordered list of Hittable objects, itself hittable.
    Objects are held by reference, so one sphere or material may appear in
    several lists.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, t_max)
            # Strictly closer only, so the earliest object wins a tie.
            if rec is not None and rec.t < closest_so_far:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
