# geometry/world.py
from typing import Iterable, Iterator, List, Optional
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

class HittableArray(Hittable):
    """
    An aggregate of Hittable objects searched by brute-force linear scan.
    Element order only affects speed, never which hit is returned.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
