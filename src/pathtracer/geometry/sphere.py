# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.material import EmptyMaterial

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the outward normal,
    which is how hollow glass shells are modelled.
    """
    def __init__(self, center: Vector3, radius: float, material=None):
        self.center = center
        self.radius = radius
        self.material = material if material is not None else EmptyMaterial()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        outward_normal = (ray.at(root) - self.center) / self.radius
        return HitRecord.from_ray(root, ray, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {type(self.material).__name__})"
