# materials/lambertian.py

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatteredRay

class Lambertian(Material):
    """
    Lambertian diffuse material with a solid albedo.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatteredRay:
        # Pick a random scatter direction by adding a random unit vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatteredRay(self.albedo, Ray(rec.p, scatter_direction))

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
