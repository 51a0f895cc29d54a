# materials/dielectric.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatteredRay

class Dielectric(Material):
    """
    Clear refractive material such as glass or water. Never absorbs; each
    hit either reflects or refracts, chosen by Schlick's approximation.
    """
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatteredRay:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.unit_vector()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection does not consume a random draw.
        if refraction_ratio * sin_theta > 1.0:
            direction = reflect(unit_direction, rec.normal)
        elif rng.random() < schlick(cos_theta, refraction_ratio):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return ScatteredRay(attenuation, Ray(rec.p, direction))

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index})"

def refract(unit_v: Vector3, n: Vector3, refraction_ratio: float) -> Vector3:
    """
    Snell's law split into components perpendicular and parallel to n.
    unit_v must be a unit vector on the opposite side of n.
    """
    cos_theta = min(-unit_v.dot(n), 1.0)
    r_out_perp = (unit_v + n * cos_theta) * refraction_ratio
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, refraction_ratio: float) -> float:
    """
    Schlick's approximation of the reflectance at a dielectric boundary.
    """
    r0 = (1.0 - refraction_ratio) / (1.0 + refraction_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
