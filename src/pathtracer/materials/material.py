# materials/material.py
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord

class ScatteredRay:
    """
    The outcome of a scatter event: the ray leaving the surface and the
    colour it is attenuated by.
    """
    __slots__ = ("attenuation", "ray")

    def __init__(self, attenuation: Vector3, ray: Ray):
        self.attenuation = attenuation
        self.ray = ray

    def __repr__(self) -> str:
        return f"ScatteredRay({self.attenuation!r}, {self.ray!r})"

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials hold no mutable state and may be shared between objects.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatteredRay]:
        """
        Computes the scattered ray and attenuation.
        Returns None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

class EmptyMaterial(Material):
    """
    Absorbs every ray. Used for geometry created without a material.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatteredRay]:
        return None
