# camera/camera.py
import math
from typing import Optional
from pathtracer.core.vector import Point3, Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from one point toward another.

    With aperture 0 it behaves as a pinhole and get_ray draws no random
    numbers. Otherwise ray origins are spread over a lens disk and only the
    plane at focus_dist is sharp.
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: Optional[float] = None):
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist if focus_dist is not None else (look_from - look_at).length()
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.look_from - self.look_at).unit_vector()
        self.u = self.vup.cross(self.w).unit_vector()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        # Scale by focus distance so the focal plane is the image plane
        self.horizontal = self.u * (viewport_width * self.focus_dist)
        self.vertical = self.v * (viewport_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Returns the ray through image-plane coordinates (s, t), both in [0, 1]
        with t measured from the bottom edge.
        """
        if self.lens_radius <= 0:
            return Ray(self.origin,
                       self.lower_left_corner + self.horizontal * s + self.vertical * t - self.origin)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)
