# renderer/raytracer.py
import logging
import math
import random
import sys
import threading
import time
from typing import Callable, Optional
import numpy as np
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Colour, Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.tone_mapping import gamma_quantize

logger = logging.getLogger(__name__)

# Rays start slightly off the surface they leave to avoid shadow acne.
T_MIN = 0.001
# Hard ceiling on bounces, whatever max_depth is configured.
MAX_DEPTH_LIMIT = 500

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

class RenderCancelled(Exception):
    """Raised by Renderer.render when its cancellation token is set."""

class CancellationToken:
    """
    Thread-safe flag polled by the renderer between pixels.
    """
    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

def sky_colour(ray: Ray) -> Colour:
    """
    Background gradient: white at the bottom blending to pale blue at the top,
    driven by the height of the unit direction.
    """
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_colour(ray: Ray, world: Hittable, depth: int, rng) -> Colour:
    """
    Colour carried back along a ray.

    Follows the ray through at most depth surface interactions, multiplying
    the attenuation of each one. A ray that escapes picks up the sky colour;
    absorption or running out of depth contributes black.
    """
    depth = min(depth, MAX_DEPTH_LIMIT)
    attenuation = WHITE
    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return attenuation * sky_colour(ray)

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return BLACK

        attenuation = attenuation * scattered.attenuation
        ray = scattered.ray
        depth -= 1
    return BLACK

def stderr_progress(remaining: int):
    """Default progress callback: a single status line rewritten in place."""
    print(f"\rScanlines remaining: {remaining} ", end="", file=sys.stderr, flush=True)
    if remaining == 0:
        print(file=sys.stderr, flush=True)

class Renderer:
    """
    Single-threaded path tracer driving the camera and integrator over every
    pixel.

    All randomness (pixel jitter, lens sampling, material scattering) comes
    from one random.Random seeded from `seed`, so equal seeds give equal
    images.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, seed: Optional[int] = None):
        if width < 2 or height < 2:
            raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        if max_depth > MAX_DEPTH_LIMIT:
            logger.warning("max_depth %d exceeds limit, using %d", max_depth, MAX_DEPTH_LIMIT)
            max_depth = MAX_DEPTH_LIMIT
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed

    def render(self, camera, world: Hittable,
               cancel_token: Optional[CancellationToken] = None,
               progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Returns a (height, width, 3) float64 buffer of summed sample colours,
        row 0 being the top of the image.

        Raises RenderCancelled if cancel_token is set while rendering.
        """
        rng = random.Random(self.seed)
        accumulated = np.zeros((self.height, self.width, 3), dtype=np.float64)
        start = time.perf_counter()
        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d",
                    self.width, self.height, self.samples_per_pixel, self.max_depth)

        for j in range(self.height - 1, -1, -1):
            row = accumulated[self.height - 1 - j]
            for i in range(self.width):
                if cancel_token is not None and cancel_token.cancelled:
                    raise RenderCancelled(f"render cancelled with {j + 1} scanlines remaining")
                colour = BLACK
                for _ in range(self.samples_per_pixel):
                    u = (i + rng.random()) / (self.width - 1)
                    v = (j + rng.random()) / (self.height - 1)
                    ray = camera.get_ray(u, v, rng)
                    colour = colour + ray_colour(ray, world, self.max_depth, rng)
                row[i] = (colour.x, colour.y, colour.z)
            if progress is not None:
                progress(j)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return accumulated

    def render_pixels(self, camera, world: Hittable,
                      cancel_token: Optional[CancellationToken] = None,
                      progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """Render and gamma-quantize to a (height, width, 3) uint8 image."""
        accumulated = self.render(camera, world, cancel_token=cancel_token, progress=progress)
        return gamma_quantize(accumulated, self.samples_per_pixel)
