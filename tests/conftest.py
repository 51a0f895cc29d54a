"""Pytest configuration and shared fixtures."""

import random

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal


class ScriptedRandom:
    """
    Stand-in for random.Random that hands out prepared values. Drawing more
    values than were scripted raises StopIteration, which lets a test assert
    that a code path draws nothing.
    """

    def __init__(self, uniforms=(), randoms=()):
        self._uniforms = iter(uniforms)
        self._randoms = iter(randoms)

    def uniform(self, a, b):
        return next(self._uniforms)

    def random(self):
        return next(self._randoms)


@pytest.fixture
def rng():
    """A seeded generator so sampling tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def small_world():
    """Ground plus one sphere of each material."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.8, 0.8, 0.0))))
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))))
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, Dielectric(1.5)))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.3)))
    return world


@pytest.fixture
def pinhole_camera():
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90.0, 2.0)
