# scenes.py
import logging
import random
from typing import Dict, Optional, Tuple
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_vector
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColourPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)

UP = Vector3(0.0, 1.0, 0.0)

#------------------------------------------------------------------------

def three_spheres() -> Tuple[HittableList, Dict]:
    """
    Diffuse, hollow glass and metal spheres resting on a large yellow ground.
    """
    ground = Lambertian(ColourPresets.YELLOW_GROUND)
    centre = Lambertian(ColourPresets.BLUE)
    glass = DielectricPresets.glass()
    metal = Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.0)

    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, ground))
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, centre))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, glass))
    # Same material, negative radius: the inner wall of a glass bubble.
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), -0.45, glass))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, metal))

    camera_params = {
        "look_from": Vector3(-2.0, 2.0, 1.0),
        "look_at": Vector3(0.0, 0.0, -1.0),
        "vup": UP,
        "vfov": 20.0,
    }
    logger.info("Built three_spheres scene with %d objects", len(world))
    return world, camera_params

#------------------------------------------------------------------------

def material_showcase() -> Tuple[HittableList, Dict]:
    """
    A row of spheres, one per metal and dielectric preset.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(ColourPresets.GROUND)))

    presets = [
        MetalPresets.gold(),
        MetalPresets.silver(),
        MetalPresets.copper(),
        MetalPresets.brushed_metal(),
        DielectricPresets.glass(),
        DielectricPresets.water(),
        DielectricPresets.diamond(),
        Lambertian(ColourPresets.RED),
    ]
    spacing = 1.1
    offset = (len(presets) - 1) * spacing / 2.0
    for index, material in enumerate(presets):
        world.add(Sphere(Vector3(index * spacing - offset, 0.5, 0.0), 0.5, material))

    camera_params = {
        "look_from": Vector3(0.0, 2.0, 9.0),
        "look_at": Vector3(0.0, 0.5, 0.0),
        "vup": UP,
        "vfov": 40.0,
    }
    logger.info("Built material_showcase scene with %d objects", len(world))
    return world, camera_params

#------------------------------------------------------------------------

def random_scene(rng: Optional[random.Random] = None) -> Tuple[HittableList, Dict]:
    """
    The classic cover scene: a grid of small random spheres around three large
    ones. The layout is drawn from rng, so a seeded generator gives the same
    scene every time.
    """
    if rng is None:
        rng = random.Random()

    world = HittableList()
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(ColourPresets.GROUND)))

    glass = DielectricPresets.glass()
    clearing = Vector3(4.0, 0.2, 0.0)
    counts = {"diffuse": 0, "metal": 0, "glass": 0}

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
                counts["diffuse"] += 1
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                fuzz = rng.uniform(0.0, 0.5)
                material = Metal(albedo, fuzz)
                counts["metal"] += 1
            else:
                material = glass
                counts["glass"] += 1
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, glass))
    world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(ColourPresets.BROWN)))
    world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera_params = {
        "look_from": Vector3(13.0, 2.0, 3.0),
        "look_at": Vector3(0.0, 0.0, 0.0),
        "vup": UP,
        "vfov": 20.0,
        "aperture": 0.1,
        "focus_dist": 10.0,
    }
    logger.info("Built random_scene with %d objects (%d diffuse, %d metal, %d glass)",
                len(world), counts["diffuse"], counts["metal"], counts["glass"])
    return world, camera_params

#------------------------------------------------------------------------

SCENES = {
    "three": lambda rng: three_spheres(),
    "showcase": lambda rng: material_showcase(),
    "random": random_scene,
}

def build_scene(name: str, rng: Optional[random.Random] = None) -> Tuple[HittableList, Dict]:
    """Look up a scene builder by name and run it."""
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"unknown scene {name!r}, choose from {sorted(SCENES)}") from None
    return builder(rng)
