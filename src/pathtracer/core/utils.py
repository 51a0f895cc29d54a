# core/utils.py
#
# Sampling helpers. Every function takes the generator explicitly so a render
# seeded with random.Random(seed) is reproducible.
from pathtracer.core.vector import Vector3

def random_vector(rng, minimum: float = 0.0, maximum: float = 1.0) -> Vector3:
    """
    Returns a vector with each component drawn uniformly from [minimum, maximum).
    """
    return Vector3(rng.uniform(minimum, maximum),
                   rng.uniform(minimum, maximum),
                   rng.uniform(minimum, maximum))

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).unit_vector()

def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in the z=0 unit disk, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.length_squared() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))
