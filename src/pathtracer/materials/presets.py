# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def aluminium() -> Metal:
        return Metal(Vector3(0.91, 0.92, 0.92), fuzz=0.08)

    @staticmethod
    def chrome() -> Metal:
        return Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with their refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def ice() -> Dielectric:
        return Dielectric(1.31)

    @staticmethod
    def sapphire() -> Dielectric:
        return Dielectric(1.77)

class ColourPresets:
    """Common albedo colours."""

    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    BLUE = Vector3(0.1, 0.2, 0.5)
    GREEN = Vector3(0.2, 0.8, 0.2)
    GROUND = Vector3(0.5, 0.5, 0.5)
    YELLOW_GROUND = Vector3(0.8, 0.8, 0.0)
    BROWN = Vector3(0.4, 0.2, 0.1)

    @staticmethod
    def matte(colour: Vector3) -> Lambertian:
        """Create a matte material with the given colour."""
        return Lambertian(colour)
