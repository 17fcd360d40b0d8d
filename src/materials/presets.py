# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials with realistic properties."""
    
    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), roughness=0.1)
    
    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88), roughness=0.05)
    
    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), roughness=0.1)
    
    @staticmethod
    def chrome() -> Metal:
        return Metal(Vector3(0.9, 0.9, 0.9), roughness=0.0)
    
    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), roughness=0.3)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""
    
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

class ColorPresets:
    """
    Common albedo colors, given in sRGB and returned in linear space.
    Each call builds a new vector, since Vector3 is mutable.
    """
    _SRGB = {
        "red": (0.9, 0.2, 0.2),
        "orange": (0.9, 0.6, 0.1),
        "yellow": (0.8, 0.8, 0.0),
        "blue": (0.1, 0.2, 0.5),
        "green": (0.2, 0.8, 0.2),
        "white": (0.9, 0.9, 0.9),
        "gray": (0.5, 0.5, 0.5),
    }

    @classmethod
    def names(cls):
        return sorted(cls._SRGB)

    @classmethod
    def linear(cls, name: str) -> Vector3:
        """Linear-space albedo for a named sRGB color."""
        try:
            srgb = cls._SRGB[name]
        except KeyError:
            raise ValueError(f"Unknown color preset {name!r}; expected one of {cls.names()}") from None
        return Vector3(*srgb).to_linear()

    @classmethod
    def matte(cls, name: str) -> Lambertian:
        """Create a matte material with the named color."""
        return Lambertian(cls.linear(name))
