# core/vector.py
import math
from typing import Iterator, Optional

import numpy as np
from numba import njit


def sqr(x: float) -> float:
    return x * x


def clamp(x, minimum, maximum):
    """
    Clamps x to the closed range [minimum, maximum].
    """
    if x < minimum:
        return minimum
    if x > maximum:
        return maximum
    return x


@njit
def srgb_to_linear(srgb_col: float) -> float:
    """
    Decodes a single sRGB-encoded channel into linear light.
    """
    if srgb_col <= 0.04045:
        return srgb_col / 12.92
    return ((srgb_col + 0.055) / 1.055) ** 2.4


@njit
def linear_to_srgb(linear_col: float) -> float:
    """
    Encodes a single linear-light channel with the sRGB transfer curve.
    """
    if linear_col <= 0.0031308:
        return linear_col * 12.92
    return 1.055 * linear_col ** (1.0 / 2.4) - 0.055


@njit
def schlick(cosine: float, refractive_index: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance at a dielectric boundary.
    """
    r0 = (1.0 - refractive_index) / (1.0 + refractive_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


class Vector3:
    """
    A 3D vector of floats, used both for points/directions (x, y, z) and for
    colors (r, g, b).

    Arithmetic returns new vectors; `normalize`, `set`, `+=` and `/=` mutate
    in place. Nothing guards against zero-length normalization or division by
    zero: those are caller preconditions.
    """
    # Keeps numpy scalars on the left of `*` from treating the vector as a sequence
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def forward(cls) -> "Vector3":
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def right(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def fill(cls, value: float) -> "Vector3":
        return cls(value, value, value)

    @classmethod
    def from_array(cls, values) -> "Vector3":
        """
        Builds a vector from any 3-element sequence or numpy array.
        """
        x, y, z = (float(c) for c in values)
        return cls(x, y, z)

    # Color aliases
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __getitem__(self, idx: int) -> float:
        return (self.x, self.y, self.z)[idx]

    def set(self, idx: int, value: float):
        if not -3 <= idx < 3:
            raise IndexError(f"Vector3 index out of range: {idx}")
        idx %= 3
        if idx == 0:
            self.x = value
        elif idx == 1:
            self.y = value
        else:
            self.z = value

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        # Element-wise (Hadamard) product, used for color attenuation.
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __itruediv__(self, t: float) -> "Vector3":
        self.x /= t
        self.y /= t
        self.z /= t
        return self

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self):
        """
        Scales this vector to unit length in place.
        """
        l = self.length()
        self.x /= l
        self.y /= l
        self.z /= l

    def normalized(self) -> "Vector3":
        return self / self.length()

    def reflect(self, normal: "Vector3") -> "Vector3":
        return reflect(self, normal)

    def refract(self, normal: "Vector3", ni_over_nt: float) -> Optional["Vector3"]:
        return refract(self, normal, ni_over_nt)

    def to_linear(self) -> "Vector3":
        """
        Converts an sRGB-encoded color to linear light, channel by channel.
        """
        return Vector3(srgb_to_linear(self.x), srgb_to_linear(self.y), srgb_to_linear(self.z))

    def to_srgb(self) -> "Vector3":
        """
        Converts a linear-light color to sRGB encoding, channel by channel.
        """
        return Vector3(linear_to_srgb(self.x), linear_to_srgb(self.y), linear_to_srgb(self.z))

    def to_array(self, dtype=np.float64) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Mirrors v about the unit normal n.
    """
    return v - n * (2.0 * v.dot(n))


def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Bends v through a surface with unit normal n following Snell's law.

    `ni_over_nt` is the ratio of the refractive index on the incoming side to
    the one on the transmitted side. Returns None when the discriminant is not
    positive, i.e. under total internal reflection; callers reflect instead.
    """
    uv = v.normalized()
    dt = uv.dot(n)
    discriminant = 1.0 - sqr(ni_over_nt) * (1.0 - sqr(dt))
    if discriminant > 0.0:
        return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)
    return None
