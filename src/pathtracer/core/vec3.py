"""Three-component vector type used for points, directions and colors.

``Vec3`` wraps a float64 NumPy array of length 3. Values are treated as
immutable: every operator returns a new vector. The aliases ``Point3`` and
``Color`` carry naming intent only and have no behavioral difference.

Division follows IEEE semantics, so normalizing a zero-length vector yields
NaN components (NumPy reports a ``RuntimeWarning``) instead of raising.

Example:
    >>> from pathtracer.core.vec3 import Vec3
    >>> v = Vec3(3.0, 4.0, 0.0)
    >>> v.length()
    5.0
    >>> tuple(v.unit_vector())
    (0.6, 0.8, 0.0)
"""

from __future__ import annotations

import numbers
from collections.abc import Iterator
from typing import Union

import numpy as np
import numpy.typing as npt

# Components smaller than this in magnitude count as zero
NEAR_ZERO_EPSILON = 1e-8


class Vec3:
    """A 3D vector backed by a float64 NumPy array.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    __slots__ = ("_data",)

    # Make NumPy scalars on the left-hand side defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._data = np.array((x, y, z), dtype=np.float64)

    @classmethod
    def from_array(cls, arr: npt.ArrayLike) -> Vec3:
        """Create a vector from any array-like of length 3."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64).reshape(3)
        return v

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return a copy of the components as a NumPy array."""
        return self._data.copy()

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        # Vec3 * Vec3 is the componentwise (Hadamard) product used for colors
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        if isinstance(other, numbers.Real):
            return Vec3.from_array(self._data * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        return self.__mul__(other)

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, numbers.Real):
            return NotImplemented
        return Vec3.from_array(self._data / np.float64(t))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    # =========================================================================
    # Geometry
    # =========================================================================

    def dot(self, other: Vec3) -> float:
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        return Vec3.from_array(np.cross(self._data, other._data))

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return float(np.sqrt(self.length_squared()))

    def unit_vector(self) -> Vec3:
        """Return ``self / self.length()``.

        A zero-length vector is not special-cased: the result has NaN
        components.
        """
        return self / self.length()

    def near_zero(self) -> bool:
        """Check whether every component is below ``NEAR_ZERO_EPSILON`` in magnitude."""
        return bool(np.all(np.abs(self._data) < NEAR_ZERO_EPSILON))


# Naming aliases; no behavioral distinction
Point3 = Vec3
Color = Vec3
