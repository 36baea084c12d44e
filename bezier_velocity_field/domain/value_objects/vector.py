"""3차원 벡터 값 객체."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.vector_math import normalize


@dataclass(frozen=True)
class Vector3:
    """불변 3차원 벡터.

    성분은 float 로 보관하고, 연산은 as_array() 로 얻은
    numpy 배열 위에서 수행한다.

    Args:
        x: X 성분.
        y: Y 성분.
        z: Z 성분.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        """영벡터를 반환한다."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Vector3:
        """성분이 3개인 배열로부터 벡터를 생성한다.

        Raises:
            ValueError: 성분 개수가 3이 아닐 때.
        """
        arr = np.asarray(values, dtype=np.float64).ravel()
        if arr.size != 3:
            raise ValueError(
                f'Vector3 requires exactly 3 components, got {arr.size}'
            )
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector3:
        return cls.from_array(list(values))

    def as_array(self) -> npt.NDArray[np.float64]:
        return np.array((self.x, self.y, self.z), dtype=np.float64)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3.from_array(self.as_array() + other.as_array())

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3.from_array(self.as_array() - other.as_array())

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3.from_array(self.as_array() * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3.from_array(-self.as_array())

    def scale(self, other: Vector3) -> Vector3:
        """성분별 곱을 반환한다."""
        return Vector3.from_array(self.as_array() * other.as_array())

    def dot(self, other: Vector3) -> float:
        return float(np.dot(self.as_array(), other.as_array()))

    def cross(self, other: Vector3) -> Vector3:
        return Vector3.from_array(np.cross(self.as_array(), other.as_array()))

    @property
    def magnitude(self) -> float:
        """벡터 길이."""
        return float(np.linalg.norm(self.as_array()))

    def normalized(self) -> Vector3:
        """단위 벡터. 길이가 NORMALIZE_EPSILON 이하이면 영벡터."""
        return Vector3.from_array(normalize(self.as_array()))

    def distance_to(self, other: Vector3) -> float:
        return float(np.linalg.norm(self.as_array() - other.as_array()))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def is_close(self, other: Vector3, abs_tol: float = 1e-9) -> bool:
        """성분별로 abs_tol 이내인지 비교한다."""
        return bool(np.allclose(
            self.as_array(), other.as_array(), rtol=0.0, atol=abs_tol,
        ))
