"""numpy 기반 3차원 벡터 연산.

점과 벡터는 (3,) 또는 (N, 3) float64 배열로 다룬다.
Vector3 값 객체와 커브/조향/리본 계산이 모두 이 함수들을 공유한다.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# 이 값 이하 길이의 벡터는 정규화 시 영벡터로 취급한다.
NORMALIZE_EPSILON = 1e-5


def as_points(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """임의의 점 목록을 (N, 3) float64 배열로 변환한다."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 3), dtype=np.float64)
    return arr.reshape(-1, 3)


def norms(vectors: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """마지막 축 기준 유클리드 길이."""
    return np.linalg.norm(np.asarray(vectors, dtype=np.float64), axis=-1)


def normalize(vectors: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """마지막 축 기준으로 정규화한다.

    길이가 NORMALIZE_EPSILON 이하인 벡터는 NaN 대신 영벡터가 된다.
    (3,) 와 (N, 3) 입력을 모두 받는다.
    """
    arr = np.asarray(vectors, dtype=np.float64)
    length = np.linalg.norm(arr, axis=-1, keepdims=True)
    safe = length > NORMALIZE_EPSILON
    out = np.zeros_like(arr)
    np.divide(arr, length, out=out, where=safe)
    return out
