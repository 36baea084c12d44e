"""인메모리 파티클 버퍼 구현체."""

from __future__ import annotations

import logging
import threading

import numpy as np
import numpy.typing as npt

from bezier_velocity_field.domain.curve_math import CurveEvaluator
from bezier_velocity_field.usecase.ports.particle_system import ParticleSystem

logger = logging.getLogger(__name__)


class InMemoryParticleSystem(ParticleSystem):
    """ParticleSystem의 numpy 배열 구현체.

    위치는 월드 좌표 (N, 3) float64 배열로 보관한다.

    Args:
        positions: 초기 파티클 위치. None이면 빈 버퍼.
    """

    def __init__(self, positions: npt.ArrayLike | None = None) -> None:
        self._lock = threading.Lock()
        if positions is None:
            self._positions = np.empty((0, 3), dtype=np.float64)
        else:
            self._positions = _as_positions(positions)

    @property
    def particle_count(self) -> int:
        with self._lock:
            return int(self._positions.shape[0])

    def get_positions(self) -> npt.NDArray[np.float64]:
        with self._lock:
            return self._positions.copy()

    def set_positions(self, positions: npt.NDArray[np.float64]) -> None:
        new = _as_positions(positions)
        with self._lock:
            if new.shape != self._positions.shape:
                raise ValueError(
                    f"positions shape {new.shape} does not match "
                    f"particle buffer {self._positions.shape}"
                )
            self._positions = new

    def emit(self, positions: npt.ArrayLike) -> int:
        """파티클을 추가한다.

        Returns:
            추가된 파티클 수.
        """
        new = _as_positions(positions)
        with self._lock:
            self._positions = np.vstack([self._positions, new])
        return int(new.shape[0])

    def emit_along_curve(
        self,
        evaluator: CurveEvaluator,
        count: int,
        spread: float = 0.0,
        seed: int | None = None,
    ) -> int:
        """커브 위 임의 파라미터에 파티클을 뿌린다.

        Args:
            evaluator: 커브 평가기.
            count: 생성할 파티클 수.
            spread: 각 축 방향 균등 분포 흔들림 폭.
            seed: 난수 시드.

        Returns:
            추가된 파티클 수.
        """
        rng = np.random.default_rng(seed)
        ts = rng.uniform(0.0, 1.0, size=count)
        points = evaluator.positions_at(ts)
        if spread > 0.0:
            points += rng.uniform(-spread, spread, size=points.shape)

        logger.debug("Emitting %d particles along curve", count)
        return self.emit(points)

    def clear(self) -> None:
        with self._lock:
            self._positions = np.empty((0, 3), dtype=np.float64)


def _as_positions(values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 3), dtype=np.float64)
    return arr.reshape(-1, 3)
