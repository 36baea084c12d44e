"""파티클 시스템 포트 인터페이스.

호스트 파티클 시스템의 위치 버퍼 접근을 추상화한다.
"""

from abc import ABC, abstractmethod

import numpy as np
import numpy.typing as npt


class ParticleSystem(ABC):
    """살아있는 파티클 위치 버퍼 인터페이스."""

    @property
    @abstractmethod
    def particle_count(self) -> int:
        """살아있는 파티클 수."""

    @abstractmethod
    def get_positions(self) -> npt.NDArray[np.float64]:
        """파티클 위치를 (N, 3) 배열로 반환한다 (월드 좌표)."""

    @abstractmethod
    def set_positions(self, positions: npt.NDArray[np.float64]) -> None:
        """파티클 위치를 갱신한다.

        Args:
            positions: get_positions() 와 같은 shape 의 위치 배열.
        """
