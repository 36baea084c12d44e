"""설정 포트 인터페이스.

애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bezier_velocity_field.domain.enums import NearestFallback
from bezier_velocity_field.domain.magnitude_curve import (
    DEFAULT_MAGNITUDE_CURVE,
    MagnitudeCurve,
)
from bezier_velocity_field.domain.ribbon import RibbonSettings
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.vector import Vector3


@dataclass(frozen=True)
class CurveConfig:
    """커브 제어점 설정.

    Args:
        control_points: 시작/끝 앵커와 탄젠트 핸들.
    """

    control_points: ControlPoints = field(default_factory=ControlPoints)


@dataclass(frozen=True)
class FieldConfig:
    """속도장 생성 설정.

    Args:
        resolution: 노드 개수 (권장 5~100).
        search_radius: 조향 탐색 반경 (권장 0.1~100).
        magnitude_curve: 크기 보정 커브.
    """

    resolution: int = 24
    search_radius: float = 5.0
    magnitude_curve: MagnitudeCurve = DEFAULT_MAGNITUDE_CURVE


@dataclass(frozen=True)
class SteeringConfig:
    """파티클 조향 설정.

    Args:
        speed_on_curve: 커브를 따라 이동하는 속도 배율.
        force_to_nearest_curve: 최근접 노드로 끌어당기는 힘.
        velocity_scale: 속도에 곱할 호스트 계층 스케일.
        fallback: 반경 안에 노드가 없을 때의 동작.
    """

    speed_on_curve: float = 1.0
    force_to_nearest_curve: float = 0.0
    velocity_scale: Vector3 = field(default_factory=Vector3.one)
    fallback: NearestFallback = NearestFallback.NOT_FOUND


@dataclass(frozen=True)
class RibbonConfig:
    """리본 메시 생성 설정.

    Args:
        enabled: 리본 생성 여부.
        settings: 압출 옵션.
    """

    enabled: bool = False
    settings: RibbonSettings = field(default_factory=RibbonSettings)


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정."""

    curve: CurveConfig = field(default_factory=CurveConfig)
    velocity_field: FieldConfig = field(default_factory=FieldConfig)
    steering: SteeringConfig = field(default_factory=SteeringConfig)
    ribbon: RibbonConfig = field(default_factory=RibbonConfig)


# 권장 범위. 벗어나면 경고만 남긴다.
RESOLUTION_RANGE = (5, 100)
SEARCH_RADIUS_RANGE = (0.1, 100.0)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드하여 AppConfig 로 반환한다."""
