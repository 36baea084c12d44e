"""Bezier Velocity Field 도메인 열거형 정의."""

from enum import StrEnum


class NearestFallback(StrEnum):
    """반경 내 노드가 없을 때의 최근접 탐색 동작."""

    NOT_FOUND = 'NOT_FOUND'
    LEGACY_ZERO_NODE = 'LEGACY_ZERO_NODE'


class RibbonOrientation(StrEnum):
    """리본 메시의 업 벡터 기준 축."""

    X = 'X'
    Y = 'Y'
    Z = 'Z'


class CurveInterpolation(StrEnum):
    """설정 파일에서 사용하는 크기 커브 보간 방식."""

    LINEAR = 'linear'
    EASE_IN_OUT = 'ease_in_out'
    CONSTANT = 'constant'
