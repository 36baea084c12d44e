"""Bezier Velocity Field 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class InvalidResolutionError(DomainError):
    """샘플링 해상도가 허용 범위를 벗어날 때."""


class InvalidSearchRadiusError(DomainError):
    """탐색 반경이 0 이하일 때."""


class MagnitudeCurveError(DomainError):
    """크기 보정 커브의 키프레임이 유효하지 않을 때."""


class ConfigValidationError(DomainError):
    """설정 값 형식이 잘못되었을 때."""
