"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from bezier_velocity_field.domain.enums import (
    CurveInterpolation,
    NearestFallback,
    RibbonOrientation,
)
from bezier_velocity_field.domain.exceptions import (
    ConfigValidationError,
    MagnitudeCurveError,
)
from bezier_velocity_field.domain.magnitude_curve import (
    DEFAULT_MAGNITUDE_CURVE,
    Keyframe,
    MagnitudeCurve,
)
from bezier_velocity_field.domain.ribbon import RibbonSettings
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.vector import Vector3
from bezier_velocity_field.usecase.ports.config_port import (
    RESOLUTION_RANGE,
    SEARCH_RADIUS_RANGE,
    AppConfig,
    ConfigPort,
    CurveConfig,
    FieldConfig,
    RibbonConfig,
    SteeringConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)

_UNIT_WIDTH = MagnitudeCurve.constant(1.0)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없으면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다.

        Raises:
            ConfigValidationError: 벡터나 커브 형식이 잘못되었을 때.
        """
        params = self._extract_params(self._read_yaml())

        config = AppConfig(
            curve=self._load_curve(params.get("curve") or {}),
            velocity_field=self._load_field(
                params.get("velocity_field") or {}
            ),
            steering=self._load_steering(params.get("steering") or {}),
            ribbon=self._load_ribbon(params.get("ribbon") or {}),
        )

        logger.info("Config loaded from %s", self._path)
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """bezier_velocity_field 최상위 키가 있으면 한 단계 벗겨낸다."""
        node_data = raw.get("bezier_velocity_field", raw)
        if isinstance(node_data, dict):
            return node_data.get("ros__parameters", node_data)
        return {}

    # -- 섹션별 변환 --

    def _load_curve(self, data: dict[str, Any]) -> CurveConfig:
        defaults = ControlPoints()
        return CurveConfig(
            control_points=ControlPoints(
                p0=_vector(data, "p0", defaults.p0),
                p0_tangent=_vector(data, "p0_tangent", defaults.p0_tangent),
                p1_tangent=_vector(data, "p1_tangent", defaults.p1_tangent),
                p1=_vector(data, "p1", defaults.p1),
            )
        )

    def _load_field(self, data: dict[str, Any]) -> FieldConfig:
        resolution = _int(data, "resolution", 24)
        search_radius = _float(data, "search_radius", 5.0)

        if not RESOLUTION_RANGE[0] <= resolution <= RESOLUTION_RANGE[1]:
            logger.warning(
                "resolution %d outside recommended range %s",
                resolution, RESOLUTION_RANGE,
            )
        if not SEARCH_RADIUS_RANGE[0] <= search_radius <= SEARCH_RADIUS_RANGE[1]:
            logger.warning(
                "search_radius %.3f outside recommended range %s",
                search_radius, SEARCH_RADIUS_RANGE,
            )

        return FieldConfig(
            resolution=resolution,
            search_radius=search_radius,
            magnitude_curve=_curve(
                data.get("magnitude_curve"), DEFAULT_MAGNITUDE_CURVE
            ),
        )

    def _load_steering(self, data: dict[str, Any]) -> SteeringConfig:
        fallback = (
            NearestFallback.LEGACY_ZERO_NODE
            if _flag(data, "legacy_fallback", False)
            else NearestFallback.NOT_FOUND
        )
        return SteeringConfig(
            speed_on_curve=_float(data, "speed_on_curve", 1.0),
            force_to_nearest_curve=_float(
                data, "force_to_nearest_curve", 0.0
            ),
            velocity_scale=_vector(data, "velocity_scale", Vector3.one()),
            fallback=fallback,
        )

    def _load_ribbon(self, data: dict[str, Any]) -> RibbonConfig:
        try:
            orientation = RibbonOrientation(
                str(data.get("orientation", "X")).upper()
            )
        except ValueError as e:
            raise ConfigValidationError(
                f"Unknown ribbon orientation: {data.get('orientation')}"
            ) from e

        return RibbonConfig(
            enabled=_flag(data, "enabled", False),
            settings=RibbonSettings(
                resolution=_int(data, "resolution", 24),
                orientation=orientation,
                two_sided=_flag(data, "two_sided", True),
                flip_side=_flag(data, "flip_side", False),
                flip_uv=_flag(data, "flip_uv", False),
                width_multiplier_left=_float(
                    data, "width_multiplier_left", 1.0
                ),
                width_multiplier_right=_float(
                    data, "width_multiplier_right", 1.0
                ),
                width_curve_left=_curve(
                    data.get("width_curve_left"), _UNIT_WIDTH
                ),
                width_curve_right=_curve(
                    data.get("width_curve_right"), _UNIT_WIDTH
                ),
            ),
        )


def _int(data: dict[str, Any], key: str, default: int) -> int:
    """정수 설정값을 읽는다. bool 과 소수부가 있는 실수는 거부한다."""
    value = data.get(key, default)
    if isinstance(value, bool):
        raise ConfigValidationError(
            f"'{key}' must be an integer, got {value!r}"
        )
    if isinstance(value, float) and not value.is_integer():
        raise ConfigValidationError(
            f"'{key}' must be an integer, got {value!r}"
        )
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(
            f"'{key}' must be an integer, got {value!r}"
        ) from e


def _float(data: dict[str, Any], key: str, default: float) -> float:
    """실수 설정값을 읽는다."""
    value = data.get(key, default)
    if isinstance(value, bool):
        raise ConfigValidationError(f"'{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(
            f"'{key}' must be a number, got {value!r}"
        ) from e


def _flag(data: dict[str, Any], key: str, default: bool) -> bool:
    """YAML true/false 만 플래그로 받는다. 'false' 같은 문자열은 거부한다."""
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigValidationError(
            f"'{key}' must be true or false, got {value!r}"
        )
    return value


def _vector(data: dict[str, Any], key: str, default: Vector3) -> Vector3:
    """[x, y, z] 리스트를 Vector3로 변환한다."""
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, (list, tuple)):
        raise ConfigValidationError(
            f"'{key}' must be a [x, y, z] list, got {value!r}"
        )
    try:
        return Vector3.from_iterable(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"Invalid vector '{key}': {e}") from e


def _curve(data: Any, default: MagnitudeCurve) -> MagnitudeCurve:
    """커브 설정 dict를 MagnitudeCurve로 변환한다.

    지원 형식:
        {interpolation: linear | ease_in_out, points: [[t, v], ...]}
        {interpolation: constant, value: v}
        {keys: [[t, v, in_tangent, out_tangent], ...]}
    """
    if data is None:
        return default
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Curve must be a mapping, got {data!r}")

    try:
        if "keys" in data:
            return MagnitudeCurve(
                [Keyframe(*(float(x) for x in k)) for k in data["keys"]]
            )

        interpolation = CurveInterpolation(
            data.get("interpolation", CurveInterpolation.LINEAR)
        )
        if interpolation == CurveInterpolation.CONSTANT:
            return MagnitudeCurve.constant(float(data.get("value", 1.0)))

        points = [(float(t), float(v)) for t, v in data.get("points", [])]
        if interpolation == CurveInterpolation.EASE_IN_OUT:
            return MagnitudeCurve.smooth(points)
        return MagnitudeCurve.piecewise_linear(points)
    except (MagnitudeCurveError, TypeError, ValueError) as e:
        raise ConfigValidationError(f"Invalid curve {data!r}: {e}") from e
