"""도메인 열거형 단위 테스트."""

from bezier_velocity_field.domain.enums import (
    CurveInterpolation,
    NearestFallback,
    RibbonOrientation,
)


class TestNearestFallback:
    def test_all_modes_exist(self):
        expected = {'NOT_FOUND', 'LEGACY_ZERO_NODE'}
        actual = {f.value for f in NearestFallback}
        assert actual == expected

    def test_from_string(self):
        assert NearestFallback('NOT_FOUND') is NearestFallback.NOT_FOUND


class TestRibbonOrientation:
    def test_all_axes_exist(self):
        assert {o.value for o in RibbonOrientation} == {'X', 'Y', 'Z'}


class TestCurveInterpolation:
    def test_values_are_lowercase(self):
        assert CurveInterpolation.LINEAR == 'linear'
        assert CurveInterpolation.EASE_IN_OUT == 'ease_in_out'
        assert CurveInterpolation.CONSTANT == 'constant'
