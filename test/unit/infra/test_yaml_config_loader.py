"""YamlConfigLoader 유닛 테스트."""

import pytest
import yaml

from bezier_velocity_field.domain.enums import (
    NearestFallback,
    RibbonOrientation,
)
from bezier_velocity_field.domain.exceptions import ConfigValidationError
from bezier_velocity_field.domain.magnitude_curve import (
    DEFAULT_MAGNITUDE_CURVE,
    MagnitudeCurve,
)
from bezier_velocity_field.domain.value_objects.control_points import (
    ControlPoints,
)
from bezier_velocity_field.domain.value_objects.vector import Vector3
from bezier_velocity_field.infra.config.yaml_config_loader import (
    YamlConfigLoader,
)
from bezier_velocity_field.usecase.ports.config_port import AppConfig


def _write(tmp_path, data, name='config.yaml'):
    path = tmp_path / name
    with open(path, 'w') as f:
        yaml.dump(data, f)
    return str(path)


@pytest.fixture
def config_yaml(tmp_path):
    """임시 config.yaml 파일을 생성한다."""
    data = {
        'bezier_velocity_field': {
            'curve': {
                'p0': [0.0, 0.0, 0.0],
                'p0_tangent': [0.0, 0.0, 1.0],
                'p1_tangent': [0.0, 0.0, 2.0],
                'p1': [0.0, 0.0, 3.0],
            },
            'velocity_field': {
                'resolution': 12,
                'search_radius': 2.5,
                'magnitude_curve': {
                    'interpolation': 'linear',
                    'points': [[0.0, 0.0], [1.0, 2.0]],
                },
            },
            'steering': {
                'speed_on_curve': 2.0,
                'force_to_nearest_curve': 0.5,
                'velocity_scale': [1.0, 2.0, 3.0],
                'legacy_fallback': True,
            },
            'ribbon': {
                'enabled': True,
                'resolution': 8,
                'orientation': 'y',
                'two_sided': False,
                'width_multiplier_left': 0.5,
                'width_curve_right': {'interpolation': 'constant',
                                      'value': 2.0},
            },
        },
    }
    return _write(tmp_path, data)


class TestYamlConfigLoader:
    """YamlConfigLoader 테스트."""

    def test_load_curve_section(self, config_yaml):
        """curve 섹션을 제어점으로 변환한다."""
        config = YamlConfigLoader(config_yaml).load()

        cp = config.curve.control_points
        assert cp.p0 == Vector3(0.0, 0.0, 0.0)
        assert cp.p1 == Vector3(0.0, 0.0, 3.0)

    def test_load_velocity_field_section(self, config_yaml):
        """velocity_field 섹션을 올바르게 로드한다."""
        config = YamlConfigLoader(config_yaml).load()

        vf = config.velocity_field
        assert vf.resolution == 12
        assert vf.search_radius == 2.5
        assert vf.magnitude_curve(0.5) == pytest.approx(1.0)

    def test_load_steering_section(self, config_yaml):
        """steering 섹션을 올바르게 로드한다."""
        config = YamlConfigLoader(config_yaml).load()

        st = config.steering
        assert st.speed_on_curve == 2.0
        assert st.force_to_nearest_curve == 0.5
        assert st.velocity_scale == Vector3(1.0, 2.0, 3.0)
        assert st.fallback == NearestFallback.LEGACY_ZERO_NODE

    def test_load_ribbon_section(self, config_yaml):
        """ribbon 섹션을 올바르게 로드한다."""
        config = YamlConfigLoader(config_yaml).load()

        ribbon = config.ribbon
        assert ribbon.enabled is True
        assert ribbon.settings.resolution == 8
        assert ribbon.settings.orientation == RibbonOrientation.Y
        assert ribbon.settings.two_sided is False
        assert ribbon.settings.width_multiplier_left == 0.5
        assert ribbon.settings.width_curve_right(0.3) == 2.0
        assert ribbon.settings.width_curve_left(0.3) == 1.0

    def test_flat_layout_without_node_key(self, tmp_path):
        """최상위 키 없이 섹션만 있어도 로드한다."""
        path = _write(tmp_path, {'velocity_field': {'resolution': 30}})
        config = YamlConfigLoader(path).load()
        assert config.velocity_field.resolution == 30

    def test_ros_parameters_layout(self, tmp_path):
        """ros__parameters 중첩을 벗겨낸다."""
        path = _write(tmp_path, {
            'bezier_velocity_field': {
                'ros__parameters': {'steering': {'speed_on_curve': 3.0}},
            },
        })
        config = YamlConfigLoader(path).load()
        assert config.steering.speed_on_curve == 3.0

    def test_load_nonexistent_file(self, tmp_path):
        """존재하지 않는 파일에 대해 기본값을 반환한다."""
        config = YamlConfigLoader(tmp_path / 'nonexistent.yaml').load()
        assert config == AppConfig()

    def test_load_invalid_yaml(self, tmp_path):
        """잘못된 YAML에 대해 기본값을 반환한다."""
        path = tmp_path / 'bad.yaml'
        with open(path, 'w') as f:
            f.write('just a string')
        config = YamlConfigLoader(path).load()
        assert config == AppConfig()

    def test_bundled_defaults(self):
        """패키지 기본 설정 파일은 기본값과 일치한다."""
        loader = YamlConfigLoader()
        assert loader.path.exists()

        config = loader.load()
        assert config.curve.control_points == ControlPoints()
        assert config.velocity_field.resolution == 24
        assert config.velocity_field.magnitude_curve == DEFAULT_MAGNITUDE_CURVE
        assert config.steering.fallback == NearestFallback.NOT_FOUND
        assert config.ribbon.enabled is False

    def test_out_of_range_resolution_warns(self, tmp_path, caplog):
        """권장 범위 밖의 값은 경고만 남기고 그대로 사용한다."""
        path = _write(tmp_path, {'velocity_field': {'resolution': 200}})
        config = YamlConfigLoader(path).load()
        assert config.velocity_field.resolution == 200
        assert 'outside recommended range' in caplog.text

    def test_keyframe_curve(self, tmp_path):
        """keys 형식의 커브를 그대로 키프레임으로 읽는다."""
        path = _write(tmp_path, {
            'velocity_field': {
                'magnitude_curve': {'keys': [[0.0, 1.0, 0.0, 0.0],
                                             [1.0, 3.0, 0.0, 0.0]]},
            },
        })
        curve = YamlConfigLoader(path).load().velocity_field.magnitude_curve
        assert curve == MagnitudeCurve.ease_in_out(0.0, 1.0, 1.0, 3.0)


class TestValidation:
    def test_bad_vector_length(self, tmp_path):
        path = _write(tmp_path, {'curve': {'p0': [1.0, 2.0]}})
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()

    def test_vector_not_list(self, tmp_path):
        path = _write(tmp_path, {'curve': {'p1': 'far away'}})
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()

    def test_unknown_orientation(self, tmp_path):
        path = _write(tmp_path, {'ribbon': {'orientation': 'W'}})
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()

    def test_unknown_interpolation(self, tmp_path):
        path = _write(tmp_path, {
            'velocity_field': {'magnitude_curve': {'interpolation': 'cubic'}},
        })
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()

    def test_unordered_curve_points(self, tmp_path):
        path = _write(tmp_path, {
            'velocity_field': {
                'magnitude_curve': {'points': [[1.0, 0.0], [0.0, 1.0]]},
            },
        })
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()

    @pytest.mark.parametrize('section, value', [
        ('velocity_field', {'resolution': None}),
        ('velocity_field', {'resolution': 'many'}),
        ('velocity_field', {'resolution': 12.5}),
        ('velocity_field', {'resolution': True}),
        ('velocity_field', {'search_radius': 'wide'}),
        ('steering', {'speed_on_curve': None}),
        ('ribbon', {'width_multiplier_left': [1.0]}),
    ])
    def test_bad_scalar(self, tmp_path, section, value):
        path = _write(tmp_path, {section: value})
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()

    @pytest.mark.parametrize('section, key', [
        ('steering', 'legacy_fallback'),
        ('ribbon', 'enabled'),
        ('ribbon', 'two_sided'),
    ])
    def test_quoted_boolean_rejected(self, tmp_path, section, key):
        path = _write(tmp_path, {section: {key: 'false'}})
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()

    def test_yaml_boolean_accepted(self, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text(
            'steering:\n  legacy_fallback: false\n'
            'ribbon:\n  enabled: yes\n'
            'velocity_field:\n  resolution: 12.0\n',
            encoding='utf-8',
        )
        config = YamlConfigLoader(path).load()
        assert config.steering.fallback == NearestFallback.NOT_FOUND
        assert config.ribbon.enabled is True
        assert config.velocity_field.resolution == 12

    def test_string_keyframe_rejected(self, tmp_path):
        path = _write(tmp_path, {
            'velocity_field': {'magnitude_curve': {'keys': [['a', 1.0]]}},
        })
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(path).load()
