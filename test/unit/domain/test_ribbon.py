"""리본 메시 압출 단위 테스트."""

import numpy as np
import pytest

from bezier_velocity_field.domain.curve_math import CurveEvaluator
from bezier_velocity_field.domain.enums import RibbonOrientation
from bezier_velocity_field.domain.exceptions import InvalidResolutionError
from bezier_velocity_field.domain.magnitude_curve import MagnitudeCurve
from bezier_velocity_field.domain.ribbon import (
    MeshRibbonExtruder,
    RibbonSettings,
)


def _extrude(control_points, **kwargs):
    settings = RibbonSettings(**kwargs)
    return MeshRibbonExtruder(settings).extrude(
        CurveEvaluator(control_points)
    )


class TestVertices:
    def test_right_then_left_per_spine_point(self, straight_control_points):
        mesh = _extrude(straight_control_points, resolution=4)

        assert mesh.vertex_count == 8
        # Z 축 직선 + X 기준축 → 왼쪽은 +Y
        assert mesh.vertices[0].tolist() == pytest.approx([0.0, -1.0, 0.0])
        assert mesh.vertices[1].tolist() == pytest.approx([0.0, 1.0, 0.0])
        assert mesh.vertices[6].tolist() == pytest.approx([0.0, -1.0, 3.0])
        assert mesh.vertices[7].tolist() == pytest.approx([0.0, 1.0, 3.0])

    def test_y_orientation(self, straight_control_points):
        mesh = _extrude(
            straight_control_points, resolution=2,
            orientation=RibbonOrientation.Y,
        )
        assert mesh.vertices[0].tolist() == pytest.approx([1.0, 0.0, 0.0])
        assert mesh.vertices[1].tolist() == pytest.approx([-1.0, 0.0, 0.0])

    def test_width_multipliers(self, straight_control_points):
        mesh = _extrude(
            straight_control_points, resolution=2,
            width_multiplier_left=2.0, width_multiplier_right=0.5,
        )
        assert mesh.vertices[0].tolist() == pytest.approx([0.0, -0.5, 0.0])
        assert mesh.vertices[1].tolist() == pytest.approx([0.0, 2.0, 0.0])

    def test_width_curve(self, straight_control_points):
        mesh = _extrude(
            straight_control_points, resolution=3,
            width_curve_left=MagnitudeCurve.linear(0.0, 0.0, 1.0, 2.0),
        )
        left = mesh.vertices[1::2, 1]
        assert left.tolist() == pytest.approx([0.0, 1.0, 2.0])


class TestUVs:
    def test_default_uvs(self, straight_control_points):
        mesh = _extrude(straight_control_points, resolution=3)
        assert mesh.uvs.tolist() == pytest.approx(
            [[0.0, 0.0], [0.0, 1.0],
             [0.5, 0.0], [0.5, 1.0],
             [1.0, 0.0], [1.0, 1.0]]
        )

    def test_flip_uv(self, straight_control_points):
        mesh = _extrude(straight_control_points, resolution=3, flip_uv=True)
        assert mesh.uvs[2].tolist() == pytest.approx([0.0, 0.5])
        assert mesh.uvs[3].tolist() == pytest.approx([1.0, 0.5])


class TestTriangles:
    @pytest.mark.parametrize("two_sided, per_quad", [(True, 12), (False, 6)])
    def test_triangle_count(self, straight_control_points, two_sided, per_quad):
        mesh = _extrude(
            straight_control_points, resolution=5, two_sided=two_sided,
        )
        assert len(mesh.triangles) == 4 * per_quad
        assert mesh.triangle_count == 4 * per_quad // 3
        assert mesh.triangles.dtype == np.int32

    def test_first_quad_winding(self, straight_control_points):
        mesh = _extrude(straight_control_points, resolution=2)
        assert mesh.triangles.tolist() == [
            0, 1, 2, 1, 3, 2,
            0, 2, 1, 1, 2, 3,
        ]

    def test_flip_side_swaps_winding(self, straight_control_points):
        mesh = _extrude(
            straight_control_points, resolution=2, flip_side=True,
        )
        assert mesh.triangles.tolist() == [
            0, 2, 1, 1, 2, 3,
            0, 1, 2, 1, 3, 2,
        ]

    def test_second_quad_offset(self, straight_control_points):
        mesh = _extrude(
            straight_control_points, resolution=3, two_sided=False,
        )
        assert mesh.triangles[6:].tolist() == [2, 3, 4, 3, 5, 4]

    def test_indices_in_range(self, sample_control_points):
        mesh = _extrude(sample_control_points, resolution=24)
        assert mesh.triangles.max() < mesh.vertex_count
        assert mesh.triangles.min() >= 0


class TestValidation:
    def test_rejects_small_resolution(self, straight_control_points):
        with pytest.raises(InvalidResolutionError):
            _extrude(straight_control_points, resolution=1)
