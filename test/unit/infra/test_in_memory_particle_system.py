"""InMemoryParticleSystem 단위 테스트."""

import numpy as np
import pytest

from bezier_velocity_field.domain.curve_math import CurveEvaluator
from bezier_velocity_field.infra.particles import InMemoryParticleSystem


class TestBuffer:
    def test_empty_by_default(self):
        system = InMemoryParticleSystem()
        assert system.particle_count == 0
        assert system.get_positions().shape == (0, 3)

    def test_initial_positions(self):
        system = InMemoryParticleSystem([[1, 2, 3], [4, 5, 6]])
        assert system.particle_count == 2
        assert system.get_positions().dtype == np.float64

    def test_get_returns_copy(self):
        system = InMemoryParticleSystem([[1.0, 2.0, 3.0]])
        positions = system.get_positions()
        positions[0, 0] = 99.0
        assert system.get_positions()[0, 0] == 1.0

    def test_set_positions(self):
        system = InMemoryParticleSystem([[0.0, 0.0, 0.0]])
        system.set_positions(np.array([[1.0, 1.0, 1.0]]))
        assert system.get_positions().tolist() == [[1.0, 1.0, 1.0]]

    def test_set_positions_shape_mismatch(self):
        system = InMemoryParticleSystem([[0.0, 0.0, 0.0]])
        with pytest.raises(ValueError):
            system.set_positions(np.zeros((2, 3)))

    def test_emit_and_clear(self):
        system = InMemoryParticleSystem()
        assert system.emit([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]]) == 2
        assert system.emit([2.0, 0.0, 0.0]) == 1
        assert system.particle_count == 3

        system.clear()
        assert system.particle_count == 0


class TestEmitAlongCurve:
    def test_points_lie_on_curve(self, straight_control_points):
        system = InMemoryParticleSystem()
        evaluator = CurveEvaluator(straight_control_points)

        assert system.emit_along_curve(evaluator, 20, seed=1) == 20

        positions = system.get_positions()
        assert np.allclose(positions[:, :2], 0.0)
        assert (positions[:, 2] >= 0.0).all()
        assert (positions[:, 2] <= 3.0).all()

    def test_spread_bounds(self, straight_control_points):
        system = InMemoryParticleSystem()
        evaluator = CurveEvaluator(straight_control_points)

        system.emit_along_curve(evaluator, 50, spread=0.5, seed=2)

        positions = system.get_positions()
        assert (np.abs(positions[:, 0]) <= 0.5).all()
        assert (np.abs(positions[:, 1]) <= 0.5).all()

    def test_seed_is_deterministic(self, sample_control_points):
        evaluator = CurveEvaluator(sample_control_points)
        a = InMemoryParticleSystem()
        b = InMemoryParticleSystem()
        a.emit_along_curve(evaluator, 10, spread=1.0, seed=42)
        b.emit_along_curve(evaluator, 10, spread=1.0, seed=42)
        assert np.array_equal(a.get_positions(), b.get_positions())
