"""파티클 인프라 (ParticleSystem 구현)."""

from bezier_velocity_field.infra.particles.in_memory_particle_system import (
    InMemoryParticleSystem,
)

__all__ = ["InMemoryParticleSystem"]
