r"""Bezier Velocity Field 진입점.

설정 파일의 커브로 속도장을 만들고, 커브 주변에 파티클을 뿌린 뒤
지정한 스텝 수만큼 조향하여 결과 보고서를 YAML로 출력한다.

실행: curve_field -c config.yaml --steps 120 --dt 0.016 \\
        --particles 200 -o report.yaml
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from bezier_velocity_field.domain.curve_math import CurveEvaluator
from bezier_velocity_field.domain.events.field_events import DomainEvent
from bezier_velocity_field.domain.exceptions import DomainError
from bezier_velocity_field.infra.config.yaml_config_loader import (
    YamlConfigLoader,
)
from bezier_velocity_field.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from bezier_velocity_field.infra.particles.in_memory_particle_system import (
    InMemoryParticleSystem,
)
from bezier_velocity_field.infra.repository.in_memory_field_repository import (
    InMemoryFieldRepository,
)
from bezier_velocity_field.infra.serialization.field_serializer import (
    dump_report,
    serialize_control_points,
    serialize_field,
    serialize_particles,
    serialize_polyline,
    serialize_ribbon,
)
from bezier_velocity_field.usecase.extrude_ribbon import ExtrudeRibbon
from bezier_velocity_field.usecase.rebuild_velocity_field import (
    RebuildVelocityField,
)
from bezier_velocity_field.usecase.steer_particles import SteerParticles

logger = logging.getLogger(__name__)


def _log_event(event: DomainEvent) -> None:
    logger.debug('Event: %r', event)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='curve_field',
        description='Steer particles along a cubic Bezier velocity field',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the config.yaml file (default: bundled params)',
    )
    parser.add_argument(
        '--steps', type=int, default=60,
        help='Number of steering ticks, default: 60',
    )
    parser.add_argument(
        '--dt', type=float, default=1.0 / 60.0,
        help='Delta time per tick in seconds, default: 1/60',
    )
    parser.add_argument(
        '--particles', type=int, default=100,
        help='Number of particles emitted along the curve, default: 100',
    )
    parser.add_argument(
        '--spread', type=float, default=0.5,
        help='Uniform jitter applied to emitted particles, default: 0.5',
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for particle emission',
    )
    parser.add_argument(
        '-o', '--output', type=str, default=None,
        help='Write the YAML report to this file instead of stdout',
    )
    parser.add_argument(
        '--log-level', type=str, default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level, default: INFO',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """속도장 시뮬레이션을 실행한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        프로세스 종료 코드.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    # 1. 설정 로드
    try:
        config = YamlConfigLoader(args.config_file).load()
    except DomainError as e:
        logger.error('Failed to load config: %s', e)
        return 1

    control_points = config.curve.control_points

    # 2. 포트 구현체 구성
    publisher = InMemoryEventPublisher()
    publisher.subscribe(DomainEvent, _log_event)
    field_repo = InMemoryFieldRepository(config.velocity_field.search_radius)
    particles = InMemoryParticleSystem()

    rebuild = RebuildVelocityField(
        field_repo, publisher, config.velocity_field
    )
    steer = SteerParticles(field_repo, publisher, config.steering)
    extrude = ExtrudeRibbon(publisher, config.ribbon)

    # 3. 속도장 생성
    try:
        rebuild.execute(control_points)
        ribbon = extrude.execute(control_points)
    except DomainError as e:
        logger.error('Invalid curve parameters: %s', e)
        return 1

    # 4. 파티클 방출 및 조향
    evaluator = CurveEvaluator(control_points)
    particles.emit_along_curve(
        evaluator, args.particles, spread=args.spread, seed=args.seed
    )
    steered_total = 0
    for _ in range(args.steps):
        steered_total += steer.step(particles, args.dt)
    logger.info(
        'Simulated %d steps for %d particles (%d particle moves)',
        args.steps, particles.particle_count, steered_total,
    )

    # 5. 보고서 출력
    report = {
        'control_points': serialize_control_points(control_points),
        'curve': serialize_polyline(
            evaluator.sample_polyline(config.velocity_field.resolution)
        ),
        'velocity_field': serialize_field(field_repo.get_field()),
        'particles': serialize_particles(particles.get_positions()),
    }
    if ribbon is not None:
        report['ribbon'] = serialize_ribbon(ribbon)

    payload = dump_report(report)
    if args.output:
        Path(args.output).write_text(payload, encoding='utf-8')
        logger.info('Report written to %s', args.output)
    else:
        sys.stdout.write(payload)
    return 0


if __name__ == '__main__':
    sys.exit(main())
