"""설정 인프라 (ConfigPort 구현)."""

from bezier_velocity_field.infra.config.yaml_config_loader import (
    YamlConfigLoader,
)

__all__ = ["YamlConfigLoader"]
