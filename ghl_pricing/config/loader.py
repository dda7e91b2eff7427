"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _load_scenarios(self) -> dict[str, Any]:
        """Read the scenarios mapping from scenarios.yaml, empty if absent."""
        scenarios_file = self.config_dir / "scenarios.yaml"

        if not scenarios_file.exists():
            return {}

        try:
            with open(scenarios_file) as f:
                scenarios_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Could not parse scenarios file: {e}",
                source=str(scenarios_file),
            )

        scenarios = scenarios_config.get("scenarios") if isinstance(scenarios_config, dict) else None
        if scenarios is not None and not isinstance(scenarios, dict):
            raise ConfigurationError(
                "'scenarios' must be a mapping of scenario names",
                source=str(scenarios_file),
            )

        return scenarios or {}

    def load_scenario_config(self, scenario_id: str) -> dict[str, Any]:
        """Load scenario-specific configuration overrides."""
        scenario = self._load_scenarios().get(scenario_id) or {}

        if not isinstance(scenario, dict):
            raise ConfigurationError(
                f"Scenario '{scenario_id}' must be a mapping of sections",
                source=scenario_id,
            )

        return scenario

    def list_scenarios(self) -> list[str]:
        """Names of the scenarios defined in scenarios.yaml."""
        return sorted(self._load_scenarios())

    def merge_config(
        self,
        scenario_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Scenario-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        scenario_config = self.load_scenario_config(scenario_id)
        config = self._deep_merge(config, scenario_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        scenario_id: str = "default",
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Merge, validate and build a typed configuration.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        merged = self.merge_config(scenario_id, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error(
                "Configuration validation failed",
                scenario_id=scenario_id,
                errors=error_msgs
            )
            raise ConfigurationError(
                f"Invalid configuration for scenario '{scenario_id}'",
                source=scenario_id,
                errors=errors,
            )

        logger.debug("Configuration loaded", scenario_id=scenario_id)
        return self.build_config(merged)

    def build_config(self, config: dict[str, Any]) -> DefaultConfig:
        """Convert a merged configuration dictionary back into dataclasses."""
        unknown_sections = set(config) - {f.name for f in fields(DefaultConfig)}
        if unknown_sections:
            raise ConfigurationError(
                f"Unknown configuration sections: {sorted(unknown_sections)}",
                source="config",
            )

        sections = {}
        for section in fields(DefaultConfig):
            section_cls = section.type
            known = {f.name for f in fields(section_cls)}
            values = config.get(section.name, {}) or {}
            unknown = set(values) - known
            if unknown:
                raise ConfigurationError(
                    f"Unknown keys in section '{section.name}': {sorted(unknown)}",
                    source=section.name,
                )
            sections[section.name] = section_cls(**values)

        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
