"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from pantryplan.generator.combinations import DEFAULT_MAX_ATTEMPTS
from pantryplan.generator.models import MealType, parse_meal_type
from pantryplan.generator.planner import DEFAULT_MEAL_COUNT


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".pantryplan"


def _default_db_path() -> Path:
    """Return the default database path."""
    return _default_config_dir() / "pantryplan.db"


def _as_list(value) -> list:
    """Accept either a YAML list or a single scalar (``restrictions: vegan``)."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@dataclass
class DatabaseConfig:
    """Database configuration."""

    path: Path = field(default_factory=_default_db_path)


@dataclass
class GenerationConfig:
    """Meal generation configuration."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None  # None = different suggestions every run
    meal_count: int = DEFAULT_MEAL_COUNT


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    meal_types: list[MealType] = field(default_factory=lambda: list(MealType))
    restrictions: list[str] = field(default_factory=list)
    output_format: str = "table"  # "table", "json", "markdown"
    skip_unavailable: bool = True


@dataclass
class Settings:
    """Main application settings."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.pantryplan/config.yaml

        Returns:
            Settings instance

        Raises:
            ValueError: If the file names an unknown meal type
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse database config
        if "database" in data:
            db_data = data["database"] or {}
            if db_data.get("path"):
                settings.database.path = Path(db_data["path"]).expanduser()

        # Parse generation config
        if "generation" in data:
            gen_data = data["generation"] or {}
            if "max_attempts" in gen_data:
                settings.generation.max_attempts = int(gen_data["max_attempts"])
            if "seed" in gen_data:
                seed = gen_data["seed"]
                settings.generation.seed = int(seed) if seed is not None else None
            if "meal_count" in gen_data:
                settings.generation.meal_count = int(gen_data["meal_count"])

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if def_data.get("meal_types"):
                settings.defaults.meal_types = [
                    parse_meal_type(m) for m in _as_list(def_data["meal_types"])
                ]
            if "restrictions" in def_data:
                settings.defaults.restrictions = _as_list(def_data["restrictions"])
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]
            if "skip_unavailable" in def_data:
                settings.defaults.skip_unavailable = bool(def_data["skip_unavailable"])

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.pantryplan/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        """Plain-data view of the settings, as written to config.yaml."""
        return {
            "database": {
                "path": str(self.database.path),
            },
            "generation": {
                "max_attempts": self.generation.max_attempts,
                "seed": self.generation.seed,
                "meal_count": self.generation.meal_count,
            },
            "defaults": {
                "meal_types": [m.value for m in self.defaults.meal_types],
                "restrictions": self.defaults.restrictions,
                "output_format": self.defaults.output_format,
                "skip_unavailable": self.defaults.skip_unavailable,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
