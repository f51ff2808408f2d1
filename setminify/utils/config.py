"""Configuration management for setminify."""

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .types import AssetKind

_SLASHES = re.compile(r"/{2,}")


def squeeze_slashes(path: str) -> str:
    """Collapse runs of ``/`` into a single separator."""
    return _SLASHES.sub("/", path)


class AppConfig(BaseSettings):
    """Main application configuration."""

    root_path: Path = Field(default=Path("."), description="Application root")
    assets_file: str = Field(
        default="config/assets.yml", description="Asset set file, relative to root"
    )
    minify: bool = Field(default=False, description="Serve built artifacts")
    log_level: str = Field(default="INFO", description="Logging level")
    development: bool = Field(default=False, description="Development mode")

    model_config = SettingsConfigDict(
        env_prefix="SETMINIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AssetPathsConfig(BaseSettings):
    """Filesystem roots and public URL prefixes for each asset kind."""

    js_path: str = Field(default="public/js", description="Script root, under root")
    css_path: str = Field(default="public/css", description="Style root, under root")
    js_url: str = Field(default="/js", description="Public prefix for scripts")
    css_url: str = Field(default="/css", description="Public prefix for styles")

    model_config = SettingsConfigDict(
        env_prefix="SETMINIFY_", env_file=".env", extra="ignore"
    )


class Settings:
    """Settings passed explicitly into every pipeline component."""

    def __init__(
        self,
        app: AppConfig | None = None,
        paths: AssetPathsConfig | None = None,
    ) -> None:
        """Initialize settings, loading from the environment when not given."""
        self.app = app if app is not None else AppConfig()
        self.paths = paths if paths is not None else AssetPathsConfig()

    @property
    def root(self) -> Path:
        """Absolute application root."""
        return self.app.root_path.resolve()

    @property
    def assets_file(self) -> Path:
        """Absolute path of the asset set file."""
        return self.root / self.app.assets_file

    @property
    def minify(self) -> bool:
        """Whether references point at built artifacts."""
        return self.app.minify

    def kind_root(self, kind: AssetKind) -> str:
        """Return the directory under which a kind's patterns are resolved.

        Example: ``/home/me/project/public/js``
        """
        prefix = self.paths.js_path if kind is AssetKind.SCRIPT else self.paths.css_path
        return squeeze_slashes(f"{self.root}/{prefix}").rstrip("/") or "/"

    def kind_url(self, kind: AssetKind) -> str:
        """Return the public URL prefix for a kind."""
        return self.paths.js_url if kind is AssetKind.SCRIPT else self.paths.css_url


class AssetSetConfig(BaseModel):
    """Set names mapped to their ordered glob patterns, per kind."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    js: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    css: dict[str, tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("js", "css", mode="before")
    @classmethod
    def normalize_sets(cls, v: Any) -> dict[str, tuple[str, ...]]:
        """Accept a single pattern or a list of patterns for each set."""
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            raise ValueError("must map set names to glob patterns")

        sets: dict[str, tuple[str, ...]] = {}
        for name, patterns in v.items():
            if isinstance(patterns, str):
                patterns = [patterns]
            if not isinstance(patterns, list | tuple) or not all(
                isinstance(p, str) for p in patterns
            ):
                raise ValueError(
                    f"set {name!r} must be a glob pattern or a list of glob patterns"
                )
            sets[str(name)] = tuple(patterns)
        return sets

    @classmethod
    def from_mapping(cls, data: Any) -> "AssetSetConfig":
        """Build from parsed configuration, raising ``ConfigError`` if malformed."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError("Asset configuration must be a mapping of kinds to sets")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigError(f"Malformed asset configuration: {e}") from e

    def sets(self, kind: AssetKind) -> dict[str, tuple[str, ...]]:
        """Return every set declared for a kind, in configuration order."""
        return self.js if kind is AssetKind.SCRIPT else self.css

    def patterns(self, kind: AssetKind, set_name: str) -> tuple[str, ...]:
        """Return the patterns of one set."""
        sets = self.sets(kind)
        if set_name not in sets:
            raise ConfigError(f"Unknown {kind.value} set: {set_name!r}")
        return sets[set_name]


def load_asset_config(path: str | Path) -> AssetSetConfig:
    """Load the asset set file (YAML)."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Asset configuration not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return AssetSetConfig.from_mapping(data)


settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings
