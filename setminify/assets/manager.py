"""High-level entry point wiring the asset pipeline together."""

from pathlib import Path
from typing import Any

import structlog

from ..utils.config import AssetSetConfig, Settings, get_settings, load_asset_config
from ..utils.types import KIND_ORDER, AssetKind, AssetReference
from .builder import ArtifactBuilder
from .freshness import FreshnessGate
from .markup import AssetHelpers
from .resolver import GlobResolver

logger = structlog.get_logger(__name__)


class AssetManager:
    """High-level asset pipeline interface."""

    def __init__(self, settings: Settings, asset_config: AssetSetConfig) -> None:
        """Initialize asset manager."""
        self.settings = settings
        self.asset_config = asset_config
        self.resolver = GlobResolver(settings, asset_config)
        self.builder = ArtifactBuilder(settings, asset_config, self.resolver)
        self.gate = FreshnessGate(settings, self.builder)
        self.helpers = AssetHelpers(self.gate)
        logger.debug(
            "Asset manager initialized",
            root=str(settings.root),
            minify=settings.minify,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AssetManager":
        """Create a manager, loading the asset set file named by the settings."""
        settings = settings or get_settings()
        return cls(settings, load_asset_config(settings.assets_file))

    def build(self) -> list[Path]:
        """Rebuild every artifact."""
        return self.builder.build()

    def clean(self) -> list[Path]:
        """Remove every artifact."""
        return self.builder.clean()

    def reference(self, kind: AssetKind, set_name: str) -> list[AssetReference]:
        """References for one set, honoring the minify setting."""
        return self.gate.reference(kind, set_name)

    def artifact_status(self) -> list[dict[str, Any]]:
        """Report, per configured set, whether its artifact is built."""
        report = []
        for kind in KIND_ORDER:
            for set_name, patterns in self.asset_config.sets(kind).items():
                path = self.builder.artifact_path(kind, set_name)
                built = path.exists()
                report.append(
                    {
                        "kind": kind.value,
                        "set_name": set_name,
                        "patterns": list(patterns),
                        "path": str(path),
                        "built": built,
                        "mtime": int(path.stat().st_mtime) if built else None,
                    }
                )
        return report
