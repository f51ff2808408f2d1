"""Choosing between built artifacts and individual source references."""

import threading

import structlog

from ..utils.config import Settings
from ..utils.types import AssetKind, AssetReference
from .builder import ArtifactBuilder

logger = structlog.get_logger(__name__)


class FreshnessGate:
    """Produces the references templates use to include an asset set.

    With minification off, every source file is referenced on its own. With it
    on, the set's artifact is referenced with its mtime as cache-bust token;
    a missing artifact triggers a full ``build()`` first.

    Rebuilds on miss are serialized per gate, and the artifact is checked
    again once the lock is held, so threads sharing a gate build at most once.
    Separate processes can still rebuild concurrently; the results converge
    because builds overwrite with identical output.
    """

    def __init__(self, settings: Settings, builder: ArtifactBuilder) -> None:
        """Initialize the gate."""
        self.settings = settings
        self.builder = builder
        self._build_lock = threading.Lock()

    @property
    def minify(self) -> bool:
        """Whether built artifacts are served."""
        return self.settings.minify

    def reference(self, kind: AssetKind, set_name: str) -> list[AssetReference]:
        """Return the references for a set."""
        if not self.minify:
            return [
                AssetReference(
                    kind=kind, url=asset.public_url, path=asset.source_path
                )
                for asset in self.builder.resolver.resolve(kind, set_name)
            ]

        # Raises ConfigError for unknown sets.
        self.builder.asset_config.patterns(kind, set_name)

        path = self.builder.artifact_path(kind, set_name)
        if not path.exists():
            with self._build_lock:
                if not path.exists():
                    logger.info(
                        "Artifact missing, building",
                        kind=kind.value,
                        set_name=set_name,
                        path=str(path),
                    )
                    self.builder.build()

        mtime = int(path.stat().st_mtime)
        return [
            AssetReference(
                kind=kind,
                url=f"{self.builder.artifact_url(kind, set_name)}?{mtime}",
                path=str(path),
                minified=True,
            )
        ]
