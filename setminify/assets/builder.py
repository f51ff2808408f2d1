"""Building and purging minified artifacts."""

from pathlib import Path

import structlog

from ..utils.config import AssetSetConfig, Settings, squeeze_slashes
from ..utils.errors import CompressionError
from ..utils.types import KIND_ORDER, AssetKind
from .combiner import Combiner
from .compressor import compressor_for
from .resolver import GlobResolver, artifact_name

logger = structlog.get_logger(__name__)


class ArtifactBuilder:
    """Writes one ``<set>.min.<ext>`` artifact per configured set.

    Kinds are processed scripts first, then styles, and sets in the order the
    configuration declares them.
    """

    def __init__(
        self,
        settings: Settings,
        asset_config: AssetSetConfig,
        resolver: GlobResolver | None = None,
    ) -> None:
        """Initialize the builder."""
        self.settings = settings
        self.asset_config = asset_config
        self.resolver = resolver or GlobResolver(settings, asset_config)
        self.combiner = Combiner(self.resolver)

    def artifact_path(self, kind: AssetKind, set_name: str) -> Path:
        """Filesystem path of a set's artifact."""
        return Path(self.resolver.artifact_path(kind, set_name))

    def artifact_url(self, kind: AssetKind, set_name: str) -> str:
        """Public URL of a set's artifact, without cache-bust token."""
        url = f"{self.settings.kind_url(kind)}/{artifact_name(kind, set_name)}"
        return squeeze_slashes(url)

    def compress(self, kind: AssetKind, set_name: str) -> bytes:
        """Return the compressed, combined contents of one set."""
        code = self.combiner.combine(kind, set_name)
        try:
            compressed = compressor_for(kind).compress(code)
        except CompressionError as e:
            e.kind, e.set_name = kind, set_name
            raise

        logger.debug(
            "Compressed asset set",
            kind=kind.value,
            set_name=set_name,
            original_size=len(code),
            compressed_size=len(compressed),
        )
        return compressed

    def build(self) -> list[Path]:
        """Rebuild every artifact and return the paths written.

        Every set is combined and compressed before anything is written, so a
        failing set aborts the build with all existing artifacts untouched.
        """
        outputs: list[tuple[Path, bytes]] = []
        for kind in KIND_ORDER:
            for set_name in self.asset_config.sets(kind):
                try:
                    code = self.compress(kind, set_name)
                except Exception as e:
                    logger.error(
                        "Build failed",
                        kind=kind.value,
                        set_name=set_name,
                        error=str(e),
                    )
                    raise
                outputs.append((self.artifact_path(kind, set_name), code))

        written: list[Path] = []
        for path, code in outputs:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(code)
            written.append(path)
            logger.info("Wrote artifact", path=str(path), size=len(code))

        return written

    def clean(self) -> list[Path]:
        """Delete every artifact that exists and return the paths removed."""
        removed: list[Path] = []
        for kind in KIND_ORDER:
            for set_name in self.asset_config.sets(kind):
                path = self.artifact_path(kind, set_name)
                if path.exists():
                    path.unlink(missing_ok=True)
                    removed.append(path)
                    logger.info("Removed artifact", path=str(path))
        return removed
