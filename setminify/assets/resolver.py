"""Glob resolution of asset sets into ordered source files."""

import glob
import os
import re

import structlog

from ..utils.config import AssetSetConfig, Settings, squeeze_slashes
from ..utils.types import AssetKind, ResolvedAsset

logger = structlog.get_logger(__name__)

_WILDCARD = re.compile(r"[*?[]")


def artifact_name(kind: AssetKind, set_name: str) -> str:
    """File name of the built artifact for a set, e.g. ``base.min.js``."""
    return f"{set_name}.min.{kind.extension}"


class GlobResolver:
    """Expands a set's glob patterns into a deduplicated, ordered file list."""

    def __init__(self, settings: Settings, asset_config: AssetSetConfig) -> None:
        """Initialize the resolver."""
        self.settings = settings
        self.asset_config = asset_config

    def public_url(self, kind: AssetKind, filename: str) -> str:
        """Return the URL of a file under a kind's root.

        Example::

            resolver.public_url(AssetKind.SCRIPT, "/srv/app/public/js/app.js")
            # "/js/app.js"
        """
        root = self.settings.kind_root(kind)
        relative = filename[len(root) :] if filename.startswith(root) else filename
        return squeeze_slashes(f"{self.settings.kind_url(kind)}/{relative}")

    def artifact_path(self, kind: AssetKind, set_name: str) -> str:
        """Filesystem path of the artifact a set builds to."""
        root = self.settings.kind_root(kind)
        return squeeze_slashes(f"{root}/{artifact_name(kind, set_name)}")

    def artifact_paths(self, kind: AssetKind) -> set[str]:
        """Paths of every artifact this kind's sets build to."""
        return {
            self.artifact_path(kind, set_name)
            for set_name in self.asset_config.sets(kind)
        }

    def resolve(self, kind: AssetKind, set_name: str) -> list[ResolvedAsset]:
        """Return the assets of a set, in pattern order, each file at most once.

        A literal pattern that matches nothing is still returned (without a
        cache-bust token) since it may name a file that is generated later. A
        wildcard pattern that matches nothing contributes nothing. Any of
        ``*``, ``?`` or ``[`` makes a pattern a wildcard, so a missing
        ``vendor[legacy].js`` is dropped rather than referenced.

        Only the pattern is expanded; the kind root is matched literally even
        when it contains glob characters.
        """
        patterns = self.asset_config.patterns(kind, set_name)
        root = self.settings.kind_root(kind)
        glob_root = glob.escape(root)
        artifacts = self.artifact_paths(kind)

        assets: list[ResolvedAsset] = []
        done: set[str] = set()

        for pattern in patterns:
            filepath = squeeze_slashes(f"{root}/{pattern}")
            is_wildcard = _WILDCARD.search(pattern) is not None
            files = [
                squeeze_slashes(f)
                for f in glob.glob(f"{glob_root}/{pattern}", recursive=True)
                if not os.path.isdir(f)
            ]
            if is_wildcard:
                files = [f for f in files if f not in artifacts]

            if not files and not is_wildcard and filepath not in done:
                assets.append(
                    ResolvedAsset(
                        public_url=self.public_url(kind, filepath),
                        source_path=filepath,
                    )
                )
                done.add(filepath)

            for filename in files:
                if filename in done:
                    continue
                mtime = int(os.path.getmtime(filename))
                assets.append(
                    ResolvedAsset(
                        public_url=f"{self.public_url(kind, filename)}?{mtime}",
                        source_path=filename,
                    )
                )
                done.add(filename)

        logger.debug(
            "Resolved asset set",
            kind=kind.value,
            set_name=set_name,
            count=len(assets),
        )
        return assets
