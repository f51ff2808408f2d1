"""Concatenation of a set's source files."""

from pathlib import Path

import structlog

from ..utils.types import AssetKind
from .resolver import GlobResolver

logger = structlog.get_logger(__name__)


class Combiner:
    """Joins the contents of a resolved set into one buffer."""

    def __init__(self, resolver: GlobResolver) -> None:
        """Initialize the combiner."""
        self.resolver = resolver

    def combine(self, kind: AssetKind, set_name: str) -> bytes:
        """Return the set's sources joined by newlines, outer whitespace trimmed.

        Raises ``OSError`` if a resolved file cannot be read, including a
        literal pattern whose file does not exist yet.
        """
        assets = self.resolver.resolve(kind, set_name)
        contents = [Path(asset.source_path).read_bytes() for asset in assets]
        combined = b"\n".join(contents).strip()

        logger.debug(
            "Combined asset set",
            kind=kind.value,
            set_name=set_name,
            files=len(contents),
            size=len(combined),
        )
        return combined
