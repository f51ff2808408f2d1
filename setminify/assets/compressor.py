"""Compressors for script and style sources."""

import re
from abc import ABC, abstractmethod

import rjsmin
import structlog

from ..utils.errors import CompressionError
from ..utils.types import AssetKind

logger = structlog.get_logger(__name__)


class Compressor(ABC):
    """Turns a combined source buffer into its minified form."""

    kind: AssetKind

    @abstractmethod
    def compress(self, source: bytes) -> bytes:
        """Return the minified form of ``source``."""


class ScriptCompressor(Compressor):
    """JavaScript minification, delegated to rjsmin."""

    kind = AssetKind.SCRIPT

    def compress(self, source: bytes) -> bytes:
        """Minify JavaScript without reordering statements."""
        try:
            return rjsmin.jsmin(source.decode("utf-8")).encode("utf-8")
        except Exception as e:
            raise CompressionError(f"Script minification failed: {e}") from e


class StyleCompressor(Compressor):
    """Lexical CSS minifier.

    This is not a CSS parser: it knows nothing of string literals or nested
    ``@media`` blocks. The substitutions run in a fixed order and each one
    relies on the ones before it (the ``"} "`` line break only fires because
    whitespace has already been collapsed to single spaces).
    """

    kind = AssetKind.STYLE

    TRANSFORMS: tuple[tuple[re.Pattern[bytes], bytes], ...] = (
        (re.compile(rb"\s+"), b" "),
        (re.compile(rb"/\*(.*?)\*/"), b""),
        (re.compile(rb"\} "), b"}\n"),
        (re.compile(rb"\n\Z"), b""),
        (re.compile(rb"[ \t]*\{[ \t]*"), b"{"),
        (re.compile(rb";[ \t]*\}"), b"}"),
        (re.compile(rb"[ \t]*([,{}>:;])[ \t]*"), rb"\1"),
        (re.compile(rb"[ \t]*\n[ \t]*"), b""),
    )

    def compress(self, source: bytes) -> bytes:
        """Minify CSS to a single line."""
        for pattern, replacement in self.TRANSFORMS:
            source = pattern.sub(replacement, source)
        return source.strip()


_COMPRESSORS: dict[AssetKind, type[Compressor]] = {
    AssetKind.SCRIPT: ScriptCompressor,
    AssetKind.STYLE: StyleCompressor,
}


def compressor_for(kind: AssetKind) -> Compressor:
    """Return the compressor for an asset kind."""
    return _COMPRESSORS[kind]()
