"""Exceptions raised by setminify."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import AssetKind


class SetMinifyError(Exception):
    """Base class for setminify errors."""


class ConfigError(SetMinifyError):
    """Unknown kind or set, or malformed asset configuration."""


class CompressionError(SetMinifyError):
    """A compressor failed to minify its input."""

    def __init__(
        self,
        message: str,
        kind: "AssetKind | None" = None,
        set_name: str | None = None,
    ):
        """Initialize compression error."""
        super().__init__(message)
        self.kind = kind
        self.set_name = set_name
