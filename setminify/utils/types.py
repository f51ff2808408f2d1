"""Type definitions for setminify."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError


class AssetKind(str, Enum):
    """Categories of static assets handled by the pipeline."""

    SCRIPT = "js"
    STYLE = "css"

    @property
    def extension(self) -> str:
        """File extension used for this kind's artifacts."""
        return self.value

    @classmethod
    def parse(cls, name: str) -> "AssetKind":
        """Look up a kind by its configuration name (``js`` or ``css``)."""
        try:
            return cls(name.lower())
        except ValueError:
            raise ConfigError(
                f"Unknown asset kind: {name!r} (expected 'js' or 'css')"
            ) from None


# Build and clean iterate kinds in this order.
KIND_ORDER: tuple[AssetKind, ...] = (AssetKind.SCRIPT, AssetKind.STYLE)


class ResolvedAsset(BaseModel):
    """A source file matched by a set's glob patterns."""

    model_config = ConfigDict(frozen=True)

    public_url: str = Field(..., description="Public URL, with cache-bust token")
    source_path: str = Field(..., description="Absolute filesystem path")


class AssetReference(BaseModel):
    """Markup-ready reference handed to templates."""

    model_config = ConfigDict(frozen=True)

    kind: AssetKind = Field(..., description="Kind of asset referenced")
    url: str = Field(..., description="Public URL including cache-bust token")
    path: str = Field(..., description="Filesystem path the URL points to")
    minified: bool = Field(
        default=False, description="Whether this references a built artifact"
    )
