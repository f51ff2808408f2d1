"""Asset pipeline: resolve, combine, compress and reference asset sets."""

from .builder import ArtifactBuilder
from .combiner import Combiner
from .compressor import Compressor, ScriptCompressor, StyleCompressor, compressor_for
from .freshness import FreshnessGate
from .manager import AssetManager
from .markup import AssetHelpers, render_tags
from .resolver import GlobResolver

__all__ = [
    "ArtifactBuilder",
    "AssetHelpers",
    "AssetManager",
    "Combiner",
    "Compressor",
    "FreshnessGate",
    "GlobResolver",
    "ScriptCompressor",
    "StyleCompressor",
    "compressor_for",
    "render_tags",
]
