"""Tests for combining set sources."""

from unittest.mock import MagicMock

import pytest

from setminify.assets.combiner import Combiner
from setminify.assets.resolver import GlobResolver
from setminify.utils.config import AssetSetConfig
from setminify.utils.types import AssetKind, ResolvedAsset


@pytest.fixture
def combiner(make_settings, asset_config) -> Combiner:
    """Return a combiner over the shared asset configuration."""
    return Combiner(GlobResolver(make_settings(), asset_config))


def test_joins_sources_in_order(combiner, js_dir, write_file):
    """Sources are joined with a newline, in resolution order."""
    write_file(js_dir / "a.js", "var a=1;")
    write_file(js_dir / "b.js", "var b=2;")

    assert combiner.combine(AssetKind.SCRIPT, "base") == b"var a=1;\nvar b=2;"


def test_trims_outer_whitespace(combiner, js_dir, write_file):
    """Leading and trailing whitespace of the whole buffer is removed."""
    write_file(js_dir / "a.js", "\n\n  var a=1;")
    write_file(js_dir / "b.js", "var b=2;  \n\n")

    assert combiner.combine(AssetKind.SCRIPT, "base") == b"var a=1;\nvar b=2;"


def test_keeps_inner_whitespace(combiner, js_dir, write_file):
    """Whitespace between files is left alone."""
    write_file(js_dir / "a.js", "var a=1;\n")
    write_file(js_dir / "b.js", "var b=2;")

    assert combiner.combine(AssetKind.SCRIPT, "base") == b"var a=1;\n\nvar b=2;"


def test_missing_literal_source_raises(combiner, js_dir, write_file):
    """A literal pattern whose file is absent cannot be combined."""
    write_file(js_dir / "a.js", "var a=1;")

    with pytest.raises(FileNotFoundError):
        combiner.combine(AssetKind.SCRIPT, "base")


def test_source_removed_after_resolution_raises(tmp_path):
    """A file that vanished between resolution and reading is not masked."""
    resolver = MagicMock(spec=GlobResolver)
    resolver.resolve.return_value = [
        ResolvedAsset(public_url="/js/gone.js?1", source_path=str(tmp_path / "gone.js"))
    ]

    with pytest.raises(OSError):
        Combiner(resolver).combine(AssetKind.SCRIPT, "base")


def test_empty_set(make_settings):
    """A set with no patterns combines to nothing."""
    config = AssetSetConfig.from_mapping({"css": {"empty": []}})
    combiner = Combiner(GlobResolver(make_settings(), config))

    assert combiner.combine(AssetKind.STYLE, "empty") == b""
