"""Tests for script and style compressors."""

from unittest.mock import patch

import pytest

from setminify.assets.compressor import (
    ScriptCompressor,
    StyleCompressor,
    compressor_for,
)
from setminify.utils.errors import CompressionError
from setminify.utils.types import AssetKind


class TestStyleCompressor:
    """Test the lexical CSS minifier."""

    def test_documented_example(self):
        """Rules collapse to a single line without trailing semicolons."""
        compressor = StyleCompressor()

        result = compressor.compress(b".a { color: red; }\n.b{margin:0;}")

        assert result == b".a{color:red}.b{margin:0}"

    def test_removes_block_comments(self):
        """Block comments disappear, including the space around them."""
        compressor = StyleCompressor()

        result = compressor.compress(b"/* header */\n.a {\n  color : red ;\n}\n")

        assert result == b".a{color:red}"

    def test_comments_are_non_greedy(self):
        """Text between two comments survives."""
        compressor = StyleCompressor()

        result = compressor.compress(b"/* a */ .x { top: 0 } /* b */")

        assert result == b".x{top:0}"

    def test_tersifies_delimiters(self):
        """Whitespace around selector and declaration delimiters is removed."""
        compressor = StyleCompressor()

        result = compressor.compress(b"ul > li , ol > li { margin : 0 ; padding : 0 }")

        assert result == b"ul>li,ol>li{margin:0;padding:0}"

    def test_multiple_rules_end_on_one_line(self):
        """No line breaks remain in the output."""
        compressor = StyleCompressor()

        result = compressor.compress(b".a { x: 1; }\n\n.b { y: 2; }\n")

        assert result == b".a{x:1}.b{y:2}"
        assert b"\n" not in result

    @pytest.mark.parametrize(
        "source",
        [
            b".a { color: red; }\n.b{margin:0;}",
            b"/* c */ body { font: 12px/1.5 sans-serif; }\n\nh1 , h2 { margin : 0 }",
            b"a > b { x : y }   c{ d:e ; }",
            b"",
        ],
    )
    def test_idempotent(self, source):
        """Compressing minified output changes nothing."""
        compressor = StyleCompressor()
        once = compressor.compress(source)

        assert compressor.compress(once) == once

    def test_empty_input(self):
        """Empty input stays empty."""
        assert StyleCompressor().compress(b"   \n\t ") == b""


class TestScriptCompressor:
    """Test JavaScript minification."""

    def test_minifies_and_keeps_statement_order(self):
        """Statements keep their order and lose redundant whitespace."""
        compressor = ScriptCompressor()

        result = compressor.compress(b"var a = 1;\n\n// note\nvar b = 2;")

        assert b"note" not in result
        assert b"a=1" in result
        assert result.index(b"a=1") < result.index(b"b=2")

    def test_minifier_failure_raises_compression_error(self):
        """Failures of the minifier surface as compression errors."""
        compressor = ScriptCompressor()

        with patch(
            "setminify.assets.compressor.rjsmin.jsmin",
            side_effect=ValueError("boom"),
        ):
            with pytest.raises(CompressionError, match="boom") as exc_info:
                compressor.compress(b"var a = 1;")

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_undecodable_source_raises_compression_error(self):
        """Non UTF-8 input cannot be minified."""
        with pytest.raises(CompressionError):
            ScriptCompressor().compress(b"var a = '\xff';")


class TestCompressorFor:
    """Test compressor selection."""

    def test_selects_by_kind(self):
        """Each kind has its own compressor."""
        assert isinstance(compressor_for(AssetKind.SCRIPT), ScriptCompressor)
        assert isinstance(compressor_for(AssetKind.STYLE), StyleCompressor)

    def test_every_kind_is_covered(self):
        """No kind is left without a compressor."""
        for kind in AssetKind:
            assert compressor_for(kind).kind is kind
