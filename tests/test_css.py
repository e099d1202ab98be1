"""Tests for colorengine.css: literal parsing, canonical strings and palette line codec."""

import pytest

from colorengine.css import (
    CodecConfig,
    CssColorCodec,
    default_codec,
    expand_bare_hex,
    hsl_to_css_string,
    parse_css_literal,
    rgb_to_css_string,
    split_comment,
)
from colorengine.types import HexLiteral, HslLiteral, ParseFailure, RgbLiteral


class TestParseCssLiteral:
    def test_hex(self):
        lit = parse_css_literal("#abc")
        assert isinstance(lit, HexLiteral)
        assert (lit.r, lit.g, lit.b) == (0xAA, 0xBB, 0xCC)

    def test_hex_with_alpha(self):
        lit = parse_css_literal("#ff000080")
        assert lit.alpha == pytest.approx(128 / 255)

    def test_named_resolves_to_hex(self):
        lit = parse_css_literal("Red")
        assert isinstance(lit, HexLiteral)
        assert (lit.r, lit.g, lit.b) == (255, 0, 0)

    def test_transparent(self):
        lit = parse_css_literal("transparent")
        assert isinstance(lit, HexLiteral)
        assert lit.alpha == 0

    def test_rgb_legacy_and_modern(self):
        for text in ("rgb(255, 0, 0)", "rgb(255 0 0)", "rgba(255,0,0,1)", "rgb(100% 0% 0%)"):
            lit = parse_css_literal(text)
            assert isinstance(lit, RgbLiteral), text
            assert (lit.r, lit.g, lit.b) == (255, 0, 0)

    def test_hsl_hue_normalised(self):
        assert parse_css_literal("hsl(-120deg 100% 50%)").h == 240
        assert parse_css_literal("hsl(0.5turn 100% 50%)").h == pytest.approx(180)

    def test_hsl_keeps_percent(self):
        lit = parse_css_literal("hsl(120, 100%, 25%)")
        assert isinstance(lit, HslLiteral)
        assert (lit.h, lit.s, lit.l) == (120, 100, 25)

    def test_failure_never_raises(self):
        for text in ("", "nope", "rgb(1,2)", "#12345", "hsl(red)"):
            lit = parse_css_literal(text)
            assert isinstance(lit, ParseFailure)
            assert lit.text == text


class TestFormatting:
    def test_rgb_rounds_half_up(self):
        assert rgb_to_css_string(0.4, 15.6, 254.5) == "#0010ff"

    def test_rgb_alpha_suffix(self):
        assert rgb_to_css_string(255, 0, 0, 1.0) == "#ff0000"
        assert rgb_to_css_string(255, 0, 0, 0.5) == "#ff000080"

    def test_hsl_rounds(self):
        assert hsl_to_css_string(120.4, 99.6, 50) == "hsl(120deg 100% 50%)"

    def test_hsl_alpha_percent(self):
        assert hsl_to_css_string(0, 100, 50, 0.5) == "hsl(0deg 100% 50% / 50%)"


class TestSplitComment:
    def test_color_and_comment(self):
        assert split_comment("red // hi") == ("red", "hi")

    def test_only_comment(self):
        assert split_comment("// hi") == ("", "hi")

    def test_no_comment(self):
        assert split_comment("red") == ("red", None)

    def test_strips_whitespace(self):
        assert split_comment("  #fff  //  x ") == ("#fff", "x")

    def test_empty_comment(self):
        assert split_comment("red //") == ("red", "")

    def test_expand_bare_hex(self):
        assert expand_bare_hex("f00") == "#f00"
        assert expand_bare_hex("red") == "red"


class TestCodecParse:
    def test_hex_line(self):
        entry = default_codec.parse("#ff0000")
        assert entry.kind == "color"
        assert entry.css == "#ff0000"
        assert entry.color.rgb == (255, 0, 0)
        assert entry.color.hsl == pytest.approx((0, 100, 50))

    def test_rgb_line_canonicalises_to_hex(self):
        entry = default_codec.parse("rgb(255, 0, 0)")
        assert entry.css == "#ff0000"
        assert entry.color.rgb == (255, 0, 0)

    def test_bare_hex(self):
        assert default_codec.parse("f00").css == "#ff0000"

    def test_named(self):
        assert default_codec.parse("red").css == "#ff0000"

    def test_uppercase_hex_is_lowercased(self):
        assert default_codec.parse("#FF0000").css == "#ff0000"

    def test_hsl_line_keeps_hsl_form(self):
        entry = default_codec.parse("hsl(120, 100%, 25%)")
        assert entry.css == "hsl(120deg 100% 25%)"
        assert entry.color.rgb == (0, 128, 0)

    def test_alpha_forms(self):
        assert default_codec.parse("rgb(255 0 0 / 50%)").css == "#ff000080"
        assert default_codec.parse("hsl(0deg 100% 50% / 50%)").css == "hsl(0deg 100% 50% / 50%)"
        assert default_codec.parse("transparent").css == "#00000000"

    def test_comment_kept(self):
        entry = default_codec.parse("blue // sky")
        assert entry.kind == "color"
        assert entry.comment == "sky"

    def test_separator(self):
        for line in ("-", "---", "-- // note"):
            entry = default_codec.parse(line)
            assert entry.kind == "lineSeparator"
            assert entry.css == "#000"

    def test_invalid(self):
        entry = default_codec.parse("notacolor")
        assert entry.kind == "invalid"
        assert entry.css == "#000"
        assert entry.contrast_css == "#fff"

    def test_comment_only_line_is_invalid(self):
        entry = default_codec.parse("// just words")
        assert entry.kind == "invalid"
        assert entry.comment == "just words"

    def test_parse_color(self):
        assert default_codec.parse_color("red").css == "#ff0000"
        assert default_codec.parse_color("-") is None
        assert default_codec.parse_color("nope") is None

    def test_hex_round_trip(self):
        for rgb in [(0, 0, 0), (255, 255, 255), (12, 200, 99), (1, 2, 3)]:
            entry = default_codec.parse(rgb_to_css_string(*rgb))
            assert entry.color.rgb == rgb


class TestContrast:
    def test_light_color_gets_dark_border(self):
        assert default_codec.parse("#ffffff").contrast_css == "#444"

    def test_dark_color_gets_light_border(self):
        assert default_codec.parse("#000000").contrast_css == "#ccc"

    def test_threshold_is_exclusive(self):
        assert default_codec.parse("hsl(0deg 0% 40%)").contrast_css == "#ccc"
        assert default_codec.parse("hsl(0deg 0% 41%)").contrast_css == "#444"

    def test_injected_config(self):
        codec = CssColorCodec(CodecConfig(dark_border="#000", light_border="#fff", lightness_threshold=50))
        assert codec.parse("hsl(0deg 0% 45%)").contrast_css == "#fff"
        assert codec.parse("hsl(0deg 0% 55%)").contrast_css == "#000"
