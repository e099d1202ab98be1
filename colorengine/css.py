"""
CSS color literal parsing and canonical formatting.
Supported: named, transparent, hex 3/4/6/8, rgb/rgba (modern/legacy),
hsl/hsla (modern/legacy).
Canonical output is #rrggbb[aa] for RGB-origin colors and
hsl(Hdeg S% L%[ / A%]) for HSL-origin colors.
"""

import logging
import math
import re
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field

from colorengine.convert import clamp, round_half_up
from colorengine.types import (
    BLACK,
    Color,
    CssLiteral,
    HexLiteral,
    HslLiteral,
    ParsedColorEntry,
    ParseFailure,
    RgbLiteral,
)

logger = logging.getLogger(__name__)

# CSS Color 4 named colors
NAMED: Dict[str, str] = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#00ffff",
    "aquamarine": "#7fffd4", "azure": "#f0ffff", "beige": "#f5f5dc",
    "bisque": "#ffe4c4", "black": "#000000", "blanchedalmond": "#ffebcd",
    "blue": "#0000ff", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "cyan": "#00ffff",
    "darkblue": "#00008b", "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9", "darkgreen": "#006400", "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00", "darkorchid": "#9932cc", "darkred": "#8b0000",
    "darksalmon": "#e9967a", "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f", "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3", "deeppink": "#ff1493", "deepskyblue": "#00bfff",
    "dimgray": "#696969", "dimgrey": "#696969", "dodgerblue": "#1e90ff",
    "firebrick": "#b22222", "floralwhite": "#fffaf0", "forestgreen": "#228b22",
    "fuchsia": "#ff00ff", "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff",
    "gold": "#ffd700", "goldenrod": "#daa520", "gray": "#808080",
    "green": "#008000", "greenyellow": "#adff2f", "grey": "#808080",
    "honeydew": "#f0fff0", "hotpink": "#ff69b4", "indianred": "#cd5c5c",
    "indigo": "#4b0082", "ivory": "#fffff0", "khaki": "#f0e68c",
    "lavender": "#e6e6fa", "lavenderblush": "#fff0f5", "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd", "lightblue": "#add8e6", "lightcoral": "#f08080",
    "lightcyan": "#e0ffff", "lightgoldenrodyellow": "#fafad2", "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90", "lightgrey": "#d3d3d3", "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa", "lightskyblue": "#87cefa",
    "lightslategray": "#778899", "lightslategrey": "#778899", "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0", "lime": "#00ff00", "limegreen": "#32cd32",
    "linen": "#faf0e6", "magenta": "#ff00ff", "maroon": "#800000",
    "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd", "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db", "mediumseagreen": "#3cb371", "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc", "mediumvioletred": "#c71585",
    "midnightblue": "#191970", "mintcream": "#f5fffa", "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5", "navajowhite": "#ffdead", "navy": "#000080",
    "oldlace": "#fdf5e6", "olive": "#808000", "olivedrab": "#6b8e23",
    "orange": "#ffa500", "orangered": "#ff4500", "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "peru": "#cd853f", "pink": "#ffc0cb", "plum": "#dda0dd",
    "powderblue": "#b0e0e6", "purple": "#800080", "rebeccapurple": "#663399",
    "red": "#ff0000", "rosybrown": "#bc8f8f", "royalblue": "#4169e1",
    "saddlebrown": "#8b4513", "salmon": "#fa8072", "sandybrown": "#f4a460",
    "seagreen": "#2e8b57", "seashell": "#fff5ee", "sienna": "#a0522d",
    "silver": "#c0c0c0", "skyblue": "#87ceeb", "slateblue": "#6a5acd",
    "slategray": "#708090", "slategrey": "#708090", "snow": "#fffafa",
    "springgreen": "#00ff7f", "steelblue": "#4682b4", "tan": "#d2b48c",
    "teal": "#008080", "thistle": "#d8bfd8", "tomato": "#ff6347",
    "turquoise": "#40e0d0", "violet": "#ee82ee", "wheat": "#f5deb3",
    "white": "#ffffff", "whitesmoke": "#f5f5f5", "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
    "transparent": "#00000000",
}

# Regular expression patterns
ws = r"\s*"
num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
perc = f"{num}%"
angle = f"{num}(?:deg|grad|rad|turn)?"
slash = f"{ws}/{ws}"
comma = f"{ws},{ws}"
sep = r"\s+"

def pct(x: str) -> float:
    """Convert percentage string to decimal."""
    return float(x.replace("%", "")) / 100

def angle_to_deg(s: str) -> float:
    """Convert angle string to degrees."""
    m = re.match(f"^({num})(deg|grad|rad|turn)?$", s, re.IGNORECASE)
    if not m:
        return 0
    v = float(m.group(1))
    unit = (m.group(2) or "deg").lower()
    if unit == "grad":
        return (v * 9) / 10
    elif unit == "rad":
        return (v * 180) / math.pi
    elif unit == "turn":
        return v * 360
    return v

def _alpha(a_val: Optional[str]) -> float:
    if a_val is None or a_val == "none":
        return 1.0
    return clamp(pct(a_val), 0, 1) if a_val.endswith("%") else clamp(float(a_val), 0, 1)

# HEX -------------------------------------------------------------

HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
BARE_HEX_RE = re.compile(r"^(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

def parse_hex(s: str) -> Optional[HexLiteral]:
    """Parse hex color string."""
    m = HEX_RE.match(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) in [3, 4]:
        h = "".join(ch + ch for ch in h)
    alpha = int(h[6:8], 16) / 255 if len(h) == 8 else 1.0
    return HexLiteral(r=int(h[0:2], 16), g=int(h[2:4], 16), b=int(h[4:6], 16), alpha=alpha)

def parse_named(s: str) -> Optional[HexLiteral]:
    """Parse named color (or transparent)."""
    hex_val = NAMED.get(s.strip().lower())
    if not hex_val:
        return None
    return parse_hex(hex_val)

# RGB -------------------------------------------------------------

RGB_MODERN_RE = re.compile(
    f"^rgba?{ws}\\({ws}({num}%?|none){sep}({num}%?|none){sep}({num}%?|none)(?:{slash}({num}|{perc}|none))?{ws}\\)$",
    re.IGNORECASE
)

RGB_LEGACY_RE = re.compile(
    f"^rgba?{ws}\\({ws}({num}%?){comma}({num}%?){comma}({num}%?)(?:{comma}({num}|{perc}))?{ws}\\)$",
    re.IGNORECASE
)

def _rgb_channel(t: str) -> float:
    if t == "none":
        return 0.0
    if t.endswith("%"):
        return clamp(pct(t) * 255, 0, 255)
    return clamp(float(t), 0, 255)

def parse_rgb(s: str) -> Optional[RgbLiteral]:
    """Parse rgb()/rgba() in either space or comma syntax."""
    m = RGB_MODERN_RE.match(s) or RGB_LEGACY_RE.match(s)
    if not m:
        return None
    R, G, B, A = m.groups()
    return RgbLiteral(r=_rgb_channel(R), g=_rgb_channel(G), b=_rgb_channel(B), alpha=_alpha(A))

# HSL -------------------------------------------------------------

HSL_MODERN_RE = re.compile(
    f"^hsla?{ws}\\({ws}({angle}|none){sep}({perc}|none){sep}({perc}|none)(?:{slash}({num}|{perc}|none))?{ws}\\)$",
    re.IGNORECASE
)

HSL_LEGACY_RE = re.compile(
    f"^hsla?{ws}\\({ws}({angle}){comma}({perc}){comma}({perc})(?:{comma}({num}|{perc}))?{ws}\\)$",
    re.IGNORECASE
)

def parse_hsl(s: str) -> Optional[HslLiteral]:
    """Parse hsl()/hsla(); hue is normalised into [0, 360)."""
    m = HSL_MODERN_RE.match(s) or HSL_LEGACY_RE.match(s)
    if not m:
        return None
    h_val, s_val, l_val, a_val = m.groups()
    h = 0 if h_val == "none" else angle_to_deg(h_val)
    h = ((h % 360) + 360) % 360
    sv = 0 if s_val == "none" else clamp(pct(s_val) * 100, 0, 100)
    lv = 0 if l_val == "none" else clamp(pct(l_val) * 100, 0, 100)
    return HslLiteral(h=h, s=sv, l=lv, alpha=_alpha(a_val))

# Top-level parse -------------------------------------------------

def parse_css_literal(input_str: str) -> CssLiteral:
    """Parse a CSS color string into a tagged literal. Never raises."""
    s = input_str.strip()
    result = parse_hex(s) or parse_named(s) or parse_rgb(s) or parse_hsl(s)
    if result is None:
        return ParseFailure(text=input_str)
    return result

def literal_to_color(literal: CssLiteral) -> Optional[Color]:
    """Build the immutable Color for a parsed literal (None for a failure)."""
    if isinstance(literal, (HexLiteral, RgbLiteral)):
        return Color.from_rgb(literal.r, literal.g, literal.b, literal.alpha)
    if isinstance(literal, HslLiteral):
        return Color.from_hsl(literal.h, literal.s, literal.l, literal.alpha)
    return None

# Formatting ------------------------------------------------------

def _byte_hex(n: float) -> str:
    return format(int(clamp(math.floor(n), 0, 255)), "02x")

def rgb_to_css_string(r: float, g: float, b: float, alpha: float = 1.0) -> str:
    """#rrggbb when opaque, otherwise #rrggbbaa. r, g, b are 0-255."""
    base = f"#{_byte_hex(round_half_up(r))}{_byte_hex(round_half_up(g))}{_byte_hex(round_half_up(b))}"
    if alpha >= 1.0:
        return base
    return base + _byte_hex(round_half_up(alpha * 255))

def hsl_to_css_string(h: float, s: float, l: float, alpha: float = 1.0) -> str:
    """hsl(Hdeg S% L%) with an optional / A% alpha. h in degrees, s and l in percent."""
    body = f"{round_half_up(h)}deg {round_half_up(s)}% {round_half_up(l)}%"
    if alpha >= 1.0:
        return f"hsl({body})"
    return f"hsl({body} / {round_half_up(alpha * 100)}%)"

def literal_to_css_string(literal: CssLiteral) -> Optional[str]:
    """Canonical string for a literal: hex for RGB origin, hsl() for HSL origin."""
    if isinstance(literal, (HexLiteral, RgbLiteral)):
        return rgb_to_css_string(literal.r, literal.g, literal.b, literal.alpha)
    if isinstance(literal, HslLiteral):
        return hsl_to_css_string(literal.h, literal.s, literal.l, literal.alpha)
    return None

# Line handling ---------------------------------------------------

def split_comment(line: str) -> Tuple[str, Optional[str]]:
    """Split a line into (text, comment) at the first //.

    A line starting with // is all comment. No // means comment is None.
    """
    line = line.strip()
    if line.startswith("//"):
        return "", line[2:].strip()
    text, marker, comment = line.partition("//")
    if not marker:
        return line, None
    return text.strip(), comment.strip()

def expand_bare_hex(text: str) -> str:
    """Prefix # onto a bare 3, 4, 6 or 8 digit hex run."""
    if BARE_HEX_RE.match(text):
        return f"#{text}"
    return text

class CodecConfig(BaseModel):
    """Border colors used to outline a swatch against itself."""

    dark_border: str = "#444"
    light_border: str = "#ccc"
    # percent; lighter colors get the dark border
    lightness_threshold: float = Field(default=40.0, ge=0, le=100)

class CssColorCodec:
    """Turns palette lines into ParsedColorEntry values using injected border colors."""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    def contrast_for(self, lightness_percent: float) -> str:
        if lightness_percent > self.config.lightness_threshold:
            return self.config.dark_border
        return self.config.light_border

    def _blank(self, kind: str, comment: Optional[str]) -> ParsedColorEntry:
        return ParsedColorEntry(
            kind=kind,
            css="#000",
            contrast_css="#fff",
            comment=comment,
            color=BLACK,
        )

    def parse(self, line: str) -> ParsedColorEntry:
        """Classify one line as color, lineSeparator or invalid. Never raises."""
        text, comment = split_comment(line)
        text = expand_bare_hex(text)

        if text.startswith("-"):
            return self._blank("lineSeparator", comment)

        literal = parse_css_literal(text)
        color = literal_to_color(literal)
        if color is None:
            return self._blank("invalid", comment)

        if isinstance(literal, HslLiteral):
            # judged on the literal's own lightness, not a recomputed one
            contrast = self.contrast_for(literal.l)
        else:
            contrast = self.contrast_for(color.hsl[2])

        return ParsedColorEntry(
            kind="color",
            css=literal_to_css_string(literal),
            contrast_css=contrast,
            comment=comment,
            color=color,
        )

    def parse_color(self, text: str) -> Optional[ParsedColorEntry]:
        """Parse a single color value; None unless it is a color."""
        entry = self.parse(text)
        if entry.kind != "color":
            logger.debug("not a color: %r", text)
            return None
        return entry

default_codec = CssColorCodec()
