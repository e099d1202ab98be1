"""Shared types for the color engine: Color, CSS literals, palette entries, blend bundles, grids."""

from __future__ import annotations

import json
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from colorengine.convert import hsl_to_rgb, rgb_to_cmyk, rgb_to_hsl, rgb_to_lab

class Color(BaseModel):
    """An immutable color with every derived space computed up front.

    rgb: 0-255 (may be fractional), hsl: degrees / percent / percent,
    lab: L 0-100 and a/b roughly -128..127, cmyk: 0-1 each.
    """

    model_config = ConfigDict(frozen=True)

    rgb: Tuple[float, float, float]
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)
    hsl: Tuple[float, float, float]
    lab: Tuple[float, float, float]
    cmyk: Tuple[float, float, float, float]

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> Color:
        """Build from RGB 0-255; RGB is authoritative."""
        h, s, l = rgb_to_hsl(r, g, b)
        return cls(
            rgb=(r, g, b),
            alpha=alpha,
            hsl=(h * 360, s * 100, l * 100),
            lab=rgb_to_lab((r, g, b)),
            cmyk=rgb_to_cmyk(r, g, b),
        )

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: float = 1.0) -> Color:
        """Build from HSL in degrees / percent / percent; HSL is authoritative."""
        rgb = hsl_to_rgb(h / 360, s / 100, l / 100)
        return cls(
            rgb=rgb,
            alpha=alpha,
            hsl=(h, s, l),
            lab=rgb_to_lab(rgb),
            cmyk=rgb_to_cmyk(*rgb),
        )

BLACK = Color.from_rgb(0, 0, 0)

# CSS literals ----------------------------------------------------

class HexLiteral(BaseModel):
    """#rgb, #rgba, #rrggbb, #rrggbbaa, or a named color resolved to hex."""

    kind: Literal["hex"] = "hex"
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

class RgbLiteral(BaseModel):
    kind: Literal["rgb"] = "rgb"
    r: float = Field(ge=0, le=255)
    g: float = Field(ge=0, le=255)
    b: float = Field(ge=0, le=255)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

class HslLiteral(BaseModel):
    """h in degrees [0, 360), s and l in percent."""

    kind: Literal["hsl"] = "hsl"
    h: float
    s: float = Field(ge=0, le=100)
    l: float = Field(ge=0, le=100)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

class ParseFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    text: str

CssLiteral = Union[HexLiteral, RgbLiteral, HslLiteral, ParseFailure]

# Palette text ----------------------------------------------------

EntryKind = Literal["color", "lineSeparator", "invalid"]

class BlendBundle(BaseModel):
    """Blend parameters embedded as JSON in a palette comment.

    Field names match the wire format: c=corners, m=method, z=grid size, op=operation.
    """

    model_config = ConfigDict(frozen=True)

    c: List[str]
    m: str
    z: Union[int, Annotated[float, Field(allow_inf_nan=False)]]
    op: str

    def to_json(self) -> str:
        """Compact JSON, the same form that is embedded in comments."""
        return json.dumps(self.model_dump(), separators=(",", ":"))

class ParsedColorEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: EntryKind
    css: str
    contrast_css: str
    comment: Optional[str] = None
    color: Color
    bundle: Optional[BlendBundle] = None

class Palette(BaseModel):
    rows: List[List[ParsedColorEntry]] = Field(default_factory=list)
    flat: List[ParsedColorEntry] = Field(default_factory=list)

# Blending --------------------------------------------------------

BlendMethod = Literal["rgb", "hsl", "lab", "cmyk"]
BLEND_METHODS: Tuple[str, ...] = ("rgb", "hsl", "lab", "cmyk")

UNSET_OP = "(not set)"

class BlendParams(BaseModel):
    """The inputs of a blend grid. When linked, corner D is forced to corner A."""

    model_config = ConfigDict(frozen=True)

    corner_a: str = "red"
    corner_b: str = "white"
    corner_c: str = "black"
    corner_d: str = "green"
    method: BlendMethod = "lab"
    grid_size: int = Field(default=4, ge=1)
    linked: bool = True

    def corners(self) -> Tuple[str, str, str, str]:
        """A (top-left), B (top-right), C (bottom-left), D (bottom-right)."""
        d = self.corner_a if self.linked else self.corner_d
        return self.corner_a, self.corner_b, self.corner_c, d

    def to_bundle(self, op: str = UNSET_OP) -> BlendBundle:
        c = [self.corner_a, self.corner_b, self.corner_c]
        if not self.linked:
            c.append(self.corner_d)
        return BlendBundle(c=c, m=self.method, z=self.grid_size, op=op)

    @classmethod
    def from_bundle(cls, bundle: BlendBundle) -> BlendParams:
        """Three corners means linked mode; four sets corner D explicitly."""
        if len(bundle.c) not in (3, 4):
            raise ValueError(f"Blend bundle needs 3 or 4 corners, got {len(bundle.c)}")
        if isinstance(bundle.z, float) and not bundle.z.is_integer():
            raise ValueError(f"Blend bundle grid size must be an integer, got {bundle.z}")
        linked = len(bundle.c) == 3
        return cls(
            corner_a=bundle.c[0],
            corner_b=bundle.c[1],
            corner_c=bundle.c[2],
            corner_d=bundle.c[0] if linked else bundle.c[3],
            method=bundle.m,
            grid_size=int(bundle.z),
            linked=linked,
        )

class BlendGrid(BaseModel):
    """(grid_size + 2) square rows of canonical color strings, indexed cells[iy][ix]."""

    cells: List[List[str]]
    params: BlendParams

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

class Selection(BaseModel):
    """Cells extracted from a grid, with the grid's bundle stamped with the operation."""

    cells: List[str]
    bundle: BlendBundle
