"""Bilinear color blend grids.

Corners A (top-left), B (top-right), C (bottom-left) and D (bottom-right)
are interpolated across an (N+2) x (N+2) grid in the chosen color space:
first A->B and C->D along x, then top->bottom along y, every channel plus
alpha independently. Cells are emitted as canonical hex strings.

In linked mode D is A, and cells past the anti-diagonal are shown as blank
spacers; the numeric grid is always complete.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from colorengine.convert import cmyk_to_rgb, hsl_to_rgb, lab_to_rgb, lerp
from colorengine.css import CssColorCodec, default_codec, rgb_to_css_string
from colorengine.errors import InvalidColorError, UnknownBlendMethodError
from colorengine.types import BLEND_METHODS, BlendGrid, BlendParams, Color, ParsedColorEntry

logger = logging.getLogger(__name__)

def color_channels(color: Color, method: str) -> Tuple[float, ...]:
    """The channels of `color` that get interpolated for `method`, alpha last."""
    if method == "rgb":
        channels = color.rgb
    elif method == "hsl":
        channels = color.hsl
    elif method == "lab":
        channels = color.lab
    elif method == "cmyk":
        channels = color.cmyk
    else:
        raise UnknownBlendMethodError(f"Unknown blend method: {method!r}. Available: {', '.join(BLEND_METHODS)}")
    return tuple(channels) + (color.alpha,)

def channels_to_css(channels: Sequence[float], method: str) -> str:
    """Convert interpolated channels (alpha last) back to a canonical hex string."""
    *values, alpha = channels
    if method == "rgb":
        r, g, b = values
    elif method == "hsl":
        h, s, l = values
        r, g, b = hsl_to_rgb(h / 360, s / 100, l / 100)
    elif method == "lab":
        r, g, b = lab_to_rgb(tuple(values))
    elif method == "cmyk":
        r, g, b = cmyk_to_rgb(*values)
    else:
        raise UnknownBlendMethodError(f"Unknown blend method: {method!r}. Available: {', '.join(BLEND_METHODS)}")
    return rgb_to_css_string(r, g, b, alpha)

def blend_cell(
    a: Tuple[float, ...],
    b: Tuple[float, ...],
    c: Tuple[float, ...],
    d: Tuple[float, ...],
    tx: float,
    ty: float,
) -> List[float]:
    """Bilinear interpolation of four channel tuples."""
    top = [lerp(x, y, tx) for x, y in zip(a, b)]
    bottom = [lerp(x, y, tx) for x, y in zip(c, d)]
    return [lerp(x, y, ty) for x, y in zip(top, bottom)]

def _parse_corners(params: BlendParams, codec: CssColorCodec) -> List[ParsedColorEntry]:
    corners = []
    for text in params.corners():
        entry = codec.parse_color(text)
        if entry is None:
            raise InvalidColorError(text)
        corners.append(entry)
    return corners

def generate_grid(params: BlendParams, codec: CssColorCodec = default_codec) -> BlendGrid:
    """Build the full blend grid for params. Corner cells hold the corners' canonical strings."""
    if params.method not in BLEND_METHODS:
        raise UnknownBlendMethodError(f"Unknown blend method: {params.method!r}. Available: {', '.join(BLEND_METHODS)}")
    ea, eb, ec, ed = _parse_corners(params, codec)
    ca, cb, cc, cd = (color_channels(e.color, params.method) for e in (ea, eb, ec, ed))

    n = params.grid_size
    last = n + 1
    corner_cells = {(0, 0): ea.css, (last, 0): eb.css, (0, last): ec.css, (last, last): ed.css}

    cells: List[List[str]] = []
    for iy in range(last + 1):
        ty = iy / last
        row: List[str] = []
        for ix in range(last + 1):
            corner = corner_cells.get((ix, iy))
            if corner is not None:
                row.append(corner)
                continue
            tx = ix / last
            row.append(channels_to_css(blend_cell(ca, cb, cc, cd, tx, ty), params.method))
        cells.append(row)

    logger.debug("generated %dx%d %s grid (linked=%s)", last + 1, last + 1, params.method, params.linked)
    return BlendGrid(cells=cells, params=params)

def is_masked(ix: int, iy: int, n: int) -> bool:
    """True for linked-mode cells past the anti-diagonal, drawn as blank spacers."""
    return ix > n - iy + 1

def display_rows(grid: BlendGrid) -> List[List[Optional[str]]]:
    """Grid cells for display: masked cells become None in linked mode."""
    if not grid.params.linked:
        return [list(row) for row in grid.cells]
    n = grid.params.grid_size
    return [
        [None if is_masked(ix, iy, n) else cell for ix, cell in enumerate(row)]
        for iy, row in enumerate(grid.cells)
    ]
