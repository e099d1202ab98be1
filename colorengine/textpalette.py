"""Text palette parsing: one color per line, `-` lines break rows, `//` comments may carry a blend bundle.

    red
    #00f            // a comment
    -
    hsl(120deg 100% 25%) // {"c":["red","white","black"],"m":"lab","z":4,"op":"row"}

A bundle on a color line applies to that color and every following color
until a row break or another bundle. Palettes are rebuilt from the full text
on every parse; nothing is patched incrementally.
"""

import json
import logging
import math
from functools import reduce
from typing import NamedTuple, Optional, Tuple

from colorengine.css import CssColorCodec, default_codec
from colorengine.distance import delta_e
from colorengine.types import BlendBundle, Palette, ParsedColorEntry

logger = logging.getLogger(__name__)

def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")

def parse_bundle(comment: Optional[str]) -> Optional[BlendBundle]:
    """Decode a comment as a blend bundle, or None if it is not one."""
    if comment is None:
        return None
    try:
        data = json.loads(comment, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None

    c, m, z, op = data.get("c"), data.get("m"), data.get("z"), data.get("op")
    if not (isinstance(c, list) and all(isinstance(x, str) for x in c)):
        return None
    # bool is an int subclass but is not a JSON number
    if isinstance(z, bool) or not isinstance(z, (int, float)):
        return None
    # 1e999 decodes to inf
    if isinstance(z, float) and not math.isfinite(z):
        return None
    if not (isinstance(m, str) and isinstance(op, str)):
        return None
    return BlendBundle(c=c, m=m, z=z, op=op)

def parse_line(line: str, codec: CssColorCodec = default_codec) -> ParsedColorEntry:
    """Parse one palette line; bundle is the line's own bundle only."""
    entry = codec.parse(line)
    bundle = parse_bundle(entry.comment)
    if bundle is None:
        if entry.comment:
            logger.debug("comment is not a blend bundle: %r", entry.comment)
        return entry
    return entry.model_copy(update={"bundle": bundle})

def parse_palette_entry(css: str, codec: CssColorCodec = default_codec) -> ParsedColorEntry:
    """Parse a single color string as a palette entry (used for grid swatches)."""
    return parse_line(css, codec)

# Palette fold ----------------------------------------------------

class FoldState(NamedTuple):
    rows: Tuple[Tuple[ParsedColorEntry, ...], ...] = ()
    row: Tuple[ParsedColorEntry, ...] = ()
    flat: Tuple[ParsedColorEntry, ...] = ()
    bundle: Optional[BlendBundle] = None

def fold_entry(state: FoldState, entry: ParsedColorEntry) -> FoldState:
    """Apply one parsed line to the palette accumulator."""
    own = entry.bundle
    if entry.kind == "color":
        attached = entry.model_copy(update={"bundle": own or state.bundle})
        return state._replace(
            row=state.row + (attached,),
            flat=state.flat + (attached,),
            bundle=own or state.bundle,
        )
    if entry.kind == "lineSeparator":
        # a row break clears the inherited bundle; `-- // {...}` then installs its own
        return state._replace(rows=state.rows + (state.row,), row=(), bundle=own)
    return state

def fold_line(state: FoldState, line: str, codec: CssColorCodec = default_codec) -> FoldState:
    return fold_entry(state, parse_line(line, codec))

def parse_text_palette(text: str, codec: CssColorCodec = default_codec) -> Palette:
    """Parse palette source text into rows and a flat list."""
    state = reduce(lambda st, line: fold_line(st, line, codec), text.split("\n"), FoldState())
    rows = list(state.rows)
    if state.row:
        rows.append(state.row)
    return Palette(rows=[list(r) for r in rows], flat=list(state.flat))

# Lookup ----------------------------------------------------------

def find_closest_match(
    target: str, palette: Palette, codec: CssColorCodec = default_codec
) -> Optional[ParsedColorEntry]:
    """Perceptually nearest palette entry to target.

    Palettes with fewer than two colors never match, not even an identical color.
    Ties go to the earliest entry.
    """
    if len(palette.flat) < 2:
        logger.debug("palette not big enough (%d colors)", len(palette.flat))
        return None
    parsed = codec.parse_color(target)
    if parsed is None:
        logger.debug("unable to parse color %r", target)
        return None

    best = palette.flat[0]
    best_distance = delta_e(best.color.lab, parsed.color.lab)
    for entry in palette.flat[1:]:
        d = delta_e(entry.color.lab, parsed.color.lab)
        if d < best_distance:
            best_distance = d
            best = entry
    return best

def find_exact_match(
    target: str, palette: Palette, codec: CssColorCodec = default_codec
) -> Optional[ParsedColorEntry]:
    """First entry whose canonical string equals the target's."""
    parsed = codec.parse_color(target)
    if parsed is None:
        return None
    return next((e for e in palette.flat if e.css == parsed.css), None)

def correct_color(
    target: str, palette: Palette, codec: CssColorCodec = default_codec
) -> Tuple[bool, Optional[ParsedColorEntry]]:
    """(True, entry) if target is already in the palette, else (False, closest match)."""
    exact = find_exact_match(target, palette, codec)
    if exact is not None:
        return True, exact
    return False, find_closest_match(target, palette, codec)
