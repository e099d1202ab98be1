"""Text palette endpoints: parse palette source, find the closest palette color."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from colorengine.css import CssColorCodec
from colorengine.textpalette import correct_color, parse_text_palette
from colorengine.types import Palette
from config import get_codec
from schemas.requests import ClosestMatchRequest, ParsePaletteRequest
from schemas.responses import ClosestMatchResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/parse_text_palette", response_model=Palette, operation_id="parse_text_palette", description="Parse palette text into rows of colors; unparsable lines are skipped")
async def parse_palette(request: ParsePaletteRequest, codec: CssColorCodec = Depends(get_codec)):
    palette = parse_text_palette(request.text, codec)
    logger.info("parsed palette: %d rows, %d colors", len(palette.rows), len(palette.flat))
    return palette

@router.post("/find_closest_match", response_model=ClosestMatchResponse, responses={400: {"model": ErrorResponse}}, operation_id="find_closest_match", description="Find the palette color perceptually closest to a CSS color (needs at least 2 palette colors)")
async def find_closest(request: ClosestMatchRequest, codec: CssColorCodec = Depends(get_codec)):
    if codec.parse_color(request.code) is None:
        raise HTTPException(status_code=400, detail="Invalid CSS color")
    palette = parse_text_palette(request.palette_text, codec)
    exact, match = correct_color(request.code, palette, codec)
    return ClosestMatchResponse(exact=exact, match=match)
