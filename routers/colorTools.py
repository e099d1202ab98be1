"""
Single-color endpoints: canonical conversion and full color detail.
Parsing and conversion live in colorengine; this module only adapts them to HTTP.
"""

from fastapi import APIRouter, Depends, HTTPException

from colorengine.css import CssColorCodec, hsl_to_css_string, rgb_to_css_string
from colorengine.textpalette import parse_palette_entry
from colorengine.types import ParsedColorEntry
from config import get_codec
from schemas.requests import ColorConvertRequest, DescribeColorRequest
from schemas.responses import ColorDetail, ErrorResponse, SuccessResponse

router = APIRouter()

def _parse_or_400(code: str, codec: CssColorCodec) -> ParsedColorEntry:
    entry = parse_palette_entry(code, codec)
    if entry.kind != "color":
        raise HTTPException(status_code=400, detail="Invalid CSS color")
    return entry

@router.post("/convert_color_code", response_model=SuccessResponse, responses={400: {"model": ErrorResponse}}, operation_id="convert_color_code", description="Convert a CSS color code to a canonical hex or hsl() string")
async def convert_color_code(request: ColorConvertRequest, codec: CssColorCodec = Depends(get_codec)):
    """Parse CSS color and convert to target format."""
    color = _parse_or_400(request.code, codec).color
    if request.target == "hex":
        return SuccessResponse(success=True, message=rgb_to_css_string(*color.rgb, color.alpha))
    return SuccessResponse(success=True, message=hsl_to_css_string(*color.hsl, color.alpha))

@router.post("/describe_color", response_model=ColorDetail, responses={400: {"model": ErrorResponse}}, operation_id="describe_color", description="Show a color in every supported space, with its contrast border and any blend bundle")
async def describe_color(request: DescribeColorRequest, codec: CssColorCodec = Depends(get_codec)):
    entry = _parse_or_400(request.code, codec)
    color = entry.color
    return ColorDetail(
        css=entry.css,
        contrast_css=entry.contrast_css,
        alpha=color.alpha,
        hex=rgb_to_css_string(*color.rgb, color.alpha),
        hsl=hsl_to_css_string(*color.hsl, color.alpha),
        lab=color.lab,
        cmyk=color.cmyk,
        comment=entry.comment,
        bundle=entry.bundle,
    )
