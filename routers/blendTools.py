"""Blend grid endpoints: generate a grid, extract selections as palette text, load a bundle."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from colorengine.blender import display_rows, generate_grid
from colorengine.css import CssColorCodec
from colorengine.errors import ColorEngineError
from colorengine.selection import append_to_palette, extract, format_fragment
from colorengine.types import BlendGrid, BlendParams
from config import Settings, get_codec, get_settings
from schemas.requests import ApplyBundleRequest, BlendGridRequest, ExtractSelectionRequest
from schemas.responses import BlendGridResponse, ErrorResponse, SelectionResponse

logger = logging.getLogger(__name__)

router = APIRouter()

def _grid_or_400(request: BlendGridRequest, codec: CssColorCodec, settings: Settings) -> BlendGrid:
    if request.grid_size > settings.max_grid_size:
        raise HTTPException(status_code=400, detail=f"grid_size may not exceed {settings.max_grid_size}")
    try:
        return generate_grid(request.to_params(), codec)
    except ColorEngineError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

@router.post("/blend_grid", response_model=BlendGridResponse, responses={400: {"model": ErrorResponse}}, operation_id="blend_grid", description="Blend four corner colors across a square grid in rgb, hsl, lab or cmyk")
async def blend_grid(
    request: BlendGridRequest,
    codec: CssColorCodec = Depends(get_codec),
    settings: Settings = Depends(get_settings),
):
    grid = _grid_or_400(request, codec, settings)
    logger.info("blend grid %s %dx%d linked=%s", request.method, grid.width, grid.height, request.linked)
    return BlendGridResponse(cells=grid.cells, display=display_rows(grid), bundle=grid.params.to_bundle())

@router.post("/extract_selection", response_model=SelectionResponse, responses={400: {"model": ErrorResponse}}, operation_id="extract_selection", description="Extract a row, column, corner walk, diagonal or swatch from a blend grid as palette text")
async def extract_selection(
    request: ExtractSelectionRequest,
    codec: CssColorCodec = Depends(get_codec),
    settings: Settings = Depends(get_settings),
):
    grid = _grid_or_400(request.params, codec, settings)
    try:
        selection = extract(grid, request.op, index=request.index, ix=request.ix, iy=request.iy)
    except (ValueError, IndexError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    fragment = format_fragment(selection, exclusive=request.exclusive)
    palette_text = None
    if request.palette_text is not None:
        palette_text = append_to_palette(request.palette_text, fragment)
    return SelectionResponse(cells=selection.cells, bundle=selection.bundle, fragment=fragment, palette_text=palette_text)

@router.post("/apply_bundle", response_model=BlendParams, responses={400: {"model": ErrorResponse}}, operation_id="apply_bundle", description="Turn a blend bundle from a palette comment back into blend grid parameters")
async def apply_bundle(request: ApplyBundleRequest):
    try:
        return BlendParams.from_bundle(request.bundle)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
