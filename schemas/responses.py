from pydantic import BaseModel, Field
from typing import List, Optional, Tuple

from colorengine.types import BlendBundle, ParsedColorEntry

class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Why the request was rejected")

class ColorDetail(BaseModel):
    css: str
    contrast_css: str
    alpha: float = Field(ge=0.0, le=1.0)
    hex: str = Field(..., description="#rrggbb[aa] form")
    hsl: str = Field(..., description="hsl(...) form")
    lab: Tuple[float, float, float]
    cmyk: Tuple[float, float, float, float]
    comment: Optional[str] = None
    bundle: Optional[BlendBundle] = None

class ClosestMatchResponse(BaseModel):
    exact: bool = Field(..., description="The color is already in the palette")
    match: Optional[ParsedColorEntry] = None

class BlendGridResponse(BaseModel):
    cells: List[List[str]]
    display: List[List[Optional[str]]] = Field(..., description="Cells with linked-mode spacers as null")
    bundle: BlendBundle

class SelectionResponse(BaseModel):
    cells: List[str]
    bundle: BlendBundle
    fragment: str
    palette_text: Optional[str] = None
