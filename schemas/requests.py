from pydantic import BaseModel, Field
from typing import Literal, Optional

from colorengine.types import BlendBundle, BlendMethod, BlendParams

class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to convert")
    target: Literal["hex", "hsl"] = Field(..., description="The canonical format to convert to")

class DescribeColorRequest(BaseModel):
    code: str = Field(..., description="A palette line: CSS color, optionally followed by a // comment")

class ParsePaletteRequest(BaseModel):
    text: str = Field(..., description="Palette source text, one color per line")

class ClosestMatchRequest(BaseModel):
    code: str = Field(..., description="The CSS color to look up")
    palette_text: str = Field(..., description="Palette source text to search")

class BlendGridRequest(BaseModel):
    corner_a: str = Field("red", description="Top-left corner color")
    corner_b: str = Field("white", description="Top-right corner color")
    corner_c: str = Field("black", description="Bottom-left corner color")
    corner_d: str = Field("green", description="Bottom-right corner color (ignored when linked)")
    method: BlendMethod = Field("lab", description="Color space to interpolate in")
    grid_size: int = Field(4, ge=1, description="Number of blended cells between corners")
    linked: bool = Field(True, description="Force corner D to corner A")

    def to_params(self) -> BlendParams:
        return BlendParams(**self.model_dump())

class ExtractSelectionRequest(BaseModel):
    params: BlendGridRequest = Field(default_factory=BlendGridRequest)
    op: Literal[
        "row", "row rev", "column", "column rev",
        "TL", "TR", "BL", "BR",
        "diagTL", "diagTR", "diagBL", "diagBR",
        "swatch",
    ] = Field(..., description="Selection to extract")
    index: Optional[int] = Field(None, description="Row or column index for row/column selections")
    ix: Optional[int] = Field(None, description="Column of the cell for swatch")
    iy: Optional[int] = Field(None, description="Row of the cell for swatch")
    exclusive: bool = Field(False, description="Drop the first and last cells from the fragment")
    palette_text: Optional[str] = Field(None, description="If given, the fragment is appended to this text")

class ApplyBundleRequest(BaseModel):
    bundle: BlendBundle = Field(..., description="A blend bundle as found in a palette comment")
