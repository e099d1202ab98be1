from .requests import (
    ApplyBundleRequest,
    BlendGridRequest,
    ClosestMatchRequest,
    ColorConvertRequest,
    DescribeColorRequest,
    ExtractSelectionRequest,
    ParsePaletteRequest,
)
from .responses import (
    BlendGridResponse,
    ClosestMatchResponse,
    ColorDetail,
    ErrorResponse,
    SelectionResponse,
    SuccessResponse,
)

__all__ = [
    "ApplyBundleRequest",
    "BlendGridRequest",
    "ClosestMatchRequest",
    "ColorConvertRequest",
    "DescribeColorRequest",
    "ExtractSelectionRequest",
    "ParsePaletteRequest",
    "BlendGridResponse",
    "ClosestMatchResponse",
    "ColorDetail",
    "ErrorResponse",
    "SelectionResponse",
    "SuccessResponse",
]
