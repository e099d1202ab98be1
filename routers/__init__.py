from .blendTools import router as blendTools_router
from .colorTools import router as colorTools_router
from .paletteTools import router as paletteTools_router

__all__ = ["blendTools_router", "colorTools_router", "paletteTools_router"]
