"""
Palette Tools MCP Server - FastAPI implementation
Provides endpoints for palette text parsing, nearest-color lookup and color blend grids
"""

import logging
import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

# Routers and shared state
from config import get_settings
from routers import blendTools_router, colorTools_router, paletteTools_router

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Palette Tools MCP Server",
    description="A FastAPI server for text palettes, color matching and color blending",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers
app.include_router(colorTools_router)
app.include_router(paletteTools_router)
app.include_router(blendTools_router)

if __name__ == "__main__":
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    uvicorn.run(app, host=settings.host, port=settings.port)
