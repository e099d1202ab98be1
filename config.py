"""Server settings, read from PALETTE_* environment variables.

Unset variables fall back to the defaults below.
"""

import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from colorengine.css import CodecConfig, CssColorCodec

ENV_PREFIX = "PALETTE_"

class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8973
    log_level: str = "INFO"
    max_grid_size: int = Field(default=32, ge=1)
    contrast_threshold: float = Field(default=40.0, ge=0, le=100)
    dark_border: str = "#444"
    light_border: str = "#ccc"

    def codec_config(self) -> CodecConfig:
        return CodecConfig(
            dark_border=self.dark_border,
            light_border=self.light_border,
            lightness_threshold=self.contrast_threshold,
        )

def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from PALETTE_HOST, PALETTE_PORT, ... ; pydantic does the type coercion."""
    env = os.environ if environ is None else environ
    values = {}
    for name in Settings.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in env:
            values[name] = env[key]
    return Settings(**values)

@lru_cache
def get_settings() -> Settings:
    return load_settings()

@lru_cache
def get_codec() -> CssColorCodec:
    """Process-wide codec built from the configured border colors."""
    return CssColorCodec(get_settings().codec_config())
