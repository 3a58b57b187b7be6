"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mdbullets.toml only contains
overrides.  An empty file is a valid config.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MAX_TEXT_SCALE = 8.0


class BulletsConfig(BaseModel):
    """[bullets] section."""

    model_config = {"frozen": True}

    style: str = "automatic"
    text_scale: float = Field(default=1.0, gt=0, le=MAX_TEXT_SCALE, allow_inf_nan=False)


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=10)
    code_theme: str = "monokai"
    hyperlinks: bool = True

