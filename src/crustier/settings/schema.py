"""Pydantic model for user settings."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from .values import ARC_MAX_STEP_DEG, CANVAS_SIZE, CANVAS_TITLE, THEME

ColorTuple = Tuple[int, int, int, int]


class Settings(BaseModel):
    """Preview settings persisted to disk.

    Parameters
    ----------
    canvas_width, canvas_height: Size of the offscreen preview surface in px.
    title: Window caption used by ``show_diagram``.
    line_width_px: Stroke width for lines and arcs.
    stroke_color, background_color: RGBA colors.
    arc_max_step_deg: Largest angle covered by one segment when an arc is
        flattened for a raster backend.
    """

    canvas_width: int = Field(default=CANVAS_SIZE[0])
    canvas_height: int = Field(default=CANVAS_SIZE[1])
    title: str = Field(default=CANVAS_TITLE)
    line_width_px: int = Field(default=int(THEME.get("line_width_px", 2)))
    stroke_color: ColorTuple = Field(
        default=tuple(THEME["colors"]["stroke"])  # type: ignore[arg-type]
    )
    background_color: ColorTuple = Field(
        default=tuple(THEME["colors"]["background"])  # type: ignore[arg-type]
    )
    arc_max_step_deg: float = Field(default=ARC_MAX_STEP_DEG)

    @field_validator("canvas_width", "canvas_height", "line_width_px")
    @classmethod
    def _chk_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    @field_validator("stroke_color", "background_color")
    @classmethod
    def _chk_color(cls, v: ColorTuple) -> ColorTuple:
        if any(c < 0 or c > 255 for c in v):
            raise ValueError("color channels must be within 0..255")
        return v

    @field_validator("arc_max_step_deg")
    @classmethod
    def _chk_step(cls, v: float) -> float:
        if not 0.0 < v <= 90.0:
            raise ValueError("arc_max_step_deg must be in (0, 90]")
        return v

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.canvas_width, self.canvas_height)
