"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we load and
parse it; keys that are missing or malformed keep the literal defaults
below so a partial file still yields a complete configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Literal defaults ------------------------------------------------------
_DEFAULT_THEME: Dict[str, Any] = {
    "colors": {
        "background": [255, 255, 255, 255],
        "stroke": [0, 0, 0, 255],
    },
    "line_width_px": 2,
}
_DEFAULT_CANVAS: Dict[str, Any] = {
    "size": [375, 667],
    "title": "Diagram",
}
_DEFAULT_ARCS: Dict[str, float] = {
    # Maximum angle covered by one flattened arc segment.
    "max_step_deg": 5.0,
}

_theme: Dict[str, Any] = {
    "colors": dict(_DEFAULT_THEME["colors"]),
    "line_width_px": _DEFAULT_THEME["line_width_px"],
}
_canvas: Dict[str, Any] = dict(_DEFAULT_CANVAS)
_arcs: Dict[str, float] = dict(_DEFAULT_ARCS)


def _color(v: object) -> list[int] | None:
    if not isinstance(v, list) or len(v) not in (3, 4):
        return None
    if not all(isinstance(c, int) and 0 <= c <= 255 for c in v):
        return None
    return list(v) + [255] * (4 - len(v))


def _step(v: object) -> float | None:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    if not 0.0 < v <= 90.0:
        return None
    return float(v)


def _load(path: Path) -> None:
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        return
    theme = raw.get("theme")
    if isinstance(theme, dict):
        colors = theme.get("colors")
        if isinstance(colors, dict):
            for name, value in colors.items():
                c = _color(value)
                if c is not None:
                    _theme["colors"][str(name)] = c
        lw = theme.get("line_width_px")
        if isinstance(lw, int) and lw > 0:
            _theme["line_width_px"] = lw
    canvas = raw.get("canvas")
    if isinstance(canvas, dict):
        size = canvas.get("size")
        if (
            isinstance(size, list)
            and len(size) == 2
            and all(isinstance(x, int) and x > 0 for x in size)
        ):
            _canvas["size"] = list(size)
        title = canvas.get("title")
        if isinstance(title, str):
            _canvas["title"] = title
    arcs = raw.get("arcs")
    if isinstance(arcs, dict):
        step = _step(arcs.get("max_step_deg"))
        if step is not None:
            _arcs["max_step_deg"] = step


if _YAML_PATH.exists():  # pragma: no branch - simple path
    _load(_YAML_PATH)

# --- Public accessors ------------------------------------------------------
THEME: Dict[str, Any] = dict(_theme)
CANVAS_SIZE: Tuple[int, int] = (int(_canvas["size"][0]), int(_canvas["size"][1]))
CANVAS_TITLE: str = str(_canvas["title"])
ARC_MAX_STEP_DEG: float = float(_arcs["max_step_deg"])

__all__ = [
    "THEME",
    "CANVAS_SIZE",
    "CANVAS_TITLE",
    "ARC_MAX_STEP_DEG",
]
