"""Diagram document loader.

Reads a JSON or YAML document describing a tree of shapes, each object
tagged by ``kind``::

    {"kind": "diagram", "elements": [
        {"kind": "circle", "center": [187.5, 333.5], "radius": 93.75},
        {"kind": "polygon", "corners": [[187.5, 427.25], [268.69, 286.625]]}
    ]}

YAML files (``.yml`` / ``.yaml``) use the same structure. A top-level list
is accepted as shorthand for a diagram. Unlike lenient loaders that skip bad
entries, any invalid node fails the whole document: a half-loaded drawing is
worse than none.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, List, Literal, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from crustier.core.geometry import ShapeError
from crustier.core.shapes import Circle, Diagram, Drawable, Polygon

__all__ = [
    "DiagramLoadError",
    "load_diagram",
    "load_diagram_file",
    "dump_diagram",
    "save_diagram_file",
]

logger = logging.getLogger(__name__)

PointDoc = Tuple[float, float]


class DiagramLoadError(ValueError):
    """Raised when a diagram document cannot be turned into shapes."""


class CircleDoc(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["circle"]
    center: PointDoc
    radius: float = Field(ge=0.0)


class PolygonDoc(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["polygon"]
    corners: List[PointDoc] = Field(min_length=1)


class DiagramDoc(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["diagram"]
    elements: List["ShapeDoc"] = Field(default_factory=list)


ShapeDoc = Annotated[
    Union[CircleDoc, PolygonDoc, DiagramDoc], Field(discriminator="kind")
]
DiagramDoc.model_rebuild()

_SHAPE_ADAPTER: TypeAdapter[Any] = TypeAdapter(ShapeDoc)


def _build(doc: Any) -> Drawable:
    if isinstance(doc, CircleDoc):
        return Circle(doc.center, doc.radius)
    if isinstance(doc, PolygonDoc):
        return Polygon(doc.corners)
    return Diagram(tuple(_build(e) for e in doc.elements))


def load_diagram(data: Any, *, source: str = "<data>") -> Drawable:
    """Validate decoded document *data* and build the shape it describes."""
    if isinstance(data, list):
        data = {"kind": "diagram", "elements": data}
    try:
        doc = _SHAPE_ADAPTER.validate_python(data)
        return _build(doc)
    except ValidationError as e:
        raise DiagramLoadError(f"{source}: invalid diagram document\n{e}") from e
    except ShapeError as e:
        raise DiagramLoadError(f"{source}: {e}") from e


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in (".yml", ".yaml")


def load_diagram_file(path: str | Path) -> Drawable:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DiagramLoadError(f"{p}: {e}") from e
    try:
        data = yaml.safe_load(text) if _is_yaml(p) else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DiagramLoadError(f"{p}: cannot parse document: {e}") from e
    shape = load_diagram(data, source=str(p))
    logger.debug("loaded diagram from %s", p)
    return shape


def dump_diagram(shape: Drawable) -> dict[str, Any]:
    """Return the document form of *shape*.

    Only the built-in shape kinds can be dumped.
    """
    if isinstance(shape, Circle):
        return {
            "kind": "circle",
            "center": [shape.center.x, shape.center.y],
            "radius": shape.radius,
        }
    if isinstance(shape, Polygon):
        return {"kind": "polygon", "corners": [[p.x, p.y] for p in shape.corners]}
    if isinstance(shape, Diagram):
        return {
            "kind": "diagram",
            "elements": [dump_diagram(e) for e in shape.elements],
        }
    raise TypeError(f"cannot dump shape of type {type(shape).__name__}")


def save_diagram_file(shape: Drawable, path: str | Path) -> None:
    p = Path(path)
    doc = dump_diagram(shape)
    if _is_yaml(p):
        p.write_text(yaml.safe_dump(doc, sort_keys=False), encoding="utf-8")
    else:
        p.write_text(json.dumps(doc, indent=2), encoding="utf-8")
