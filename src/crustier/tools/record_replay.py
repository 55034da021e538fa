"""JSONL recorder and replayer for renderer operations.

This module persists the calls a shape makes on a renderer so a drawing
pass can be inspected, diffed, or replayed later into a different backend.

Record format (JSON per line):
{"op": "move", "point": [x, y]}
{"op": "line", "point": [x, y]}
{"op": "arc", "center": [x, y], "radius": r, "start_angle": a,
 "end_angle": b, "clockwise": true}

Usage examples:

Recording a drawing pass:
    with JsonlOperationWriter("ops.jsonl") as writer:
        diagram.draw(writer)

Replaying into another renderer:
    replayer = JsonlOperationReader("ops.jsonl")
    replayer.replay(PygameDisplayBackend().begin_frame())
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import TracebackType
from typing import IO, Any, Iterable, Iterator, List, Optional, Type

from ..core.geometry import Point
from ..render.recording import AddArc, LineTo, MoveTo, Operation, RecordingRenderer
from ..render.renderer import DEFAULT_CLOCKWISE, Renderer

__all__ = [
    "JsonlOperationWriter",
    "JsonlOperationReader",
    "operation_to_record",
    "record_to_operation",
    "write_operations",
]

logger = logging.getLogger(__name__)


def operation_to_record(op: Operation) -> dict[str, Any]:
    if isinstance(op, MoveTo):
        return {"op": "move", "point": [op.point[0], op.point[1]]}
    if isinstance(op, LineTo):
        return {"op": "line", "point": [op.point[0], op.point[1]]}
    return {
        "op": "arc",
        "center": [op.center[0], op.center[1]],
        "radius": op.radius,
        "start_angle": op.start_angle,
        "end_angle": op.end_angle,
        "clockwise": op.clockwise,
    }


def _point(v: Any) -> Point:
    if not isinstance(v, list) or len(v) != 2:
        raise ValueError(f"expected [x, y], got {v!r}")
    return Point(float(v[0]), float(v[1]))


def record_to_operation(record: dict[str, Any]) -> Operation:
    """Decode one JSONL record.

    Raises:
        ValueError: for unknown ops or missing/malformed fields.
    """
    kind = record.get("op")
    try:
        if kind == "move":
            return MoveTo(_point(record["point"]))
        if kind == "line":
            return LineTo(_point(record["point"]))
        if kind == "arc":
            clockwise = record.get("clockwise", DEFAULT_CLOCKWISE)
            if not isinstance(clockwise, bool):
                raise ValueError(f"clockwise must be a boolean, got {clockwise!r}")
            return AddArc(
                _point(record["center"]),
                float(record["radius"]),
                float(record["start_angle"]),
                float(record["end_angle"]),
                clockwise,
            )
    except (KeyError, TypeError) as e:
        raise ValueError(f"malformed {kind} record: {e}") from None
    raise ValueError(f"unknown op {kind!r}")


def write_operations(path: str | Path, operations: Iterable[Operation]) -> int:
    """Write *operations* to *path*, returning the number of lines written."""
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for op in operations:
            f.write(json.dumps(operation_to_record(op)) + "\n")
            count += 1
    return count


class JsonlOperationWriter:
    """Renderer that streams each call to a JSONL file.

    Use as a context manager, or call :meth:`close` when done.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._file: Optional[IO[str]] = open(self._path, "w", encoding="utf-8")
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def _write(self, op: Operation) -> None:
        if self._file is None:
            raise RuntimeError("writer is closed")
        self._file.write(json.dumps(operation_to_record(op)) + "\n")
        self._count += 1

    def move_to(self, point: Point) -> None:
        self._write(MoveTo(Point(*point)))

    def line_to(self, point: Point) -> None:
        self._write(LineTo(Point(*point)))

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = DEFAULT_CLOCKWISE,
    ) -> None:
        self._write(AddArc(Point(*center), radius, start_angle, end_angle, clockwise))

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.debug("wrote %d operations to %s", self._count, self._path)

    def __enter__(self) -> "JsonlOperationWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class JsonlOperationReader:
    """Reads a JSONL operation log.

    Blank lines are ignored. Lines that are not UTF-8, not valid JSON or not a
    valid record are logged and skipped so one damaged line does not lose the rest
    of the log; :attr:`skipped` counts them.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self.skipped = 0

    def __iter__(self) -> Iterator[Operation]:
        self.skipped = 0
        with self._path.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").strip()
                    if not line:
                        continue
                    record = json.loads(line)
                    if not isinstance(record, dict):
                        raise ValueError("record is not an object")
                    yield record_to_operation(record)
                except ValueError as e:
                    self.skipped += 1
                    logger.warning("%s:%d: skipping record: %s", self._path, lineno, e)

    def read(self) -> List[Operation]:
        return list(self)

    def to_recording(self) -> RecordingRenderer:
        return RecordingRenderer(self)

    def replay(self, into: Renderer) -> int:
        """Issue every logged call against *into*; return how many were issued."""
        n = 0
        for op in self:
            op.apply(into)
            n += 1
        return n
