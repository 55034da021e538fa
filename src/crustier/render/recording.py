"""In-memory renderer that records every call.

:class:`RecordingRenderer` is the oracle used by the tests: it stores one
immutable record per renderer call, in call order, without transforming
anything. Records can be rendered as short human-readable strings
(``moveTo(x, y)``, ``lineTo(x, y)``, ``arcAt(...)``) or replayed into any
other renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Union

from crustier.core.geometry import Point
from crustier.render.renderer import DEFAULT_CLOCKWISE, Renderer

__all__ = [
    "MoveTo",
    "LineTo",
    "AddArc",
    "Operation",
    "RecordingRenderer",
    "merge_recordings",
]


def _num(v: float) -> str:
    return repr(float(v))


def _pt(p: Point) -> str:
    return f"{_num(p[0])}, {_num(p[1])}"


@dataclass(frozen=True, slots=True)
class MoveTo:
    point: Point

    def describe(self) -> str:
        return f"moveTo({_pt(self.point)})"

    def apply(self, renderer: Renderer) -> None:
        renderer.move_to(self.point)


@dataclass(frozen=True, slots=True)
class LineTo:
    point: Point

    def describe(self) -> str:
        return f"lineTo({_pt(self.point)})"

    def apply(self, renderer: Renderer) -> None:
        renderer.line_to(self.point)


@dataclass(frozen=True, slots=True)
class AddArc:
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool = DEFAULT_CLOCKWISE

    def describe(self) -> str:
        return (
            f"arcAt(({_pt(self.center)}), radius: {_num(self.radius)},"
            f" startAngle: {_num(self.start_angle)},"
            f" endAngle: {_num(self.end_angle)},"
            f" clockwise: {'true' if self.clockwise else 'false'})"
        )

    def apply(self, renderer: Renderer) -> None:
        renderer.add_arc(
            self.center,
            self.radius,
            self.start_angle,
            self.end_angle,
            clockwise=self.clockwise,
        )


Operation = Union[MoveTo, LineTo, AddArc]


class RecordingRenderer:
    """Renderer that appends a record for each call."""

    def __init__(self, records: Iterable[Operation] = ()) -> None:
        self.records: List[Operation] = list(records)

    def move_to(self, point: Point) -> None:
        self.records.append(MoveTo(Point(*point)))

    def line_to(self, point: Point) -> None:
        self.records.append(LineTo(Point(*point)))

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = DEFAULT_CLOCKWISE,
    ) -> None:
        self.records.append(
            AddArc(Point(*center), radius, start_angle, end_angle, clockwise)
        )

    @property
    def operations(self) -> List[str]:
        """Human-readable form of the records, one string per call."""
        return [r.describe() for r in self.records]

    def replay(self, into: Renderer) -> None:
        """Issue every recorded call, in order, against *into*."""
        for r in self.records:
            r.apply(into)

    def extend(self, other: "RecordingRenderer") -> None:
        self.records.extend(other.records)

    def clear(self) -> None:
        self.records.clear()

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


def merge_recordings(recordings: Iterable[RecordingRenderer]) -> RecordingRenderer:
    """Concatenate recordings (e.g. one per worker thread) in the given order."""
    merged = RecordingRenderer()
    for rec in recordings:
        merged.extend(rec)
    return merged
