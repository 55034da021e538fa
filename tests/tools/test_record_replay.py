"""Tests for JSONL operation record and replay."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from crustier.core.geometry import Point
from crustier.examples.sample import sample_diagram
from crustier.render.recording import AddArc, LineTo, MoveTo, RecordingRenderer
from crustier.tools.record_replay import (
    JsonlOperationReader,
    JsonlOperationWriter,
    operation_to_record,
    record_to_operation,
    write_operations,
)


class TestJsonlOperationWriter:
    """Streaming writer behaves like any other renderer."""

    def test_writes_one_line_per_call(self, tmp_path: Path) -> None:
        path = tmp_path / "ops.jsonl"
        with JsonlOperationWriter(path) as writer:
            sample_diagram().draw(writer)
        assert writer.count == 5

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 5
        first = json.loads(lines[0])
        assert first["op"] == "arc"
        assert first["clockwise"] is True
        assert json.loads(lines[1]) == {"op": "move", "point": [106.31, 286.625]}

    def test_closed_writer_refuses_calls(self, tmp_path: Path) -> None:
        writer = JsonlOperationWriter(tmp_path / "ops.jsonl")
        writer.close()
        writer.close()
        with pytest.raises(RuntimeError):
            writer.move_to((0, 0))


class TestJsonlOperationReader:
    """Reading logs back and replaying them."""

    def test_roundtrip_matches_recording(self, tmp_path: Path) -> None:
        path = tmp_path / "ops.jsonl"
        with JsonlOperationWriter(path) as writer:
            sample_diagram().draw(writer)

        expected = RecordingRenderer()
        sample_diagram().draw(expected)

        reader = JsonlOperationReader(path)
        assert reader.read() == expected.records
        assert reader.skipped == 0

        replayed = RecordingRenderer()
        assert reader.replay(replayed) == 5
        assert replayed.operations == expected.operations

    def test_write_operations_helper(self, tmp_path: Path) -> None:
        rec = RecordingRenderer()
        sample_diagram().draw(rec)
        path = tmp_path / "ops.jsonl"
        assert write_operations(path, rec) == 5
        assert JsonlOperationReader(path).to_recording().records == rec.records

    def test_malformed_lines_are_skipped(
        self, fixtures_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        reader = JsonlOperationReader(fixtures_dir / "sample_ops.jsonl")
        with caplog.at_level(logging.WARNING):
            ops = reader.read()
        assert reader.skipped == 3
        assert [type(o) for o in ops] == [AddArc, MoveTo, LineTo, LineTo, LineTo]
        assert "skipping record" in caplog.text

    def test_undecodable_line_is_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "ops.jsonl"
        path.write_bytes(
            b'{"op": "move", "point": [1.0, 2.0]}\n'
            b"\xff\xfe\n"
            b'{"op": "line", "point": [3.0, 4.0]}\n'
        )
        reader = JsonlOperationReader(path)
        assert reader.read() == [MoveTo(Point(1.0, 2.0)), LineTo(Point(3.0, 4.0))]
        assert reader.skipped == 1

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            JsonlOperationReader(tmp_path / "missing.jsonl").read()


def test_record_codec_rejects_bad_records() -> None:
    with pytest.raises(ValueError):
        record_to_operation({"op": "arc", "center": [0, 0]})
    with pytest.raises(ValueError):
        record_to_operation({"op": "arc", "center": [0, 0], "radius": 1,
                             "start_angle": 0, "end_angle": 1, "clockwise": "yes"})
    with pytest.raises(ValueError):
        record_to_operation({"point": [0, 0]})


def test_arc_clockwise_defaults_to_true() -> None:
    op = record_to_operation(
        {"op": "arc", "center": [1, 2], "radius": 3, "start_angle": 0, "end_angle": 1}
    )
    assert op == AddArc((1.0, 2.0), 3.0, 0.0, 1.0, True)
    assert operation_to_record(op)["clockwise"] is True
