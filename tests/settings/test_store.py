from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from crustier.settings.schema import Settings
from crustier.settings.store import SettingsStore
from crustier.settings.values import CANVAS_SIZE, THEME


def test_load_defaults(crustier_home: Path) -> None:
    s = SettingsStore.load()
    assert isinstance(s, Settings)
    assert s.canvas_size == CANVAS_SIZE
    assert list(s.stroke_color) == THEME["colors"]["stroke"]


def test_values_yml_is_loaded() -> None:
    assert CANVAS_SIZE == (375, 667)
    assert THEME["line_width_px"] == 2


def test_roundtrip(crustier_home: Path) -> None:
    s = Settings(canvas_width=200, canvas_height=100, stroke_color=(255, 0, 0, 255))
    SettingsStore.save(s)
    assert SettingsStore.settings_path() == crustier_home / "settings.json"
    s2 = SettingsStore.load()
    assert s2.canvas_size == (200, 100)
    assert s2.stroke_color == (255, 0, 0, 255)


def test_corrupt_returns_default(crustier_home: Path) -> None:
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("{broken")
    s = SettingsStore.load()
    assert s.canvas_size == CANVAS_SIZE


def test_invalid_values_return_default(crustier_home: Path) -> None:
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps({"canvas_width": -5}))
    assert SettingsStore.load().canvas_width == CANVAS_SIZE[0]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"canvas_width": 0},
        {"line_width_px": -1},
        {"stroke_color": (0, 0, 300, 255)},
        {"arc_max_step_deg": 0.0},
        {"arc_max_step_deg": 120.0},
    ],
)
def test_validation(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(**kwargs)


@pytest.mark.parametrize("step", [0, -1.0, 90.5, 120, True, "5"])
def test_values_yml_rejects_out_of_range_arc_step(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, step: object
) -> None:
    from crustier.settings import values

    monkeypatch.setattr(values, "_arcs", {"max_step_deg": 5.0})
    p = tmp_path / "values.yml"
    p.write_text(json.dumps({"arcs": {"max_step_deg": step}}), encoding="utf-8")
    values._load(p)
    assert values._arcs["max_step_deg"] == 5.0


def test_values_yml_accepts_arc_step_at_bound(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from crustier.settings import values

    monkeypatch.setattr(values, "_arcs", {"max_step_deg": 5.0})
    p = tmp_path / "values.yml"
    p.write_text("arcs:\n  max_step_deg: 90\n", encoding="utf-8")
    values._load(p)
    assert values._arcs["max_step_deg"] == 90.0
    s = Settings(arc_max_step_deg=values._arcs["max_step_deg"])
    assert s.arc_max_step_deg == 90.0
