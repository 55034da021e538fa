from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pytest.importorskip("pygame")

from crustier.app.show import show_diagram  # noqa: E402
from crustier.config import make_runtime_config  # noqa: E402
from crustier.examples.sample import sample_diagram  # noqa: E402
from crustier.render.renderer import Renderer  # noqa: E402
from crustier.settings.schema import Settings  # noqa: E402


def test_show_diagram_saves_png(tmp_path: Path, crustier_home: Path) -> None:
    seen: list[Renderer] = []

    def draw(renderer: Renderer) -> None:
        seen.append(renderer)
        sample_diagram().draw(renderer)

    out = tmp_path / "diagram.png"
    backend = show_diagram("Diagram", draw, png_path=str(out))
    assert len(seen) == 1
    assert out.exists()
    assert backend.size() == Settings().canvas_size


def test_show_diagram_headless_window_request_does_not_block(
    crustier_home: Path,
) -> None:
    cfg = make_runtime_config(settings=Settings(canvas_width=50, canvas_height=40))
    backend = show_diagram(None, sample_diagram().draw, window=True, config=cfg)
    assert not backend.has_window
    assert backend.size() == (50, 40)


def test_show_diagram_title_leaves_config_untouched(crustier_home: Path) -> None:
    cfg = make_runtime_config(settings=Settings(canvas_width=30, canvas_height=30))
    before = cfg.title
    show_diagram("Other title", sample_diagram().draw, config=cfg)
    assert cfg.title == before
