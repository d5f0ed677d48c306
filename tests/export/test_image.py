from __future__ import annotations

import subprocess
from pathlib import Path

import numpy as np
import pytest

from escher.core.realize import RealizedGeometry, RealizedLayer
from escher.export import image


# `escher.export.image`（SVG→PNG / resvg）をテストする。

def _layers() -> list[RealizedLayer]:
    realized = RealizedGeometry(
        coords=np.array([[0.0, 0.0], [10.0, 10.0]]),
        offsets=np.array([0, 2], dtype=np.int32),
    )
    return [RealizedLayer(realized=realized, color=(0.0, 0.0, 0.0), thickness=1.0)]


def test_scaled_size_multiplies_canvas_by_scale():
    assert image.scaled_size((300, 200), 2.0) == (600, 400)
    assert image.scaled_size((3, 3), 0.5) == (2, 2)


def test_scaled_size_rejects_empty_result():
    with pytest.raises(ValueError):
        image.scaled_size((10, 10), 0.01)


def test_export_png_writes_svg_then_invokes_resvg(tmp_path, monkeypatch: pytest.MonkeyPatch):
    out_png = tmp_path / "out.png"
    calls: list[list[str]] = []

    def fake_run(cmd, *, capture_output: bool, text: bool, check: bool):
        assert capture_output is True
        assert text is True
        assert check is False
        calls.append(cmd)
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    path = image.export_png(
        _layers(),
        out_png,
        canvas_size=(100, 50),
        scale=2.0,
        background_color=(1.0, 0.0, 0.0),
    )
    assert path == out_png
    assert (tmp_path / "out.svg").exists()

    assert len(calls) == 1
    cmd = calls[0]
    assert cmd[0] == "resvg"
    assert cmd[cmd.index("--width") + 1] == "200"
    assert cmd[cmd.index("--height") + 1] == "100"
    assert cmd[cmd.index("--background") + 1] == "#FF0000"
    assert Path(cmd[-2]) == tmp_path / "out.svg"
    assert Path(cmd[-1]) == out_png


def test_export_png_raises_when_resvg_is_missing(tmp_path, monkeypatch: pytest.MonkeyPatch):
    def missing(*args, **kwargs):
        raise FileNotFoundError

    monkeypatch.setattr(image.subprocess, "run", missing)

    with pytest.raises(RuntimeError, match="resvg が見つかりません"):
        image.export_png(_layers(), tmp_path / "out.png", canvas_size=(10, 10))


def test_export_png_raises_on_failure(tmp_path, monkeypatch: pytest.MonkeyPatch):
    def failing(cmd, **kwargs):
        return subprocess.CompletedProcess(args=cmd, returncode=2, stdout="", stderr="boom")

    monkeypatch.setattr(image.subprocess, "run", failing)

    with pytest.raises(RuntimeError, match="boom"):
        image.export_png(_layers(), tmp_path / "out.png", canvas_size=(10, 10))
