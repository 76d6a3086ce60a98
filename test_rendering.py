"""
Test Wipe Rendering
===================

Compositing, divider, handle and the WipeView pipeline.

Usage:
    pytest test_rendering.py
"""

from pathlib import Path

import cv2
import numpy as np
import pytest

from slidewipe_view.config import WipeStyle
from slidewipe_view.geometry import Rect, compute_wipe_geometry
from slidewipe_view.pipeline import WipeView, interpolate_progress, render_sweep
from slidewipe_view.rendering import WipeCompositor, load_image
from slidewipe_view.rendering.compositor import default_indicator_glyph, glyph_from_image

RED = (0, 0, 255)
BLUE = (255, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)

# No divider, no handle: only the masked blend is visible
BARE = WipeStyle(divider_width=0, indicator_width=0, indicator_image_width=0)


def solid(color, width=100, height=50) -> np.ndarray:
    return np.full((height, width, 3), color, dtype=np.uint8)


def test_lhs_below_line_rhs_above():
    compositor = WipeCompositor(style=BARE)
    frame = compositor.compose(solid(RED), solid(BLUE), compute_wipe_geometry(Rect.from_size(100, 50), 0.5))

    assert frame.shape == (50, 100, 3)
    assert tuple(frame[40, 10]) == RED    # below the diagonal
    assert tuple(frame[5, 90]) == BLUE    # above the diagonal


def test_no_cut_shows_base_only():
    compositor = WipeCompositor(style=BARE)
    frame = compositor.compose(solid(RED), solid(BLUE), compute_wipe_geometry(Rect.from_size(100, 50), 1.0))
    assert np.all(frame == np.array(BLUE, dtype=np.uint8))


def test_inputs_are_not_mutated():
    lhs, rhs = solid(RED), solid(BLUE)
    WipeCompositor().compose(lhs, rhs, compute_wipe_geometry(Rect.from_size(100, 50), 0.4))
    assert np.all(lhs == np.array(RED, dtype=np.uint8))
    assert np.all(rhs == np.array(BLUE, dtype=np.uint8))


def test_divider_is_drawn_on_the_cut():
    style = WipeStyle(divider_color="#FFFFFF", divider_width=2, indicator_width=0, indicator_image_width=0)
    frame = WipeCompositor(style=style).compose(
        solid(RED), solid(BLUE), compute_wipe_geometry(Rect.from_size(100, 50), 0.5)
    )
    assert tuple(frame[10, 20]) == WHITE


def test_handle_is_drawn_at_anchor():
    style = WipeStyle(indicator_color="#00FF00", indicator_width=20, indicator_image_width=0, divider_width=0)
    frame = WipeCompositor(style=style).compose(
        solid(RED), solid(BLUE), compute_wipe_geometry(Rect.from_size(100, 50), 0.5)
    )
    assert tuple(frame[25, 50]) == GREEN
    assert tuple(frame[5, 90]) == BLUE


def test_icon_is_tinted():
    style = WipeStyle(indicator_color="#FFFFFF", indicator_image_color="#000000", divider_width=0)
    compositor = WipeCompositor(style=style)
    frame = compositor.compose(solid(RED, 200, 100), solid(BLUE, 200, 100),
                               compute_wipe_geometry(Rect.from_size(200, 100), 0.5))

    # The icon box holds dark pixels on the white handle
    box = frame[50 - 11:50 + 11, 100 - 11:100 + 11]
    assert box.min() < 128
    assert compositor.glyph.shape == (22, 22)


def test_rhs_is_resized_to_frame():
    frame = WipeCompositor(style=BARE).compose(
        solid(RED), solid(BLUE, 50, 25), compute_wipe_geometry(Rect.from_size(100, 50), 0.5)
    )
    assert frame.shape == (50, 100, 3)
    assert tuple(frame[5, 90]) == BLUE


def test_default_glyph_has_coverage():
    glyph = default_indicator_glyph(22)
    assert glyph.shape == (22, 22)
    assert glyph.max() == 255
    assert default_indicator_glyph(0).size == 0


def test_custom_glyph_fits_box():
    icon = np.zeros((10, 20, 4), dtype=np.uint8)
    icon[:, :, 3] = 255
    glyph = glyph_from_image(icon, 22)
    assert glyph.shape == (22, 22)
    # 20x10 scales to 22x11, centered vertically
    assert glyph[0].max() == 0
    assert glyph[11].min() == 255


def test_custom_indicator_image_loads(tmp_path: Path):
    icon_path = tmp_path / "icon.png"
    icon = np.full((16, 16, 3), 255, dtype=np.uint8)
    icon[4:12, 4:12] = 0
    cv2.imwrite(str(icon_path), icon)

    compositor = WipeCompositor(style=WipeStyle(indicator_image=icon_path))
    assert compositor.glyph.shape == (22, 22)
    assert compositor.glyph.max() > 0


def test_missing_indicator_image_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WipeCompositor(style=WipeStyle(indicator_image=tmp_path / "missing.png"))


def test_load_image_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.png")

    bogus = tmp_path / "bogus.png"
    bogus.write_text("not an image")
    with pytest.raises(ValueError):
        load_image(bogus)


def test_view_renders_at_initial_progress():
    view = WipeView(style=BARE.replace(initial_progress=1.0))
    frame = view.render(solid(RED), solid(BLUE))
    assert np.all(frame == np.array(BLUE, dtype=np.uint8))

    view.set_progress(0.5)
    frame = view.render(solid(RED), solid(BLUE))
    assert tuple(frame[40, 10]) == RED


def test_view_drag_moves_cut():
    view = WipeView(style=BARE)
    assert view.drag(x=50, width=200) == 0.75
    assert view.progress == 0.75


def test_view_render_with_explicit_size():
    frame = WipeView(style=BARE).render(solid(RED), solid(BLUE), size_wh=(64, 32))
    assert frame.shape == (32, 64, 3)


def test_interpolate_progress():
    assert interpolate_progress(0.0, 1.0, 5) == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert interpolate_progress(0.3, 0.9, 1) == [0.3]
    with pytest.raises(ValueError):
        interpolate_progress(0.0, 1.0, 0)


def test_render_sweep_writes_video(tmp_path: Path):
    view = WipeView(style=BARE)
    output = tmp_path / "sweep" / "sweep.mp4"
    result = render_sweep(view, solid(RED, 64, 32), solid(BLUE, 64, 32),
                          output_path=str(output), frames=5, start=0.2, end=0.8, fps=5)

    assert result == str(output)
    assert output.exists() and output.stat().st_size > 0
    assert view.progress == pytest.approx(0.8)


def test_interactive_mouse_drives_progress():
    from slidewipe_view.interactive import InteractiveSession

    session = InteractiveSession(WipeView(style=BARE), solid(RED, 200, 100), solid(BLUE, 200, 100))

    session.on_mouse(cv2.EVENT_MOUSEMOVE, 10, 10, 0)
    assert session.view.progress == 0.5  # hover without button

    session.on_mouse(cv2.EVENT_LBUTTONDOWN, 50, 10, cv2.EVENT_FLAG_LBUTTON)
    assert session.view.progress == 0.75

    session.on_mouse(cv2.EVENT_MOUSEMOVE, 250, 10, cv2.EVENT_FLAG_LBUTTON)
    assert session.view.progress == 0.0

    session.on_mouse(cv2.EVENT_LBUTTONUP, 100, 10, 0)
    session.on_mouse(cv2.EVENT_MOUSEMOVE, 100, 10, 0)
    assert session.view.progress == 0.0


def test_degenerate_rect_returns_base_copy():
    rhs = solid(BLUE, 30, 20)
    frame = WipeCompositor().compose(solid(RED), rhs, compute_wipe_geometry(Rect.from_size(0, 50), 0.5))

    assert frame.shape == rhs.shape
    assert np.array_equal(frame, rhs)
    assert frame is not rhs
