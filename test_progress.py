"""
Test Progress Controller
========================

Usage:
    pytest test_progress.py
"""

import pytest

from slidewipe_view.control import ProgressController


def test_default_progress_is_half():
    assert ProgressController().progress == 0.5


@pytest.mark.parametrize("requested, expected", [(0.3, 0.3), (1.7, 1.0), (-3.0, 0.0)])
def test_initial_progress_is_clamped(requested, expected):
    assert ProgressController(initial_progress=requested).progress == expected


def test_drag_maps_inverted_position():
    controller = ProgressController()
    assert controller.update_from_drag(current_width=200, drag_x=50) == 0.75
    assert controller.progress == 0.75
    assert controller.update_from_drag(current_width=200, drag_x=100) == 0.5
    assert controller.update_from_drag(current_width=200, drag_x=0) == 1.0
    assert controller.update_from_drag(current_width=200, drag_x=200) == 0.0


def test_drag_outside_viewport_is_clamped():
    controller = ProgressController()
    assert controller.update_from_drag(current_width=200, drag_x=250) == 0.0
    assert controller.update_from_drag(current_width=200, drag_x=-40) == 1.0


def test_drag_on_zero_width_keeps_progress():
    controller = ProgressController(initial_progress=0.3)
    assert controller.update_from_drag(current_width=0, drag_x=10) == 0.3
    assert controller.update_from_drag(current_width=-5, drag_x=10) == 0.3


def test_set_progress_clamps():
    controller = ProgressController()
    assert controller.set_progress(0.2) == 0.2
    assert controller.set_progress(5) == 1.0
    assert controller.set_progress(-1) == 0.0


def test_reset_restores_initial():
    controller = ProgressController(initial_progress=0.3)
    controller.update_from_drag(current_width=100, drag_x=90)
    controller.reset()
    assert controller.progress == 0.3
    assert controller.initial_progress == 0.3


def test_progress_is_read_only():
    controller = ProgressController()
    with pytest.raises(AttributeError):
        controller.progress = 0.9
