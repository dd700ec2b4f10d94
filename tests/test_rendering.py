"""Tests for rendering utilities."""

import numpy as np
import pytest
from PIL import Image
from c8vm import create_state
from c8vm.rendering import display_to_rgb, create_color_scheme, render_frame, save_screenshot


def test_display_to_rgb_layout(fresh_state):
    display = fresh_state.display.at[63, 0].set(True)

    rgb = display_to_rgb(display)

    assert rgb.shape == (32, 64, 3)
    assert tuple(rgb[0, 63]) == (0, 255, 0)
    assert tuple(rgb[0, 0]) == (0, 0, 0)


def test_display_to_rgb_scaled(fresh_state):
    display = fresh_state.display.at[1, 1].set(True)
    on_color, off_color = create_color_scheme("amber")

    rgb = display_to_rgb(display, 4, on_color, off_color)

    assert rgb.shape == (128, 256, 3)
    assert tuple(rgb[4, 4]) == on_color
    assert tuple(rgb[7, 7]) == on_color
    assert tuple(rgb[8, 8]) == off_color


def test_unknown_color_scheme():
    with pytest.raises(ValueError):
        create_color_scheme("octarine")


def test_render_frame_2d_buffer(fresh_state):
    display = fresh_state.display.at[5, 2].set(True)
    frame = np.zeros((32, 64), dtype=np.uint32)

    render_frame(display, frame, on_color=0xFFFFFF, off_color=0x111111)

    assert frame[2, 5] == 0xFFFFFF
    assert frame[0, 0] == 0x111111


def test_save_screenshot(tmp_path):
    state = create_state()
    path = tmp_path / "shot.png"

    save_screenshot(state.display.at[0, 0].set(True), path, scale=2, color_scheme="white")

    with Image.open(path) as image:
        assert image.size == (128, 64)
        assert image.getpixel((0, 0)) == (255, 255, 255)
        assert image.getpixel((2, 0)) == (0, 0, 0)
