"""CHIP-8 rendering utilities for visualization."""

import os
from typing import Tuple

import jax.numpy as jnp
import numpy as np
from PIL import Image

from c8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT, ON_COLOR, OFF_COLOR


def render_frame(display: jnp.ndarray, frame: np.ndarray,
                 on_color: int = ON_COLOR, off_color: int = OFF_COLOR) -> np.ndarray:
    """Fill a caller-provided 0x00RRGGBB buffer row-major from the display grid.

    Args:
        display: Boolean array of shape (64, 32), indexed [x, y]
        frame: Writable integer array with 64 * 32 elements (any shape)
        on_color: Packed color for lit pixels
        off_color: Packed color for dark pixels

    Returns:
        ``frame``, filled in place
    """
    if frame.size != SCREEN_WIDTH * SCREEN_HEIGHT:
        raise ValueError(
            f"Expected a buffer of {SCREEN_WIDTH * SCREEN_HEIGHT} pixels, got {frame.size}"
        )
    pixels = np.asarray(display, dtype=np.bool_).T.reshape(-1)
    values = np.where(pixels, on_color, off_color).reshape(frame.shape)
    np.copyto(frame, values, casting="unsafe")
    return frame


def display_to_rgb(
    display: jnp.ndarray,
    scale: int = 1,
    on_color: Tuple[int, int, int] = (0, 255, 0),
    off_color: Tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Convert CHIP-8 boolean display to RGB array with optional upscaling.

    Args:
        display: Boolean array of shape (64, 32) representing CHIP-8 display
        scale: Upscaling factor for better visibility
        on_color: RGB color for "on" pixels (default: green)
        off_color: RGB color for "off" pixels (default: black)

    Returns:
        RGB array of shape (height*scale, width*scale, 3) with uint8 values
    """
    pixels = np.array(display, dtype=np.bool_)

    # (64 width, 32 height) -> (32 height, 64 width)
    pixels = pixels.T
    height, width = pixels.shape

    rgb_frame = np.zeros((height, width, 3), dtype=np.uint8)

    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    # Nearest neighbour upscaling
    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def create_color_scheme(
    scheme: str = "classic",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name ("classic", "amber", "white", "blue", "retro")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    schemes = {
        "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
        "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
        "white": ((255, 255, 255), (0, 0, 0)),  # White on black
        "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
        "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
        )

    return schemes[scheme]


def save_screenshot(
    display: jnp.ndarray,
    filename: str | os.PathLike,
    scale: int = 8,
    color_scheme: str = "classic",
) -> None:
    """Write the display to an image file (format picked from the extension)."""
    on_color, off_color = create_color_scheme(color_scheme)
    rgb = display_to_rgb(display, scale, on_color, off_color)
    Image.fromarray(rgb).save(filename)
