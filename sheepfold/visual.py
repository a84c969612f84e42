"""Pixel-value conversion for TrueColor visuals."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]

# Channel layout of an ordinary 24-bit 0x00RRGGBB visual.
DEFAULT_SHIFTS: Shifts = (16, 8, 8, 8, 0, 8)


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (offset, width) of the contiguous run of set bits in a mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit mask, got {mask:#x}")
    offset = 0
    while not mask & 1:
        mask >>= 1
        offset += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Return (red offset, red bits, green offset, green bits, blue offset, blue bits)."""
    red = _mask_layout(red_mask)
    green = _mask_layout(green_mask)
    blue = _mask_layout(blue_mask)
    return (*red, *green, *blue)


def good_color(color: int, depth: int, shifts: Shifts) -> int:
    """Convert a 0x00RRGGBB colour into a pixel value for a visual.

    Visuals of depth 24 or more take the colour unchanged; shallower ones get
    each 8-bit channel narrowed and moved to its place in the pixel.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_off, red_bits, green_off, green_bits, blue_off, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_off)
        + ((green >> (16 - green_bits)) << green_off)
        + ((blue >> (16 - blue_bits)) << blue_off)
    )