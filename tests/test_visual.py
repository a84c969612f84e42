import pytest

from sheepfold.visual import DEFAULT_SHIFTS, good_color, rgb_shifts

RGB565 = (0xF800, 0x07E0, 0x001F)


def test_shifts_of_24_bit_visual():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_default_shifts_match_24_bit_masks():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == DEFAULT_SHIFTS


def test_shifts_of_565_visual():
    assert rgb_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, 0)])
def test_zero_mask_is_rejected(masks):
    with pytest.raises(ValueError):
        rgb_shifts(*masks)


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0xFF99FF])
def test_deep_visual_keeps_colour(color):
    assert good_color(color, 24, (11, 5, 5, 6, 0, 5)) == color
    assert good_color(color, 32, DEFAULT_SHIFTS) == color


@pytest.mark.parametrize("color", [0, 0x010203, 0x00FFFF, 0xFF99FF, 0xABCDEF])
def test_shallow_visual_with_8_bit_channels_is_identity(color):
    assert good_color(color, 16, DEFAULT_SHIFTS) == color


def test_pure_channels_fill_their_masks():
    shifts = rgb_shifts(*RGB565)
    assert good_color(0xFF0000, 16, shifts) == RGB565[0]
    assert good_color(0x00FF00, 16, shifts) == RGB565[1]
    assert good_color(0x0000FF, 16, shifts) == RGB565[2]


def test_white_fills_all_masks():
    shifts = rgb_shifts(*RGB565)
    assert good_color(0xFFFFFF, 16, shifts) == RGB565[0] | RGB565[1] | RGB565[2]


def test_shallow_result_stays_within_masks():
    shifts = rgb_shifts(*RGB565)
    full = RGB565[0] | RGB565[1] | RGB565[2]
    for color in (0x123456, 0x808080, 0xFEDCBA):
        assert good_color(color, 16, shifts) & ~full == 0