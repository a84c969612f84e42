import pytest

from sheepfold.image import Canvas, Image, TextDraw
from sheepfold.visual import good_color, rgb_shifts

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42


def color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def color_map_type2(x, y, w, h):
    return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def fill_image(image, mapping):
    for y in range(image.height):
        for x in range(image.width):
            image.set_pixel(x, y, mapping(x, y, image.width, image.height))


def test_new_image_layout():
    image = Image(IM1_SX, IM1_SY)
    assert image.bpp == 32
    assert image.size_line == IM1_SX * 4
    assert len(image.data) == image.size_line * IM1_SY
    assert not any(image.data)


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_bad_image_size(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_little_endian_fill_matches_byte_layout():
    image = Image(IM1_SX, IM1_SY, endian=0)
    fill_image(image, color_map)
    for x, y in [(0, 0), (41, 41), (13, 27)]:
        offset = y * image.size_line + x * 4
        expected = color_map(x, y, IM1_SX, IM1_SY)
        assert bytes(image.data[offset:offset + 4]) == expected.to_bytes(4, "little")
        assert image.get_pixel(x, y) == expected


def test_big_endian_fill_matches_byte_layout():
    image = Image(IM1_SX, IM1_SY, endian=1)
    fill_image(image, color_map_type2)
    for x, y in [(0, 0), (41, 0), (7, 33)]:
        offset = y * image.size_line + x * 4
        expected = color_map_type2(x, y, IM1_SX, IM1_SY)
        assert bytes(image.data[offset:offset + 4]) == expected.to_bytes(4, "big")
        assert image.get_pixel(x, y) == expected


def test_set_pixel_truncates_to_pixel_size():
    image = Image(2, 2, bpp=16)
    image.set_pixel(1, 1, 0x123456)
    assert image.get_pixel(1, 1) == 0x3456


def test_image_pixel_out_of_range():
    image = Image(4, 4)
    with pytest.raises(IndexError):
        image.set_pixel(4, 0, 1)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_color_map_without_event():
    canvas = Canvas(WIN1_SX, WIN1_SY)
    for x in range(WIN1_SX):
        for y in range(WIN1_SY):
            canvas.pixel_put(x, y, color_map(x, y, WIN1_SX, WIN1_SY))
    for x, y in [(0, 0), (241, 241), (100, 50)]:
        assert canvas.get_pixel(x, y) == color_map(x, y, WIN1_SX, WIN1_SY)


def test_clear_window():
    canvas = Canvas(WIN1_SX, WIN1_SY)
    canvas.pixel_put(10, 10, 0xFF99FF)
    canvas.string_put(5, WIN1_SY // 2, 0xFF99FF, "String output")
    canvas.clear()
    assert canvas.get_pixel(10, 10) == 0
    assert canvas.texts == []


def test_put_image_at_offset():
    image = Image(IM1_SX, IM1_SY)
    fill_image(image, color_map)
    canvas = Canvas(WIN1_SX, WIN1_SY)
    canvas.put_image(image, 20, 20)
    assert canvas.get_pixel(20, 20) == image.get_pixel(0, 0)
    assert canvas.get_pixel(61, 61) == image.get_pixel(41, 41)
    assert canvas.get_pixel(19, 19) == 0
    assert canvas.get_pixel(62, 62) == 0


def test_put_image_is_clipped():
    image = Image(IM1_SX, IM1_SY)
    fill_image(image, color_map)
    canvas = Canvas(30, 30)
    canvas.put_image(image, 20, -10)
    assert canvas.get_pixel(20, 0) == image.get_pixel(0, 10)
    assert canvas.get_pixel(29, 29) == image.get_pixel(9, 39)


def test_put_image_drops_bits_above_depth():
    image = Image(1, 1)
    image.set_pixel(0, 0, 0xFF123456)
    canvas = Canvas(2, 2)
    canvas.put_image(image, 0, 0)
    assert canvas.get_pixel(0, 0) == 0x123456


def test_string_put_records_text():
    canvas = Canvas(WIN1_SX, WIN1_SY)
    canvas.string_put(5, WIN1_SY // 2, 0xFF99FF, "String output")
    canvas.string_put(15, WIN1_SY // 2 + 20, 0x00FFFF, "MinilibX test")
    assert canvas.texts == [
        TextDraw(5, WIN1_SY // 2, 0xFF99FF, "String output"),
        TextDraw(15, WIN1_SY // 2 + 20, 0x00FFFF, "MinilibX test"),
    ]


def test_pixel_put_converts_for_shallow_canvas():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    canvas = Canvas(4, 4, depth=16, shifts=shifts)
    canvas.pixel_put(1, 2, 0xFF0000)
    assert canvas.get_pixel(1, 2) == good_color(0xFF0000, 16, shifts)
    assert canvas.get_pixel(1, 2) == 0xF800


def test_pixel_put_outside_is_ignored():
    canvas = Canvas(4, 4)
    canvas.pixel_put(10, 10, 0xFFFFFF)
    assert all(value == 0 for line in canvas.pixels for value in line)
    with pytest.raises(IndexError):
        canvas.get_pixel(10, 10)