"""Off-screen images and an in-memory drawing surface."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheepfold.visual import DEFAULT_SHIFTS, Shifts, good_color


@dataclass
class Image:
    """A pixel buffer of `bpp` bits per pixel, rows `size_line` bytes apart.

    `endian` is 0 for little-endian pixel storage and 1 for big-endian.
    """

    width: int
    height: int
    bpp: int = 32
    endian: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bpp <= 0 or self.bpp % 8:
            raise ValueError(f"unsupported bits per pixel: {self.bpp}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        return self.width * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store a pixel value, truncated to the image's pixel size."""
        offset = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << self.bpp) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], self._byteorder)


@dataclass(frozen=True)
class TextDraw:
    """A string drawn onto a canvas."""

    x: int
    y: int
    color: int
    text: str


class Canvas:
    """A window-like surface that images, pixels and strings are drawn onto.

    Drawing outside the surface is clipped; the background is pixel 0.
    """

    def __init__(self, width: int, height: int, depth: int = 24,
                 shifts: Shifts = DEFAULT_SHIFTS) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self.depth = depth
        self.shifts = shifts
        self._mask = (1 << depth) - 1
        self.pixels = [[0] * width for _ in range(height)]
        self.texts: list[TextDraw] = []

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy a whole image with its top-left corner at (x, y)."""
        for row in range(image.height):
            target_y = y + row
            if not 0 <= target_y < self.height:
                continue
            line = self.pixels[target_y]
            for col in range(image.width):
                target_x = x + col
                if 0 <= target_x < self.width:
                    line[target_x] = image.get_pixel(col, row) & self._mask

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Draw one pixel of a 0x00RRGGBB colour."""
        if self._inside(x, y):
            self.pixels[y][x] = good_color(color, self.depth, self.shifts) & self._mask

    def string_put(self, x: int, y: int, color: int, text: str) -> None:
        """Record a string drawn at (x, y) in a 0x00RRGGBB colour."""
        pixel = good_color(color, self.depth, self.shifts) & self._mask
        self.texts.append(TextDraw(x, y, pixel, text))

    def clear(self) -> None:
        """Reset every pixel to the background and drop drawn strings."""
        for line in self.pixels:
            line[:] = [0] * self.width
        self.texts.clear()

    def get_pixel(self, x: int, y: int) -> int:
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self.pixels[y][x]