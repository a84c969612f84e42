# sheepfold

Building blocks for a small tile-based puzzle game: named colours, an XPM
sprite reader, in-memory images and a drawing canvas, and a compact
printf-style formatter. Everything is pure Python with no dependencies.

## Modules

### `sheepfold.colors`

The X11 colour names.

- `lookup_color(name)` returns the `0xRRGGBB` value of a name, matched
  case-insensitively, or `None` if the name is unknown. Where a name occurs
  more than once in the table, the first entry wins. The name `none` gives `-1`.
- `text_to_rgb(name, end)` resolves an XPM colour specification: `#rrggbb`
  is read as hexadecimal; otherwise `name` (joined with `end` by a space when
  `end` is given) is looked up. Unknown names give `0`.

### `sheepfold.visual`

Pixel-value conversion for TrueColor displays.

- `rgb_shifts(red_mask, green_mask, blue_mask)` returns the offset and width
  of each channel mask as a six-tuple; a mask that is not positive raises
  `ValueError`.
- `good_color(color, depth, shifts)` returns the colour unchanged for depth
  24 or more, and otherwise narrows each 8-bit channel and moves it into place.
- `DEFAULT_SHIFTS` is the layout of an ordinary 24-bit `0x00RRGGBB` visual.

### `sheepfold.image`

- `Image(width, height, bpp=32, endian=0)` is a pixel buffer (`data`) with
  rows `size_line` bytes apart. `set_pixel(x, y, color)` stores a value
  truncated to the pixel size, `get_pixel(x, y)` reads it back; positions
  outside the image raise `IndexError`. `endian` 0 stores pixels
  little-endian, 1 big-endian.
- `Canvas(width, height, depth=24, shifts=DEFAULT_SHIFTS)` is a window-like
  surface. `put_image(image, x, y)` copies an image with its top-left corner
  at `(x, y)`, `pixel_put(x, y, color)` draws one pixel, `string_put(x, y,
  color, text)` records a `TextDraw` in `texts`, and `clear()` resets every
  pixel to 0 and drops the recorded strings. Drawing outside the canvas is
  clipped; `get_pixel` outside it raises `IndexError`.

### `sheepfold.xpm`

- `parse_xpm(lines)` and `xpm_to_image(lines)` build an `Image` from XPM
  strings: the header, the colour lines, then the pixel rows.
- `xpm_file_to_image(path)` reads an XPM file, blanks out comments that are
  outside quoted strings, takes the quoted strings and parses them. `OSError`
  propagates if the file cannot be read.
- Malformed data raises `XpmError` (a `ValueError`).
- Pixels of the colour `None` get the value `TRANSPARENT` (`0xFF000000`);
  keys with no colour definition give 0.
- Helpers: `str_to_wordtab`, `find_unquoted`, `strip_comments`, `color_key`,
  `extract_strings`.

### `sheepfold.ftprintf`

A formatter supporting `%c %s %p %d %i %u %x %X %%`.

- `format_printf(fmt, *args)` returns the formatted text. `%s` of `None`
  gives `(null)`, `%p` of `None` or 0 gives `(nil)`, `%d`/`%i` wrap to 32-bit
  signed, `%u`/`%x`/`%X` to 32-bit unsigned. An unknown conversion character
  is written as itself. Missing or wrongly typed arguments raise `TypeError`.
- `ft_printf(fmt, *args)` writes that text to standard output and returns its
  length.
- `number_in_base(number, base)`, `check_base(base)` and
  `format_pointer(address)` are available on their own.

## Examples

```python
from sheepfold.colors import lookup_color, text_to_rgb

print(hex(lookup_color("Forest Green")))   # 0x228b22
print(text_to_rgb("#00ff00", None))        # 65280
```

```python
from sheepfold.xpm import TRANSPARENT, xpm_to_image

sprite = xpm_to_image(["2 1 2 1", ". c #ff0000", "x c None", ".x"])
print(hex(sprite.get_pixel(0, 0)))            # 0xff0000
print(sprite.get_pixel(1, 0) == TRANSPARENT)  # True
```

```python
from sheepfold.image import Canvas

canvas = Canvas(64, 64)
canvas.put_image(sprite, 10, 10)
canvas.string_put(5, 20, 0xFF0000, "Steps: 3")
print(canvas.get_pixel(10, 10), canvas.texts[0].text)
```

```python
from sheepfold.ftprintf import format_printf

print(format_printf("%d sheep, %x, %s", 3, 255, None))  # 3 sheep, ff, (null)
```

## What this package does not do

It holds no game itself: there is no map loading or checking, no player,
sheep or enemy, no movement or win/lose rules, no texture set, no window or
event loop, and no command to start a game. The canvas keeps its pixels and
strings in memory and shows nothing on screen.