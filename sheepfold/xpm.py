"""Reading XPM pixmaps into images."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from sheepfold.colors import text_to_rgb
from sheepfold.image import Image

# Pixel value used for the transparent colour "None".
TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def str_to_wordtab(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return text.replace("\t", " ").split(" ") and [
        word for word in text.replace("\t", " ").split(" ") if word
    ]


def find_unquoted(text: str, find: str) -> int:
    """Return the position of `find` outside double quotes, or -1."""
    if not find:
        raise ValueError("search string must not be empty")
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Blank out /* */ and // comments that are not inside quoted strings."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        relative = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, relative + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        relative = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, relative + 3)
    return text


def color_key(chars: str) -> int:
    """Pack the characters naming an XPM colour into one integer."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def extract_strings(text: str) -> list[str]:
    """Return the contents of the double-quoted strings in the text, in order."""
    return list(_iter_strings(text))


def _iter_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(text: str) -> int:
    text = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = []
    for char in text:
        if not char.isdigit() or not char.isascii():
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows.

    With one or two characters per pixel a later colour definition replaces an
    earlier one for the same key; with more, the first definition wins.
    Undefined keys give pixel 0, and "None" gives the transparent value.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "the header"))
    later_wins = cpp <= 2

    palette: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "the colour table ends")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour visual in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour after 'c' in {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = color_key(line[:cpp])
        if later_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(source, "all pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(color_key(line[cpp * x:cpp * (x + 1)]), 0)
            if color == -1:
                color = TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data already split into its strings."""
    return parse_xpm(lines)


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file into an image; OSError propagates if it cannot be read."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(extract_strings(strip_comments(text)))