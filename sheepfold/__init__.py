"""Colour names, an XPM reader, in-memory images and canvas, and a printf-style formatter."""

__version__ = "0.1.0"

__all__ = ["colors", "ftprintf", "image", "visual", "xpm"]