"""
Robofont: bitmap-font ASCII art banners

Load ``.robofont`` glyph definitions and compose text into multi-line banners.
"""

from typing import Union

from .version import __version__
from .base import BLANK, FontDefinition, Glyph
from .compositor import Canvas, Compositor
from .exceptions import ConfigError, FontNotFoundError, FontParseError, RobofontError
from .loader import load_font, parse_font
from .registry import available_fonts, get_font

FontLike = Union[str, FontDefinition, Compositor]


def render_text(text: str, font: FontLike = 'slant') -> str:
    """
    Generate a banner for text

    :param text: Text to render; it is upper-cased before glyph lookup
    :param font: Font name, FontDefinition or Compositor (default: 'slant')
    :return: Banner with one line per font row
    """
    if isinstance(font, Compositor):
        compositor = font
    elif isinstance(font, FontDefinition):
        compositor = Compositor(font)
    else:
        compositor = Compositor(get_font(font))
    return compositor.render(text.upper())


def print_banner(text: str, font: FontLike = 'slant') -> None:
    """
    Print a banner directly

    :param text: Text to render and print
    :param font: Font name, FontDefinition or Compositor (default: 'slant')
    """
    print(render_text(text, font))


__all__ = [
    'render_text',
    'print_banner',
    'parse_font',
    'load_font',
    'available_fonts',
    'get_font',
    'Compositor',
    'Canvas',
    'FontDefinition',
    'Glyph',
    'BLANK',
    'RobofontError',
    'FontParseError',
    'FontNotFoundError',
    'ConfigError',
    '__version__',
]
