#!/usr/bin/env python3
"""
Offscreen rendering of single clock frames.
"""

import io
from datetime import datetime

import cairo
from PIL import Image

from face import render
from theme import Theme


def render_surface(width, height, now=None, theme=None, background=True):
    """
    Render one frame into a new ARGB32 image surface.

    Args:
        width, height: Surface size in pixels
        now: Instant to show (defaults to the current local time)
        theme: Theme for the color roles (defaults to light)
        background: Paint the theme background first; otherwise the
            surface stays transparent outside the drawn shapes

    Returns:
        cairo.ImageSurface
    """
    if now is None:
        now = datetime.now()
    if theme is None:
        theme = Theme()

    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
    cr = cairo.Context(surface)

    if background:
        cr.set_source_rgb(*theme.get('background_color'))
    else:
        cr.set_source_rgba(0, 0, 0, 0)
    cr.paint()

    render(cr, width, height, now, theme)
    surface.flush()
    return surface


def surface_to_png(surface):
    """Encode a cairo surface as PNG bytes"""
    buffer = io.BytesIO()
    surface.write_to_png(buffer)
    return buffer.getvalue()


def render_image(width, height, now=None, theme=None, background=True):
    """Render one frame and return it as an RGBA Pillow image"""
    surface = render_surface(width, height, now, theme, background)
    image = Image.open(io.BytesIO(surface_to_png(surface)))
    return image.convert('RGBA')
