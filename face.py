#!/usr/bin/env python3
"""
Clock face rendering on a cairo context.

Every length is a fixed proportion of the face radius, which is half the
shorter side of the drawing area. A frame is a pure function of the surface
size and the instant being shown.
"""

import calendar
import math
from collections import namedtuple
from datetime import datetime

import cairo

from angles import component, compute_angles
from theme import Theme


# ============================================================================
# VISUAL CONFIGURATION
# ============================================================================

HOUR_TICK_WIDTH = 3  # Every 5th minute tick
MINUTE_TICK_WIDTH = 1
DATE_BOX_LINE_WIDTH = 2

# ============================================================================


class FaceMetrics(namedtuple('FaceMetrics', [
        'radius', 'border',
        'hour_length', 'minute_length', 'second_length',
        'stalk_width', 'body_width', 'body_offset',
        'second_width', 'second_offset',
        'numeral_size', 'numeral_offset',
        'tick_offset', 'tick_length',
        'hub_diameter', 'hub_stroke',
        'date_size'])):
    """Derived lengths for one frame."""

    __slots__ = ()

    @classmethod
    def from_radius(cls, r):
        return cls(
            radius=r,
            border=r / 25,
            hour_length=r / 2.5,
            minute_length=r / 1.5,
            second_length=r * 1.05,
            stalk_width=r / 30,
            body_width=r / 15,
            body_offset=r / 5,
            second_width=r / 25,
            second_offset=-r / 6,
            numeral_size=r * 0.25,
            numeral_offset=r * 0.75,
            tick_offset=r * 0.95,
            tick_length=r / 20,
            hub_diameter=r / 6,
            hub_stroke=r / 40,
            date_size=r / 8,
        )


def face_metrics(width, height):
    """Metrics for a drawing area of the given size"""
    return FaceMetrics.from_radius(min(width, height) / 2)


def render(cr, width, height, now=None, theme=None):
    """
    Draw one clock frame filling a width x height area.

    The face is composed in its own group so the hub punch-through only
    erases the face layer, not what the caller painted underneath.

    Args:
        cr: cairo.Context positioned at the area's top-left corner
        width, height: Size of the drawing area
        now: Instant to show (defaults to the current local time)
        theme: Theme supplying the color roles (defaults to light)
    """
    if now is None:
        now = datetime.now()
    if theme is None:
        theme = Theme()

    metrics = face_metrics(width, height)
    radius = metrics.radius
    angles = compute_angles(now)
    primary = theme.get('primary_color')
    accent = theme.get('accent_color')
    font = theme.get('numeral_font')

    cr.save()
    cr.push_group()
    try:
        cr.translate(width / 2, height / 2)

        # Bezel, inset so the stroke is centered on the true radius
        cr.set_source_rgb(*primary)
        cr.set_line_width(metrics.border)
        cr.new_sub_path()
        cr.arc(0, 0, radius - metrics.border / 2, 0, 2 * math.pi)
        cr.stroke()

        draw_hours(cr, radius, primary, font)
        draw_marks(cr, radius, primary)
        draw_date(cr, radius, now, primary, font)

        draw_hand(cr, radius, metrics.minute_length, angles.minute, primary)
        draw_hand(cr, radius, metrics.hour_length, angles.hour, primary)
        draw_second_hand(cr, radius, metrics.second_length, angles.second, accent)

        draw_hub(cr, radius, primary, accent)
    finally:
        cr.pop_group_to_source()
        cr.paint()
        cr.restore()


def draw_rounded_rectangle(cr, x, y, width, height, radius):
    """Draw a rounded rectangle path"""
    cr.new_sub_path()
    cr.arc(x + radius, y + radius, radius, math.pi, 3 * math.pi / 2)
    cr.arc(x + width - radius, y + radius, radius, 3 * math.pi / 2, 0)
    cr.arc(x + width - radius, y + height - radius, radius, 0, math.pi / 2)
    cr.arc(x + radius, y + height - radius, radius, math.pi / 2, math.pi)
    cr.close_path()


def capsule_path(cr, x, y, width, height):
    """Rounded rectangle whose short sides are full semicircles"""
    draw_rounded_rectangle(cr, x, y, width, height, min(width, height) / 2)


def _show_centered_text(cr, text, x, y):
    extents = cr.text_extents(text)
    cr.move_to(x - extents.x_bearing - extents.width / 2,
               y - extents.y_bearing - extents.height / 2)
    cr.show_text(text)


def numeral_position(hour, radius):
    """Center of an hour numeral: 12 o'clock rotated clockwise by hour * 30 degrees"""
    angle = hour * math.pi / 6
    offset = FaceMetrics.from_radius(radius).numeral_offset
    return offset * math.sin(angle), -offset * math.cos(angle)


def draw_hours(cr, radius, color, font='Sans'):
    """Draw the upright numerals 1..12 around the dial"""
    cr.set_source_rgb(*color)
    cr.select_font_face(font, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD)
    cr.set_font_size(FaceMetrics.from_radius(radius).numeral_size)

    for hour in range(1, 13):
        x, y = numeral_position(hour, radius)
        _show_centered_text(cr, str(hour), x, y)


def draw_marks(cr, radius, color):
    """Draw 60 radial minute ticks, thicker on the hour positions"""
    metrics = FaceMetrics.from_radius(radius)
    outer = metrics.tick_offset
    inner = metrics.tick_offset - metrics.tick_length

    cr.set_source_rgb(*color)
    for minute in range(60):
        angle = minute * math.pi / 30
        cr.set_line_width(HOUR_TICK_WIDTH if minute % 5 == 0 else MINUTE_TICK_WIDTH)
        cr.move_to(math.cos(angle) * outer, math.sin(angle) * outer)
        cr.line_to(math.cos(angle) * inner, math.sin(angle) * inner)
        cr.stroke()


def date_text(now):
    """
    Short date such as 'Oct 19' (locale month abbreviation, unpadded day).
    Missing date fields read as 0, and month 0 has no abbreviation.
    """
    month = component(now, 'month')
    day = component(now, 'day')
    return f"{calendar.month_abbr[month]} {day}".strip()


def draw_date(cr, radius, now, color, font='Sans'):
    """Draw the date readout inside its outline box, right of center"""
    cr.set_source_rgb(*color)
    cr.select_font_face(font, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD)
    cr.set_font_size(FaceMetrics.from_radius(radius).date_size)
    _show_centered_text(cr, date_text(now), radius / 2.75, -radius / 6)

    cr.set_line_width(DATE_BOX_LINE_WIDTH)
    cr.rectangle(radius / 10, -radius / 4, radius / 2, radius / 6)
    cr.stroke()


def draw_hand(cr, radius, length, angle, color):
    """
    Draw an hour or minute hand.

    A thin stalk runs from the pivot to length; a capsule twice as wide,
    starting radius / 5 out from the pivot, forms the visible body. Both
    point down before rotation.
    """
    metrics = FaceMetrics.from_radius(radius)
    width = metrics.stalk_width

    cr.save()
    cr.rotate(angle)
    cr.set_source_rgb(*color)

    cr.rectangle(-width / 2, 0, width, length)
    cr.fill()

    capsule_path(cr, -width, metrics.body_offset, metrics.body_width, length)
    cr.fill()
    cr.restore()


def draw_second_hand(cr, radius, length, angle, color):
    """Draw the second hand, a single capsule reaching slightly past the pivot"""
    metrics = FaceMetrics.from_radius(radius)
    width = metrics.second_width

    cr.save()
    cr.rotate(angle)
    cr.set_source_rgb(*color)
    capsule_path(cr, -width / 2, metrics.second_offset, width, length)
    cr.fill()
    cr.restore()


def draw_hub(cr, radius, primary, accent):
    """
    Draw the center hub: a primary ring, the area inside it erased to full
    transparency, then an accent ring on the erased edge.
    """
    metrics = FaceMetrics.from_radius(radius)
    ring_width = metrics.hub_stroke
    outer = metrics.hub_diameter / 2
    inner = outer - ring_width

    cr.set_line_width(ring_width)
    cr.set_source_rgb(*primary)
    cr.new_sub_path()
    cr.arc(0, 0, outer, 0, 2 * math.pi)
    cr.stroke()

    cr.set_operator(cairo.OPERATOR_CLEAR)
    cr.new_sub_path()
    cr.arc(0, 0, inner, 0, 2 * math.pi)
    cr.fill()
    cr.set_operator(cairo.OPERATOR_OVER)

    cr.set_source_rgb(*accent)
    cr.new_sub_path()
    cr.arc(0, 0, inner, 0, 2 * math.pi)
    cr.stroke()
