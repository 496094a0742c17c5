#!/usr/bin/env python3
"""
Timeline Clock - an analog clock face redrawn on every display frame
Features:
- Smoothly sweeping hour, minute and second hands
- Hour numerals, minute ticks and a date readout
- Light and dark color roles following the desktop preference
"""

import logging
import sys
import traceback
from datetime import datetime

import gi
gi.require_version('Gtk', '3.0')
from gi.repository import Gtk, Gdk, GLib, GdkPixbuf

from face import render
from settings import Settings
from snapshot import render_surface, surface_to_png

logger = logging.getLogger(__name__)

ICON_SIZE = 64
RESPONSE_COPY = 1


def format_crash_report(exc_type, exc_value, exc_traceback):
    """Plain-text report of an uncaught exception"""
    frames = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    return f"{exc_type.__name__}: {exc_value}\n\n{frames}"


def show_crash_report(report, summary):
    """
    Modal error dialog with the report folded into a Details expander.
    The Copy button puts the report on the clipboard and keeps the dialog open.
    """
    dialog = Gtk.MessageDialog(
        message_type=Gtk.MessageType.ERROR,
        buttons=Gtk.ButtonsType.NONE,
        text="The clock stopped drawing"
    )
    dialog.format_secondary_text(summary)
    dialog.add_button("Copy", RESPONSE_COPY)
    dialog.add_button("Close", Gtk.ResponseType.CLOSE)

    label = Gtk.Label(label=report, selectable=True, xalign=0)
    label.get_style_context().add_class('monospace')
    details = Gtk.ScrolledWindow(min_content_height=240, min_content_width=560)
    details.add(label)

    expander = Gtk.Expander(label="Details")
    expander.add(details)
    dialog.get_message_area().pack_end(expander, True, True, 0)
    dialog.show_all()

    while dialog.run() == RESPONSE_COPY:
        Gtk.Clipboard.get(Gdk.SELECTION_CLIPBOARD).set_text(report, -1)
    dialog.destroy()


def exception_hook(exc_type, exc_value, exc_traceback):
    """Log uncaught exceptions and report them in a dialog; Ctrl-C passes through"""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logger.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    show_crash_report(format_crash_report(exc_type, exc_value, exc_traceback), str(exc_value))


def prefers_dark_theme():
    """Whether the desktop asks applications for a dark appearance"""
    gtk_settings = Gtk.Settings.get_default()
    if gtk_settings is None:
        return False
    if gtk_settings.get_property('gtk-application-prefer-dark-theme'):
        return True
    theme_name = gtk_settings.get_property('gtk-theme-name') or ''
    return theme_name.lower().endswith('-dark')


def surface_to_pixbuf(surface):
    """Convert a cairo image surface to a GdkPixbuf through PNG"""
    loader = GdkPixbuf.PixbufLoader.new_with_type('png')
    loader.write(surface_to_png(surface))
    loader.close()
    return loader.get_pixbuf()


class ClockWindow(Gtk.Window):
    def __init__(self, settings=None):
        super().__init__()

        self.settings = settings if settings is not None else Settings()
        self.theme = self.settings.resolve_theme(prefers_dark_theme())
        logger.info("Using %s color scheme", self.theme.name)

        self.set_title(self.settings.get('title'))
        self.set_default_size(self.settings.get('width'), self.settings.get('height'))
        self.set_icon(surface_to_pixbuf(render_surface(ICON_SIZE, ICON_SIZE, theme=self.theme)))

        self.drawing_area = Gtk.DrawingArea()
        self.drawing_area.connect('draw', self.on_draw)
        self.add(self.drawing_area)

        # Redraw on every frame of the display's frame clock
        self.drawing_area.add_tick_callback(self.on_tick)

        self.connect('destroy', self.on_destroy)
        self.connect('key-press-event', self.on_key_press)

    def on_tick(self, widget, frame_clock):
        widget.queue_draw()
        return GLib.SOURCE_CONTINUE

    def on_draw(self, widget, cr):
        """Paint the background and the clock face for the current instant"""
        width = widget.get_allocated_width()
        height = widget.get_allocated_height()

        cr.set_source_rgb(*self.theme.get('background_color'))
        cr.paint()

        render(cr, width, height, datetime.now(), self.theme)
        return False

    def on_key_press(self, widget, event):
        """Handle keyboard events"""
        if event.keyval == Gdk.KEY_Escape or event.keyval == Gdk.KEY_q:
            self.destroy()

    def on_destroy(self, widget):
        """Called when window is closed"""
        logger.info("Clock window closed")
        Gtk.main_quit()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.excepthook = exception_hook

    window = ClockWindow()
    window.show_all()
    Gtk.main()


if __name__ == '__main__':
    main()
