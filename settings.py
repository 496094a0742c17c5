#!/usr/bin/env python3
"""
Settings class for the host window.
"""

from property_bag import PropertyBag
from theme import Theme


COLOR_SCHEMES = ('auto', 'light', 'dark')


class Settings(PropertyBag):
    """
    Property bag for host defaults (non-appearance).
    Handles the initial window geometry and which color scheme to use.
    """

    # Default values for all settings
    DEFAULTS = {
        # Window geometry
        'width': 400,
        'height': 400,
        'title': 'Clock',

        # 'auto' follows the desktop's dark preference
        'color_scheme': 'auto',
    }

    def set(self, key, value):
        if key == 'color_scheme':
            assert value in COLOR_SCHEMES, f"Unknown color scheme '{value}'"
        super().set(key, value)

    def resolve_theme(self, prefers_dark=False):
        """
        Pick the Theme for the configured color scheme.

        Args:
            prefers_dark: Desktop preference, only consulted for 'auto'

        Returns:
            Theme: light or dark color roles
        """
        scheme = self.get('color_scheme')
        if scheme == 'auto':
            return Theme.for_dark_mode(prefers_dark)
        return Theme(scheme)
