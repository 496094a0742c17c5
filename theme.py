#!/usr/bin/env python3
"""
Theme class for the clock's color roles.
"""

import logging

from property_bag import PropertyBag

logger = logging.getLogger(__name__)


class Theme(PropertyBag):
    """
    Property bag for the light and dark color roles.
    Colors are (r, g, b) tuples in the 0..1 range cairo expects.
    """

    # Light scheme
    DEFAULTS = {
        'primary_color': (0.0, 0.0, 0.0),  # Hands, numerals, ticks, rings
        'accent_color': (1.0, 0.584, 0.0),  # Orange second hand and hub
        'background_color': (1.0, 1.0, 1.0),
        'numeral_font': 'Sans',
    }

    SCHEMES = {
        'light': {},
        'dark': {
            'primary_color': (1.0, 1.0, 1.0),
            'accent_color': (1.0, 0.624, 0.039),
            'background_color': (0.11, 0.11, 0.118),
        },
    }

    def __init__(self, name='light'):
        """
        Initialize theme.

        Args:
            name: 'light' or 'dark'; anything else falls back to 'light'
        """
        if name not in self.SCHEMES:
            logger.warning("Theme '%s' not found, using light", name)
            name = 'light'

        self.name = name
        super().__init__(**self.SCHEMES[name])

    @classmethod
    def for_dark_mode(cls, dark):
        return cls('dark' if dark else 'light')
