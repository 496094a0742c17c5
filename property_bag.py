#!/usr/bin/env python3
"""
Base PropertyBag class for fixed-key property storage.
"""


class PropertyBag:
    """
    Base class for in-memory property storage.
    Keys are fixed by DEFAULTS; setting or reading anything else is a bug.
    """

    # Subclasses must define DEFAULTS dict
    DEFAULTS = {}

    def __init__(self, **overrides):
        """
        Initialize property bag from DEFAULTS.

        Args:
            **overrides: Property values replacing the defaults
        """
        self._properties = self.DEFAULTS.copy()
        self.update(overrides)

    def _check_key(self, key):
        assert key in self.DEFAULTS, f"Unknown property '{key}' in {self.__class__.__name__}"

    def set(self, key, value):
        """
        Set a single property.

        Raises:
            AssertionError: If key is not in DEFAULTS
        """
        self._check_key(key)
        self._properties[key] = value

    def get(self, key, default=None):
        """
        Get a property value.

        Args:
            key: Property name
            default: Fallback when the stored value is None

        Raises:
            AssertionError: If key is not in DEFAULTS
        """
        self._check_key(key)

        value = self._properties.get(key)
        if value is None and default is not None:
            return default
        return value

    def update(self, values):
        """Set several properties at once."""
        for key, value in values.items():
            self.set(key, value)
