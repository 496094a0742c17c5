from unittest.mock import Mock

import cairo
import pytest


@pytest.fixture
def make_recording_context():
    """
    Factory for real cairo contexts on a fresh image surface whose calls
    are recorded in mock_calls.
    """
    def factory(width=400, height=400):
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        return Mock(wraps=cairo.Context(surface))
    return factory


@pytest.fixture
def recording_context(make_recording_context):
    return make_recording_context()


def calls_named(context, name):
    """Recorded calls of one cairo method, in order"""
    return [c for c in context.mock_calls if c[0] == name]
