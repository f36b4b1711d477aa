"""
Shared fixtures for rendering tests.
"""

import pytest

from canopy.config import Settings, configure


@pytest.fixture(autouse=True)
def default_settings():
    """Pin the color system so results do not depend on NO_COLOR or the terminal."""
    settings = configure(Settings(color_system="truecolor"))
    yield settings
    configure(Settings(color_system="truecolor"))


@pytest.fixture
def plain_settings():
    """Render without any ANSI escape sequences."""
    return configure(Settings(color_system=None))
