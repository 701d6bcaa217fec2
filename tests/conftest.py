import pytest

from stylekit.property import StyleProperty


@pytest.fixture
def parse():
    """Shortcut for `StyleProperty.parse`."""
    return StyleProperty.parse
