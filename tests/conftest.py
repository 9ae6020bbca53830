import pytest

from tasklauncher.models import FontSpec


class FakeMeasurer:
    """10px per character; height is twice the point size."""

    def __init__(self):
        self.calls = []

    def measure(self, text: str, font: FontSpec):
        self.calls.append((text, font))
        return len(text) * 10, int(font.size * 2)


@pytest.fixture
def measurer():
    return FakeMeasurer()
