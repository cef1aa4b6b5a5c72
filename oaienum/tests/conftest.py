"""Unit tests configuration file."""

import pytest

from oaienum.registry import Registry


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


class FakeField:
    """Multipart field whose text is known up front."""

    def __init__(self, text):
        self._text = text

    async def text(self):
        return self._text


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def multipart_field():
    return FakeField
