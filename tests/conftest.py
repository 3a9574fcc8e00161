import io

import pytest

from rgbterm.terminal import Terminal


class FakeTerminal(Terminal):
    """Terminal bound to in-memory streams."""

    def __init__(self, reply: str = "", timeout=None):
        super().__init__(stdout=io.StringIO(), stdin=io.StringIO(reply), timeout=timeout)

    @property
    def output(self) -> str:
        return self.stdout.getvalue()


@pytest.fixture
def term() -> FakeTerminal:
    """Terminal writing into a StringIO with empty input."""
    return FakeTerminal()


@pytest.fixture
def make_term():
    """Factory for terminals whose input holds a scripted reply."""

    def _factory(reply: str = "", timeout=None) -> FakeTerminal:
        return FakeTerminal(reply, timeout=timeout)

    return _factory
