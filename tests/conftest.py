import io
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from ranch.core.notify import Notifier  # noqa: E402


@pytest.fixture
def notifier() -> Notifier:
    return Notifier(stream=io.StringIO())


class StubRNG:
    """Returns a fixed sequence of coin flips."""

    def __init__(self, *flips: bool) -> None:
        self._flips = list(flips)

    def coin_flip(self) -> bool:
        return self._flips.pop(0)


@pytest.fixture
def stub_rng():
    return StubRNG
