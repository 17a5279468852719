# Tint - Shared test fixtures
"""
Conversion strategies used to drive the gamut search and scheme generator
through their failure paths.
"""

from __future__ import annotations

import pytest

from tint_hct import LabConversion


class ProbeFailure(RuntimeError):
    """Raised by ``FailingStrategy`` to mark an injected failure."""


class CountingStrategy(LabConversion):
    """Default conversion that records how often it was probed."""

    __slots__ = ("calls",)

    def __init__(self) -> None:
        self.calls = 0

    def lch_to_argb(self, hue, chroma, tone):
        self.calls += 1
        return super().lch_to_argb(hue, chroma, tone)


class FailingStrategy(CountingStrategy):
    """Behaves like the default strategy until the *fail_on*-th probe."""

    __slots__ = ("fail_on",)

    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self.fail_on = fail_on

    def lch_to_argb(self, hue, chroma, tone):
        if self.calls + 1 >= self.fail_on:
            self.calls += 1
            raise ProbeFailure(f"injected failure on probe {self.calls}")
        return super().lch_to_argb(hue, chroma, tone)


class ConstantStrategy:
    """Returns a fixed (possibly malformed) probe result."""

    def __init__(self, result) -> None:
        self.result = result

    def lch_to_argb(self, hue, chroma, tone):
        return self.result


@pytest.fixture
def counting_strategy() -> CountingStrategy:
    return CountingStrategy()
