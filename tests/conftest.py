"""Shared fixtures: deterministic and failing entropy sources."""

import random

import pytest


@pytest.fixture
def seeded_entropy():
    """Reproducible byte source."""
    return random.Random(1234).randbytes


@pytest.fixture
def failing_entropy():
    """Byte source that always errors."""

    def read(n: int) -> bytes:
        raise OSError("entropy device unavailable")

    return read


@pytest.fixture
def zero_entropy():
    """Byte source that only ever returns zeros."""

    def read(n: int) -> bytes:
        return bytes(n)

    return read
