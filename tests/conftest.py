"""Core test fixtures for dice tests."""

import random
from unittest.mock import Mock

import pytest

from dicemath.config import Settings, get_settings


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for sampling tests."""
    return random.Random(20240601)


@pytest.fixture
def scripted_rng():
    """Factory for a random source that returns the given faces in order.

    Usage:
        rng = scripted_rng(3, 4, 5)
        rng.randint(1, 6)  # 3
    """

    def _make(*faces: int) -> Mock:
        rng = Mock(spec=["randint"])
        rng.randint.side_effect = list(faces)
        return rng

    return _make


@pytest.fixture
def default_settings(monkeypatch) -> Settings:
    """Settings with no .env file and no DICE_* overrides."""
    for name in ("DICE_SEED", "DICE_FRACTION_STYLE", "DICE_DEBUG", "DICE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()
