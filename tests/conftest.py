import pytest

from mortgage_calculators.config import settings


@pytest.fixture
def strict_ltv(monkeypatch):
    """Turn on the [0, 100] LTV bound for the duration of a test."""
    monkeypatch.setattr(settings, "STRICT_LTV_RANGE", True)
