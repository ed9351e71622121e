"""Shared polygon and point fixtures."""

import pytest


@pytest.fixture
def square() -> list[dict[str, float]]:
    """Axis-aligned 10x10 square, not explicitly closed."""
    return [
        {"lat": 0, "lng": 0},
        {"lat": 0, "lng": 10},
        {"lat": 10, "lng": 10},
        {"lat": 10, "lng": 0},
    ]


@pytest.fixture
def rectangle() -> list[dict[str, float]]:
    """Rectangle spanning lat 1-4, lng 1-5."""
    return [
        {"lat": 1, "lng": 1},
        {"lat": 1, "lng": 5},
        {"lat": 4, "lng": 5},
        {"lat": 4, "lng": 1},
    ]


@pytest.fixture
def pentagon() -> list[dict[str, float]]:
    """Regular-ish pentagon centred on the origin."""
    return [
        {"lat": 2, "lng": 0},
        {"lat": 0.618, "lng": 1.902},
        {"lat": -1.618, "lng": 1.176},
        {"lat": -1.618, "lng": -1.176},
        {"lat": 0.618, "lng": -1.902},
    ]


@pytest.fixture
def accra() -> list[dict[str, float]]:
    """Square around central Accra."""
    return [
        {"lat": 5.6037, "lng": -0.1870},
        {"lat": 5.6037, "lng": -0.1700},
        {"lat": 5.5800, "lng": -0.1700},
        {"lat": 5.5800, "lng": -0.1870},
    ]
