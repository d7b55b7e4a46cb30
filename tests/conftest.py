"""Shared fixtures for the tessera test suite."""

import json

import pytest

from tessera_geometry import Point2D, Polygon2D
from tessera_geometry.logging import create_logger


@pytest.fixture
def unit_square_points():
    return [Point2D(0, 0), Point2D(1, 0), Point2D(1, 1), Point2D(0, 1)]


@pytest.fixture
def unit_square(unit_square_points):
    return Polygon2D(tuple(unit_square_points))


@pytest.fixture
def test_logger():
    return create_logger("test")


@pytest.fixture
def logged_events(caplog):
    """Returns a callable listing the structured events captured so far."""
    caplog.set_level("DEBUG")

    def events():
        return [json.loads(record.getMessage())["event"] for record in caplog.records]

    return events
