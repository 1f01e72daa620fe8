"""Pytest configuration and shared fixtures."""

import matplotlib
matplotlib.use("Agg")

import pytest
from nbody_sim.physics.body import Body


@pytest.fixture
def sun_earth_bodies():
    """Reference Sun/Earth initial conditions."""
    return [
        Body(2.0e30, (0.0, 0.0), (0.0, 0.0)),
        Body(6.0e24, (0.0, 1.5e11), (30000.0, 0.0)),
    ]


@pytest.fixture
def three_bodies():
    """Three unequal masses in a non-degenerate configuration."""
    return [
        Body(5.0e29, (0.0, 0.0), (0.0, -1000.0)),
        Body(3.0e27, (1.0e11, 2.0e10), (-2000.0, 25000.0)),
        Body(8.0e26, (-7.0e10, 9.0e10), (18000.0, 4000.0)),
    ]
