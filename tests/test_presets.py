"""Tests for preset scenarios."""

import numpy as np
import pytest
from nbody_sim.physics.body import Body
from nbody_sim.physics.simulation import Simulation
from nbody_sim.presets import SunEarth, InnerPlanets, RandomDisk, get_preset, list_presets


def test_sun_earth(sun_earth_bodies):
    """Test Sun/Earth preset reproduces the reference initial conditions."""
    preset = SunEarth()
    bodies = preset.generate()
    
    assert bodies == sun_earth_bodies
    assert preset.name == "sun_earth"


def test_inner_planets():
    """Test inner planets preset."""
    preset = InnerPlanets()
    bodies = preset.generate()
    
    assert len(bodies) == 5
    assert preset.name == "inner_planets"
    
    star = bodies[0]
    for planet in bodies[1:]:
        r = np.linalg.norm(planet.position)
        v = np.linalg.norm(planet.velocity)
        assert v == pytest.approx(np.sqrt(preset.G * star.mass / r))
        # Circular orbit: velocity perpendicular to radius
        assert abs(np.dot(planet.position, planet.velocity)) < 1e-6 * r * v


def test_random_disk():
    """Test random disk preset."""
    preset = RandomDisk(n_bodies=15, seed=42)
    bodies = preset.generate()
    
    assert len(bodies) == 15
    assert preset.name == "random_disk"
    assert all(isinstance(body, Body) for body in bodies)
    assert all(body.mass > 0 for body in bodies)
    radii = [np.linalg.norm(body.position) for body in bodies[1:]]
    assert min(radii) >= preset.inner_radius
    assert max(radii) <= preset.outer_radius


def test_preset_reproducibility():
    """Test that presets are reproducible with same seed."""
    bodies1 = RandomDisk(n_bodies=30, seed=42).generate()
    bodies2 = RandomDisk(n_bodies=30, seed=42).generate()
    bodies3 = RandomDisk(n_bodies=30, seed=7).generate()
    
    assert bodies1 == bodies2
    assert bodies1 != bodies3


def test_random_disk_rejects_empty():
    """A disk needs at least the central star."""
    with pytest.raises(ValueError):
        RandomDisk(n_bodies=0)


def test_registry():
    """Presets are available by name."""
    assert set(list_presets()) == {"sun_earth", "inner_planets", "random_disk"}
    assert isinstance(get_preset("SUN_EARTH"), SunEarth)
    assert get_preset("random_disk", n_bodies=4, seed=1).n_bodies == 4
    with pytest.raises(ValueError, match="Unknown preset"):
        get_preset("galaxy")


@pytest.mark.parametrize("name", ["sun_earth", "inner_planets", "random_disk"])
def test_presets_build_valid_simulations(name):
    """Every preset produces bodies the engine accepts."""
    sim = Simulation(get_preset(name, seed=0).generate())
    sim.run(5)
    assert np.all(np.isfinite(sim.snapshot().positions))
