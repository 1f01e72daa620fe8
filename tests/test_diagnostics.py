"""Regression tests for diagnostics and the Sun/Earth orbit."""

import numpy as np
import pytest
from nbody_sim.backends.factory import get_backend
from nbody_sim.physics.body import Body
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.simulation import Simulation


def test_two_body_energies():
    """K and U for a simple pair match the closed forms."""
    backend = get_backend('numpy')
    positions = np.array([[0.0, 0.0], [5.0, 0.0]])
    velocities = np.array([[0.0, 0.0], [0.0, 2.0]])
    masses = np.array([100.0, 1.0])
    
    diagnostics = Diagnostics(backend, G=1.0)
    K, U, E = diagnostics.compute_energies(positions, velocities, masses)
    
    assert K == pytest.approx(2.0)
    assert U == pytest.approx(-100.0 / 5.0)
    assert E == pytest.approx(K + U)


def test_coincident_pair_has_no_potential():
    """Potential energy skips r == 0 pairs, matching the force policy."""
    backend = get_backend('numpy')
    positions = np.array([[0.0, 0.0], [0.0, 0.0], [2.0, 0.0]])
    masses = np.array([1.0, 1.0, 4.0])
    
    U = Diagnostics(backend, G=1.0).compute_potential_energy(positions, masses)
    
    assert np.isfinite(U)
    assert U == pytest.approx(-2.0 * (1.0 * 4.0 / 2.0))


def test_momentum_and_center_of_mass():
    """Momentum, angular momentum and center of mass."""
    backend = get_backend('numpy')
    positions = np.array([[1.0, 0.0], [-1.0, 0.0]])
    velocities = np.array([[0.0, 1.0], [0.0, -1.0]])
    masses = np.array([2.0, 2.0])
    diagnostics = Diagnostics(backend, G=1.0)
    
    assert np.allclose(diagnostics.compute_momentum(velocities, masses), [0.0, 0.0])
    assert diagnostics.compute_angular_momentum(positions, velocities, masses) == pytest.approx(4.0)
    assert np.allclose(diagnostics.compute_center_of_mass(positions, masses), [0.0, 0.0])


def test_sun_earth_energy_bounded(sun_earth_bodies):
    """Symplectic Euler keeps the energy error small over one year."""
    sim = Simulation(sun_earth_bodies)
    E0 = sim.get_energy()
    
    energies = []
    for _ in range(365):
        sim.step()
        energies.append(sim.get_energy())
    
    max_error = max(abs(E - E0) / abs(E0) for E in energies)
    assert max_error < 0.05, f"Energy error should stay < 5%, got {max_error*100:.4f}%"


def test_sun_earth_orbit_stays_bound(sun_earth_bodies):
    """The Earth stays near 1 AU and returns close to its start after a year."""
    sim = Simulation(sun_earth_bodies)
    radii = []
    for _ in range(365):
        sim.step()
        pos = sim.snapshot().positions
        radii.append(np.linalg.norm(pos[1] - pos[0]))
    
    assert min(radii) > 1.3e11
    assert max(radii) < 1.7e11
    final = sim.snapshot().positions
    assert np.linalg.norm(final[1] - final[0] - np.array([0.0, 1.5e11])) < 0.4e11


def test_linear_momentum_conserved(three_bodies):
    """Sum-then-apply keeps total momentum constant."""
    sim = Simulation(three_bodies)
    diagnostics = Diagnostics(sim.backend, G=sim.G)
    snap = sim.snapshot()
    p0 = diagnostics.compute_momentum(snap.velocities, snap.masses)
    
    sim.run(200)
    snap = sim.snapshot()
    p1 = diagnostics.compute_momentum(snap.velocities, snap.masses)
    
    np.testing.assert_allclose(p1, p0, rtol=0, atol=1e-9 * np.linalg.norm(p0))


def test_angular_momentum_conserved():
    """Central forces conserve L_z up to rounding."""
    sim = Simulation([
        Body(1.0, (0.0, 0.0), (0.0, 0.0)),
        Body(0.001, (1.0, 0.0), (0.0, 1.0)),
    ], G=1.0, dt=0.01)
    diagnostics = Diagnostics(sim.backend, G=1.0)
    snap = sim.snapshot()
    L0 = diagnostics.compute_angular_momentum(snap.positions, snap.velocities, snap.masses)
    
    sim.run(500)
    snap = sim.snapshot()
    L1 = diagnostics.compute_angular_momentum(snap.positions, snap.velocities, snap.masses)
    
    assert L1 == pytest.approx(L0, rel=1e-9)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
