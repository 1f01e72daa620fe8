"""Physics engine for N-body simulations."""

from nbody_sim.physics.body import Body, InvalidBody
from nbody_sim.physics.simulation import Simulation, Snapshot

__all__ = ["Body", "InvalidBody", "Simulation", "Snapshot"]
