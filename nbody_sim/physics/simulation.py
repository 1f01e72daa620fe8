"""Main simulation engine."""

import threading
import warnings
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple
import numpy as np
from nbody_sim.backends.base import Backend
from nbody_sim.backends.factory import get_backend
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body, InvalidBody
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only copy of the simulation state at one instant.

    Arrays are private copies with the write flag cleared, so later steps
    never show through.
    """
    positions: np.ndarray
    velocities: np.ndarray
    masses: np.ndarray
    time: float
    step_count: int

    def __len__(self) -> int:
        return self.masses.shape[0]

    def points(self) -> List[Tuple[Tuple[float, float], float]]:
        """Return [((x, y), mass), ...] for rendering."""
        return [
            ((float(pos[0]), float(pos[1])), float(mass))
            for pos, mass in zip(self.positions, self.masses)
        ]

    def bodies(self) -> List[Body]:
        """Return the captured state as Body values."""
        return [
            Body(float(mass), (float(pos[0]), float(pos[1])), (float(vel[0]), float(vel[1])))
            for pos, vel, mass in zip(self.positions, self.velocities, self.masses)
        ]


class Simulation:
    """Fixed-step gravitational N-body simulation.

    Owns the body state and the constants G and dt. Each call to step()
    computes every acceleration from the start-of-step positions, then
    commits new velocities and positions together with semi-implicit Euler.
    """

    G = constants.G
    DT = constants.DAY

    def __init__(
        self,
        bodies: Iterable[Body],
        G: Optional[float] = None,
        dt: Optional[float] = None,
        backend: Optional[Backend] = None,
        force_method: str = "vectorized"
    ):
        """Initialize simulation.

        Args:
            bodies: Non-empty ordered collection of bodies
            G: Gravitational constant (default: 6.67e-11)
            dt: Time step in seconds (default: one day)
            backend: Compute backend (default: NumPy)
            force_method: 'vectorized' or 'direct' pairwise summation

        Raises:
            InvalidBody: If the collection is empty or any body is invalid
        """
        bodies = list(bodies)
        if not bodies:
            raise InvalidBody("A simulation needs at least one body")
        for index, body in enumerate(bodies):
            try:
                body.validate()
            except InvalidBody as exc:
                raise InvalidBody(f"Body {index}: {exc}") from exc

        self.backend = backend or get_backend("numpy")
        self.G = float(G) if G is not None else self.G
        self.dt = float(dt) if dt is not None else self.DT
        self.force_calculator = ForceCalculator(method=force_method)
        self.integrator = SymplecticEulerIntegrator()

        self.positions = self.backend.array([body.position for body in bodies])
        self.velocities = self.backend.array([body.velocity for body in bodies])
        self.masses = self.backend.array([body.mass for body in bodies])
        self.n_bodies = len(bodies)

        self.time = 0.0
        self.step_count = 0
        self._lock = threading.Lock()

        # Callbacks and progress output
        self.on_step_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self.debug_table_interval: int = 100

        self._warn_coincident()

    def _warn_coincident(self):
        positions_np = np.asarray(self.backend.to_numpy(self.positions))
        n_unique = np.unique(positions_np, axis=0).shape[0]
        if n_unique < self.n_bodies:
            warnings.warn(
                f"{self.n_bodies - n_unique} bodies share a position with another body; "
                f"coincident pairs exert no force on each other.",
                UserWarning
            )

    def compute_accelerations(self):
        """Compute accelerations from the current positions without changing state.

        Returns:
            Array of shape (n, 2)
        """
        with self._lock:
            positions = self.positions
        return self.force_calculator.compute_accelerations(
            positions, self.masses, self.backend, self.G
        )

    def step(self):
        """Advance every body by one time step."""
        # Start-of-step state; never written in place, only replaced on commit
        positions = self.positions
        velocities = self.velocities

        accelerations = self.force_calculator.compute_accelerations(
            positions, self.masses, self.backend, self.G
        )
        new_positions, new_velocities = self.integrator.step(
            positions, velocities, accelerations, self.dt, self.backend
        )

        with self._lock:
            self.positions = new_positions
            self.velocities = new_velocities
            self.time += self.dt
            self.step_count += 1

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_diagnostics_table()

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def snapshot(self) -> Snapshot:
        """Take an atomic, read-only copy of the current state."""
        with self._lock:
            positions = np.asarray(self.backend.to_numpy(self.backend.copy(self.positions)), dtype=np.float64)
            velocities = np.asarray(self.backend.to_numpy(self.backend.copy(self.velocities)), dtype=np.float64)
            masses = np.asarray(self.backend.to_numpy(self.backend.copy(self.masses)), dtype=np.float64)
            time, step_count = self.time, self.step_count
        for arr in (positions, velocities, masses):
            arr.setflags(write=False)
        return Snapshot(positions, velocities, masses, time, step_count)

    @property
    def bodies(self) -> List[Body]:
        """Current state as a fresh list of Body values."""
        return self.snapshot().bodies()

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        snap = self.snapshot()
        _, _, E = Diagnostics(self.backend, G=self.G).compute_energies(
            snap.positions, snap.velocities, snap.masses
        )
        return E

    def _log_diagnostics_table(self):
        """Print K, U, E and L_z for the current step."""
        snap = self.snapshot()
        diagnostics = Diagnostics(self.backend, G=self.G)
        K, U, E = diagnostics.compute_energies(snap.positions, snap.velocities, snap.masses)
        Lz = diagnostics.compute_angular_momentum(snap.positions, snap.velocities, snap.masses)
        print(f"[Diag] step={snap.step_count} K={K:.4e} U={U:.4e} E={E:.4e} Lz={Lz:.4e}")
