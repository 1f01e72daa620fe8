"""Basic example of using the N-body simulator."""

from nbody_sim import Simulation
from nbody_sim.presets import InnerPlanets

def main():
    """Run the inner solar system for two years."""
    bodies = InnerPlanets().generate()

    # One-day steps (the default)
    sim = Simulation(bodies)

    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6e}")

    for step in range(730):
        sim.step()
        if step % 100 == 0:
            energy = sim.get_energy()
            print(f"Step {step}: Time={sim.time:.3e}s, Energy={energy:.6e}")

    for (x, y), mass in sim.snapshot().points():
        print(f"  m={mass:.2e} kg at ({x:.3e}, {y:.3e}) m")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
