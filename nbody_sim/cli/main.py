"""CLI main entry point."""

import argparse
import sys
from nbody_sim.backends.factory import get_backend, list_available_backends
from nbody_sim.physics.body import InvalidBody
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.force_calculator import METHODS
from nbody_sim.physics.simulation import Simulation
from nbody_sim.presets import list_presets
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.render.viewer import Viewer
from nbody_sim.utils.config import Config, load_config, save_config, bodies_from_config


def build_config(args) -> Config:
    """Merge a config file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else Config()

    overrides = {
        'preset': args.preset,
        'steps': args.steps,
        'dt': args.dt,
        'G': args.G,
        'force_method': args.force_method,
        'backend': args.backend,
        'seed': args.seed,
        'render_every': args.render_every,
        'extent': args.extent,
        'debug_every': args.debug_every,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.bodies is not None:
        if config.preset != 'random_disk':
            raise ValueError("--bodies only applies to the random_disk preset")
        config.preset_params['n_bodies'] = args.bodies
    if args.render:
        config.render = True
    return config


def print_row(step, time, K, U, E, Lz, dE):
    print(f"{step:<8} {time:<12.4e} {K:<12.4e} {U:<12.4e} {E:<12.4e} {Lz:<12.4e} {dE:<10.4f}%")


def run_simulation(config: Config):
    """Run a simulation."""
    backend = get_backend(config.backend)
    bodies = bodies_from_config(config)
    sim = Simulation(bodies, G=config.G, dt=config.dt, backend=backend, force_method=config.force_method)

    source = "explicit bodies" if config.bodies else config.preset
    print(f"Running simulation: {source} with {sim.n_bodies} bodies")
    print(f"Backend: {backend.name}, Integrator: {sim.integrator.name}, dt: {sim.dt}, G: {sim.G}")

    diagnostics = Diagnostics(backend, G=sim.G)

    def report(snap, initial_energy):
        K, U, E = diagnostics.compute_energies(snap.positions, snap.velocities, snap.masses)
        Lz = diagnostics.compute_angular_momentum(snap.positions, snap.velocities, snap.masses)
        dE = (E - initial_energy) / abs(initial_energy) * 100 if initial_energy != 0 else 0.0
        print_row(snap.step_count, snap.time, K, U, E, Lz, dE)

    snap0 = sim.snapshot()
    _, _, E0 = diagnostics.compute_energies(snap0.positions, snap0.velocities, snap0.masses)

    print(f"{'Step':<8} {'Time':<12} {'K':<12} {'U':<12} {'E':<12} {'Lz':<12} {'dE/E0':<10}")
    print("-" * 84)
    report(snap0, E0)

    def on_step(s):
        if s.step_count % config.debug_every == 0:
            report(s.snapshot(), E0)

    if config.debug_every > 0:
        sim.on_step_callback = on_step

    if config.render:
        renderer = Renderer2D(extent=config.extent)
        viewer = Viewer(sim, renderer, steps_per_frame=config.render_every)
        n_frames = -(-config.steps // config.render_every)
        viewer.run(max_frames=n_frames)
    else:
        sim.run(config.steps)

    print("Simulation complete!")
    return sim


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="N-Body Simulator - fixed-step gravitational simulation")

    # Simulation parameters
    parser.add_argument('--config', type=str, default=None,
                       help='Load settings from a .json or .yaml config file')
    parser.add_argument('--preset', type=str, default=None, choices=list_presets(),
                       help='Preset scenario (default: sun_earth)')
    parser.add_argument('--bodies', type=int, default=None,
                       help='Number of bodies (random_disk preset only)')
    parser.add_argument('--steps', type=int, default=None,
                       help='Number of simulation steps (default: 365)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step in seconds (default: 86400)')
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant (default: 6.67e-11)')
    parser.add_argument('--force-method', type=str, default=None, choices=list(METHODS),
                       help='Pairwise summation method (default: vectorized)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')
    parser.add_argument('--debug-every', type=int, default=None,
                       help='Print diagnostics every N steps, 0 to disable (default: 30)')

    # Backend
    parser.add_argument('--backend', type=str, default=None,
                       choices=list_available_backends(),
                       help='Compute backend (default: numpy)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Show a live 2D plot')
    parser.add_argument('--render-every', type=int, default=None,
                       help='Simulation steps per rendered frame')
    parser.add_argument('--extent', type=float, default=None,
                       help='Half-width of the plotted region in meters (default: 6e11)')

    # Config output and info
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective configuration to a file and exit')
    parser.add_argument('--list-presets', action='store_true',
                       help='List available presets and exit')
    parser.add_argument('--list-backends', action='store_true',
                       help='List available backends and exit')

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            print(f"  - {name}")
        return 0

    if args.list_backends:
        print("Available backends:")
        for backend in list_available_backends():
            print(f"  - {backend}")
        return 0

    try:
        config = build_config(args)
        if args.save_config:
            save_config(config, args.save_config)
            print(f"Config saved to {args.save_config}")
            return 0
        run_simulation(config)
    except InvalidBody as e:
        print(f"Invalid body: {e}")
        sys.exit(1)
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    return 0


if __name__ == '__main__':
    main()
