"""CLI main entry point."""

import argparse
import sys
import yaml
from dataclasses import replace
from physics_sandbox.physics.errors import SandboxError
from physics_sandbox.physics.diagnostics import total_energy, total_momentum
from physics_sandbox.physics.integrators.registry import list_integrators
from physics_sandbox.physics.simulation import GravitySimulation
from physics_sandbox.io.state_io import save_state
from physics_sandbox.utils.config import Config, load_config


def build_config(args) -> Config:
    """Merge a config file (if any) with explicit command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'n_bodies': args.bodies,
        'steps': args.steps,
        'time_step': args.dt,
        'G': args.G,
        'width': args.width,
        'height': args.height,
        'integrator': args.integrator,
        'softening_factor': args.softening,
        'seed': args.seed,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def run_simulation(config: Config, debug_every: int = 60, save_path: str = None):
    """Run a gravity simulation and print a diagnostics table."""
    engine_config = config.gravity_config()
    sim = GravitySimulation(
        config.width,
        config.height,
        body_count=config.n_bodies,
        G=config.G,
        config=engine_config,
        seed=config.seed,
    )
    softening = engine_config.softening_factor

    print(f"Running gravity simulation with {config.n_bodies} bodies for {config.steps} steps")
    print(f"Integrator: {sim.engine.integrator.name}, dt: {sim.engine.time_step:.5f}, "
          f"G: {config.G}, eps: {softening}, area: {config.width:g}x{config.height:g}")

    def report(step: int):
        bodies = sim.engine.bodies
        E = total_energy(bodies, sim.engine.G, softening)
        px, py = total_momentum(bodies)
        print(f"{step:<8} {sim.time:<10.3f} {E:<16.4f} {px:<14.4f} {py:<14.4f}")

    print(f"{'Step':<8} {'Time':<10} {'E':<16} {'Px':<14} {'Py':<14}")
    print("-" * 62)
    report(0)

    sim.start()
    for step in range(1, config.steps + 1):
        sim.step()
        if debug_every > 0 and step % debug_every == 0:
            report(step)
    sim.stop()

    if save_path:
        save_state(sim.engine.get_state(), save_path, metadata={
            'time': sim.time,
            'steps': sim.step_count,
            'integrator': sim.engine.integrator.name,
            'G': sim.engine.G,
        })
        print(f"State saved to {save_path}")

    print("Simulation complete!")
    return sim


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Physics Sandbox - N-body gravity with pluggable integrators")

    parser.add_argument('--config', type=str, default=None,
                        help='YAML or JSON config file; command-line flags override it')
    parser.add_argument('--bodies', type=int, default=None,
                        help='Number of bodies (default: 3)')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps (default: 600)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Fixed time step (default: 1/60)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 1.0)')
    parser.add_argument('--width', type=float, default=None,
                        help='Width of the simulation area (default: 800)')
    parser.add_argument('--height', type=float, default=None,
                        help='Height of the simulation area (default: 600)')
    parser.add_argument('--integrator', type=str, default=None,
                        choices=list_integrators(),
                        help='Numerical integrator (default: rk4)')
    parser.add_argument('--softening', type=float, default=None,
                        help='Softening length (default: 5)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--debug-every', type=int, default=60,
                        help='Print diagnostics every N steps (0 disables)')
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final state to file (.npz or .json)')
    parser.add_argument('--list-integrators', action='store_true',
                        help='List available integrators and exit')

    args = parser.parse_args(argv)

    if args.list_integrators:
        print("Available integrators:")
        for name in list_integrators():
            print(f"  - {name}")
        return 0

    try:
        config = build_config(args)
        run_simulation(config, debug_every=args.debug_every, save_path=args.save_state)
    except (SandboxError, ValueError, OSError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
