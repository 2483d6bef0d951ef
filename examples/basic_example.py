"""Basic example of using the gravity engine."""

from physics_sandbox import GravityEngine
from physics_sandbox.physics import GravityConfig
from physics_sandbox.physics.diagnostics import total_energy

def main():
    """Run a small N-body simulation with velocity Verlet."""
    config = GravityConfig(integrator="velocityVerlet")
    engine = GravityEngine(800, 600, body_count=5, G=1.0, config=config, seed=42)

    print("Running simulation...")
    print(f"Initial energy: {total_energy(engine.bodies, engine.G):.6f}")

    for step in range(600):
        engine.step()
        if step % 100 == 0:
            energy = total_energy(engine.bodies, engine.G)
            print(f"Step {step}: Energy={energy:.6f}")

    state = engine.get_state()
    for body in state.bodies:
        print(f"Body {body.id}: x={body.x:.1f} y={body.y:.1f} mass={body.mass:.1f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
