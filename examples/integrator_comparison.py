"""Compare integrators on the harmonic oscillator x'' = -x."""

import math
from physics_sandbox.physics.integrators import get_integrator, list_integrators


def oscillate(name: str, dt: float = 0.1, steps: int = 100):
    integrator = get_integrator(name)
    t = 0.0
    if name == "verlet":
        # [x, x_prev] with x_prev taken from the exact solution
        state = [1.0, math.cos(-dt)]
        derivative = lambda s, t: [-s[0]]
    else:
        # [x, v] -> [dx/dt, dv/dt]
        state = [1.0, 0.0]
        derivative = lambda s, t: [s[1], -s[0]]

    for _ in range(steps):
        state = integrator.integrate(state, derivative, dt, t)
        t += dt
    return state[0], math.cos(t)


def main():
    for name in list_integrators():
        x, exact = oscillate(name)
        print(f"{name:<16} x(10)={x:+.6f} exact={exact:+.6f} error={abs(x - exact):.2e}")


if __name__ == "__main__":
    main()
