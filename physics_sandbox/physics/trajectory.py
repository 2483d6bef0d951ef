"""Projectile trajectory with optional air resistance."""

import math
from typing import Dict, List, Tuple
from physics_sandbox.physics.integrators.registry import get_integrator

RESISTANCE_TYPES = ("none", "linear", "quadratic")
MAX_POINTS = 10000


def projectile_motion(
    state: Dict[str, float],
    g: float = 9.8,
    resistance: str = "none",
    drag_coefficient: float = 0.1,
    dt: float = 0.01,
    integrator: str = "euler",
) -> Dict[str, float]:
    """Advance a projectile ``{x, y, vx, vy}`` by one time step.

    Drag modes:
        none: a = (0, -g)
        linear: a -= k * v
        quadratic: a -= k * |v| * v

    Args:
        state: Dict with keys x, y, vx, vy
        g: Gravitational acceleration
        resistance: One of RESISTANCE_TYPES
        drag_coefficient: Drag constant k
        dt: Time step
        integrator: Registry name (euler, rk4 or velocityVerlet)

    Returns:
        New state dict
    """
    if resistance not in RESISTANCE_TYPES:
        raise ValueError(f"Unknown resistance type '{resistance}'. Available: {list(RESISTANCE_TYPES)}")

    def derivative(s, t):
        _, _, vx, vy = s
        ax, ay = 0.0, -g
        speed = math.hypot(vx, vy)
        if resistance == "linear" and speed > 0:
            ax -= drag_coefficient * vx
            ay -= drag_coefficient * vy
        elif resistance == "quadratic" and speed > 0:
            drag = drag_coefficient * speed
            ax -= drag * vx
            ay -= drag * vy
        return [vx, vy, ax, ay]

    new_state = get_integrator(integrator).integrate(
        [state["x"], state["y"], state["vx"], state["vy"]], derivative, dt
    )
    return {
        "x": float(new_state[0]),
        "y": float(new_state[1]),
        "vx": float(new_state[2]),
        "vy": float(new_state[3]),
    }


class TrajectorySimulation:
    """Launches a projectile from the origin and records its path until landing."""

    def __init__(
        self,
        velocity: float = 50.0,
        angle: float = 45.0,
        resistance: str = "none",
        drag_coefficient: float = 0.1,
        g: float = 9.8,
        time_step: float = 0.01,
    ):
        self.initial_velocity = velocity
        self.angle = angle
        self.resistance = resistance
        self.drag_coefficient = drag_coefficient
        self.g = g
        self.time_step = time_step
        self.trajectory: List[Tuple[float, float]] = []

    def launch(self) -> List[Tuple[float, float]]:
        """Compute the full trajectory.

        The last point is the landing position, linearly interpolated to y = 0
        between the last point above ground and the first one below.
        """
        self.trajectory = []
        angle_rad = math.radians(self.angle)
        state = {
            "x": 0.0,
            "y": 0.0,
            "vx": self.initial_velocity * math.cos(angle_rad),
            "vy": self.initial_velocity * math.sin(angle_rad),
        }

        while state["y"] >= 0 and len(self.trajectory) < MAX_POINTS:
            self.trajectory.append((state["x"], state["y"]))
            state = projectile_motion(
                state, self.g, self.resistance, self.drag_coefficient, self.time_step
            )
            if state["y"] < 0:
                prev_x, prev_y = self.trajectory[-1]
                frac = prev_y / (prev_y - state["y"])
                self.trajectory.append((prev_x + frac * (state["x"] - prev_x), 0.0))
                break

        return self.trajectory

    def set_parameters(self, velocity: float, angle: float, resistance: str, drag_coefficient: float):
        self.initial_velocity = velocity
        self.angle = angle
        self.resistance = resistance
        self.drag_coefficient = drag_coefficient

    def reset(self):
        self.trajectory = []

    @property
    def range(self) -> float:
        """Horizontal distance of the last recorded point (0 before launch)."""
        return self.trajectory[-1][0] if self.trajectory else 0.0

    def get_state(self) -> dict:
        return {
            "trajectory": list(self.trajectory),
            "resistance": self.resistance,
            "initial_velocity": self.initial_velocity,
            "angle": self.angle,
            "drag_coefficient": self.drag_coefficient,
        }
