"""Simulation controller that drives the gravity engine tick by tick."""

from typing import Callable, List, Optional
from physics_sandbox.physics.gravity import GravityConfig
from physics_sandbox.physics.gravity_engine import GravityEngine


class GravitySimulation:
    """Gravity simulation controller.

    Holds the running flag, counts steps and simulated time, and notifies
    listeners after each state change. There is no internal timer: a driver
    (render loop, CLI, test) calls ``step()`` or ``run()`` while the
    simulation is running.
    """

    def __init__(
        self,
        width: float,
        height: float,
        body_count: int = 3,
        G: float = 1.0,
        config: Optional[GravityConfig] = None,
        seed: Optional[int] = None,
    ):
        self.engine = GravityEngine(width, height, body_count, G, config=config, seed=seed)
        self.is_running = False
        self.time = 0.0
        self.step_count = 0
        self._listeners: List[Callable[[dict], None]] = []

    @property
    def width(self) -> float:
        return self.engine.width

    @property
    def height(self) -> float:
        return self.engine.height

    def on_update(self, callback: Callable[[dict], None]):
        """Register a callback receiving the state dict after every update."""
        self._listeners.append(callback)

    def _notify(self):
        state = self.get_state()
        for listener in self._listeners:
            listener(state)

    def get_state(self) -> dict:
        """Get engine snapshot plus controller bookkeeping."""
        state = self.engine.get_state()
        return {
            "bodies": state.bodies,
            "width": state.width,
            "height": state.height,
            "time": self.time,
            "step_count": self.step_count,
            "is_running": self.is_running,
        }

    def initialize(self, body_count: int):
        """Re-populate the engine with ``body_count`` bodies."""
        self.engine.initialize(body_count)

    def step(self):
        """Advance one tick and notify listeners."""
        self.engine.step()
        self.time += self.engine.time_step
        self.step_count += 1
        self._notify()

    def run(self, n_steps: int):
        """Run up to ``n_steps`` ticks, stopping early if ``stop()`` is called."""
        for _ in range(n_steps):
            if not self.is_running:
                return
            self.step()

    def start(self):
        """Mark the simulation as running."""
        if self.is_running:
            return
        self.is_running = True
        self._notify()

    def stop(self):
        """Mark the simulation as stopped."""
        self.is_running = False
        self._notify()

    def reset(self, body_count: Optional[int] = None):
        """Stop, clear counters and re-initialize bodies."""
        self.is_running = False
        self.time = 0.0
        self.step_count = 0
        self.engine.reset(body_count)
        self._notify()

    def set_G(self, G: float):
        """Update gravitational constant."""
        self.engine.set_G(G)

    def destroy(self):
        """Stop and drop all listeners."""
        self.stop()
        self._listeners = []
