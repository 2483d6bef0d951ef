"""Exception types raised by the physics core."""


class SandboxError(Exception):
    """Base class for all physics-sandbox errors."""


class IntegrationError(SandboxError, ValueError):
    """A derivative returned a malformed result, or a state has the wrong layout."""


class DomainError(SandboxError, ValueError):
    """A physical parameter is outside its valid domain (mass, dt, dimensions...)."""


class UnknownIntegratorError(SandboxError, ValueError):
    """Requested integrator name is not part of the registry."""
