class SimulationError(Exception):
    """Base class for simulation failures."""


class InvalidParameter(SimulationError, ValueError):
    """A simulation input is outside the domain the simulator accepts."""


class RandomSourceExhausted(SimulationError):
    """A fixed random source has no draws left."""
