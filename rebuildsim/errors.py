"""
Exceptions raised by the rebuild-load simulator.

Configuration problems surface as InvalidConfig before any stripe is
simulated. Once a run has been configured every per-stripe operation is
total, so the only other failure is a degenerate counter array handed to
the reporter.
"""


class SimulationError(Exception):
    pass


class InvalidConfig(SimulationError):
    pass


class DegenerateStatistics(SimulationError):
    pass
