"""
This module defines the exception hierarchy raised by the gravitational simulation
package.

SimulationError is the common base. ConfigurationError covers every input problem
detected before integration starts (mismatched array lengths, wrong shapes,
non-positive masses, coincident bodies, bad run settings). InvalidStateAccess is raised
when the simulator is driven before it has been reset. NumericDegeneracy is only raised
when degeneracy detection is enabled in SimConfig; otherwise non-finite values flow
through the trajectory unchecked.
"""

from __future__ import annotations


class SimulationError(Exception):
    pass


class ConfigurationError(SimulationError, ValueError):
    """Raised when a scenario or run configuration is invalid or inconsistent."""


class InvalidStateAccess(SimulationError, RuntimeError):
    """Raised when a simulator is advanced before reset() has been called."""


class NumericDegeneracy(SimulationError, ArithmeticError):
    """Raised when integration produces non-finite positions or velocities."""
