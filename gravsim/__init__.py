"""
This initialization file is the entry point for the gravitational N-body simulation
package and re-exports its public API.

It exposes the orchestrator (Simulator), the generic fixed-step integrator (RK4Stepper,
rk4_step), the force model (accelerations, GravityModel), the fixed-shape vector
helpers, scenario definitions and presets, scenario generators, diagnostics, the pandas
frame recorder, run configuration and the error hierarchy, so callers can import any
major component directly from the package root.
"""

from .errors import (
    SimulationError,
    ConfigurationError,
    InvalidStateAccess,
    NumericDegeneracy,
)
from .sim_config import SimConfig
from .vector_ops import as_vec3, as_matrix
from .rk4_stepper import RK4Stepper, rk4_step
from .forces import accelerations, state_derivative, pack_state, GravityModel
from .geometry_cache import geometry_buffers, min_pair_separation, pair_potential
from .physics_utils import center_of_mass, remove_center_of_mass, to_barycentric
from .simulation_validator import SimulationValidator
from .scenarios import ScenarioConfig, get_scenario, list_scenarios, PRESETS
from .simulation import Simulator
from .diagnostics import Diagnostics
from .frame_recorder import FrameRecorder
from .specialized_generators import SpecializedGenerators
from .initial_condition_generator import InitialConditionGenerator, GeneratorConfig


__version__ = "0.1.0"

__all__ = [
    "SimulationError",
    "ConfigurationError",
    "InvalidStateAccess",
    "NumericDegeneracy",
    "SimConfig",
    "as_vec3",
    "as_matrix",
    "RK4Stepper",
    "rk4_step",
    "accelerations",
    "state_derivative",
    "pack_state",
    "GravityModel",
    "geometry_buffers",
    "min_pair_separation",
    "pair_potential",
    "center_of_mass",
    "remove_center_of_mass",
    "to_barycentric",
    "SimulationValidator",
    "ScenarioConfig",
    "get_scenario",
    "list_scenarios",
    "PRESETS",
    "Simulator",
    "Diagnostics",
    "FrameRecorder",
    "SpecializedGenerators",
    "InitialConditionGenerator",
    "GeneratorConfig",
]
