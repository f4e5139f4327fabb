"""
This module defines ScenarioConfig, the immutable description of one simulation run,
and the catalogue of named preset scenarios.

A ScenarioConfig holds the masses, initial positions and initial velocities of N bodies.
Construction validates them through SimulationValidator and stores read-only float64
copies, so a config can be shared freely between simulators without aliasing mutable
state. The presets reproduce the hand-tuned systems of the interactive viewer: the
symmetric circular binary, a tilted unequal binary, a three-body tangle and the
four-body system with one dominant mass.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, Dict, List
import numpy as np

from .errors import ConfigurationError
from .simulation_validator import SimulationValidator


@dataclass(frozen=True, eq=False)
class ScenarioConfig:
    masses: np.ndarray
    init_positions: np.ndarray
    init_velocities: np.ndarray
    name: str = "custom"

    def __post_init__(self) -> None:
        m, r, v = SimulationValidator.validate(
            self.masses, self.init_positions, self.init_velocities
        )
        for arr in (m, r, v):
            arr.setflags(write=False)
        object.__setattr__(self, "masses", m)
        object.__setattr__(self, "init_positions", r)
        object.__setattr__(self, "init_velocities", v)

    @property
    def n_bodies(self) -> int:
        return int(self.masses.size)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "masses": self.masses.tolist(),
            "init_positions": self.init_positions.tolist(),
            "init_velocities": self.init_velocities.tolist(),
        }


def _two_body() -> ScenarioConfig:
    return ScenarioConfig(
        masses=[1.0, 1.0],
        init_positions=[[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]],
        init_velocities=[[0.0, 0.5, 0.0], [0.0, -0.5, 0.0]],
        name="two_body",
    )


def _tilted_binary() -> ScenarioConfig:
    s = math.sqrt(2.0)
    return ScenarioConfig(
        masses=[2.0, 10.0],
        init_positions=[[-4.0 / s, 0.0, -4.0 / s], [4.0 / s, 0.0, 4.0 / s]],
        init_velocities=[
            [-1.0 / s / 2.0, 0.0, 1.0 / s / 2.0],
            [1.0 / s / 4.0, 0.0, -1.0 / s / 4.0],
        ],
        name="tilted_binary",
    )


def _three_body() -> ScenarioConfig:
    return ScenarioConfig(
        masses=[5.95, 3.05, 4.95],
        init_positions=[[1.0, 3.0, 0.0], [-2.0, -1.0, 0.0], [1.0, -1.0, 0.0]],
        init_velocities=[[0.0, 0.0, 1.0], [0.0, 0.0, -1.0], [0.0, 0.0, 0.0]],
        name="three_body",
    )


def _four_body() -> ScenarioConfig:
    return ScenarioConfig(
        masses=[25.0, 3.0, 4.0, 500.0],
        init_positions=[[5.0, 7.0, 0.0], [-4.0, -2.0, 0.0], [5.0, -2.0, 0.0], [0.0, 0.0, 0.0]],
        init_velocities=[[0.0, -4.0, 5.0], [8.0, -8.0, -4.0], [0.0, 8.0, 0.0], [0.0, 0.0, 0.0]],
        name="four_body",
    )


PRESETS: Dict[str, Callable[[], ScenarioConfig]] = {
    "two_body": _two_body,
    "tilted_binary": _tilted_binary,
    "three_body": _three_body,
    "four_body": _four_body,
}

DEFAULT_SCENARIO = "four_body"


def list_scenarios() -> List[str]:
    return list(PRESETS)


def get_scenario(name: str) -> ScenarioConfig:
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown scenario {name!r}; choose one of {', '.join(PRESETS)}"
        ) from None
    return factory()
