"""
Command-line driver for headless runs.

Runs one preset scenario for a fixed number of frames and prints a table of sampled
body positions followed by a conservation summary (relative energy drift, final
momentum, closest approach). Useful for checking a scenario before handing it to the
interactive viewer.
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import pandas as pd

from .diagnostics import Diagnostics
from .errors import SimulationError
from .frame_recorder import FrameRecorder
from .scenarios import DEFAULT_SCENARIO, get_scenario, list_scenarios
from .sim_config import SimConfig
from .simulation import Simulator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gravsim",
        description="Integrate a preset N-body scenario with fixed-step RK4.",
    )
    parser.add_argument("--scenario", default=DEFAULT_SCENARIO, help="preset scenario name")
    parser.add_argument("--steps", type=int, default=1000, help="number of frames to advance")
    parser.add_argument("--dt", type=float, default=0.01, help="fixed step size")
    parser.add_argument("--every", type=int, default=100, help="print every k-th frame")
    parser.add_argument("--softening", type=float, default=0.0, help="Plummer softening length")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="stop with an error as soon as the state becomes non-finite",
    )
    parser.add_argument("--list", action="store_true", help="list preset scenarios and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(module)s - %(message)s",
    )

    if args.list:
        for name in list_scenarios():
            print(name)
        return 0

    try:
        cfg = SimConfig(dt=args.dt, softening=args.softening, detect_degeneracy=args.strict)
        sim = Simulator.from_scenario(get_scenario(args.scenario), cfg)
        recorder = FrameRecorder(args.steps, every=args.every)
        logger.info("running %s for %d frames (dt=%g)", args.scenario, args.steps, args.dt)
        table = recorder.record(sim)
    except SimulationError as exc:
        logger.error("%s", exc)
        return 2
    except ValueError as exc:
        logger.error("invalid arguments: %s", exc)
        return 2

    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(table.to_string(index=False))

    final = Diagnostics(sim).summary()
    print()
    print(f"t = {sim.time:g}  frames = {args.steps}")
    print(f"relative energy drift = {recorder.energy_drift():.3e}")
    print(f"|P| = {final['momentum_norm']:.3e}  |L| = {final['angular_momentum_norm']:.6g}")
    print(f"closest approach = {sim.min_separation:.6g}")
    return 0
