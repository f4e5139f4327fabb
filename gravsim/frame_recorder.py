import numpy as np
import pandas as pd
import logging
from typing import Dict, List
from .diagnostics import Diagnostics
from .simulation import Simulator

"""
This module samples a simulator into pandas tables without keeping anything outside
memory. FrameRecorder drives advance() a fixed number of times, optionally keeping only
every k-th frame, and collects positions in long format (one row per frame and body
with columns frame, time, body, x, y, z) together with a per-frame diagnostics table
(energies, momentum, minimum separation). The simulator is reset first unless it is
already running, in which case recording continues from the current frame. The tables
are meant for inspection, plotting and tests.


"""

logger = logging.getLogger(__name__)


class FrameRecorder:
	def __init__(self, n_frames: int = 1000, every: int = 1, with_diagnostics: bool = True) -> None:
		if int(n_frames) < 0:
			raise ValueError("n_frames must be >= 0")
		if int(every) < 1:
			raise ValueError("every must be >= 1")
		self.n_frames = int(n_frames)
		self.every = int(every)
		self.with_diagnostics = with_diagnostics
		self.rows: List[Dict[str, float]] = []
		self.diag_rows: List[Dict[str, float]] = []

	def record(self, sim: Simulator) -> pd.DataFrame:
		if not sim.is_ready:
			sim.reset()
		self.rows = []
		self.diag_rows = []
		diag = Diagnostics(sim) if self.with_diagnostics else None

		for frame in range(self.n_frames):
			t, positions = sim.advance()
			if frame % self.every:
				continue
			for body, (x, y, z) in enumerate(positions):
				self.rows.append({"frame": frame, "time": t, "body": body, "x": x, "y": y, "z": z})
			if diag is not None:
				row = diag.summary()
				row["frame"] = frame
				self.diag_rows.append(row)

		logger.debug("recorded %d frames of %s", self.n_frames, sim.scenario.name)
		return self.positions_frame()

	def positions_frame(self) -> pd.DataFrame:
		return pd.DataFrame(self.rows, columns=["frame", "time", "body", "x", "y", "z"])

	def diagnostics_frame(self) -> pd.DataFrame:
		if not self.diag_rows:
			return pd.DataFrame()
		df = pd.DataFrame(self.diag_rows).set_index("frame")
		return df

	def energy_drift(self) -> float:
		df = self.diagnostics_frame()
		if df.empty:
			return float("nan")
		E = df["total_energy"].to_numpy()
		E0 = E[0]
		if E0 == 0.0:
			return float(np.max(np.abs(E - E0)))
		return float(np.max(np.abs((E - E0) / E0)))
