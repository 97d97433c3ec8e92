"""Search of the pedestal of every MUSIC anode by a Gaussian fit."""

from __future__ import annotations

import logging
import math
import warnings
from collections.abc import Iterable

import numpy as np
from scipy.optimize import OptimizeWarning, curve_fit

from .music_data import MusicMappedData
from .parameters import MusicCalPar

logger = logging.getLogger(__name__)

DEAD_ANODE = -1
NUM_FIT_PARAMS = 3
_START_MEAN = 100.0
_START_SIGMA = 2.0


def _gaus(x: np.ndarray, amplitude: float, mean: float, sigma: float) -> np.ndarray:
    return amplitude * np.exp(-0.5 * ((x - mean) / sigma) ** 2)


class PedestalFinder:
    """Collect raw anode energies and fit the pedestal of each anode."""

    def __init__(
        self,
        cal_par: MusicCalPar,
        num_dets: int = 0,
        num_anodes: int = 8,
        max_sigma: float = 200,
        min_statistics: int = 0,
        bins: int = 0,
        left: float = 0,
        right: float = 0,
        name: str = "FRS Music Pedestal Finder ",
    ) -> None:
        self.name = name
        self.cal_par = cal_par
        self.num_dets = int(num_dets)
        self.num_anodes = int(num_anodes)
        self.max_sigma = max_sigma
        self.min_statistics = min_statistics
        self.bins = int(bins)
        self.left = left
        self.right = right
        self.sigma = 0.0
        self.mean = 0.0
        self._energies: list[list[float]] = [
            [] for _ in range(self.num_dets * self.num_anodes)
        ]

    def _index(self, det: int, anode: int) -> int:
        if not (0 <= det < self.num_dets and 0 <= anode < self.num_anodes):
            raise IndexError(
                f"no histogram for detector {det}, anode {anode} "
                f"({self.num_dets} detectors x {self.num_anodes} anodes)"
            )
        return anode + self.num_anodes * det

    def fill(self, mapped: Iterable[MusicMappedData]) -> None:
        """Record the raw energies of one event."""
        for hit in mapped:
            self._energies[self._index(hit.det_id, hit.anode_id)].append(float(hit.energy))

    def entries(self, det: int, anode: int) -> int:
        """Number of energies recorded for an anode."""
        return len(self._energies[self._index(det, anode)])

    def _fit(self, values: list[float]) -> tuple[float, float, float]:
        if self.right <= self.left:
            raise ValueError(f"empty histogram range [{self.left}, {self.right}]")
        bins = max(self.bins, 1)
        data = np.asarray(values, dtype=np.float64)
        data = data[(data >= self.left) & (data < self.right)]
        counts, edges = np.histogram(data, bins=bins, range=(self.left, self.right))
        centres = 0.5 * (edges[:-1] + edges[1:])
        total = counts.sum()
        if total == 0:
            return 0.0, _START_MEAN, _START_SIGMA

        mean = float(np.sum(counts * centres) / total)
        rms = math.sqrt(float(np.sum(counts * (centres - mean) ** 2) / total))
        start = (float(counts.max()), mean, rms or float(edges[1] - edges[0]))

        filled = counts > 0
        if filled.sum() < NUM_FIT_PARAMS:
            return start
        try:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", OptimizeWarning)
                fitted, _ = curve_fit(
                    _gaus,
                    centres[filled],
                    counts[filled].astype(np.float64),
                    p0=start,
                    sigma=np.sqrt(counts[filled]),
                    absolute_sigma=True,
                    maxfev=10000,
                )
        except (RuntimeError, ValueError):
            return start
        amplitude, fit_mean, fit_sigma = (float(v) for v in fitted)
        return amplitude, fit_mean, abs(fit_sigma)

    def search_pedestals(self) -> MusicCalPar:
        """Fit every anode and store amplitude, pedestal and sigma in the container.

        Anodes with too few entries, or whose fitted sigma reaches the maximum,
        get a pedestal of -1 (dead anode).
        """
        logger.info("PedestalFinder: Search pedestals")
        par = self.cal_par
        par.num_dets = self.num_dets
        par.num_anodes = self.num_anodes
        par.num_params_fit = NUM_FIT_PARAMS
        par.resize()

        for det in range(self.num_dets):
            for anode in range(self.num_anodes):
                values = self._energies[self._index(det, anode)]
                base = NUM_FIT_PARAMS * anode + det * NUM_FIT_PARAMS * self.num_anodes
                if len(values) > self.min_statistics:
                    amplitude, mean, sigma = self._fit(values)
                    par.set_anode_cal_param(amplitude, base)
                    pedestal = mean if sigma < self.max_sigma else DEAD_ANODE
                    par.set_anode_cal_param(pedestal, base + 1)
                    par.set_anode_cal_param(sigma, base + 2)
                else:
                    par.set_anode_cal_param(DEAD_ANODE, base + 1)
                    par.set_anode_cal_param(0, base + 2)
                    logger.warning(
                        "Histogram NO Fitted, detector: %d, anode: %d", det + 1, anode + 1
                    )

        par.status = True
        return par

    def finish(self) -> MusicCalPar:
        """End of the run: search the pedestals."""
        return self.search_pedestals()