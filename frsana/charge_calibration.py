"""Calibration of MUSIC energies to atomic number (Z) from the peaks of the charge spectrum."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np
from scipy.signal import find_peaks

from .cal2hit import truncated_energies
from .music_data import MusicCalData
from .parameters import MusicHitPar

logger = logging.getLogger(__name__)

NUM_FIT_PARAMS = 2
MAX_PEAKS = 8
PEAK_THRESHOLD = 0.1


class ChargeCalibrator:
    """Collect per-detector MUSIC charges and fit Z = a0 + a1 * charge.

    The peaks of each detector's charge spectrum are taken, from the highest
    charge down, as Z = max_z, max_z - 1, ... and a straight line is fitted.
    """

    def __init__(
        self,
        hit_par: MusicHitPar,
        num_dets: int = 5,
        max_z: int = 100,
        max_sigma: float = 200,
        min_statistics: int = 100,
        bins: int = 500,
        left: float = 0,
        right: float = 100,
        name: str = "FRS Music Atomic number Finder ",
    ) -> None:
        self.name = name
        self.hit_par = hit_par
        self.num_dets = int(num_dets)
        self.max_z = int(max_z)
        self.max_sigma = max_sigma
        self.min_statistics = min_statistics
        self.bins = int(bins)
        self.left = left
        self.right = right
        self.sigma = 0.0
        self.mean = 0.0
        self._charges: list[list[float]] = [[] for _ in range(self.num_dets)]

    def _check_det(self, det: int) -> int:
        if not 0 <= det < self.num_dets:
            raise IndexError(f"no spectrum for detector {det} ({self.num_dets} detectors)")
        return det

    def fill(self, cal_hits: Iterable[MusicCalData]) -> None:
        """Record the charges of one event.

        Only detectors up to the detector of the last hit are taken.
        """
        hits = list(cal_hits)
        if not hits:
            return
        last_det = hits[-1].det_id
        for det, charge in truncated_energies(hits).items():
            if det > last_det or charge <= 0.0:
                continue
            self._charges[self._check_det(det)].append(charge)

    def entries(self, det: int) -> int:
        """Number of charges recorded for a detector."""
        return len(self._charges[self._check_det(det)])

    def _peaks(self, det: int) -> list[float]:
        """Peak positions of a detector's spectrum, highest charge first."""
        if self.right <= self.left:
            raise ValueError(f"empty histogram range [{self.left}, {self.right}]")
        data = np.asarray(self._charges[det], dtype=np.float64)
        data = data[(data >= self.left) & (data < self.right)]
        counts, edges = np.histogram(data, bins=max(self.bins, 1), range=(self.left, self.right))
        if counts.max(initial=0) == 0:
            return []
        centres = 0.5 * (edges[:-1] + edges[1:])
        padded = np.concatenate(([0], counts, [0]))
        indices, props = find_peaks(padded, height=PEAK_THRESHOLD * counts.max())
        indices = indices - 1
        strongest = np.argsort(-props["peak_heights"], kind="stable")[:MAX_PEAKS]
        return sorted((float(centres[indices[i]]) for i in strongest), reverse=True)

    def search_z(self) -> MusicHitPar:
        """Fit every detector with enough statistics and store a0, a1 in the container.

        With fewer than two peaks the parameters default to a0 = 0 and a1 = 1.
        """
        logger.info("ChargeCalibrator: Search atomic numbers (Z)")
        par = self.hit_par
        par.num_dets = self.num_dets
        par.num_params_fit = NUM_FIT_PARAMS
        par.resize()

        for det in range(self.num_dets):
            if self.entries(det) <= self.min_statistics:
                continue
            peaks = self._peaks(det)
            base = NUM_FIT_PARAMS * det
            if len(peaks) < 2:
                logger.error(
                    "ChargeCalibrator.search_z() couldn't get the sufficient parameters: %d<2",
                    len(peaks),
                )
                par.set_detector_hit_param(0, base)
                par.set_detector_hit_param(1, base + 1)
                logger.info("ChargeCalibrator.search_z() default parameters: a0=0 and a1=1")
                continue
            charges = np.asarray(peaks)
            zs = self.max_z - np.arange(len(peaks), dtype=np.float64)
            slope, intercept = np.polyfit(charges, zs, 1)
            par.set_detector_hit_param(float(intercept), base)
            par.set_detector_hit_param(float(slope), base + 1)

        par.status = True
        return par

    def finish(self) -> MusicHitPar:
        """End of the run: search the atomic numbers and report the parameters."""
        par = self.search_z()
        logger.info("%s", par.describe())
        return par