"""Conversion of calibrated MUSIC anode energies to atomic number (Z)."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np

from .music_data import MusicCalData, MusicHitData
from .parameters import MusicHitPar

logger = logging.getLogger(__name__)

MAX_DETS = 5
NUM_ANODES = 8


def truncated_energies(cal_hits: Iterable[MusicCalData]) -> dict[int, float]:
    """Mean energy of the eight anodes of each detector, by detector id.

    Anodes are paired (0-1, 2-3, 4-5, 6-7); a detector is kept only when the
    geometric mean of every pair is positive. The value is the geometric mean
    of the four pair means, i.e. of all eight anode energies. A later hit on
    the same anode overwrites an earlier one.
    """
    energy = np.zeros((MAX_DETS, NUM_ANODES), dtype=np.float64)
    for hit in cal_hits:
        if not (0 <= hit.det_id < MAX_DETS and 0 <= hit.anode_id < NUM_ANODES):
            raise IndexError(
                f"MUSIC hit outside {MAX_DETS} detectors x {NUM_ANODES} anodes: "
                f"detector {hit.det_id}, anode {hit.anode_id}"
            )
        energy[hit.det_id, hit.anode_id] = hit.energy

    result: dict[int, float] = {}
    with np.errstate(invalid="ignore"):
        pair_means = np.sqrt(energy[:, 0::2] * energy[:, 1::2]).astype(np.float32)
    for det, pairs in enumerate(pair_means):
        if np.all(pairs > 0):
            r1, r2, r3, r4 = (float(v) for v in pairs)
            result[det] = math.sqrt(math.sqrt(math.sqrt(r1 * r2) * math.sqrt(r3 * r4)))
    return result


class MusicCal2Hit:
    """Apply the linear charge calibration a0 + a1 * E to each detector."""

    def __init__(
        self,
        hit_par: MusicHitPar,
        name: str = "FRS Music Calibrator",
        online: bool = False,
    ) -> None:
        self.name = name
        self.online = online
        self.hit_par = hit_par
        self.num_dets = int(hit_par.num_dets)
        self.num_anodes = NUM_ANODES
        self.num_params = int(hit_par.num_params_fit)
        self.hit_params = hit_par.detector_hit_params
        self.hit_data: list[MusicHitData] = []

        logger.info("MusicCal2Hit: Nb detectors: %d", self.num_dets)
        logger.info("MusicCal2Hit: Nb parameters from pedestal fit: %d", self.num_params)
        for det in range(self.num_dets):
            logger.info(
                "MusicCal2Hit Nb detector: %d Params %g : %g",
                det + 1,
                self._param(det * self.num_params),
                self._param(det * self.num_params + 1),
            )

    def _param(self, index: int) -> float:
        # Parameters past the end of the array read as zero.
        if 0 <= index < len(self.hit_params):
            return float(self.hit_params[index])
        return 0.0

    def process(self, cal_hits: Iterable[MusicCalData]) -> list[MusicHitData]:
        """Calibrate one event; return one hit per detector with a valid energy."""
        self.reset()
        hits = list(cal_hits)
        if not hits:
            return []
        energies = truncated_energies(hits)
        for det in range(min(self.num_dets + 1, MAX_DETS)):
            if det not in energies:
                continue
            a0 = self._param(det * self.num_params)
            a1 = self._param(det * self.num_params + 1)
            self.hit_data.append(MusicHitData(det, a0 + a1 * energies[det]))
        return list(self.hit_data)

    def reset(self) -> None:
        """Drop the hits of the previous event."""
        logger.debug("Clearing MusicHitData structure")
        self.hit_data.clear()