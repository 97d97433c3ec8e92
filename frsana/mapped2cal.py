"""Conversion of raw MUSIC anode energies to pedestal-subtracted energies."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .music_data import MusicCalData, MusicMappedData
from .parameters import MusicCalPar

logger = logging.getLogger(__name__)

DEAD_ANODE = -1


class MusicMapped2Cal:
    """Subtract the fitted pedestal of each anode, dropping dead anodes."""

    def __init__(
        self,
        cal_par: MusicCalPar,
        name: str = "FRS Music Calibrator",
        online: bool = False,
    ) -> None:
        self.name = name
        self.online = online
        self.cal_par = cal_par
        self.num_dets = int(cal_par.num_dets)
        self.num_anodes = int(cal_par.num_anodes)
        self.num_params = int(cal_par.num_params_fit)
        self.cal_params = cal_par.anode_cal_params
        self.cal_data: list[MusicCalData] = []

        logger.info("MusicMapped2Cal: Nb detectors: %d", self.num_dets)
        logger.info("MusicMapped2Cal: Nb anodes: %d", self.num_anodes)
        logger.info("MusicMapped2Cal: Nb parameters from pedestal fit: %d", self.num_params)
        for det, count in enumerate(self.dead_anodes(), start=1):
            logger.info("MusicMapped2Cal: Nb of dead anodes in MUSIC %d: %d", det, count)

    def _pedestal(self, det: int, anode: int) -> float:
        index = self.num_params * anode + 1 + det * self.num_anodes * self.num_params
        if not 0 <= index < len(self.cal_params):
            raise IndexError(f"no pedestal for detector {det}, anode {anode}")
        return float(self.cal_params[index])

    def dead_anodes(self) -> list[int]:
        """The number of dead anodes in each detector."""
        return [
            sum(self._pedestal(det, anode) == DEAD_ANODE for anode in range(self.num_anodes))
            for det in range(self.num_dets)
        ]

    def process(self, mapped: Iterable[MusicMappedData]) -> list[MusicCalData]:
        """Calibrate one event; return the calibrated hits of live anodes."""
        self.reset()
        hits = list(mapped)
        if not hits:
            return []
        if len(hits) != self.num_anodes * self.num_dets:
            logger.warning(
                "MusicMapped2Cal: nHits!=%d NumAnodes:NumDets%d:%d",
                len(hits),
                self.num_anodes,
                self.num_dets,
            )
        for hit in hits:
            pedestal = self._pedestal(hit.det_id, hit.anode_id)
            if pedestal != DEAD_ANODE:
                self.cal_data.append(
                    MusicCalData(hit.det_id, hit.anode_id, hit.energy - pedestal)
                )
        return list(self.cal_data)

    def reset(self) -> None:
        """Drop the calibrated hits of the previous event."""
        logger.debug("Clearing MusicCalData structure")
        self.cal_data.clear()