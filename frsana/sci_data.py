"""Scintillator timing data records."""

from __future__ import annotations

from dataclasses import dataclass, field

_USHORT_MAX = 0xFFFF
_UINT_MAX = 0xFFFFFFFF


def _unsigned(value: int, limit: int, label: str) -> int:
    value = int(value)
    if not 0 <= value <= limit:
        raise ValueError(f"{label} must lie in [0, {limit}], got {value}")
    return value


@dataclass(slots=True)
class VftxSciMappedData:
    """Coarse and fine time of one photomultiplier read by a VFTX module."""

    detector: int = 0
    pmt: int = 0
    time_coarse: int = 0
    time_fine: int = 0

    def __post_init__(self) -> None:
        self.detector = _unsigned(self.detector, _USHORT_MAX, "detector")
        self.pmt = _unsigned(self.pmt, _USHORT_MAX, "pmt")
        self.time_coarse = _unsigned(self.time_coarse, _UINT_MAX, "time_coarse")
        self.time_fine = _unsigned(self.time_fine, _UINT_MAX, "time_fine")


@dataclass(slots=True)
class SciTcalData:
    """A calibrated time in ns of one photomultiplier (detector 1..n, pmt 1..3)."""

    detector: int = 0
    pmt: int = 0
    raw_time_ns: float = 0.0

    def __post_init__(self) -> None:
        self.detector = _unsigned(self.detector, _USHORT_MAX, "detector")
        self.pmt = _unsigned(self.pmt, _USHORT_MAX, "pmt")
        self.raw_time_ns = float(self.raw_time_ns)


_NUM_DETECTORS = 2
_NUM_TOFS = 1


def _det_index(det: int) -> int:
    if not 1 <= det <= _NUM_DETECTORS:
        raise IndexError(f"detector must be 1..{_NUM_DETECTORS}, got {det}")
    return det - 1


def _rank_index(rank: int) -> int:
    if not 0 <= rank < _NUM_TOFS:
        raise IndexError(f"time-of-flight rank must be 0..{_NUM_TOFS - 1}, got {rank}")
    return rank


@dataclass
class SciSingleTcalData:
    """Single-hit times, positions and times of flight of the two scintillators.

    Detectors are numbered from 1, time-of-flight ranks from 0.
    """

    _raw_time_ns: list[float] = field(default_factory=lambda: [0.0] * _NUM_DETECTORS)
    _raw_pos_ns: list[float] = field(default_factory=lambda: [0.0] * _NUM_DETECTORS)
    _mult_per_det: list[int] = field(default_factory=lambda: [0] * _NUM_DETECTORS)
    _raw_tof_ns: list[float] = field(default_factory=lambda: [0.0] * _NUM_TOFS)
    _mult_per_tof: list[int] = field(default_factory=lambda: [0] * _NUM_TOFS)

    def raw_time_ns(self, det: int) -> float:
        """Mean of left and right times of a detector."""
        return self._raw_time_ns[_det_index(det)]

    def raw_pos_ns(self, det: int) -> float:
        """Left minus right time of a detector."""
        return self._raw_pos_ns[_det_index(det)]

    def raw_tof_ns(self, rank: int) -> float:
        """Time of flight of the given rank."""
        return self._raw_tof_ns[_rank_index(rank)]

    def mult_per_det(self, det: int) -> int:
        """Number of hits with a proper position in a detector."""
        return self._mult_per_det[_det_index(det)]

    def mult_per_tof(self, rank: int) -> int:
        """Number of hits with a proper time of flight of the given rank."""
        return self._mult_per_tof[_rank_index(rank)]

    def set_raw_time_ns(self, det: int, time: float) -> None:
        self._raw_time_ns[_det_index(det)] = float(time)

    def set_raw_pos_ns(self, det: int, pos: float) -> None:
        self._raw_pos_ns[_det_index(det)] = float(pos)

    def set_mult_per_det(self, det: int, mult: int) -> None:
        self._mult_per_det[_det_index(det)] = _unsigned(mult, _USHORT_MAX, "multiplicity")

    def set_raw_tof_ns(self, rank: int, tof: float) -> None:
        self._raw_tof_ns[_rank_index(rank)] = float(tof)

    def set_mult_per_tof(self, rank: int, mult: int) -> None:
        self._mult_per_tof[_rank_index(rank)] = _unsigned(mult, _USHORT_MAX, "multiplicity")