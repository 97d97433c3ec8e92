"""Per-event TPC (time projection chamber) data records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_FOUR_ZEROS = (0, 0, 0, 0)
_TWO_ZEROS = (0, 0)


def _fixed_ints(values: Iterable[float], size: int, label: str) -> tuple[int, ...]:
    """Return exactly ``size`` integers from ``values`` or raise ValueError."""
    result = tuple(int(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{label} needs {size} values, got {len(result)}")
    return result


@dataclass(slots=True)
class TpcMappedData:
    """Raw energies and drift times of one TPC.

    ``ae``/``dt`` hold the four anodes, ``le``/``lt`` and ``re``/``rt``
    the two left and two right delay-line ends.
    """

    det_id: int = 0
    ae: tuple[int, ...] = _FOUR_ZEROS
    le: tuple[int, ...] = _TWO_ZEROS
    re: tuple[int, ...] = _TWO_ZEROS
    dt: tuple[int, ...] = _FOUR_ZEROS
    lt: tuple[int, ...] = _TWO_ZEROS
    rt: tuple[int, ...] = _TWO_ZEROS

    def __post_init__(self) -> None:
        self.det_id = int(self.det_id)
        self.ae = _fixed_ints(self.ae, 4, "ae")
        self.le = _fixed_ints(self.le, 2, "le")
        self.re = _fixed_ints(self.re, 2, "re")
        self.dt = _fixed_ints(self.dt, 4, "dt")
        self.lt = _fixed_ints(self.lt, 2, "lt")
        self.rt = _fixed_ints(self.rt, 2, "rt")


@dataclass(slots=True)
class TpcCalData:
    """A calibrated position of one TPC section along x or y.

    ``position`` is in mm; ``control_par`` is the check sum or delta-x
    used to validate the measurement.
    """

    det_id: int = 0
    xy_id: int = 0
    sec_id: int = 0
    position: float = -500.0
    control_par: float = 0.0

    def __post_init__(self) -> None:
        self.det_id = int(self.det_id)
        self.xy_id = int(self.xy_id)
        self.sec_id = int(self.sec_id)
        self.position = float(self.position)
        self.control_par = float(self.control_par)


@dataclass(slots=True)
class TpcHitData:
    """The reconstructed x, y position of a track in one TPC, in mm."""

    det_id: int = 0
    x: float = -500.0
    y: float = -500.0

    def __post_init__(self) -> None:
        self.det_id = int(self.det_id)
        self.x = float(self.x)
        self.y = float(self.y)