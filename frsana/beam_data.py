"""Beam-line detector records: multi-wire chambers and the SEETRAM counters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class MwHitData:
    """The reconstructed x, y position of a track in one multi-wire chamber, in mm."""

    det_id: int = 0
    x: float = -500.0
    y: float = -500.0

    def __post_init__(self) -> None:
        self.det_id = int(self.det_id)
        self.x = float(self.x)
        self.y = float(self.y)


@dataclass(slots=True)
class MwMappedData:
    """Raw anode and cathode (x right/left, y up/down) signals of one multi-wire chamber."""

    det_id: int = 0
    an: float = 0.0
    xr: float = 0.0
    xl: float = 0.0
    yu: float = 0.0
    yd: float = 0.0

    def __post_init__(self) -> None:
        self.det_id = int(self.det_id)
        self.an = float(self.an)
        self.xr = float(self.xr)
        self.xl = float(self.xl)
        self.yu = float(self.yu)
        self.yd = float(self.yd)


@dataclass(slots=True)
class SeetramCalData:
    """Scaler counts of the triggers, SEETRAM, ionisation chamber and S0 plastics."""

    acc_trig_counts: int = 0
    free_trig_counts: int = 0
    see_counts: int = 0
    ic_counts: int = 0
    dum_counts: int = 0
    sci00_counts: int = 0
    sci01_counts: int = 0
    sci02_counts: int = 0
    clock_1s: int = 0

    def __post_init__(self) -> None:
        self.acc_trig_counts = int(self.acc_trig_counts)
        self.free_trig_counts = int(self.free_trig_counts)
        self.see_counts = int(self.see_counts)
        self.ic_counts = int(self.ic_counts)
        self.dum_counts = int(self.dum_counts)
        self.sci00_counts = int(self.sci00_counts)
        self.sci01_counts = int(self.sci01_counts)
        self.sci02_counts = int(self.sci02_counts)
        self.clock_1s = int(self.clock_1s)