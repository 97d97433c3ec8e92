"""Scaler and trigger records of the FRS: per-spill counters and per-event mapped data."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


def _coerce_ints(record: object) -> None:
    """Store every field of a dataclass record as an int."""
    for spec in fields(record):
        setattr(record, spec.name, int(getattr(record, spec.name)))


@dataclass(slots=True)
class FrsSpillMappedData:
    """Counter values read out once per spill.

    Clocks, external start/stop, accepted and free triggers, the SEETRAM
    (new and old), the ionisation chambers and the left/right plastic
    scintillators at S0, S2, S4 and S8.
    """

    clock_100khz: int = 0
    clock_10hz: int = 0
    clock_1hz: int = 0
    start_ext: int = 0
    stop_ext: int = 0
    acc_trig: int = 0
    free_trig: int = 0
    seetram_new: int = 0
    seetram_old: int = 0
    ic01: int = 0
    icc: int = 0
    sci00: int = 0
    sci01: int = 0
    sci02: int = 0
    sci21l: int = 0
    sci21r: int = 0
    sci41l: int = 0
    sci41r: int = 0
    sci42l: int = 0
    sci42r: int = 0
    sci43l: int = 0
    sci43r: int = 0
    sci81l: int = 0
    sci81r: int = 0

    def __post_init__(self) -> None:
        _coerce_ints(self)

    def copy(self) -> FrsSpillMappedData:
        """An independent record with the same values."""
        return replace(self)


@dataclass(slots=True)
class FrsMappedData:
    """Per-event scalers and plastic-scintillator energies (E) and times (T).

    Scintillators at S2, S4 and S8 are read from a left (L) and right (R)
    photomultiplier. ``trigger`` is -1 when no trigger was recorded.
    """

    acc_trig: int = 0
    clock_100khz: int = 0
    clock_1hz: int = 0
    clock_10hz: int = 0
    trigger: int = -1
    free_trig: int = 0
    spill: int = 0
    seetram_new: int = 0
    seetram_old: int = 0
    ic: int = 0
    sci00: int = 0
    sci01: int = 0
    sci02: int = 0
    sci21le: int = 0
    sci21re: int = 0
    sci21lt: int = 0
    sci21rt: int = 0
    sci41le: int = 0
    sci41re: int = 0
    sci41lt: int = 0
    sci41rt: int = 0
    sci42le: int = 0
    sci42re: int = 0
    sci42lt: int = 0
    sci42rt: int = 0
    sci43le: int = 0
    sci43re: int = 0
    sci43lt: int = 0
    sci43rt: int = 0
    sci81le: int = 0
    sci81re: int = 0
    sci81lt: int = 0
    sci81rt: int = 0

    def __post_init__(self) -> None:
        _coerce_ints(self)

    def copy(self) -> FrsMappedData:
        """An independent record with the same values."""
        return replace(self)