"""Per-event MUSIC (multi-sampling ionisation chamber) data records."""

from __future__ import annotations

from dataclasses import dataclass


def _as_int(value: float) -> int:
    """Store a value in an integer slot, truncating toward zero."""
    return int(value)


@dataclass(slots=True)
class MusicMappedData:
    """Raw energy read from one anode of one MUSIC detector."""

    det_id: int = 0
    anode_id: int = 0
    energy: int = 0

    def __post_init__(self) -> None:
        self.det_id = _as_int(self.det_id)
        self.anode_id = _as_int(self.anode_id)
        self.energy = _as_int(self.energy)


@dataclass(slots=True)
class MusicCalData:
    """Pedestal-subtracted energy of one anode of one MUSIC detector."""

    det_id: int = 0
    anode_id: int = 0
    energy: int = 0

    def __post_init__(self) -> None:
        self.det_id = _as_int(self.det_id)
        self.anode_id = _as_int(self.anode_id)
        self.energy = _as_int(self.energy)


@dataclass(slots=True)
class MusicHitData:
    """Energy deposited in one MUSIC detector, in units of atomic number."""

    det_id: int = 0
    charge: float = 0.0

    def __post_init__(self) -> None:
        self.det_id = _as_int(self.det_id)
        self.charge = float(self.charge)

    @property
    def z(self) -> float:
        """The charge expressed as atomic number Z."""
        return self.charge