"""Drift-chamber and S4 identification data records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class MdcMappedData:
    """Raw energy of one anode of the mini drift chamber."""

    anode_id: int = 0
    energy: int = 0

    def __post_init__(self) -> None:
        self.anode_id = int(self.anode_id)
        self.energy = int(self.energy)


@dataclass(slots=True)
class FrsS4Data:
    """Fragment identification at S4: Z, A/q and focal-plane x and angle at S2 and S4."""

    z: float = 0.0
    aq: float = 0.0
    xs2: float = 0.0
    as2: float = 0.0
    xs4: float = 0.0
    as4: float = 0.0

    def __post_init__(self) -> None:
        self.z = float(self.z)
        self.aq = float(self.aq)
        self.xs2 = float(self.xs2)
        self.as2 = float(self.as2)
        self.xs4 = float(self.xs4)
        self.as4 = float(self.as4)