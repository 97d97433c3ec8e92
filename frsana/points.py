"""Monte-Carlo points recorded in the WASA drift chamber and time-of-flight wall."""

from __future__ import annotations

from dataclasses import dataclass

Vector3 = tuple[float, float, float]

_ORIGIN: Vector3 = (0.0, 0.0, 0.0)


@dataclass
class McPoint:
    """A track crossing an active volume, with entry and exit coordinates.

    Positions are in cm, momenta in GeV, time in ns, energy loss in GeV.
    """

    track_id: int = 0
    detector_id: int = 0
    det_copy_id: int = 0
    position_in: Vector3 = _ORIGIN
    position_out: Vector3 = _ORIGIN
    momentum_in: Vector3 = _ORIGIN
    momentum_out: Vector3 = _ORIGIN
    time: float = 0.0
    length: float = 0.0
    energy_loss: float = 0.0

    def __post_init__(self) -> None:
        self.position_in = tuple(float(v) for v in self.position_in)
        self.position_out = tuple(float(v) for v in self.position_out)
        self.momentum_in = tuple(float(v) for v in self.momentum_in)
        self.momentum_out = tuple(float(v) for v in self.momentum_out)

    def _interpolate(self, axis: int, z: float) -> float:
        start, end = self.position_in[axis], self.position_out[axis]
        z_in, z_out = self.position_in[2], self.position_out[2]
        if (z_out - z) * (z_in - z) >= 0.0:
            return (end + start) / 2.0
        return start + (z - z_in) / (z_out - z_in) * (end - start)

    def x_at(self, z: float) -> float:
        """x at the given z by linear interpolation; the mean x outside the segment."""
        return self._interpolate(0, z)

    def y_at(self, z: float) -> float:
        """y at the given z by linear interpolation; the mean y outside the segment."""
        return self._interpolate(1, z)

    def is_usable(self) -> bool:
        """Whether entry and exit are far enough apart in z to interpolate."""
        return abs(self.position_out[2] - self.position_in[2]) >= 1.0e-4

    def describe(self) -> str:
        """A human-readable summary of the point."""
        x, y, z = self.position_in
        px, py, pz = self.momentum_in
        return "\n".join(
            [
                f"-I- {type(self).__name__}: STS Point for track {self.track_id} "
                f"in detector {self.detector_id}",
                f"    Position ({x:g}, {y:g}, {z:g}) cm",
                f"    Momentum ({px:g}, {py:g}, {pz:g}) GeV",
                f"    Time {self.time:g} ns,  Length {self.length:g} cm,  "
                f"Energy loss {self.energy_loss * 1.0e06:g} keV",
            ]
        )


@dataclass
class MdcPoint(McPoint):
    """A point in the WASA mini drift chamber."""


@dataclass
class TofPoint(McPoint):
    """A point in the WASA time-of-flight wall, carrying the particle id."""

    det_copy_id: int = -1
    pid: int = 0