"""Constant magnetic field of the WASA solenoid inside a cylindrical region."""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

_RULE = "=" * 54


class WasaFieldMap:
    """A uniform field (kG) inside a cylinder given by r and z limits (cm)."""

    def __init__(self, name: str = "WASAFieldMap", title: str = "") -> None:
        self.name = name
        self.title = title
        self.rmin = self.rmax = 0.0
        self.zmin = self.zmax = 0.0
        self.scale = 1.0
        self.bx = self.by = self.bz = 0.0
        self.pos_x = self.pos_y = self.pos_z = 0.0
        self._translation: tuple[float, float, float] | None = None

    def init(self) -> None:
        """Place the field centre at the origin and prepare the local frame."""
        logger.info("WasaFieldMap: Init")
        self.pos_x = self.pos_y = self.pos_z = 0.0
        self._translation = (-self.pos_x, -self.pos_y, -self.pos_z)

    def set_position(self, x: float, y: float, z: float) -> None:
        """Set the field centre in global coordinates."""
        self.pos_x, self.pos_y, self.pos_z = float(x), float(y), float(z)

    def set_field(self, bx: float, by: float, bz: float) -> None:
        """Set the field components."""
        self.bx, self.by, self.bz = float(bx), float(by), float(bz)

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.pos_x, self.pos_y, self.pos_z)

    def is_inside(self, x: float, y: float, z: float) -> bool:
        """Whether a local point lies within the field region."""
        r = math.hypot(x, y)
        return self.rmin <= r <= self.rmax and self.zmin <= z <= self.zmax

    def _to_local(self, x: float, y: float, z: float) -> tuple[float, float, float]:
        if self._translation is None:
            raise RuntimeError("field map used before init()")
        tx, ty, tz = self._translation
        return (x + tx, y + ty, z + tz)

    def _component(self, value: float, x: float, y: float, z: float) -> float:
        return value if self.is_inside(*self._to_local(x, y, z)) else 0.0

    def bx_at(self, x: float, y: float, z: float) -> float:
        return self._component(self.bx, x, y, z)

    def by_at(self, x: float, y: float, z: float) -> float:
        return self._component(self.by, x, y, z)

    def bz_at(self, x: float, y: float, z: float) -> float:
        return self._component(self.bz, x, y, z)

    def field_at(self, x: float, y: float, z: float) -> tuple[float, float, float]:
        """All three components at a global point."""
        return (self.bx_at(x, y, z), self.by_at(x, y, z), self.bz_at(x, y, z))

    def reset(self) -> None:
        """Clear the limits, scale and field; the position is kept."""
        self.rmin = self.rmax = 0.0
        self.zmin = self.zmax = 0.0
        self.scale = 1.0
        self.bx = self.by = self.bz = 0.0

    def describe(self) -> str:
        """A human-readable summary of the field."""
        return "\n".join(
            [
                _RULE,
                f"----  {self.title} : {self.name}",
                "----",
                "----  Field type    : constant",
                "----",
                "----  Field regions : ",
                f"----        r = {self.rmin:>4g} to {self.rmax:>4g} cm",
                f"----        z = {self.zmin:>4g} to {self.zmax:>4g} cm",
                f"---- Position = {self.pos_x:>4g} {self.pos_y:>4g} {self.pos_z:>4g} cm",
                f"----  B = ( {self.bx:.4g}, {self.by:.4g}, {self.bz:.4g} ) kG",
                _RULE,
            ]
        )