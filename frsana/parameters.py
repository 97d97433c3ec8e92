"""Calibration parameter containers for the MUSIC detectors."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping

import numpy as np

logger = logging.getLogger(__name__)


class ParameterError(Exception):
    """Raised when a parameter set cannot be read from its store."""


def _resized(values: np.ndarray, size: int) -> np.ndarray:
    """Return ``values`` resized to ``size``, keeping the head and padding with zeros."""
    result = np.zeros(size, dtype=np.float32)
    keep = min(size, len(values))
    result[:keep] = values[:keep]
    return result


def _read_int(params: Mapping, key: str) -> int:
    try:
        return int(params[key])
    except KeyError:
        raise ParameterError(f"missing parameter {key!r}") from None
    except (TypeError, ValueError) as exc:
        raise ParameterError(f"parameter {key!r} is not an integer") from exc


def _read_array(params: Mapping, key: str, size: int) -> np.ndarray:
    try:
        raw: Iterable[float] = params[key]
    except KeyError:
        raise ParameterError(f"could not initialize {key!r}") from None
    try:
        values = np.asarray(list(raw), dtype=np.float32)
    except (TypeError, ValueError) as exc:
        raise ParameterError(f"parameter {key!r} is not a list of numbers") from exc
    if values.shape != (size,):
        raise ParameterError(f"parameter {key!r} needs {size} values, got {values.size}")
    return values


class _ParameterSet:
    """Common state of a named parameter container."""

    def __init__(self, name: str, title: str, context: str) -> None:
        self.name = name
        self.title = title
        self.context = context
        self.status = False


class MusicCalPar(_ParameterSet):
    """Per-anode pedestal fit parameters (amplitude, mean, sigma) of the MUSICs."""

    ARRAY_KEY = "frsmusicCalPar"
    DETS_KEY = "frsmusicDetNumberPar"
    ANODES_KEY = "frsmusicAnodeNumberPar"
    FIT_KEY = "frsmusicAnodeParamsFitPar"

    def __init__(
        self,
        name: str = "frsmusicCalPar",
        title: str = "FRS MUSIC Parameters",
        context: str = "FRSMUSICCalParContext",
    ) -> None:
        super().__init__(name, title, context)
        self.anode_cal_params = np.zeros(24, dtype=np.float32)
        self.num_dets = 1
        self.num_anodes = 8
        self.num_params_fit = 3

    @property
    def array_size(self) -> int:
        return self.num_dets * self.num_anodes * self.num_params_fit

    def clear(self) -> None:
        """Mark the parameters as not initialised."""
        self.status = False

    def resize(self) -> None:
        """Resize the parameter array to detectors x anodes x fit parameters."""
        self.anode_cal_params = _resized(self.anode_cal_params, self.array_size)

    def set_anode_cal_param(self, value: float, index: int) -> None:
        """Store one parameter at a flat index."""
        if not 0 <= index < len(self.anode_cal_params):
            raise IndexError(
                f"parameter index {index} outside 0..{len(self.anode_cal_params) - 1}"
            )
        self.anode_cal_params[index] = value

    def put_params(self, params: MutableMapping | None) -> None:
        """Write all parameters into ``params``."""
        logger.info("MusicCalPar.put_params() called")
        if params is None:
            return
        logger.info("Array Size: %d", self.array_size)
        self.resize()
        params[self.ARRAY_KEY] = [float(v) for v in self.anode_cal_params]
        params[self.DETS_KEY] = self.num_dets
        params[self.ANODES_KEY] = self.num_anodes
        params[self.FIT_KEY] = self.num_params_fit

    def get_params(self, params: Mapping | None) -> None:
        """Read all parameters from ``params``; raise ParameterError if any is missing."""
        logger.info("MusicCalPar.get_params() called")
        if params is None:
            raise ParameterError("no parameter list given")
        self.num_dets = _read_int(params, self.DETS_KEY)
        self.num_anodes = _read_int(params, self.ANODES_KEY)
        self.num_params_fit = _read_int(params, self.FIT_KEY)
        logger.info("Array Size: %d", self.array_size)
        self.resize()
        self.anode_cal_params = _read_array(params, self.ARRAY_KEY, self.array_size)

    def describe(self) -> str:
        """A listing of every fit parameter by detector and anode."""
        lines = ["MusicCalPar: music anode Parameters: "]
        for det in range(self.num_dets):
            lines.append(f"Music detector number: {det}")
            for anode in range(self.num_anodes):
                lines.append(f"Anode number: {anode}")
                base = det * self.num_params_fit * self.num_anodes + anode * self.num_params_fit
                for j in range(self.num_params_fit):
                    lines.append(f"FitParam({j}) = {float(self.anode_cal_params[base + j]):g}")
        return "\n".join(lines)


class MusicHitPar(_ParameterSet):
    """Per-detector linear charge calibration parameters of the MUSICs."""

    ARRAY_KEY = "frsmusicHitPar"
    DETS_KEY = "frsmusicDetNumberPar"
    FIT_KEY = "frsmusicHitParamsFitPar"

    def __init__(
        self,
        name: str = "frsmusicHitPar",
        title: str = "FRS MUSIC Hit Parameters",
        context: str = "FRSMUSICHitParContext",
    ) -> None:
        super().__init__(name, title, context)
        self.detector_hit_params = np.zeros(2, dtype=np.float32)
        self.num_dets = 1
        self.num_params_fit = 2

    @property
    def array_size(self) -> int:
        return self.num_dets * self.num_params_fit

    def clear(self) -> None:
        """Mark the parameters as not initialised."""
        self.status = False

    def resize(self) -> None:
        """Resize the parameter array to detectors x fit parameters."""
        self.detector_hit_params = _resized(self.detector_hit_params, self.array_size)

    def set_detector_hit_param(self, value: float, index: int) -> None:
        """Store one parameter at a flat index."""
        if not 0 <= index < len(self.detector_hit_params):
            raise IndexError(
                f"parameter index {index} outside 0..{len(self.detector_hit_params) - 1}"
            )
        self.detector_hit_params[index] = value

    def put_params(self, params: MutableMapping | None) -> None:
        """Write all parameters into ``params``."""
        logger.info("MusicHitPar.put_params() called")
        if params is None:
            return
        logger.info("Array Size: %d", self.array_size)
        self.resize()
        params[self.ARRAY_KEY] = [float(v) for v in self.detector_hit_params]
        params[self.DETS_KEY] = self.num_dets
        params[self.FIT_KEY] = self.num_params_fit

    def get_params(self, params: Mapping | None) -> None:
        """Read all parameters from ``params``; raise ParameterError if any is missing."""
        logger.info("MusicHitPar.get_params() called")
        if params is None:
            raise ParameterError("no parameter list given")
        self.num_dets = _read_int(params, self.DETS_KEY)
        self.num_params_fit = _read_int(params, self.FIT_KEY)
        logger.info("Array Size: %d", self.array_size)
        self.resize()
        self.detector_hit_params = _read_array(params, self.ARRAY_KEY, self.array_size)

    def describe(self) -> str:
        """A listing of every fit parameter by detector."""
        lines = ["MusicHitPar: music detector Parameters: "]
        for det in range(self.num_dets):
            lines.append(f"Music detector number: {det}")
            for j in range(self.num_params_fit):
                value = float(self.detector_hit_params[det * self.num_params_fit + j])
                lines.append(f"FitParam({j}) = {value:g}")
        return "\n".join(lines)