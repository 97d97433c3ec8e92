# frsana

Analysis building blocks for fragment-separator (FRS) experiments. The package has
plain data records for each detector stage, a constant magnetic field inside a
cylinder, and the MUSIC ionisation-chamber calibration chain. That chain runs from
raw anode signals to atomic number.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Data records

All records are dataclasses. Their fields are converted to `int` or `float` when a
record is created.

- `frsana.music_data`
  - `MusicMappedData`, `MusicCalData`: `det_id`, `anode_id`, `energy`.
  - `MusicHitData`: `det_id`, `charge`, and the `z` property.
- `frsana.tpc_data`
  - `TpcMappedData`: raw energies (`ae`, `le`, `re`) and drift times (`dt`, `lt`, `rt`). A wrong number of values raises `ValueError`.
  - `TpcCalData` and `TpcHitData`: positions default to -500.
- `frsana.sci_data`
  - `VftxSciMappedData` and `SciTcalData`: values outside the unsigned range raise `ValueError`.
  - `SciSingleTcalData`: accessors and setters take detectors 1..2 and a time-of-flight rank of 0. Any other index raises `IndexError`.
- `frsana.tracking_data`: `MdcMappedData`, `FrsS4Data`.
- `frsana.beam_data`: `MwHitData`, `MwMappedData`, `SeetramCalData`.
- `frsana.scalers`: `FrsSpillMappedData` and `FrsMappedData`. Both have a `copy()` method. In `FrsMappedData`, `trigger` defaults to -1.
- `frsana.points`: the simulated hits `McPoint`, `MdcPoint` and `TofPoint`.
  - They hold entry and exit positions and momenta.
  - `x_at(z)` and `y_at(z)` interpolate linearly inside the segment and return the mean value outside it.
  - `is_usable()` requires at least 1e-4 cm between entry and exit in z.
  - `describe()` returns a text summary.

## Field

`frsana.field.WasaFieldMap` is a uniform field (kG) inside a cylinder.

- The cylinder is given by the attributes `rmin`, `rmax`, `zmin` and `zmax` (cm).
- `init()` places the field centre at the origin and must be called before any field lookup. Calling `bx_at`, `by_at`, `bz_at` or `field_at` earlier raises `RuntimeError`.
- Because `init()` resets the centre, a `set_position()` made before it is overwritten.
- `scale` is stored but not applied to the field.
- `reset()` clears the limits, the scale and the field.
- `describe()` returns a text summary.

```python
from frsana.field import WasaFieldMap

field = WasaFieldMap()
field.rmax = 40.0
field.zmin, field.zmax = -50.0, 50.0
field.set_field(0.0, 0.0, 10.0)
field.init()

print(field.field_at(1.0, 2.0, 0.0))    # inside: (0.0, 0.0, 10.0)
print(field.field_at(100.0, 0.0, 0.0))  # outside: (0.0, 0.0, 0.0)
```

## MUSIC calibration

### Parameter containers

`frsana.parameters` has two containers, both backed by numpy arrays:

- `MusicCalPar` holds the per-anode amplitude, pedestal and sigma.
- `MusicHitPar` holds the per-detector `a0` and `a1`.

Both have these methods:

- `put_params(mapping)` writes the parameters into a dict-like object.
- `get_params(mapping)` reads them back. It raises `ParameterError` when a key is missing or malformed.
- `describe()` lists the values.

### Finding parameters

- `frsana.pedestals.PedestalFinder` collects raw anode energies with `fill()`. `search_pedestals()` (or `finish()`) histograms them and fits a Gaussian with scipy. It writes the results into a `MusicCalPar`.
  - An anode gets a pedestal of -1 (dead) when it has too few entries.
  - It also gets -1 when its fitted sigma reaches `max_sigma`.
- `frsana.charge_calibration.ChargeCalibrator` collects per-detector charges with `fill()`. `search_z()` (or `finish()`) does the calibration:
  - It finds up to eight peaks in the charge spectrum.
  - It assigns them Z = `max_z`, `max_z` - 1, ... from the highest charge down.
  - It fits a straight line and stores the result in a `MusicHitPar`.
  - With fewer than two peaks it stores a0 = 0 and a1 = 1.

### Applying parameters

- `frsana.mapped2cal.MusicMapped2Cal` subtracts each anode's pedestal and skips dead anodes. `dead_anodes()` counts the dead anodes per detector.
- `frsana.cal2hit.MusicCal2Hit` turns calibrated anode energies into one charge per detector, computed as `a0 + a1 * E`. `E` is the geometric mean of the eight anode energies, from `truncated_energies()`.

```python
from frsana.cal2hit import MusicCal2Hit
from frsana.mapped2cal import MusicMapped2Cal
from frsana.music_data import MusicMappedData
from frsana.parameters import MusicCalPar, MusicHitPar

cal_par = MusicCalPar()                    # 1 detector, 8 anodes, 3 fit parameters
for anode in range(8):
    cal_par.set_anode_cal_param(50.0, 3 * anode + 1)   # pedestal of each anode

hit_par = MusicHitPar()                    # 1 detector, a0 and a1
hit_par.set_detector_hit_param(0.0, 0)
hit_par.set_detector_hit_param(0.5, 1)

mapped = [MusicMappedData(0, anode, 150) for anode in range(8)]
cal = MusicMapped2Cal(cal_par).process(mapped)   # energies of 100 on every anode
hits = MusicCal2Hit(hit_par).process(cal)
print(hits)   # [MusicHitData(det_id=0, charge=50.0)]
```

Progress and warnings go through the standard `logging` module.

## What the package does not do

- It does not read or write experiment data files or event streams. Events are passed in as lists of records.
- Parameter sets are exchanged only as plain Python mappings. There is no parameter database.
- There is no command-line tool. Everything is used from Python.