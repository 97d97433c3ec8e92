import numpy as np
import pytest

from frsana.music_data import MusicMappedData
from frsana.parameters import MusicCalPar
from frsana.pedestals import PedestalFinder


def _finder(**kwargs):
    options = dict(num_dets=1, num_anodes=2, bins=100, left=0, right=100)
    options.update(kwargs)
    return PedestalFinder(MusicCalPar(), **options)


def _gaussian_hits(det, anode, mean, sigma, n=5000, seed=1):
    rng = np.random.default_rng(seed)
    return [MusicMappedData(det, anode, v) for v in rng.normal(mean, sigma, n)]


def test_entries_count_fills():
    finder = _finder()
    finder.fill([MusicMappedData(0, 1, 10), MusicMappedData(0, 1, 12), MusicMappedData(0, 0, 5)])
    assert finder.entries(0, 1) == 2
    assert finder.entries(0, 0) == 1


def test_fill_outside_layout_raises():
    finder = _finder()
    with pytest.raises(IndexError):
        finder.fill([MusicMappedData(1, 0, 10)])
    with pytest.raises(IndexError):
        finder.fill([MusicMappedData(0, 2, 10)])


def test_fit_recovers_pedestal_and_sigma():
    finder = _finder()
    finder.fill(_gaussian_hits(0, 0, 50, 5, seed=2))
    finder.fill(_gaussian_hits(0, 1, 40, 5, seed=3))
    par = finder.finish()
    params = par.anode_cal_params
    assert len(params) == 6
    assert params[1] == pytest.approx(50, abs=0.5)
    assert params[2] == pytest.approx(5, rel=0.1)
    assert params[4] == pytest.approx(40, abs=0.5)
    assert params[0] > 0


def test_container_layout_updated():
    par = MusicCalPar()
    finder = PedestalFinder(par, num_dets=2, num_anodes=3, bins=10, left=0, right=100)
    finder.search_pedestals()
    assert (par.num_dets, par.num_anodes) == (2, 3)
    assert len(par.anode_cal_params) == par.num_dets * par.num_anodes * par.num_params_fit


def test_low_statistics_marks_dead_anode():
    finder = _finder(min_statistics=10)
    finder.fill([MusicMappedData(0, 0, 50)] * 5)
    params = finder.search_pedestals().anode_cal_params
    assert params[1] == -1
    assert params[2] == 0
    assert params[4] == -1


def test_wide_pedestal_marks_dead_but_keeps_sigma():
    finder = _finder(max_sigma=1, num_anodes=1)
    finder.fill(_gaussian_hits(0, 0, 50, 5, seed=4))
    params = finder.search_pedestals().anode_cal_params
    assert params[1] == -1
    assert params[2] > 1


def test_empty_range_with_data_raises():
    finder = PedestalFinder(MusicCalPar(), num_dets=1, num_anodes=1)
    finder.fill([MusicMappedData(0, 0, 10)])
    with pytest.raises(ValueError):
        finder.search_pedestals()