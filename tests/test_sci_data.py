import pytest

from frsana.sci_data import SciSingleTcalData, SciTcalData, VftxSciMappedData


def test_vftx_defaults_and_values():
    assert VftxSciMappedData() == VftxSciMappedData(0, 0, 0, 0)
    data = VftxSciMappedData(2, 3, 123456, 789)
    assert (data.detector, data.pmt, data.time_coarse, data.time_fine) == (2, 3, 123456, 789)


@pytest.mark.parametrize("args", [(-1, 1, 0, 0), (1, 70000, 0, 0), (1, 1, -5, 0), (1, 1, 0, 2**32)])
def test_vftx_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        VftxSciMappedData(*args)


def test_tcal_values():
    data = SciTcalData(1, 2, 15.75)
    assert (data.detector, data.pmt) == (1, 2)
    assert data.raw_time_ns == 15.75
    assert SciTcalData().raw_time_ns == 0.0


def test_single_tcal_defaults_are_zero():
    data = SciSingleTcalData()
    for det in (1, 2):
        assert data.raw_time_ns(det) == 0.0
        assert data.raw_pos_ns(det) == 0.0
        assert data.mult_per_det(det) == 0
    assert data.raw_tof_ns(0) == 0.0
    assert data.mult_per_tof(0) == 0


def test_single_tcal_detectors_are_independent():
    data = SciSingleTcalData()
    data.set_raw_time_ns(1, 10.5)
    data.set_raw_time_ns(2, 20.5)
    data.set_raw_pos_ns(2, -1.25)
    data.set_mult_per_det(1, 3)
    assert data.raw_time_ns(1) == 10.5
    assert data.raw_time_ns(2) == 20.5
    assert data.raw_pos_ns(1) == 0.0
    assert data.raw_pos_ns(2) == -1.25
    assert data.mult_per_det(1) == 3
    assert data.mult_per_det(2) == 0


def test_single_tcal_tof_round_trip():
    data = SciSingleTcalData()
    data.set_raw_tof_ns(0, 42.0)
    data.set_mult_per_tof(0, 2)
    assert data.raw_tof_ns(0) == 42.0
    assert data.mult_per_tof(0) == 2
    assert data.mult_per_det(1) == 0


def test_single_tcal_instances_do_not_share_state():
    first, second = SciSingleTcalData(), SciSingleTcalData()
    first.set_raw_time_ns(1, 7.0)
    assert second.raw_time_ns(1) == 0.0


@pytest.mark.parametrize("det", [0, 3, -1])
def test_single_tcal_rejects_bad_detector(det):
    data = SciSingleTcalData()
    with pytest.raises(IndexError):
        data.raw_time_ns(det)
    with pytest.raises(IndexError):
        data.set_raw_pos_ns(det, 1.0)


@pytest.mark.parametrize("rank", [1, -1])
def test_single_tcal_rejects_bad_rank(rank):
    data = SciSingleTcalData()
    with pytest.raises(IndexError):
        data.set_raw_tof_ns(rank, 1.0)