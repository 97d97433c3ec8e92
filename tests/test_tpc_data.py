import pytest

from frsana.tpc_data import TpcCalData, TpcHitData, TpcMappedData


def test_mapped_defaults_are_zero():
    data = TpcMappedData()
    assert data.det_id == 0
    assert data.ae == (0, 0, 0, 0)
    assert data.dt == (0, 0, 0, 0)
    assert data.le == data.re == data.lt == data.rt == (0, 0)


def test_mapped_keeps_values_in_order():
    data = TpcMappedData(
        3,
        ae=[10, 11, 12, 13],
        le=[20, 21],
        re=[30, 31],
        dt=[40, 41, 42, 43],
        lt=[50, 51],
        rt=[60, 61],
    )
    assert data.det_id == 3
    assert data.ae == (10, 11, 12, 13)
    assert data.le == (20, 21)
    assert data.re == (30, 31)
    assert data.dt == (40, 41, 42, 43)
    assert data.lt == (50, 51)
    assert data.rt == (60, 61)


def test_mapped_lists_are_copied():
    anodes = [1, 2, 3, 4]
    data = TpcMappedData(1, ae=anodes)
    anodes[0] = 99
    assert data.ae[0] == 1


@pytest.mark.parametrize("name, values", [("ae", [1, 2, 3]), ("le", [1]), ("dt", [1, 2, 3, 4, 5]), ("rt", [])])
def test_mapped_rejects_wrong_lengths(name, values):
    with pytest.raises(ValueError):
        TpcMappedData(1, **{name: values})


def test_cal_defaults():
    data = TpcCalData()
    assert (data.det_id, data.xy_id, data.sec_id) == (0, 0, 0)
    assert data.position == -500.0
    assert data.control_par == 0.0


def test_cal_values():
    data = TpcCalData(2, 1, 3, 12.5, 0.25)
    assert (data.det_id, data.xy_id, data.sec_id) == (2, 1, 3)
    assert data.position == 12.5
    assert data.control_par == 0.25


def test_hit_defaults_and_values():
    assert (TpcHitData().x, TpcHitData().y) == (-500.0, -500.0)
    hit = TpcHitData(4, 1.5, -2.5)
    assert hit.det_id == 4
    assert (hit.x, hit.y) == (1.5, -2.5)