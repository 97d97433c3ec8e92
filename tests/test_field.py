import pytest

from frsana.field import WasaFieldMap


@pytest.fixture
def field_map():
    fmap = WasaFieldMap()
    fmap.rmin = 0.0
    fmap.rmax = 10.0
    fmap.zmin = -5.0
    fmap.zmax = 5.0
    fmap.set_field(1.0, 2.0, 3.0)
    fmap.init()
    return fmap


def test_defaults():
    fmap = WasaFieldMap()
    assert fmap.name == "WASAFieldMap"
    assert fmap.scale == 1.0
    assert (fmap.rmin, fmap.rmax, fmap.zmin, fmap.zmax) == (0.0, 0.0, 0.0, 0.0)
    assert (fmap.bx, fmap.by, fmap.bz) == (0.0, 0.0, 0.0)


def test_field_inside(field_map):
    assert field_map.field_at(0.0, 0.0, 0.0) == (1.0, 2.0, 3.0)
    assert field_map.bx_at(3.0, 4.0, 5.0) == 1.0
    assert field_map.by_at(3.0, 4.0, -5.0) == 2.0
    assert field_map.bz_at(0.0, 10.0, 0.0) == 3.0


@pytest.mark.parametrize("point", [(10.0, 1.0, 0.0), (0.0, 0.0, 5.5), (0.0, 0.0, -6.0), (8.0, 8.0, 0.0)])
def test_field_outside(field_map, point):
    assert field_map.field_at(*point) == (0.0, 0.0, 0.0)


def test_is_inside_respects_inner_radius(field_map):
    field_map.rmin = 2.0
    assert not field_map.is_inside(1.0, 0.0, 0.0)
    assert field_map.is_inside(2.0, 0.0, 0.0)
    assert field_map.bz_at(1.0, 0.0, 0.0) == 0.0


def test_init_resets_position():
    fmap = WasaFieldMap()
    fmap.set_position(1.0, 2.0, 3.0)
    assert fmap.position == (1.0, 2.0, 3.0)
    fmap.init()
    assert fmap.position == (0.0, 0.0, 0.0)


def test_position_after_init_does_not_move_field(field_map):
    field_map.set_position(100.0, 0.0, 0.0)
    assert field_map.bx_at(0.0, 0.0, 0.0) == 1.0
    assert field_map.bx_at(100.0, 0.0, 0.0) == 0.0


def test_use_before_init_raises():
    fmap = WasaFieldMap()
    with pytest.raises(RuntimeError):
        fmap.bx_at(0.0, 0.0, 0.0)


def test_reset_clears_field_but_keeps_position(field_map):
    field_map.set_position(4.0, 5.0, 6.0)
    field_map.scale = 2.0
    field_map.reset()
    assert (field_map.bx, field_map.by, field_map.bz) == (0.0, 0.0, 0.0)
    assert (field_map.rmax, field_map.zmin, field_map.zmax) == (0.0, 0.0, 0.0)
    assert field_map.scale == 1.0
    assert field_map.position == (4.0, 5.0, 6.0)


def test_describe(field_map):
    text = field_map.describe()
    lines = text.splitlines()
    assert lines[0] == lines[-1] == "=" * 54
    assert "WASAFieldMap" in lines[1]
    assert "----  Field type    : constant" in lines
    assert "----  B = ( 1, 2, 3 ) kG" in lines
    assert "10" in lines[6]