import math

import numpy as np
from pydantic import ValidationError
import pytest

from swisscoords import LV03, WGS84


def test_wgs84_init():
    c = WGS84(46.9, 7.4, 500.)
    assert c.lat == 46.9
    assert c.lng == 7.4
    assert c.height == 500.

    c = WGS84('46.9', 7, 0)
    assert c.lat == 46.9
    assert c.lng == 7.
    assert isinstance(c.lng, float)

    assert WGS84(46.9, 7.4).height == 0.

    with pytest.raises(ValidationError):
        WGS84('north', 7.4)


def test_lv03_init():
    c = LV03(600000, 200000.5, 12)
    assert c.east == 600000.
    assert c.north == 200000.5
    assert c.height == 12.

    with pytest.raises(ValidationError):
        LV03(600000, None)


def test_coordinate_accepts_non_finite():
    c = LV03(float('nan'), float('inf'), float('-inf'))
    assert math.isnan(c.east)
    assert c.north == float('inf')
    assert c.height == float('-inf')


def test_coordinate_immutable():
    c = WGS84(46.9, 7.4)
    with pytest.raises(AttributeError):
        c.lat = 47.

    with pytest.raises(AttributeError):
        c.foo = 1

    with pytest.raises(AttributeError):
        del c.lat

    assert c.lat == 46.9


def test_coordinate_eq():
    assert LV03(600000., 200000.) == LV03(600000., 200000., 0.)
    assert LV03(600000., 200000.) != LV03(600000., 200001.)
    assert LV03(1., 2., 3.) != WGS84(1., 2., 3.)
    assert LV03(1., 2., 3.) != (1., 2., 3.)


def test_coordinate_hash():
    coords = {
        WGS84(46., 7.),
        WGS84(46., 7., 0.),
        WGS84(47., 8.),
    }
    assert len(coords) == 2
    assert WGS84(47., 8.) in coords
    assert hash(WGS84(1., 2., 3.)) != hash(LV03(1., 2., 3.))


def test_coordinate_repr():
    assert repr(WGS84(46.5, 7.25, 1.)) == '<WGS84(46.5, 7.25, 1.0)>'
    assert repr(LV03(600000., 200000., 0.)) == '<LV03(600000.0, 200000.0, 0.0)>'


def test_coordinate_to_float():
    assert WGS84(46.5, 7.25, 1.).to_float() == (46.5, 7.25, 1.)
    assert LV03(600000, 200000).to_float() == (600000., 200000., 0.)


def test_coordinate_from_float():
    assert LV03.from_float([600000., 200000., 5.]) == LV03(600000., 200000., 5.)
    assert WGS84.from_float((46.5, 7.25)) == WGS84(46.5, 7.25, 0.)
    assert WGS84.from_float(np.array([46.5, 7.25, 2.])) == WGS84(46.5, 7.25, 2.)

    with pytest.raises(TypeError):
        WGS84.from_float('46.5 7.25')

    with pytest.raises(ValueError):
        WGS84.from_float([46.5])

    with pytest.raises(ValueError):
        LV03.from_float([1., 2., 3., 4.])


def test_struct_methods():
    assert LV03(600000., 200000., 0.).to_wgs84() == WGS84(
        16.9023892 * 100 / 36, 2.6779094 * 100 / 36, 49.55
    )
    assert isinstance(WGS84(46.95, 7.44).to_lv03(), LV03)
