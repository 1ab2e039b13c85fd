import re

import pytest

from swisscoords import LV03, WGS84, check_lv03, check_wgs84, in_lv03_domain, in_wgs84_domain
from swisscoords.utils import logging as swisscoords_logging


@pytest.fixture(autouse=True)
def reset_warnings():
    swisscoords_logging._WARNINGS.clear()
    yield
    swisscoords_logging._WARNINGS.clear()


def test_in_lv03_domain():
    assert in_lv03_domain(LV03(600000., 200000.))
    assert in_lv03_domain(LV03(485000., 75000.))
    assert not in_lv03_domain(LV03(2600000., 1200000.))
    assert not in_lv03_domain(LV03(float('nan'), 200000.))

    with pytest.raises(TypeError):
        in_lv03_domain(WGS84(46.9, 7.4))


def test_in_wgs84_domain():
    assert in_wgs84_domain(WGS84(46.9, 7.4))
    assert in_wgs84_domain(WGS84(45.82, 5.96))
    assert not in_wgs84_domain(WGS84(-33.86, 151.21))
    assert not in_wgs84_domain(WGS84(46.9, float('inf')))

    with pytest.raises(TypeError):
        in_wgs84_domain(LV03(600000., 200000.))


def test_check_lv03_passes_through(caplog):
    coord = LV03(600000., 200000.)
    assert check_lv03(coord) is coord
    assert 'outside' not in caplog.text


def test_check_warns_once(caplog):
    far = WGS84(-33.86, 151.21)
    assert check_wgs84(far) is far
    assert 'WGS84 coordinate <WGS84(-33.86, 151.21, 0.0)> lies outside' in caplog.text

    check_wgs84(WGS84(0., 0.))
    assert len(re.findall('WGS84 coordinate', caplog.text)) == 1

    far = LV03(0., 0.)
    assert check_lv03(far) is far
    assert 'LV03 coordinate' in caplog.text
