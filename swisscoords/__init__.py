from swisscoords._version import __version__  # noqa: F401
from swisscoords.utils.logging import LOGGER
from swisscoords.coordinates import LV03, WGS84
from swisscoords.conversion import (
    lv03_coord_to_wgs84, lv03_to_wgs84, lv03_to_wgs84_array,
    wgs84_coord_to_lv03, wgs84_to_lv03, wgs84_to_lv03_array
)
from swisscoords.bounds import check_lv03, check_wgs84, in_lv03_domain, in_wgs84_domain

__all__ = [
    'LV03',
    'WGS84',
    'check_lv03',
    'check_wgs84',
    'in_lv03_domain',
    'in_wgs84_domain',
    'lv03_coord_to_wgs84',
    'lv03_to_wgs84',
    'lv03_to_wgs84_array',
    'wgs84_coord_to_lv03',
    'wgs84_to_lv03',
    'wgs84_to_lv03_array',
    'LOGGER',
]
