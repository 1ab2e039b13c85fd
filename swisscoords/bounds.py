"""
Optional checks on whether a coordinate lies in the area the conversion
formulas were fitted for (Switzerland, with a margin).

These are never applied by the conversions themselves, which accept any
float. Call them explicitly when out-of-area input should be detected.
"""

__all__ = [
    'LV03_BOUNDS', 'WGS84_BOUNDS',
    'check_lv03', 'check_wgs84', 'in_lv03_domain', 'in_wgs84_domain'
]

from swisscoords.coordinates import LV03, WGS84
from swisscoords.utils.logging import warn_once

# (min_east, min_north, max_east, max_north), meters
LV03_BOUNDS = (420000., 30000., 900000., 350000.)

# (min_lng, min_lat, max_lng, max_lat), decimal degrees
WGS84_BOUNDS = (5.1, 45.4, 11.7, 48.3)


def _within(x: float, y: float, bounds) -> bool:
    min_x, min_y, max_x, max_y = bounds
    # NaN fails every comparison
    return min_x <= x <= max_x and min_y <= y <= max_y


def in_lv03_domain(coord: LV03) -> bool:
    """Test whether an LV03 coordinate lies within LV03_BOUNDS"""
    if not isinstance(coord, LV03):
        raise TypeError(f'Expected an LV03 coordinate, not {type(coord)}')

    return _within(coord.east, coord.north, LV03_BOUNDS)


def in_wgs84_domain(coord: WGS84) -> bool:
    """Test whether a WGS84 coordinate lies within WGS84_BOUNDS"""
    if not isinstance(coord, WGS84):
        raise TypeError(f'Expected a WGS84 coordinate, not {type(coord)}')

    return _within(coord.lng, coord.lat, WGS84_BOUNDS)


def check_lv03(coord: LV03) -> LV03:
    """
    Returns the coordinate unchanged, logging a warning (once) if it
    falls outside the fitted area and conversions will be inaccurate.
    """
    if not in_lv03_domain(coord):
        warn_once(
            'LV03 coordinate %s lies outside the area covered by the conversion '
            'formulas; results will be inaccurate. (this warning will not repeat)',
            coord
        )

    return coord


def check_wgs84(coord: WGS84) -> WGS84:
    """
    Returns the coordinate unchanged, logging a warning (once) if it
    falls outside the fitted area and conversions will be inaccurate.
    """
    if not in_wgs84_domain(coord):
        warn_once(
            'WGS84 coordinate %s lies outside the area covered by the conversion '
            'formulas; results will be inaccurate. (this warning will not repeat)',
            coord
        )

    return coord
