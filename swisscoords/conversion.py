"""
Conversions between the Swiss LV03 grid and WGS84.

Uses the approximate polynomial formulas published by swisstopo
("Approximate formulas for the transformation between Swiss projection
coordinates and WGS84"). Results are accurate to roughly 1-2 meters; validate
against the NAVREF service where better accuracy matters.

No input validation is performed. Non-finite or out-of-range values flow
through the arithmetic and surface as NaN, infinite or meaningless results.
"""

__all__ = [
    'lv03_to_wgs84', 'lv03_coord_to_wgs84', 'lv03_to_wgs84_array',
    'wgs84_to_lv03', 'wgs84_coord_to_lv03', 'wgs84_to_lv03_array',
]

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from swisscoords._const import (
    ANGLE_UNIT, BERN_LAT_SEX, BERN_LNG_SEX, GRID_UNIT, HEIGHT_OFFSET,
    LV03_EAST_OFFSET, LV03_NORTH_OFFSET
)
from swisscoords.coordinates import LV03, WGS84


def lv03_to_wgs84(east: float, north: float, height: float) -> WGS84:
    """
    Convert an LV03 position to WGS84.

    Args:
        east:
            Easting (Y), in meters

        north:
            Northing (X), in meters

        height:
            Height, in meters

    Returns:
        WGS84
    """
    return WGS84(
        _ch_to_wgs_lat(east, north),
        _ch_to_wgs_lng(east, north),
        _ch_to_wgs_height(east, north, height),
    )


def lv03_coord_to_wgs84(coord: LV03) -> WGS84:
    """Convert an LV03 coordinate to WGS84"""
    if not isinstance(coord, LV03):
        raise TypeError(f'Expected an LV03 coordinate, not {type(coord)}')

    return lv03_to_wgs84(coord.east, coord.north, coord.height)


def wgs84_to_lv03(lat: float, lng: float, ell_height: float) -> LV03:
    """
    Convert a WGS84 position to LV03.

    Args:
        lat:
            Latitude, in decimal degrees

        lng:
            Longitude, in decimal degrees

        ell_height:
            Ellipsoidal height, in meters

    Returns:
        LV03
    """
    return LV03(
        _wgs_to_ch_east(lat, lng),
        _wgs_to_ch_north(lat, lng),
        _wgs_to_ch_height(lat, lng, ell_height),
    )


def wgs84_coord_to_lv03(coord: WGS84) -> LV03:
    """Convert a WGS84 coordinate to LV03"""
    if not isinstance(coord, WGS84):
        raise TypeError(f'Expected a WGS84 coordinate, not {type(coord)}')

    return wgs84_to_lv03(coord.lat, coord.lng, coord.height)


def lv03_to_wgs84_array(
    east: ArrayLike,
    north: ArrayLike,
    height: ArrayLike
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert many LV03 positions at once. Inputs are broadcast against
    each other, so e.g. a scalar height may be paired with arrays of
    eastings and northings.

    Returns:
        A tuple of arrays (lat, lng, height)
    """
    east, north, height = np.broadcast_arrays(
        *(np.asarray(x, dtype=np.float64) for x in (east, north, height))
    )
    with np.errstate(invalid='ignore', over='ignore'):
        return (
            np.asarray(_ch_to_wgs_lat(east, north)),
            np.asarray(_ch_to_wgs_lng(east, north)),
            np.asarray(_ch_to_wgs_height(east, north, height)),
        )


def wgs84_to_lv03_array(
    lat: ArrayLike,
    lng: ArrayLike,
    ell_height: ArrayLike
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert many WGS84 positions at once. Inputs are broadcast against
    each other.

    Returns:
        A tuple of arrays (east, north, height)
    """
    lat, lng, ell_height = np.broadcast_arrays(
        *(np.asarray(x, dtype=np.float64) for x in (lat, lng, ell_height))
    )
    with np.errstate(invalid='ignore', over='ignore'):
        return (
            np.asarray(_wgs_to_ch_east(lat, lng)),
            np.asarray(_wgs_to_ch_north(lat, lng)),
            np.asarray(_wgs_to_ch_height(lat, lng, ell_height)),
        )


def _ch_to_wgs_height(y, x, h):
    """Convert CH y/x/h to WGS height"""
    # Military to civil, unit = 1000km (auxiliary values % Bern)
    y_aux = (y - LV03_EAST_OFFSET) / GRID_UNIT
    x_aux = (x - LV03_NORTH_OFFSET) / GRID_UNIT

    return (h + HEIGHT_OFFSET) - (12.60 * y_aux) - (22.64 * x_aux)


def _ch_to_wgs_lat(y, x):
    """Convert CH y/x to WGS lat"""
    y_aux = (y - LV03_EAST_OFFSET) / GRID_UNIT
    x_aux = (x - LV03_NORTH_OFFSET) / GRID_UNIT

    lat = (
        (16.9023892 + (3.238272 * x_aux))
        - (0.270978 * (y_aux * y_aux))
        - (0.002528 * (x_aux * x_aux))
        - (0.0447 * (y_aux * y_aux) * x_aux)
        - (0.0140 * (x_aux * x_aux * x_aux))
    )

    # Unit 10000" to 1", then seconds to decimal degrees
    return (lat * 100) / 36


def _ch_to_wgs_lng(y, x):
    """Convert CH y/x to WGS lng"""
    y_aux = (y - LV03_EAST_OFFSET) / GRID_UNIT
    x_aux = (x - LV03_NORTH_OFFSET) / GRID_UNIT

    lng = (
        (
            2.6779094 + (4.728982 * y_aux)
            + (0.791484 * y_aux * x_aux)
            + (0.1306 * y_aux * (x_aux * x_aux))
        )
        - (0.0436 * (y_aux * y_aux * y_aux))
    )

    return (lng * 100) / 36


def _dec_to_sex_angle(dec):
    """
    Convert a decimal angle (degrees) to a sexagesimal angle (seconds).

    Degrees and minutes are taken with floor, so negative angles round
    toward negative infinity. numpy's floor keeps NaN and infinities as
    floats instead of raising. Scalar input gives a plain float, so the
    arithmetic that follows stays free of numpy floating-point warnings.
    """
    with np.errstate(invalid='ignore', over='ignore'):
        deg = np.floor(dec)
        minutes = np.floor((dec - deg) * 60)
        sec = (((dec - deg) * 60) - minutes) * 60

        angle = sec + minutes * 60. + deg * 3600.

    if np.ndim(angle) == 0:
        return float(angle)

    return angle


def _wgs_to_ch_height(lat, lng, h):
    """Convert WGS lat/lng (dec degrees) and height to CH h"""
    lat = _dec_to_sex_angle(lat)
    lng = _dec_to_sex_angle(lng)

    # Auxiliary values (% Bern)
    lat_aux = (lat - BERN_LAT_SEX) / ANGLE_UNIT
    lng_aux = (lng - BERN_LNG_SEX) / ANGLE_UNIT

    return (h - HEIGHT_OFFSET) + (2.73 * lng_aux) + (6.94 * lat_aux)


def _wgs_to_ch_north(lat, lng):
    """Convert WGS lat/lng (dec degrees) to CH x"""
    lat = _dec_to_sex_angle(lat)
    lng = _dec_to_sex_angle(lng)

    lat_aux = (lat - BERN_LAT_SEX) / ANGLE_UNIT
    lng_aux = (lng - BERN_LNG_SEX) / ANGLE_UNIT

    return (
        (
            (
                200147.07 + (308807.95 * lat_aux)
                + (3745.25 * (lng_aux * lng_aux))
                + (76.63 * (lat_aux * lat_aux))
            )
            - (194.56 * (lng_aux * lng_aux) * lat_aux)
        )
        + (119.79 * (lat_aux * lat_aux * lat_aux))
    )


def _wgs_to_ch_east(lat, lng):
    """Convert WGS lat/lng (dec degrees) to CH y"""
    lat = _dec_to_sex_angle(lat)
    lng = _dec_to_sex_angle(lng)

    lat_aux = (lat - BERN_LAT_SEX) / ANGLE_UNIT
    lng_aux = (lng - BERN_LNG_SEX) / ANGLE_UNIT

    return (
        (600072.37 + (211455.93 * lng_aux))
        - (10938.51 * lng_aux * lat_aux)
        - (0.36 * lng_aux * (lat_aux * lat_aux))
        - (44.54 * (lng_aux * lng_aux * lng_aux))
    )
