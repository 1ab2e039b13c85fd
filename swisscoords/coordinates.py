"""
Representation of a position in the WGS84 and LV03 reference frames
"""

__all__ = ['LV03', 'WGS84']

from typing import Sequence, Tuple, Union

import numpy as np
from pydantic import validate_call


class _FrameCoordinate:
    """Immutable triple of floats shared by both reference frames"""

    __slots__ = ('_values',)

    def __init__(self, first: float, second: float, height: float):
        object.__setattr__(self, '_values', (first, second, height))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False

        return self._values == other._values

    def __hash__(self):
        return hash((self.__class__.__name__, *self._values))

    def __repr__(self):
        return f'<{self.__class__.__name__}({", ".join(map(str, self._values))})>'

    @classmethod
    def from_float(cls, values: Union[Sequence[float], np.ndarray]):
        """
        Creates a coordinate from a sequence of floats, in field order. The
        height may be omitted, in which case it defaults to 0.

        Args:
            values:
                A list, tuple or 1-dimensional array of length 2 or 3

        Returns:
            An instance of the calling class
        """
        if not isinstance(values, (list, tuple, np.ndarray)):
            raise TypeError(
                f'{cls.__name__} can only be created from a list, tuple or array, '
                f'not {type(values)}'
            )

        if len(values) not in (2, 3):
            raise ValueError(
                f'{cls.__name__} requires 2 or 3 values, received {len(values)}'
            )

        return cls(*values)

    def to_float(self) -> Tuple[float, float, float]:
        """Returns the coordinate as a tuple of floats, in field order"""
        return self._values


class WGS84(_FrameCoordinate):
    """
    A position in the World Geodetic System 1984.

    Args:
        lat:
            Latitude, in decimal degrees

        lng:
            Longitude, in decimal degrees

        height:
            (Default 0.) Ellipsoidal height, in meters
    """

    __slots__ = ()

    @validate_call
    def __init__(self, lat: float, lng: float, height: float = 0.):
        super().__init__(lat, lng, height)

    @property
    def lat(self) -> float:
        return self._values[0]

    @property
    def lng(self) -> float:
        return self._values[1]

    @property
    def height(self) -> float:
        return self._values[2]

    def to_lv03(self) -> 'LV03':
        """Convert this position to the Swiss LV03 grid"""
        from swisscoords.conversion import wgs84_to_lv03  # pylint: disable=import-outside-toplevel
        return wgs84_to_lv03(self.lat, self.lng, self.height)


class LV03(_FrameCoordinate):
    """
    A position on the Swiss national grid (Landesvermessung 1903).

    Args:
        east:
            Easting (Y), in meters

        north:
            Northing (X), in meters

        height:
            (Default 0.) Height above sea level, in meters
    """

    __slots__ = ()

    @validate_call
    def __init__(self, east: float, north: float, height: float = 0.):
        super().__init__(east, north, height)

    @property
    def east(self) -> float:
        return self._values[0]

    @property
    def north(self) -> float:
        return self._values[1]

    @property
    def height(self) -> float:
        return self._values[2]

    def to_wgs84(self) -> WGS84:
        """Convert this position to WGS84"""
        from swisscoords.conversion import lv03_to_wgs84  # pylint: disable=import-outside-toplevel
        return lv03_to_wgs84(self.east, self.north, self.height)
