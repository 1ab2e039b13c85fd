"""
Constants declarations for swisscoords
"""

# LV03 grid offsets of the Bern origin (meters, military to civil)
LV03_EAST_OFFSET = 600000.
LV03_NORTH_OFFSET = 200000.

# Bern origin in sexagesimal seconds
BERN_LAT_SEX = 169028.66
BERN_LNG_SEX = 26782.5

# Units of the auxiliary values
GRID_UNIT = 1000000.  # 1000 km
ANGLE_UNIT = 10000.  # 10000"

# Mean offset between LV03 heights and WGS84 ellipsoidal heights (meters)
HEIGHT_OFFSET = 49.55
