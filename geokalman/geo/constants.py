"""
Geographic and filter constants.
"""

import math

# Mathematical constants
SQRT_2 = math.sqrt(2.0)
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Meters per degree latitude series: a0 - a2*cos(2φ) + a4*cos(4φ) - a6*cos(6φ)
LAT_SERIES_A0 = 111132.92
LAT_SERIES_A2 = 559.82
LAT_SERIES_A4 = 1.175
LAT_SERIES_A6 = 0.0023

# Meters per degree longitude series: b1*cos(φ) - b3*cos(3φ) + b5*cos(5φ)
LNG_SERIES_B1 = 111412.84
LNG_SERIES_B3 = 93.5
LNG_SERIES_B5 = 0.118

# Reference latitude for approximate short-span distances (degrees)
APPROXIMATE_REFERENCE_LAT = 40.0

# Geographic filter parameters
MIN_SPEED_ACCURACY = 0.1   # Velocity accuracy floor (m/s)
INCLINE_DEG = 5.0          # Assumed incline used to derive vertical random walk
INCLINE_FACTOR = math.sin(INCLINE_DEG * DEG_TO_RAD)
