"""
Geographic utility functions for local linearization.
"""

import math
import numpy as np

from .constants import (
    DEG_TO_RAD, RAD_TO_DEG, APPROXIMATE_REFERENCE_LAT,
    LAT_SERIES_A0, LAT_SERIES_A2, LAT_SERIES_A4, LAT_SERIES_A6,
    LNG_SERIES_B1, LNG_SERIES_B3, LNG_SERIES_B5,
)

def meters_per_degree_lat(lat):
    """
    Length of one degree of latitude at the given latitude.
    
    Args:
        lat (float): Latitude in degrees
        
    Returns:
        float: Meters per degree latitude
    """
    lat_rad = lat * DEG_TO_RAD
    return (LAT_SERIES_A0
            - LAT_SERIES_A2 * math.cos(2 * lat_rad)
            + LAT_SERIES_A4 * math.cos(4 * lat_rad)
            - LAT_SERIES_A6 * math.cos(6 * lat_rad))

def meters_per_degree_lng(lat):
    """
    Length of one degree of longitude at the given latitude.
    
    Collapses toward zero at the poles.
    
    Args:
        lat (float): Latitude in degrees
        
    Returns:
        float: Meters per degree longitude
    """
    lat_rad = lat * DEG_TO_RAD
    return (LNG_SERIES_B1 * math.cos(lat_rad)
            - LNG_SERIES_B3 * math.cos(3 * lat_rad)
            + LNG_SERIES_B5 * math.cos(5 * lat_rad))

# Meters-per-degree tables at whole degrees, linearly interpolated in between
_TABLE_LATS = np.arange(-90.0, 91.0, 1.0)
_LAT_TABLE = np.array([meters_per_degree_lat(lat) for lat in _TABLE_LATS])
_LNG_TABLE = np.array([meters_per_degree_lng(lat) for lat in _TABLE_LATS])

def fast_meters_per_degree_lat(lat):
    """
    Table-driven approximation of meters_per_degree_lat.
    
    Exact at whole degrees and within a few centimeters in between.
    """
    return float(np.interp(lat, _TABLE_LATS, _LAT_TABLE))

def fast_meters_per_degree_lng(lat):
    """
    Table-driven approximation of meters_per_degree_lng.
    
    Exact at whole degrees and within a few meters in between.
    """
    return float(np.interp(lat, _TABLE_LATS, _LNG_TABLE))

APPROXIMATE_METERS_PER_DEGREE_LAT = meters_per_degree_lat(APPROXIMATE_REFERENCE_LAT)
APPROXIMATE_METERS_PER_DEGREE_LNG = meters_per_degree_lng(APPROXIMATE_REFERENCE_LAT)

def approximate_distance(lat1, lng1, lat2, lng2):
    """
    Approximate distance between two nearby points.
    
    Uses fixed meters-per-degree factors taken at a 40 degree reference
    latitude, so it is only meaningful over short spans.
    
    Args:
        lat1, lng1: First point (degrees)
        lat2, lng2: Second point (degrees)
        
    Returns:
        float: Distance in meters
    """
    delta_lat = (lat1 - lat2) * APPROXIMATE_METERS_PER_DEGREE_LAT
    delta_lng = (lng1 - lng2) * APPROXIMATE_METERS_PER_DEGREE_LNG
    return math.sqrt(delta_lat * delta_lat + delta_lng * delta_lng)

def bearing(lat1, lng1, lat2, lng2):
    """
    Direction from point 1 to point 2.
    
    Args:
        lat1, lng1: Starting point (degrees)
        lat2, lng2: Ending point (degrees)
        
    Returns:
        float: Degrees from north in [0, 360)
    """
    return heading_degrees(lat2 - lat1, lng2 - lng1)

def heading_degrees(north, east):
    """Angle from north of a (north, east) vector, in [0, 360)."""
    d = math.atan2(east, north) * RAD_TO_DEG
    if d < 0.0:
        d += 360.0
    return d
