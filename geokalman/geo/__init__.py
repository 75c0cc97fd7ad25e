"""
Geographic math for locally linear position tracking.
"""

from .utils import (
    meters_per_degree_lat, meters_per_degree_lng,
    fast_meters_per_degree_lat, fast_meters_per_degree_lng,
    approximate_distance, bearing,
)
from .constants import *

__all__ = [
    "meters_per_degree_lat", "meters_per_degree_lng",
    "fast_meters_per_degree_lat", "fast_meters_per_degree_lng",
    "approximate_distance", "bearing",
]
