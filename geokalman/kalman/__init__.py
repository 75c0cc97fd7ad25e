"""
Linear and geographic Kalman filters.
"""

from .filter import LinearKalmanFilter
from .geo_filter import GeoKalmanFilter, GeoProcessNoise, GeoObservation, GeoEstimate
from .state import Observation, Tracking, Uninitialized
from .models import ProcessNoise, MotionModel, MeasurementModel, process_noise_rates

__all__ = [
    "LinearKalmanFilter", "GeoKalmanFilter",
    "GeoProcessNoise", "GeoObservation", "GeoEstimate",
    "Observation", "Tracking", "Uninitialized",
    "ProcessNoise", "MotionModel", "MeasurementModel", "process_noise_rates",
]
