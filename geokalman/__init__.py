"""
Kalman filtering of geolocation fixes.

This package provides:
- A linear Kalman filter over 3-D position and velocity
- A geographic adapter working in latitude, longitude and altitude
- Local linearization utilities (meters per degree, distance, bearing)
"""

__version__ = "1.0.0"
__author__ = "GeoKalman Team"

from .kalman import (
    LinearKalmanFilter, GeoKalmanFilter,
    Observation, ProcessNoise,
    GeoObservation, GeoProcessNoise, GeoEstimate,
)
from .errors import GeoKalmanError, InvalidProcessNoiseError, SingularMatrixError
from .config import Config

__all__ = [
    "LinearKalmanFilter",
    "GeoKalmanFilter",
    "Observation",
    "ProcessNoise",
    "GeoObservation",
    "GeoProcessNoise",
    "GeoEstimate",
    "GeoKalmanError",
    "InvalidProcessNoiseError",
    "SingularMatrixError",
    "Config"
]
