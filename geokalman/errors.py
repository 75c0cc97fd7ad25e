"""
Exceptions raised by the filters.
"""

import numpy as np

class GeoKalmanError(Exception):
    """Base class for filter errors."""

class InvalidProcessNoiseError(GeoKalmanError, ValueError):
    """Random walk steps were given without a positive time normalizer."""

class SingularMatrixError(GeoKalmanError, np.linalg.LinAlgError):
    """The innovation covariance of an update could not be inverted."""
