"""
Linear Kalman filter over position and velocity in three axes.
"""

import logging
import numpy as np
from typing import Optional, Dict, Any
from .state import Observation, Tracking, FilterState, UNINITIALIZED, STATE_SIZE
from .models import ProcessNoise, MotionModel, MeasurementModel, process_noise_rates
from ..errors import SingularMatrixError

logger = logging.getLogger(__name__)

class LinearKalmanFilter:
    """
    Kalman filter for a point moving with constant velocity.

    The first observation initializes the filter; every later observation
    runs a predict step over the elapsed time followed by an update step.
    """

    def __init__(self, process_noise: Optional[ProcessNoise] = None):
        """
        Initialize the filter.

        Args:
            process_noise: Expected random walk, no process noise if omitted

        Raises:
            InvalidProcessNoiseError: process noise parameters are inconsistent
        """
        self.process_noise = process_noise or ProcessNoise()
        self._rates = process_noise_rates(self.process_noise)
        self._track: FilterState = UNINITIALIZED

        # Statistics
        self.observation_count = 0
        self.update_count = 0
        self.rejected_count = 0

    @property
    def is_initialized(self) -> bool:
        return isinstance(self._track, Tracking)

    @property
    def state(self) -> Optional[np.ndarray]:
        """Current state vector, None before the first observation."""
        if not self.is_initialized:
            return None
        return self._track.state.copy()

    @property
    def covariance(self) -> Optional[np.ndarray]:
        """Current state covariance, None before the first observation."""
        if not self.is_initialized:
            return None
        return self._track.covariance.copy()

    def observe(self, dt: float, observation: Observation):
        """
        Process a single observation.

        Args:
            dt: Time since the previous observation
            observation: Observed state and accuracies

        Raises:
            SingularMatrixError: innovation covariance is exactly singular;
                the filter is left unchanged. Ill-conditioned but
                invertible innovation covariances are not rejected.
        """
        values = observation.values
        accuracies = observation.accuracies

        if not self.is_initialized:
            self._track = Tracking(
                state=values,
                covariance=MeasurementModel.observation_noise_matrix(accuracies)
            )
            self.observation_count += 1
            logger.debug("Filter initialized from first observation")
            return

        state = self._track.state
        P = self._track.covariance

        # Predict
        F = MotionModel.transition_matrix(dt)
        predicted_state = F @ state
        predicted_P = F @ P @ F.T + MotionModel.process_noise_matrix(self._rates, dt)

        # Update
        R = MeasurementModel.observation_noise_matrix(accuracies)
        S = predicted_P + R
        try:
            S_inv = np.linalg.inv(S)
        except np.linalg.LinAlgError as e:
            self.rejected_count += 1
            logger.warning(f"Observation rejected, singular innovation covariance (dt={dt:.3f}s)")
            raise SingularMatrixError("innovation covariance is singular") from e

        K = predicted_P @ S_inv
        innovation = values - predicted_state
        I = np.eye(STATE_SIZE)

        self._track = Tracking(
            state=predicted_state + K @ innovation,
            covariance=(I - K) @ predicted_P
        )

        self.observation_count += 1
        self.update_count += 1
        logger.debug(f"Update applied: dt={dt:.3f}s, innovation={np.linalg.norm(innovation):.6g}")

    def estimate(self) -> Optional[Tracking]:
        """Get a copy of the current state and covariance, None if never observed."""
        if not self.is_initialized:
            return None
        return self._track.copy()

    def get_uncertainty(self) -> Optional[np.ndarray]:
        """Get current state uncertainty (standard deviation per axis)."""
        if not self.is_initialized:
            return None
        return np.sqrt(np.diag(self._track.covariance))

    def reset(self):
        """Discard the state and return to the uninitialized filter."""
        self._track = UNINITIALIZED

        # Reset counters
        self.observation_count = 0
        self.update_count = 0
        self.rejected_count = 0

    def get_statistics(self) -> Dict[str, Any]:
        """Get filter statistics."""
        uncertainty = self.get_uncertainty()
        return {
            'initialized': self.is_initialized,
            'observations': self.observation_count,
            'updates': self.update_count,
            'rejected': self.rejected_count,
            'state_uncertainty': uncertainty.tolist() if uncertainty is not None else None
        }
