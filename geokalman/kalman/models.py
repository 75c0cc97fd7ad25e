"""
Process noise, motion and measurement models for the linear Kalman filter.
"""

import numpy as np
from dataclasses import dataclass
from .state import X, Y, Z, VX, VY, VZ, STATE_SIZE
from ..errors import InvalidProcessNoiseError

@dataclass
class ProcessNoise:
    """
    Expected random walk of the tracked point.
    
    sx, sy, sz: random step of each coordinate per st
    svx, svy, svz: random step of each velocity component per st
    st: time normalizer the steps refer to
    """
    
    sx: float = 0.0
    sy: float = 0.0
    sz: float = 0.0
    svx: float = 0.0
    svy: float = 0.0
    svz: float = 0.0
    st: float = 0.0
    
    @property
    def steps(self) -> np.ndarray:
        return np.array([self.sx, self.sy, self.sz, self.svx, self.svy, self.svz], dtype=float)

def process_noise_rates(noise: ProcessNoise) -> np.ndarray:
    """
    Convert random walk steps into per-axis variance growth rates.
    
    Args:
        noise: Random walk parameters
        
    Returns:
        Vector of six variance rates, step**2 / st
        
    Raises:
        InvalidProcessNoiseError: a step is non-zero but st is not positive
    """
    steps = noise.steps
    if not np.any(steps != 0.0):
        return np.zeros(STATE_SIZE)
    if noise.st <= 0.0:
        raise InvalidProcessNoiseError(
            f"random walk steps require a positive time normalizer, got st={noise.st}"
        )
    return steps * steps / noise.st

class MotionModel:
    """
    Constant velocity motion model.
    
    State: [x, y, z, vx, vy, vz]
    """
    
    @staticmethod
    def transition_matrix(dt: float) -> np.ndarray:
        """
        State transition for a time step.
        
        Args:
            dt: Time step
            
        Returns:
            6x6 transition matrix F
        """
        F = np.eye(STATE_SIZE)
        
        # Position advances by velocity
        F[X, VX] = dt
        F[Y, VY] = dt
        F[Z, VZ] = dt
        
        return F
    
    @staticmethod
    def process_noise_matrix(rates: np.ndarray, dt: float) -> np.ndarray:
        """
        Process noise covariance accumulated over a time step.
        
        Args:
            rates: Per-axis variance rates from process_noise_rates()
            dt: Time step
            
        Returns:
            6x6 diagonal process noise matrix Q
        """
        return np.diag(rates * dt)

class MeasurementModel:
    """
    The full state is observed directly, so the observation operator is
    the identity and only the noise depends on the observation.
    """
    
    @staticmethod
    def observation_noise_matrix(accuracies: np.ndarray) -> np.ndarray:
        """
        Observation noise covariance from per-axis accuracies.
        
        Args:
            accuracies: Standard deviation of each observed component
            
        Returns:
            6x6 diagonal matrix R
        """
        return np.diag(np.asarray(accuracies, dtype=float) ** 2)
