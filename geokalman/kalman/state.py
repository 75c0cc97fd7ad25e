"""
Observation and filter state representation.
"""

import numpy as np
from dataclasses import dataclass
from typing import Union

# Symbolic indexes into the state vector
X, Y, Z, VX, VY, VZ = range(6)
STATE_SIZE = 6

@dataclass
class Observation:
    """
    A single observation of the full state.
    
    Observation vector: [x, y, z, vx, vy, vz]
    Each component carries its own accuracy (one standard deviation).
    """
    
    # Position
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    
    # Velocity
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    
    # Position accuracy
    xa: float = 0.0
    ya: float = 0.0
    za: float = 0.0
    
    # Velocity accuracy
    vxa: float = 0.0
    vya: float = 0.0
    vza: float = 0.0
    
    @property
    def values(self) -> np.ndarray:
        """Get observed values as numpy vector."""
        return np.array([self.x, self.y, self.z, self.vx, self.vy, self.vz], dtype=float)
    
    @values.setter
    def values(self, vector: np.ndarray):
        if len(vector) != STATE_SIZE:
            raise ValueError("Observation vector must have 6 elements")
        self.x, self.y, self.z, self.vx, self.vy, self.vz = (float(v) for v in vector)
    
    @property
    def accuracies(self) -> np.ndarray:
        """Get per-axis accuracies as numpy vector."""
        return np.array([self.xa, self.ya, self.za, self.vxa, self.vya, self.vza], dtype=float)
    
    @accuracies.setter
    def accuracies(self, vector: np.ndarray):
        if len(vector) != STATE_SIZE:
            raise ValueError("Accuracy vector must have 6 elements")
        self.xa, self.ya, self.za, self.vxa, self.vya, self.vza = (float(v) for v in vector)

class Uninitialized:
    """Filter state before the first observation."""
    
    def __repr__(self) -> str:
        return "Uninitialized()"

UNINITIALIZED = Uninitialized()

@dataclass(frozen=True, eq=False)
class Tracking:
    """
    Filter state once observations have been fused.
    
    state: [x, y, z, vx, vy, vz]
    covariance: 6x6 uncertainty of state
    """
    
    state: np.ndarray
    covariance: np.ndarray
    
    def copy(self) -> 'Tracking':
        return Tracking(state=self.state.copy(), covariance=self.covariance.copy())
    
    @property
    def position(self) -> np.ndarray:
        return self.state[X:VX].copy()
    
    @property
    def velocity(self) -> np.ndarray:
        return self.state[VX:].copy()
    
FilterState = Union[Uninitialized, Tracking]
