"""
Kalman filter over geographic coordinates and altitude.

Internally the linear filter tracks [lat, lng, altitude, vlat, vlng,
valtitude] in degrees, meters, degrees per second and meters per second.
Meters are converted to degrees with meters-per-degree factors taken at
the latitude of each fix (or of the current estimate), so the flat-earth
approximation is relinearized on every call.
"""

import logging
import math
import numpy as np
from dataclasses import dataclass
from typing import Optional, Dict, Any
from .filter import LinearKalmanFilter
from .models import ProcessNoise
from .state import Observation, X, Y
from ..geo.utils import fast_meters_per_degree_lat, fast_meters_per_degree_lng, heading_degrees
from ..geo.constants import SQRT_2, DEG_TO_RAD, INCLINE_FACTOR, MIN_SPEED_ACCURACY

logger = logging.getLogger(__name__)

@dataclass
class GeoProcessNoise:
    """Expected random walk in geographic terms."""

    # Latitude at which distances are converted to degrees
    base_latitude: float = 0.0

    # Expected random walk distance per second (meters)
    distance_per_second: float = 0.0

    # Expected speed change per second (m/s)
    speed_per_second: float = 0.0

@dataclass
class GeoObservation:
    """A single geolocation fix."""

    lat: float
    lng: float
    altitude: float = 0.0

    speed: float = 0.0                 # m/s
    speed_accuracy: float = 0.0        # m/s
    direction: float = 0.0             # degrees from north, [0, 360)
    direction_accuracy: float = 0.0    # degrees

    horizontal_accuracy: float = 0.0   # meters
    vertical_accuracy: float = 0.0     # meters

@dataclass
class GeoEstimate:
    """Location estimated from the observed fixes."""

    lat: float
    lng: float
    altitude: float
    speed: float                       # m/s
    direction: float                   # degrees from north, [0, 360)
    horizontal_accuracy: float         # meters

def speed_lat_accuracy(speed, speed_accuracy, direction_rad, direction_rad_accuracy, meters_per_degree_lat):
    """
    Accuracy of the latitude velocity component, in degrees per second.

    Propagates speed and direction errors linearly and floors the result
    at MIN_SPEED_ACCURACY.
    """
    ds = math.cos(direction_rad) / meters_per_degree_lat * speed_accuracy
    dr = -speed * math.sin(direction_rad) / meters_per_degree_lat * direction_rad_accuracy
    return max(math.sqrt(ds * ds + dr * dr), MIN_SPEED_ACCURACY / meters_per_degree_lat)

def speed_lng_accuracy(speed, speed_accuracy, direction_rad, direction_rad_accuracy, meters_per_degree_lng):
    """Accuracy of the longitude velocity component, in degrees per second."""
    ds = math.sin(direction_rad) / meters_per_degree_lng * speed_accuracy
    dr = speed * math.cos(direction_rad) / meters_per_degree_lng * direction_rad_accuracy
    return max(math.sqrt(ds * ds + dr * dr), MIN_SPEED_ACCURACY / meters_per_degree_lng)

class GeoKalmanFilter:
    """
    Tracks position, altitude and velocity from geolocation fixes.
    """

    def __init__(self, process_noise: Optional[GeoProcessNoise] = None):
        """
        Initialize the filter.

        Horizontal random walk is split evenly between latitude and
        longitude; vertical random walk is the horizontal one scaled by
        the sine of a fixed incline.

        Args:
            process_noise: Expected random walk, no process noise if omitted

        Raises:
            InvalidProcessNoiseError: propagated from the linear filter
        """
        self.process_noise = process_noise or GeoProcessNoise()
        d = self.process_noise

        meters_per_degree_lat = fast_meters_per_degree_lat(d.base_latitude)
        meters_per_degree_lng = fast_meters_per_degree_lng(d.base_latitude)

        self.filter = LinearKalmanFilter(ProcessNoise(
            sx=d.distance_per_second / SQRT_2 / meters_per_degree_lat,
            sy=d.distance_per_second / SQRT_2 / meters_per_degree_lng,
            sz=d.distance_per_second * INCLINE_FACTOR,
            svx=d.speed_per_second / SQRT_2 / meters_per_degree_lat,
            svy=d.speed_per_second / SQRT_2 / meters_per_degree_lng,
            svz=d.speed_per_second * INCLINE_FACTOR,
            st=1.0
        ))

        logger.debug(f"Geo filter created: {self.process_noise}")

    @classmethod
    def from_config(cls, config) -> 'GeoKalmanFilter':
        """Create a filter from the process noise section of a Config."""
        return cls(config.geo_process_noise)

    @property
    def is_initialized(self) -> bool:
        return self.filter.is_initialized

    def observe(self, dt: float, observed: GeoObservation):
        """
        Process a single fix.

        Args:
            dt: Seconds since the previous fix
            observed: The fix

        Raises:
            SingularMatrixError: propagated from the linear filter
        """
        self.filter.observe(dt, self._to_observation(observed))

    def _to_observation(self, ob: GeoObservation) -> Observation:
        """Convert a fix into the linear filter's units."""
        meters_per_degree_lat = fast_meters_per_degree_lat(ob.lat)
        meters_per_degree_lng = fast_meters_per_degree_lng(ob.lat)
        direction_rad = ob.direction * DEG_TO_RAD
        direction_rad_accuracy = ob.direction_accuracy * DEG_TO_RAD

        return Observation(
            x=ob.lat,
            y=ob.lng,
            z=ob.altitude,
            vx=ob.speed * math.cos(direction_rad) / meters_per_degree_lat,
            vy=ob.speed * math.sin(direction_rad) / meters_per_degree_lng,
            vz=0.0,  # Vertical speed is not observed
            xa=ob.horizontal_accuracy / meters_per_degree_lat,
            ya=ob.horizontal_accuracy / meters_per_degree_lng,
            za=ob.vertical_accuracy,
            vxa=speed_lat_accuracy(ob.speed, ob.speed_accuracy, direction_rad,
                                   direction_rad_accuracy, meters_per_degree_lat),
            vya=speed_lng_accuracy(ob.speed, ob.speed_accuracy, direction_rad,
                                   direction_rad_accuracy, meters_per_degree_lng),
            vza=MIN_SPEED_ACCURACY
        )

    def estimate(self) -> Optional[GeoEstimate]:
        """
        Get the best location estimate.

        Returns:
            GeoEstimate, or None if nothing was observed yet
        """
        track = self.filter.estimate()
        if track is None:
            return None

        (lat, lng, altitude), velocity = track.position, track.velocity
        P = track.covariance
        meters_per_degree_lat = fast_meters_per_degree_lat(lat)
        meters_per_degree_lng = fast_meters_per_degree_lng(lat)

        speed_lat_meters = velocity[0] * meters_per_degree_lat
        speed_lng_meters = velocity[1] * meters_per_degree_lng
        speed = math.sqrt(speed_lat_meters ** 2 + speed_lng_meters ** 2)
        direction = heading_degrees(speed_lat_meters, speed_lng_meters)

        # Conservative scalar bound: the larger of the two axis deviations.
        # Rounding can leave a variance slightly negative, which yields NaN.
        with np.errstate(invalid='ignore'):
            ha_lat = float(np.sqrt(P[X, X])) * meters_per_degree_lat
            ha_lng = float(np.sqrt(P[Y, Y])) * meters_per_degree_lng

        return GeoEstimate(
            lat=float(lat),
            lng=float(lng),
            altitude=float(altitude),
            speed=speed,
            direction=direction,
            horizontal_accuracy=float(np.maximum(ha_lat, ha_lng))
        )

    def reset(self):
        """Discard all observations."""
        self.filter.reset()

    def get_statistics(self) -> Dict[str, Any]:
        """Get filter statistics."""
        stats = self.filter.get_statistics()
        stats['process_noise'] = {
            'base_latitude': self.process_noise.base_latitude,
            'distance_per_second': self.process_noise.distance_per_second,
            'speed_per_second': self.process_noise.speed_per_second
        }
        return stats
