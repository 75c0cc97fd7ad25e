#!/usr/bin/env python3
"""
Basic usage example of the geographic Kalman filter.

Feeds a fixed sequence of noisy fixes of a mostly stationary device to
the filter and prints the running estimate.
"""

import sys
import os

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from geokalman import Config, GeoKalmanFilter, GeoObservation, SingularMatrixError

# Time passed between fixes (seconds)
TIME_DELTA = 10.0

# Fixes of varying quality around Yorktown Heights, NY
OBSERVED = [
    GeoObservation(lat=41.154874, lng=-73.773139, altitude=105.0, speed_accuracy=0.1,
                   horizontal_accuracy=100.0, vertical_accuracy=10.0),
    GeoObservation(lat=41.155874, lng=-73.773239, altitude=107.0, speed_accuracy=0.1,
                   horizontal_accuracy=50.0, vertical_accuracy=5.0),
    GeoObservation(lat=41.154974, lng=-73.763139, altitude=99.0, speed_accuracy=0.1,
                   horizontal_accuracy=200.0, vertical_accuracy=10.0),
    GeoObservation(lat=41.153874, lng=-73.763139, altitude=50.0, speed_accuracy=0.1,
                   horizontal_accuracy=1000.0, vertical_accuracy=100.0),
    GeoObservation(lat=41.154574, lng=-73.772139, altitude=130.0, speed_accuracy=0.1,
                   horizontal_accuracy=200.0, vertical_accuracy=50.0),
]

def main():
    """Main example function."""
    config_file = sys.argv[1] if len(sys.argv) > 1 else None
    config = Config(config_file)
    config.configure_logging()

    if config_file is None:
        config.set("process_noise.base_latitude", OBSERVED[0].lat)
        config.set("process_noise.distance_per_second", 1.0)
        config.set("process_noise.speed_per_second", 0.1)

    geo_filter = GeoKalmanFilter.from_config(config)

    print("Geographic Kalman Filter - Basic Usage Example")
    print("=" * 50)

    for i, observed in enumerate(OBSERVED):
        try:
            geo_filter.observe(TIME_DELTA, observed)
        except SingularMatrixError as e:
            print(f"Skipping fix {i}: {e}")
            continue

        estimate = geo_filter.estimate()
        print(f"Fix {i}: {observed.lat:.6f}, {observed.lng:.6f} "
              f"(±{observed.horizontal_accuracy:.0f}m)")
        print(f"  Estimate: {estimate.lat:.6f}, {estimate.lng:.6f}, "
              f"alt {estimate.altitude:.1f}m, ±{estimate.horizontal_accuracy:.1f}m, "
              f"speed {estimate.speed:.2f}m/s")

    print()
    print(f"Statistics: {geo_filter.get_statistics()}")

if __name__ == "__main__":
    main()
