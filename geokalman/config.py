"""
Configuration manager for geographic filters.
"""

import copy
import json
import logging
import os
from typing import Dict, Any, Optional
from .kalman.geo_filter import GeoProcessNoise

logger = logging.getLogger(__name__)

class Config:
    """Filter configuration backed by an optional JSON file."""
    
    DEFAULT_CONFIG = {
        # Geographic process noise
        "process_noise": {
            "base_latitude": 0.0,
            "distance_per_second": 0.0,
            "speed_per_second": 0.0
        },
        
        # Logging
        "log_level": "INFO"
    }
    
    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.
        
        Args:
            config_file: Path to configuration file, defaults only if None
        """
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        
        if config_file is None:
            return
        
        if os.path.exists(config_file):
            self.load_config()
        else:
            logger.info(f"Config file {config_file} not found, using defaults")
    
    def load_config(self) -> bool:
        """
        Load configuration from file.
        
        Returns:
            True if loaded successfully
        """
        if self.config_file is None:
            logger.warning("No config file set, nothing to load")
            return False
        
        try:
            with open(self.config_file, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config from {self.config_file}: {e}")
            return False
        
        # File config overrides defaults
        self._merge_config(self.config, file_config)
        
        logger.info(f"Configuration loaded from {self.config_file}")
        return True
    
    def save_config(self) -> bool:
        """
        Save current configuration to file.
        
        Returns:
            True if saved successfully
        """
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save config to {self.config_file}: {e}")
            return False
        
        logger.info(f"Configuration saved to {self.config_file}")
        return True
    
    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value
    
    def get(self, key: str, default=None):
        """Get configuration value by dotted key."""
        value = self.config
        
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        
        return value
    
    def set(self, key: str, value: Any):
        """Set configuration value by dotted key."""
        keys = key.split('.')
        config = self.config
        
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]
        
        config[keys[-1]] = value
    
    @property
    def process_noise(self) -> Dict[str, float]:
        return self.config["process_noise"]
    
    @property
    def geo_process_noise(self) -> GeoProcessNoise:
        noise = self.process_noise
        return GeoProcessNoise(
            base_latitude=float(noise["base_latitude"]),
            distance_per_second=float(noise["distance_per_second"]),
            speed_per_second=float(noise["speed_per_second"])
        )
    
    @property
    def log_level(self) -> str:
        return self.config["log_level"]
    
    def configure_logging(self):
        """Configure root logging at the configured level."""
        logging.basicConfig(
            level=self.log_level.upper(),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s"
        )
