"""Configuration management for CT scan geometry."""

from .defaults import DEFAULT_RADIUS, HALF_TURN, UPWARD_DIRECTION
from .yaml_config import GeometrySettings, ScanConfig, load_scan_config

__all__ = [
    'DEFAULT_RADIUS',
    'HALF_TURN',
    'UPWARD_DIRECTION',
    'GeometrySettings',
    'ScanConfig',
    'load_scan_config',
]
