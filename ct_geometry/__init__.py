"""
CT Scan Geometry

A Python package describing the acquisition geometry of a 2D CT scanner:
parallel and fan beam layouts swept around the scanned object.
"""

__version__ = "0.1.0"

# Import main classes and functions for convenient access
from .core.beam import Beam, InvalidConfiguration
from .core.rotation import generate_from_baseline, rotation_angles, rotation_matrices
from .core.scan_geometry import FanBeam, ParallelBeam, ScanGeometry, generate
from .utils.tensors import beams_to_tensors
from .config.yaml_config import ScanConfig, load_scan_config
from .visualization.geometry_plots import plot_beams

# Define what gets imported with "from ct_geometry import *"
__all__ = [
    # Beams and geometries
    'Beam',
    'InvalidConfiguration',
    'ParallelBeam',
    'FanBeam',
    'ScanGeometry',

    # Beam generation
    'generate',
    'generate_from_baseline',
    'rotation_angles',
    'rotation_matrices',

    # Utilities
    'beams_to_tensors',

    # YAML config
    'ScanConfig',
    'load_scan_config',

    # Visualization
    'plot_beams',
]
