"""Beams, scan geometries and beam generation."""

from .beam import Beam, InvalidConfiguration
from .rotation import generate_from_baseline, rotation_angles, rotation_matrices
from .scan_geometry import FanBeam, ParallelBeam, ScanGeometry, generate

__all__ = [
    'Beam',
    'InvalidConfiguration',
    'ParallelBeam',
    'FanBeam',
    'ScanGeometry',
    'generate',
    'generate_from_baseline',
    'rotation_angles',
    'rotation_matrices',
]
