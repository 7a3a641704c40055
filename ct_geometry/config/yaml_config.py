"""
YAML configuration loading for CT scan geometries.

A scan configuration names the geometry type with its parameters and the
radius of rotation, e.g.::

    geometry:
      type: fan
      angle: 1.0
      num_sources: 11
      rotation_step: 0.1
    scan:
      radius: 2.5
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import torch
import yaml

from .defaults import DEFAULT_RADIUS

GEOMETRY_TYPES = ('parallel', 'fan')


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class GeometrySettings:
    """Scan geometry specification.

    Parameters
    ----------
    type : str
        ``'parallel'`` or ``'fan'``.
    num_sources : int
        Number of sources (parallel) or beams in the fan.
    rotation_step : float
        Rotation increment in radians.
    width_ratio : float or None
        Width ratio, parallel geometries only.
    angle : float or None
        Fan angle in radians, fan geometries only.
    """

    type: str
    num_sources: int
    rotation_step: float
    width_ratio: Optional[float] = None
    angle: Optional[float] = None

    def build(self):
        """Construct the validated geometry object.

        Raises
        ------
        InvalidConfiguration
            If the type is unknown, its shape parameter is missing, or a
            value is out of range.
        """
        from ..core.beam import InvalidConfiguration
        from ..core.scan_geometry import FanBeam, ParallelBeam

        if self.type == 'parallel':
            if self.width_ratio is None:
                raise InvalidConfiguration("Parallel geometry requires 'width_ratio'.")
            return ParallelBeam(self.width_ratio, self.num_sources, self.rotation_step)
        if self.type == 'fan':
            if self.angle is None:
                raise InvalidConfiguration("Fan geometry requires 'angle'.")
            return FanBeam(self.angle, self.num_sources, self.rotation_step)
        raise InvalidConfiguration(
            f"Unknown geometry type '{self.type}', expected one of {GEOMETRY_TYPES}"
        )


@dataclass
class ScanConfig:
    """Complete configuration for generating the beams of a scan.

    Loaded by ``load_scan_config(path)``.
    """

    geometry: GeometrySettings
    radius: float = DEFAULT_RADIUS
    device: Optional[str] = None
    verbose: bool = False

    @property
    def torch_device(self) -> torch.device:
        return torch.device(self.device) if self.device else torch.device('cpu')

    def build_geometry(self):
        """Validated ``ParallelBeam`` or ``FanBeam`` for this config."""
        return self.geometry.build()

    def generate(self):
        """Beams of the configured scan. See ``ct_geometry.generate``."""
        from ..core.scan_geometry import generate

        return generate(
            self.build_geometry(),
            self.radius,
            verbose=self.verbose,
            device=self.torch_device,
        )

    @classmethod
    def from_dict(cls, raw: dict) -> 'ScanConfig':
        """Create a configuration from a parsed YAML mapping.

        Raises
        ------
        KeyError
            If the ``geometry`` section or one of its required keys is missing.
        """
        scan_raw = raw.get("scan") or {}
        return cls(
            geometry=_parse_geometry(raw["geometry"]),
            radius=scan_raw.get("radius", DEFAULT_RADIUS),
            device=raw.get("device"),
            verbose=raw.get("verbose", False),
        )

    def to_dict(self) -> dict:
        geometry = {
            "type": self.geometry.type,
            "num_sources": self.geometry.num_sources,
            "rotation_step": self.geometry.rotation_step,
        }
        if self.geometry.width_ratio is not None:
            geometry["width_ratio"] = self.geometry.width_ratio
        if self.geometry.angle is not None:
            geometry["angle"] = self.geometry.angle
        return {
            "geometry": geometry,
            "scan": {"radius": self.radius},
            "device": self.device,
            "verbose": self.verbose,
        }


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


def _parse_geometry(raw: dict) -> GeometrySettings:
    return GeometrySettings(
        type=str(raw["type"]).lower(),
        num_sources=raw["num_sources"],
        rotation_step=raw["rotation_step"],
        width_ratio=raw.get("width_ratio"),
        angle=raw.get("angle"),
    )


def load_scan_config(path: Union[str, Path]) -> ScanConfig:
    """Load a scan configuration from a YAML file.

    Parameters
    ----------
    path : str or Path
        Path to the YAML configuration file.

    Returns
    -------
    ScanConfig

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    KeyError
        If required fields are missing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    return ScanConfig.from_dict(raw or {})
