"""
Scan geometries for 2D CT acquisition.

Two geometries are supported:

``ParallelBeam``
    A bank of parallel sources spread across a chord of the scan circle.
``FanBeam``
    A single apex on the scan circle emitting a fan of beams.

Both are immutable and validated on construction. ``generate`` turns a
geometry and a radius of rotation into the full list of beams.
"""

import math
import numbers
from dataclasses import dataclass
from typing import List, Union

import torch

from ..config.defaults import UPWARD_DIRECTION
from .beam import Beam, InvalidConfiguration
from .rotation import generate_from_baseline, rotation_angles


def _as_float(value, message):
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(message) from None


def _check_num_sources(num_sources):
    if isinstance(num_sources, bool) or not isinstance(num_sources, numbers.Integral):
        raise InvalidConfiguration("Number of sources must be a positive integer.")
    if num_sources <= 0:
        raise InvalidConfiguration("Number of sources must be a positive integer.")


_ROTATION_STEP_MESSAGE = "Rotation step must be in (0, π)."


def _check_rotation_step(rotation_step):
    if not 0.0 < rotation_step < math.pi:
        raise InvalidConfiguration(_ROTATION_STEP_MESSAGE)


@dataclass(frozen=True)
class ParallelBeam:
    """Parallel beam scan geometry.

    Parameters
    ----------
    width_ratio : float
        Distance between the two outermost sources as a fraction of the
        diameter of rotation, in [0, 1]. Must be zero for a single source.
    num_sources : int
        Number of sources spread along the width.
    rotation_step : float
        Rotation increment in radians, in (0, π).

    Raises
    ------
    InvalidConfiguration
        If any parameter is out of range.
    """

    width_ratio: float
    num_sources: int
    rotation_step: float

    def __post_init__(self):
        message = "Width ratio must be in [0, 1]."
        object.__setattr__(self, 'width_ratio', _as_float(self.width_ratio, message))
        if not 0.0 <= self.width_ratio <= 1.0:
            raise InvalidConfiguration(message)
        _check_num_sources(self.num_sources)
        if self.num_sources == 1 and self.width_ratio != 0.0:
            raise InvalidConfiguration(
                "Width ratio must be zero if the number of sources is one."
            )
        if self.num_sources != 1 and self.width_ratio == 0.0:
            raise InvalidConfiguration(
                "Width ratio must be non-zero if the number of sources is "
                "greater than one."
            )
        object.__setattr__(
            self, 'rotation_step', _as_float(self.rotation_step, _ROTATION_STEP_MESSAGE)
        )
        _check_rotation_step(self.rotation_step)

    def generate(self, radius, verbose=False, device=None) -> List[Beam]:
        """Beams of this geometry for a radius of rotation. See ``generate``."""
        return generate(self, radius, verbose=verbose, device=device)


@dataclass(frozen=True)
class FanBeam:
    """Fan beam scan geometry.

    Parameters
    ----------
    angle : float
        Opening angle of the fan in radians, in [0, π]. Must be zero for a
        single source.
    num_sources : int
        Number of beams emanating from the apex.
    rotation_step : float
        Rotation increment in radians, in (0, π).

    Raises
    ------
    InvalidConfiguration
        If any parameter is out of range.
    """

    angle: float
    num_sources: int
    rotation_step: float

    def __post_init__(self):
        message = "Angle must be in [0, π]."
        object.__setattr__(self, 'angle', _as_float(self.angle, message))
        if not 0.0 <= self.angle <= math.pi:
            raise InvalidConfiguration(message)
        _check_num_sources(self.num_sources)
        if self.num_sources == 1 and self.angle != 0.0:
            raise InvalidConfiguration(
                "Angle must be zero if the number of sources is one."
            )
        if self.num_sources != 1 and self.angle == 0.0:
            raise InvalidConfiguration(
                "Angle must be non-zero if the number of sources is greater than one."
            )
        object.__setattr__(
            self, 'rotation_step', _as_float(self.rotation_step, _ROTATION_STEP_MESSAGE)
        )
        _check_rotation_step(self.rotation_step)

    def generate(self, radius, verbose=False, device=None) -> List[Beam]:
        """Beams of this geometry for a radius of rotation. See ``generate``."""
        return generate(self, radius, verbose=verbose, device=device)


ScanGeometry = Union[ParallelBeam, FanBeam]


def _parallel_baseline(geometry: ParallelBeam, radius: float, device):
    half_width = radius * geometry.width_ratio
    x_positions = torch.linspace(
        -half_width, half_width, geometry.num_sources,
        dtype=torch.float64, device=device,
    )
    # Sources sit on the lower half of the scan circle
    y_positions = -torch.sqrt(torch.clamp(radius**2 - x_positions**2, min=0.0))

    x_directions = torch.full(
        (geometry.num_sources,), UPWARD_DIRECTION[0], dtype=torch.float64, device=device
    )
    y_directions = torch.full(
        (geometry.num_sources,), UPWARD_DIRECTION[1], dtype=torch.float64, device=device
    )
    return x_positions, y_positions, x_directions, y_directions


def _fan_baseline(geometry: FanBeam, radius: float, device):
    x_positions = torch.zeros(geometry.num_sources, dtype=torch.float64, device=device)
    y_positions = torch.full(
        (geometry.num_sources,), -radius, dtype=torch.float64, device=device
    )

    half_angle = geometry.angle / 2
    beam_angles = torch.linspace(
        -half_angle, half_angle, geometry.num_sources,
        dtype=torch.float64, device=device,
    ) + math.pi / 2
    return x_positions, y_positions, torch.cos(beam_angles), torch.sin(beam_angles)


def generate(geometry: ScanGeometry, radius: float, verbose=False, device=None) -> List[Beam]:
    """
    Source positions and beam directions of a scan.

    The baseline layout (rotation angle zero) is derived from the geometry
    and then swept through the angles ``0, step, 2*step, ...`` below π.

    Parameters
    ----------
    geometry : ParallelBeam or FanBeam
        Validated scan geometry.
    radius : float
        Radius of rotation around the scanned object. Must be positive.
    verbose : bool, optional
        Print a summary of the generated scan (default: False)
    device : torch.device, optional
        Device used for the computation (default: CPU)

    Returns
    -------
    list of Beam
        Beams ordered by rotation angle, then by source.

    Raises
    ------
    InvalidConfiguration
        If ``radius`` is not positive.
    TypeError
        If ``geometry`` is not a supported scan geometry.
    """
    if device is None:
        device = torch.device('cpu')

    if isinstance(geometry, ParallelBeam):
        make_baseline = _parallel_baseline
    elif isinstance(geometry, FanBeam):
        make_baseline = _fan_baseline
    else:
        raise TypeError(
            f"Unsupported scan geometry: {type(geometry).__name__}"
        )

    if not radius > 0:
        raise InvalidConfiguration("Radius of rotation must be a positive value.")

    baseline = make_baseline(geometry, float(radius), device)
    angles = rotation_angles(geometry.rotation_step, device=device)
    beams = generate_from_baseline(*baseline, angles, device=device)

    if verbose:
        print(
            f"{type(geometry).__name__}: {geometry.num_sources} sources x "
            f"{len(angles)} rotation angles -> {len(beams)} beams "
            f"(radius {float(radius):g})"
        )

    return beams
