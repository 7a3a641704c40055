"""
Beam records and the domain error for scan geometry generation.
"""

from dataclasses import dataclass
from typing import Tuple

import torch


class InvalidConfiguration(ValueError):
    """Raised when a scan geometry or generation input is out of range."""


@dataclass
class Beam:
    """A single X-ray beam in 2D.

    Parameters
    ----------
    source : tuple of float
        Source position (x, y) in the absolute Cartesian frame.
    direction : tuple of float
        Beam direction (x, y) in the same frame. Not normalised.
    """

    source: Tuple[float, float]
    direction: Tuple[float, float]

    def as_tensor(self, device=None):
        """Return ``[source, direction]`` as a (2, 2) float64 tensor."""
        if device is None:
            device = torch.device('cpu')
        return torch.tensor(
            [self.source, self.direction], dtype=torch.float64, device=device
        )
