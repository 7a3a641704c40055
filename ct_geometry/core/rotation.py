"""
Rotation of baseline beams around the scan centre.

A baseline is the set of source positions and beam directions at rotation
angle zero. Sweeping it through a sequence of angles yields every beam of
the scan, ordered by angle first and by source second.
"""

import math

import torch

from ..config.defaults import HALF_TURN
from .beam import Beam, InvalidConfiguration


def rotation_angles(rotation_step, device=None):
    """
    Angles ``0, step, 2*step, ...`` strictly below π.

    The angle at π is never produced since the symmetric baselines repeat
    themselves there. A multiple of the step that evaluates to π in floating
    point, such as ``3 * (π / 3)``, is dropped as well.

    Parameters
    ----------
    rotation_step : float
        Angular increment in radians, must be positive.
    device : torch.device, optional
        Device to place the tensor on (default: CPU)

    Returns
    -------
    torch.Tensor
        1D float64 tensor of rotation angles in radians.
    """
    if device is None:
        device = torch.device('cpu')
    if rotation_step <= 0:
        raise InvalidConfiguration("Rotation step must be positive.")

    n_candidates = math.ceil(HALF_TURN / rotation_step) + 1
    steps = torch.arange(n_candidates, dtype=torch.float64, device=device)
    angles = steps * rotation_step
    return angles[angles < HALF_TURN]


def rotation_matrices(angles, device=None):
    """
    Stack of 2D rotation matrices, one per angle.

    Parameters
    ----------
    angles : sequence of float or torch.Tensor
        Rotation angles in radians.
    device : torch.device, optional
        Device to place tensors on (default: CPU)

    Returns
    -------
    torch.Tensor
        Tensor of shape (M, 2, 2) where entry m is
        ``[[cos, -sin], [sin, cos]]`` of ``angles[m]``.
    """
    if device is None:
        device = torch.device('cpu')
    theta = torch.as_tensor(angles, dtype=torch.float64, device=device).reshape(-1)
    cos_t = torch.cos(theta)
    sin_t = torch.sin(theta)
    return torch.stack(
        [
            torch.stack([cos_t, -sin_t], dim=-1),
            torch.stack([sin_t, cos_t], dim=-1),
        ],
        dim=-2,
    )


def generate_from_baseline(
    baseline_x_positions,
    baseline_y_positions,
    baseline_x_directions,
    baseline_y_directions,
    rotation_angles,
    device=None,
):
    """
    Rotate baseline beams through every angle in ``rotation_angles``.

    Parameters
    ----------
    baseline_x_positions, baseline_y_positions : sequence of float
        Source coordinates at rotation angle zero.
    baseline_x_directions, baseline_y_directions : sequence of float
        Beam direction components at rotation angle zero.
    rotation_angles : sequence of float
        Rotation angles in radians. May be empty.
    device : torch.device, optional
        Device used for the computation (default: CPU)

    Returns
    -------
    list of Beam
        ``len(rotation_angles) * N`` beams. The beam at index ``a*N + i``
        is baseline ``i`` rotated by ``rotation_angles[a]``.

    Raises
    ------
    InvalidConfiguration
        If the four baseline sequences differ in length.
    """
    if device is None:
        device = torch.device('cpu')

    num_sources = len(baseline_x_positions)
    if (
        len(baseline_y_positions) != num_sources
        or len(baseline_x_directions) != num_sources
        or len(baseline_y_directions) != num_sources
    ):
        raise InvalidConfiguration("All baseline vectors must have the same length.")

    def _column(values):
        return torch.as_tensor(values, dtype=torch.float64, device=device).reshape(-1)

    positions = torch.stack(
        [_column(baseline_x_positions), _column(baseline_y_positions)], dim=-1
    )
    directions = torch.stack(
        [_column(baseline_x_directions), _column(baseline_y_directions)], dim=-1
    )

    # (M, 2, 2) x (N, 2) -> (M, N, 2), flattened angle-major
    R = rotation_matrices(rotation_angles, device=device)
    rotated_positions = torch.einsum('mij,nj->mni', R, positions).reshape(-1, 2)
    rotated_directions = torch.einsum('mij,nj->mni', R, directions).reshape(-1, 2)

    return [
        Beam(source=(src[0], src[1]), direction=(dir_[0], dir_[1]))
        for src, dir_ in zip(rotated_positions.tolist(), rotated_directions.tolist())
    ]
