"""
Tensor conversion utilities for generated beams.

Downstream ray tracers work on stacked coordinates rather than on lists of
``Beam`` records; these helpers provide that view.
"""

import torch


def beams_to_tensors(beams, device=None):
    """
    Stack beam sources and directions into tensors.

    Parameters
    ----------
    beams : list of Beam
        Beams as returned by ``generate`` or ``generate_from_baseline``.
    device : torch.device, optional
        Device to place tensors on (default: CPU)

    Returns
    -------
    sources : torch.Tensor
        Float64 tensor of shape (len(beams), 2).
    directions : torch.Tensor
        Float64 tensor of shape (len(beams), 2).
    """
    if device is None:
        device = torch.device('cpu')

    if not beams:
        empty = torch.empty((0, 2), dtype=torch.float64, device=device)
        return empty, empty.clone()

    sources = torch.tensor(
        [beam.source for beam in beams], dtype=torch.float64, device=device
    )
    directions = torch.tensor(
        [beam.direction for beam in beams], dtype=torch.float64, device=device
    )
    return sources, directions
