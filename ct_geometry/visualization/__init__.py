"""Visualization and plotting utilities."""

from .geometry_plots import plot_beams

__all__ = [
    'plot_beams',
]
