"""
Plotting functions for generated scan geometries.

Draws beam sources as points and beam directions as short segments so a
scan layout can be inspected by eye.
"""

import matplotlib.pyplot as plt
import numpy as np

from ..utils.tensors import beams_to_tensors

# Default font sizes for geometry plots
_LABEL_FONTSIZE = 14
_TITLE_FONTSIZE = 16


def plot_beams(beams, radius=None, ax=None, length=None, title=None):
    """
    Plot beam sources and directions.

    Parameters
    ----------
    beams : list of Beam
        Beams to draw.
    radius : float, optional
        Radius of rotation. When given, the scan circle is drawn and used as
        the default segment length.
    ax : matplotlib.axes.Axes, optional
        Axes to draw into. A new figure is created if omitted.
    length : float, optional
        Length of the direction segments (default: ``2 * radius`` or 1).
    title : str, optional
        Axes title.

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure

    if length is None:
        length = 2.0 * radius if radius is not None else 1.0

    if radius is not None:
        phi = np.linspace(0.0, 2.0 * np.pi, 361)
        ax.plot(radius * np.cos(phi), radius * np.sin(phi), color='grey', lw=1, ls='--')

    sources, directions = beams_to_tensors(beams)
    sources = sources.cpu().numpy()
    directions = directions.cpu().numpy()

    if len(sources):
        ends = sources + length * directions
        for start, end in zip(sources, ends):
            ax.plot([start[0], end[0]], [start[1], end[1]], color='tab:orange', lw=0.5, alpha=0.6)
        ax.scatter(sources[:, 0], sources[:, 1], s=10, color='black', zorder=3)

    ax.set_aspect('equal')
    ax.set_xlabel('x', fontsize=_LABEL_FONTSIZE)
    ax.set_ylabel('y', fontsize=_LABEL_FONTSIZE)
    if title is not None:
        ax.set_title(title, fontsize=_TITLE_FONTSIZE)

    return fig, ax
