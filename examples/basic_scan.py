"""
    Driver code drawing the beams of a parallel and a fan beam scan.
"""

import math

import matplotlib.pyplot as plt

from ct_geometry import FanBeam, ParallelBeam, generate, plot_beams

RADIUS = 1.0


def main():
    parallel = ParallelBeam(width_ratio=0.8, num_sources=9, rotation_step=math.pi / 6)
    fan = FanBeam(angle=math.pi / 3, num_sources=9, rotation_step=math.pi / 6)

    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    for geometry, ax in zip((parallel, fan), axes):
        beams = generate(geometry, RADIUS, verbose=True)
        # Only the baseline, the full sweep is unreadable
        plot_beams(beams[:geometry.num_sources], radius=RADIUS, ax=ax, title=type(geometry).__name__)

    plt.tight_layout()
    plt.show()


if __name__ == '__main__':
    main()
