"""Pytest configuration and fixtures for CT scan geometry tests."""

import math

import matplotlib
import pytest
import torch

matplotlib.use('Agg')


@pytest.fixture(scope="session")
def device():
    """Get the default device for testing."""
    return torch.device('cuda' if torch.cuda.is_available() else 'cpu')


@pytest.fixture
def quarter_turn_baseline():
    """Two-source baseline rotated once by a quarter turn."""
    return {
        'x_positions': [0.0, 1.0],
        'y_positions': [-1.0, 0.0],
        'x_directions': [-1.0, 0.0],
        'y_directions': [0.0, 1.0],
        'rotation_angles': [math.pi / 2],
    }


@pytest.fixture
def scan_config_file(tmp_path):
    """Write a fan beam scan configuration and return its path."""
    path = tmp_path / "scan.yaml"
    path.write_text(
        "geometry:\n"
        "  type: fan\n"
        "  angle: 1.0\n"
        "  num_sources: 5\n"
        "  rotation_step: 0.5\n"
        "scan:\n"
        "  radius: 2.0\n"
        "device: cpu\n"
    )
    return path
