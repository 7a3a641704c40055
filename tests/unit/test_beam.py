"""Tests for the Beam record."""

import torch

from ct_geometry import Beam


def test_beam_holds_source_and_direction():
    beam = Beam((1.0, 2.0), (0.0, 1.0))
    assert beam.source == (1.0, 2.0)
    assert beam.direction == (0.0, 1.0)


def test_beam_fields_can_be_reassigned():
    beam = Beam((1.0, 2.0), (0.0, 1.0))
    beam.source = (3.0, 4.0)
    beam.direction = (1.0, 0.0)
    assert beam.source == (3.0, 4.0)
    assert beam.direction == (1.0, 0.0)


def test_beam_equality_is_by_value():
    assert Beam((1.0, 2.0), (0.0, 1.0)) == Beam((1.0, 2.0), (0.0, 1.0))
    assert Beam((1.0, 2.0), (0.0, 1.0)) != Beam((1.0, 2.0), (1.0, 0.0))


def test_beam_direction_is_not_normalised():
    beam = Beam((0.0, 0.0), (3.0, 4.0))
    assert beam.direction == (3.0, 4.0)


def test_beam_as_tensor(device):
    tensor = Beam((1.0, 2.0), (0.0, 1.0)).as_tensor(device)
    assert tensor.shape == (2, 2)
    assert tensor.dtype == torch.float64
    assert torch.equal(tensor.cpu(), torch.tensor([[1.0, 2.0], [0.0, 1.0]], dtype=torch.float64))
