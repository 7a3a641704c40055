"""Utility functions for CT scan geometry."""

from .tensors import beams_to_tensors

__all__ = [
    'beams_to_tensors',
]
