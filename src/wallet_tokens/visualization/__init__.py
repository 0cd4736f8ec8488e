"""Visualization helpers for :mod:`wallet_tokens`."""

from .visualizer import Visualizer

__all__ = ["Visualizer"]
