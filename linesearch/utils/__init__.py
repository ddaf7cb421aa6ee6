"""Utility functions."""

from .benchmark import Benchmarker, BenchmarkResults

__all__ = ['Benchmarker', 'BenchmarkResults']
