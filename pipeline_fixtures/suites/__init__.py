"""Benchmark suite declarations."""

from .aggregation import declare_aggregation_suite

__all__ = ["declare_aggregation_suite"]
