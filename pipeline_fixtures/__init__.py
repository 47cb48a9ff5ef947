"""Deterministic fixture builder for aggregation pipeline benchmarks."""

from .builder import MATERIALIZING_STAGES, TestCaseBuilder, is_materializing
from .config import FixtureSettings, get_settings
from .errors import (
    ConfigurationError,
    DuplicateTestCaseError,
    ErrorCategory,
    FixtureError,
    IndexSetupError,
    PoolBoundsError,
)
from .models import CommandSpec, OperationDescriptor, TestCase, TestCaseOptions
from .registry import SuiteRegistry

__version__ = "0.1.0"

__all__ = [
    "MATERIALIZING_STAGES",
    "CommandSpec",
    "ConfigurationError",
    "DuplicateTestCaseError",
    "ErrorCategory",
    "FixtureError",
    "FixtureSettings",
    "IndexSetupError",
    "OperationDescriptor",
    "PoolBoundsError",
    "SuiteRegistry",
    "TestCase",
    "TestCaseBuilder",
    "TestCaseOptions",
    "get_settings",
    "is_materializing",
]
