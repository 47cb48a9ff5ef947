"""Models describing test cases and the options used to build them."""

from .options import TestCaseOptions
from .test_case import CommandSpec, OperationDescriptor, Stage, TestCase

__all__ = [
    "CommandSpec",
    "OperationDescriptor",
    "Stage",
    "TestCase",
    "TestCaseOptions",
]
