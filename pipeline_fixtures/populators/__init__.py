"""Setup and teardown strategies for benchmark collections."""

from .base import (
    FunctionSetup,
    FunctionTeardown,
    IndexSpec,
    Setup,
    Teardown,
    as_setup,
    as_teardown,
    sibling,
)
from .multi_entity import LOOKUP_SUFFIX, MultiEntityPopulator, ReferenceShape
from .seeded import SeededPopulator, create_indexes
from .teardown import DropCollection, DropWithSiblings

__all__ = [
    "LOOKUP_SUFFIX",
    "DropCollection",
    "DropWithSiblings",
    "FunctionSetup",
    "FunctionTeardown",
    "IndexSpec",
    "MultiEntityPopulator",
    "ReferenceShape",
    "SeededPopulator",
    "Setup",
    "Teardown",
    "as_setup",
    "as_teardown",
    "create_indexes",
    "sibling",
]
