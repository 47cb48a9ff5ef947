"""Setup and teardown strategies handed to the benchmark runner."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Sequence, Union

from pymongo.collection import Collection

IndexSpec = Union[Mapping[str, Any], Sequence[Any]]


class Setup(ABC):
    """Prepares state before a test case runs. Must be safe to re-run."""

    @abstractmethod
    def setup(self, collection: Collection) -> None:
        """Populate ``collection`` (and any siblings) from scratch."""


class Teardown(ABC):
    """Removes whatever setup and execution left behind."""

    @abstractmethod
    def teardown(self, collection: Collection) -> None:
        """Drop state created for ``collection``."""


class FunctionSetup(Setup):
    """Adapts a plain ``fn(collection)`` to the Setup interface."""

    def __init__(self, fn: Callable[[Collection], None]):
        self._fn = fn

    def setup(self, collection: Collection) -> None:
        self._fn(collection)

    def __repr__(self) -> str:
        return f"FunctionSetup({getattr(self._fn, '__name__', self._fn)!r})"


class FunctionTeardown(Teardown):
    """Adapts a plain ``fn(collection)`` to the Teardown interface."""

    def __init__(self, fn: Callable[[Collection], None]):
        self._fn = fn

    def teardown(self, collection: Collection) -> None:
        self._fn(collection)

    def __repr__(self) -> str:
        return f"FunctionTeardown({getattr(self._fn, '__name__', self._fn)!r})"


def as_setup(value: Union[Setup, Callable[[Collection], None]]) -> Setup:
    if isinstance(value, Setup):
        return value
    return FunctionSetup(value)


def as_teardown(value: Union[Teardown, Callable[[Collection], None]]) -> Teardown:
    if isinstance(value, Teardown):
        return value
    return FunctionTeardown(value)


def sibling(collection: Collection, suffix: str) -> Collection:
    """Collection in the same database named ``<collection name><suffix>``."""
    return collection.database[collection.name + suffix]
