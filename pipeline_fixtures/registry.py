"""Ordered collection of declared test cases."""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from pipeline_fixtures.builder import TestCaseBuilder
from pipeline_fixtures.errors import DuplicateTestCaseError
from pipeline_fixtures.logging import LoggerMixin
from pipeline_fixtures.models import TestCase, TestCaseOptions


class SuiteRegistry(LoggerMixin):
    """
    Accumulates test cases in declaration order.

    Created explicitly by whoever declares a suite and handed whole to the
    runner. Names are unique within a registry.
    """

    def __init__(self, builder: Optional[TestCaseBuilder] = None):
        self.builder = builder or TestCaseBuilder()
        self._cases: Dict[str, TestCase] = {}

    def add(self, test_case: TestCase) -> TestCase:
        if test_case.name in self._cases:
            raise DuplicateTestCaseError("Test case already registered", name=test_case.name)
        self._cases[test_case.name] = test_case
        self.logger.debug("test_case_registered", name=test_case.name, total=len(self._cases))
        return test_case

    def register(
        self,
        options: Union[TestCaseOptions, Mapping[str, Any]],
        builder: Optional[TestCaseBuilder] = None,
    ) -> TestCase:
        """Build ``options`` and append the result."""
        return self.add((builder or self.builder).build(options))

    def get(self, name: str) -> Optional[TestCase]:
        return self._cases.get(name)

    def names(self) -> List[str]:
        return list(self._cases)

    def with_tag(self, tag: str) -> List[TestCase]:
        return [case for case in self._cases.values() if tag in case.tags]

    def to_list(self) -> List[Dict[str, Any]]:
        """All test cases in the runner's dict shape."""
        return [case.to_dict() for case in self._cases.values()]

    def __iter__(self) -> Iterator[TestCase]:
        return iter(list(self._cases.values()))

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, name: object) -> bool:
        return name in self._cases
