"""
Unit tests for the suite registry.
"""

import pytest

from pipeline_fixtures.builder import TestCaseBuilder
from pipeline_fixtures.errors import DuplicateTestCaseError
from pipeline_fixtures.registry import SuiteRegistry


class TestSuiteRegistry:
    """Test accumulating test cases"""

    def test_register_in_order(self):
        """Test declaration order is preserved"""
        registry = SuiteRegistry()

        for name in ["B", "A", "C"]:
            registry.register({"name": name, "pipeline": []})

        assert registry.names() == ["Aggregation.B", "Aggregation.A", "Aggregation.C"]
        assert [case.name for case in registry] == registry.names()
        assert len(registry) == 3

    def test_register_returns_test_case(self):
        """Test register hands back what it stored"""
        registry = SuiteRegistry()

        test_case = registry.register({"name": "X", "pipeline": []})

        assert registry.get("Aggregation.X") is test_case
        assert "Aggregation.X" in registry
        assert registry.get("Aggregation.Y") is None

    def test_duplicate_name(self):
        """Test names are unique within a registry"""
        registry = SuiteRegistry()
        registry.register({"name": "X", "pipeline": []})

        with pytest.raises(DuplicateTestCaseError):
            registry.register({"name": "X", "pipeline": [{"$limit": 1}]})

        assert len(registry) == 1

    def test_registries_are_independent(self):
        """Test there is no shared module-level accumulator"""
        first, second = SuiteRegistry(), SuiteRegistry()

        first.register({"name": "X", "pipeline": []})

        assert len(second) == 0

    def test_builder_override(self):
        """Test a per-call builder takes precedence"""
        registry = SuiteRegistry()

        registry.register({"name": "X", "pipeline": []}, TestCaseBuilder(namespace="Other"))

        assert registry.names() == ["Other.X"]

    def test_with_tag(self):
        """Test filtering by tag"""
        registry = SuiteRegistry()
        registry.register({"name": "A", "pipeline": []})
        registry.register({"name": "B", "pipeline": [], "tags": ["core"]})

        assert [c.name for c in registry.with_tag("core")] == ["Aggregation.B"]
        assert [c.name for c in registry.with_tag("regression")] == ["Aggregation.A"]

    def test_to_list_runner_shape(self, collection):
        """Test the exported shape matches what the runner reads"""
        registry = SuiteRegistry()
        registry.register({"name": "A", "pipeline": [{"$limit": 1}], "n_docs": 0})

        (entry,) = registry.to_list()

        assert set(entry) == {"tags", "name", "pre", "post", "ops"}
        assert entry["tags"] == {"aggregation", "regression"}
        assert entry["ops"][0]["command"]["pipeline"] == [{"$limit": 1}, {"$skip": 1_000_000_000}]
        entry["post"](collection)
        collection.drop.assert_called_once()

    def test_exported_pipeline_is_a_copy(self):
        """Test editing exported stages leaves the test case intact"""
        registry = SuiteRegistry()
        test_case = registry.register({"name": "A", "pipeline": [{"$match": {"a": 1}}]})

        registry.to_list()[0]["ops"][0]["command"]["pipeline"][0]["$match"]["a"] = 2

        assert test_case.pipeline[0] == {"$match": {"a": 1}}
