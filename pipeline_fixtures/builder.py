"""Builds fully specified test cases from sparse options."""

import copy
from typing import Any, Iterable, List, Mapping, Optional, Union

from pipeline_fixtures.config import get_settings
from pipeline_fixtures.errors import ConfigurationError
from pipeline_fixtures.logging import get_logger
from pipeline_fixtures.models import CommandSpec, OperationDescriptor, Stage, TestCase, TestCaseOptions
from pipeline_fixtures.populators import DropCollection, SeededPopulator, Setup, Teardown

logger = get_logger(__name__)

# Stages that write results to a collection and must stay last.
MATERIALIZING_STAGES = frozenset({"$out", "$merge"})


def is_materializing(stage: Stage) -> bool:
    return any(key in MATERIALIZING_STAGES for key in stage)


class TestCaseBuilder:
    """
    Turns a ``TestCaseOptions`` record into a ``TestCase``.

    Defaults (namespace, placeholders, bypass size, tags) come from
    ``FixtureSettings`` unless passed explicitly. Explicit values are
    checked as strictly as the settings are, so an empty namespace or a
    non-positive bypass size raises ``ConfigurationError``.
    """

    __test__ = False

    def __init__(
        self,
        namespace: Optional[str] = None,
        db_placeholder: Optional[str] = None,
        collection_placeholder: Optional[str] = None,
        bypass_skip: Optional[int] = None,
        default_tags: Optional[Iterable[str]] = None,
    ):
        settings = get_settings()
        self.namespace = settings.namespace if namespace is None else namespace
        self.db_placeholder = settings.db_placeholder if db_placeholder is None else db_placeholder
        self.collection_placeholder = (
            settings.collection_placeholder
            if collection_placeholder is None
            else collection_placeholder
        )
        self.bypass_skip = settings.bypass_skip if bypass_skip is None else bypass_skip
        self.default_tags = frozenset(
            settings.default_tags if default_tags is None else default_tags
        )

        if not self.namespace or "." in self.namespace:
            raise ConfigurationError("Namespace must be non-empty and contain no '.'", namespace=self.namespace)
        if not self.db_placeholder or not self.collection_placeholder:
            raise ConfigurationError(
                "Placeholders must be non-empty",
                db_placeholder=self.db_placeholder,
                collection_placeholder=self.collection_placeholder,
            )
        if self.bypass_skip <= 0:
            raise ConfigurationError("Bypass skip count must be positive", bypass_skip=self.bypass_skip)

    @property
    def bypass_stage(self) -> Stage:
        return {"$skip": self.bypass_skip}

    def qualified_name(self, name: str) -> str:
        return f"{self.namespace}.{name}"

    def normalize_pipeline(self, pipeline: List[Stage]) -> List[Stage]:
        """
        Return a copy of ``pipeline`` ending in a bypass ``$skip``.

        The skip discards every result so the measurement covers the stages
        rather than cursor serialization. Empty pipelines and pipelines ending
        in a materializing stage are returned unchanged.
        """
        normalized = list(pipeline)
        if normalized and not is_materializing(normalized[-1]):
            normalized.append(self.bypass_stage)
        return normalized

    def resolve_setup(self, options: TestCaseOptions) -> Setup:
        if options.pre is not None:
            return options.pre
        return SeededPopulator(
            n_docs=options.n_docs,
            indices=options.indices or [],
            doc_generator=options.doc_generator,
        )

    def resolve_teardown(self, options: TestCaseOptions) -> Teardown:
        if options.post is not None:
            return options.post
        return DropCollection()

    def build(self, options: Union[TestCaseOptions, Mapping[str, Any]]) -> TestCase:
        """
        Build a test case.

        Args:
            options: Options record, or a mapping validated into one

        Returns:
            Immutable TestCase with a single aggregate operation

        Raises:
            ConfigurationError: If required options are missing or a custom
                ``pre`` is mixed with default-populator options
        """
        if not isinstance(options, TestCaseOptions):
            options = TestCaseOptions.from_mapping(options)

        # The stored stages must not share dicts with the caller.
        pipeline = copy.deepcopy(self.normalize_pipeline(options.pipeline))
        command = CommandSpec(
            aggregate=self.collection_placeholder,
            pipeline=tuple(pipeline),
        )
        test_case = TestCase(
            name=self.qualified_name(options.name),
            tags=self.default_tags if options.tags is None else frozenset(options.tags),
            setup=self.resolve_setup(options),
            teardown=self.resolve_teardown(options),
            ops=(OperationDescriptor(ns=self.db_placeholder, command=command),),
        )

        logger.debug(
            "test_case_built",
            name=test_case.name,
            stages=len(pipeline),
            bypass_appended=len(pipeline) != len(options.pipeline),
            setup=repr(test_case.setup),
        )
        return test_case
