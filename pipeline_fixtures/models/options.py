"""Options record accepted by the test case builder."""

from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from pipeline_fixtures.config import get_settings
from pipeline_fixtures.errors import ConfigurationError
from pipeline_fixtures.populators.base import Setup, Teardown, as_setup, as_teardown

# Options that only feed the default populator.
POPULATOR_OPTIONS = frozenset({"indices", "doc_generator", "n_docs"})


class TestCaseOptions(BaseModel):
    """
    Sparse description of one benchmark.

    Only ``name`` and ``pipeline`` are required. ``indices``, ``doc_generator``
    and ``n_docs`` configure the default seeded populator and therefore may not
    be combined with a custom ``pre``. A custom ``post`` may be given on its
    own, e.g. to clean up a collection written by ``$out``.

    Invalid options raise ``ConfigurationError`` whether the record is built
    directly or through ``from_mapping``; the pydantic ``ValidationError`` is
    kept as its cause.
    """

    name: str = Field(..., min_length=1, description="Test name, prefixed with the namespace")
    pipeline: List[Dict[str, Any]] = Field(..., description="Aggregation stages")
    tags: Optional[FrozenSet[str]] = Field(None, description="Tags; defaults from settings")
    indices: Optional[List[Any]] = Field(None, description="Index specs created after the load")
    n_docs: int = Field(
        default_factory=lambda: get_settings().default_n_docs,
        ge=0,
        alias="nDocs",
        description="Documents inserted by the default populator",
    )
    doc_generator: Optional[Any] = Field(
        None, alias="docGenerator", description="(index, rng) -> document"
    )
    pre: Optional[Any] = Field(None, description="Custom Setup or fn(collection)")
    post: Optional[Any] = Field(None, description="Custom Teardown or fn(collection)")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    # Keep pytest from collecting this class.
    __test__: ClassVar[bool] = False

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _configuration_error(e, data.get("name")) from e

    @field_validator("doc_generator")
    @classmethod
    def validate_doc_generator(cls, v: Any) -> Any:
        if v is not None and not callable(v):
            raise ValueError("doc_generator must be callable")
        return v

    @field_validator("pre")
    @classmethod
    def validate_pre(cls, v: Any) -> Optional[Setup]:
        if v is None:
            return None
        if not isinstance(v, Setup) and not callable(v):
            raise ValueError("pre must be a Setup or a callable")
        return as_setup(v)

    @field_validator("post")
    @classmethod
    def validate_post(cls, v: Any) -> Optional[Teardown]:
        if v is None:
            return None
        if not isinstance(v, Teardown) and not callable(v):
            raise ValueError("post must be a Teardown or a callable")
        return as_teardown(v)

    @model_validator(mode="after")
    def validate_override(self) -> "TestCaseOptions":
        """Custom setup replaces the default populator entirely."""
        if self.pre is not None:
            mixed = sorted(POPULATOR_OPTIONS & self.model_fields_set)
            if mixed:
                raise ValueError(
                    f"custom 'pre' cannot be combined with {', '.join(mixed)}; "
                    "those options only configure the default populator"
                )
        return self

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "TestCaseOptions":
        """
        Validate a plain mapping of options.

        Raises:
            ConfigurationError: If a required option is missing or the
                combination is unsupported
        """
        return cls(**dict(options))


def _configuration_error(error: ValidationError, name: Any) -> ConfigurationError:
    return ConfigurationError(
        "Invalid test case options",
        name=name,
        errors=[
            f"{'.'.join(str(p) for p in err['loc']) or 'options'}: {err['msg']}"
            for err in error.errors()
        ],
    )
