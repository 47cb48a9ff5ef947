"""Document generators and filler strings used to populate benchmark data."""

from .documents import (
    DEFAULT_STRING_SIZE,
    DocGenerator,
    Document,
    default_doc_generator,
    geo_2d_doc_generator,
    geo_2dsphere_doc_generator,
    group_doc_generator,
    id_only_doc_generator,
    large_unwind_doc_generator,
    object_id_from,
    projection_doc_generator,
    redact_doc_generator,
    sort_doc_generator,
    unwind_doc_generator,
)
from .string_pool import BoundedStringPool, default_pool, get_string_of_length

__all__ = [
    "DEFAULT_STRING_SIZE",
    "BoundedStringPool",
    "DocGenerator",
    "Document",
    "default_doc_generator",
    "default_pool",
    "geo_2d_doc_generator",
    "geo_2dsphere_doc_generator",
    "get_string_of_length",
    "group_doc_generator",
    "id_only_doc_generator",
    "large_unwind_doc_generator",
    "object_id_from",
    "projection_doc_generator",
    "redact_doc_generator",
    "sort_doc_generator",
    "unwind_doc_generator",
]
