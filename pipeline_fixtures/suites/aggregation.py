"""Aggregation pipeline regression benchmarks."""

from typing import Optional

from pipeline_fixtures.builder import TestCaseBuilder
from pipeline_fixtures.generators import (
    geo_2d_doc_generator,
    geo_2dsphere_doc_generator,
    group_doc_generator,
    id_only_doc_generator,
    large_unwind_doc_generator,
    projection_doc_generator,
    redact_doc_generator,
    sort_doc_generator,
    unwind_doc_generator,
)
from pipeline_fixtures.logging import get_logger, log_context
from pipeline_fixtures.populators import (
    LOOKUP_SUFFIX,
    DropWithSiblings,
    MultiEntityPopulator,
    ReferenceShape,
)
from pipeline_fixtures.registry import SuiteRegistry

logger = get_logger(__name__)

OUT_SUFFIX = "_tmp_out"


def _geo_near(spherical: bool = False) -> dict:
    stage = {
        "near": [0, 0],
        "minDistance": 0,
        "maxDistance": 300,
        "distanceField": "foo",
        "query": {"boolFilter": True},
    }
    if spherical:
        stage["spherical"] = True
    return {"$geoNear": stage}


def declare_single_stage(registry: SuiteRegistry, builder: TestCaseBuilder) -> None:
    lookup_from = builder.collection_placeholder + LOOKUP_SUFFIX

    registry.register({"name": "Empty", "pipeline": []}, builder)

    registry.register({
        "name": "GeoNear2d",
        "doc_generator": geo_2d_doc_generator,
        "indices": [{"geo": "2d"}],
        "pipeline": [_geo_near()],
    }, builder)

    registry.register({
        "name": "GeoNear2dSphere",
        "doc_generator": geo_2dsphere_doc_generator,
        "indices": [{"geo": "2dsphere"}],
        "pipeline": [_geo_near(spherical=True)],
    }, builder)

    registry.register({
        "name": "Group.All",
        "pipeline": [{"$group": {"_id": "constant"}}],
    }, builder)

    registry.register({
        "name": "Group.TenGroups",
        "doc_generator": group_doc_generator,
        "pipeline": [{"$group": {"_id": "$_idMod10"}}],
    }, builder)

    registry.register({
        "name": "Group.TenGroupsWithAvg",
        "doc_generator": group_doc_generator,
        "pipeline": [{"$group": {"_id": "$_idMod10", "avg": {"$avg": "$_id"}}}],
    }, builder)

    registry.register({
        "name": "Limit",
        "n_docs": 500,
        "pipeline": [{"$limit": 250}],
    }, builder)

    # $lookup needs a second collection, so setup and teardown are custom.
    lookup = MultiEntityPopulator(shape=ReferenceShape.ONE_TO_ONE)
    registry.register({
        "name": "Lookup",
        "pre": lookup,
        "post": lookup,
        "pipeline": [{
            "$lookup": {
                "from": lookup_from,
                "localField": "foreignKey",
                "foreignField": "_id",
                "as": "match",
            }
        }],
    }, builder)

    orders = MultiEntityPopulator(shape=ReferenceShape.FAN_OUT)
    registry.register({
        "name": "LookupOrders",
        "pre": orders,
        "post": orders,
        "pipeline": [
            {"$unwind": "$products"},
            {
                "$lookup": {
                    "from": lookup_from,
                    "localField": "products._id",
                    "foreignField": "_id",
                    "as": "product",
                }
            },
        ],
    }, builder)

    # $project first so the $match is not pushed down into the query layer.
    registry.register({
        "name": "Match",
        "n_docs": 500,
        "doc_generator": id_only_doc_generator,
        "pipeline": [
            {"$project": {"_id": 0, "_idTimes10": {"$multiply": ["$_id", 10]}}},
            {"$match": {"_idTimes10": {"$lt": 2500}}},
        ],
    }, builder)

    registry.register({
        "name": "Out",
        "post": DropWithSiblings([OUT_SUFFIX]),
        "pipeline": [{"$out": builder.collection_placeholder + OUT_SUFFIX}],
    }, builder)

    registry.register({
        "name": "Project",
        "doc_generator": projection_doc_generator,
        "pipeline": [{"$project": {"_id": 0, "x": 1, "y": 1}}],
    }, builder)

    registry.register({
        "name": "Redact",
        "doc_generator": redact_doc_generator,
        "pipeline": [{
            "$redact": {
                "$cond": {
                    "if": "$has_permissions",
                    "then": "$$DESCEND",
                    "else": "$$PRUNE",
                }
            }
        }],
    }, builder)

    registry.register({
        "name": "Sample.SmallSample",
        "n_docs": 500,
        "pipeline": [{"$sample": {"size": 5}}],
    }, builder)

    registry.register({
        "name": "Sample.LargeSample",
        "n_docs": 500,
        "pipeline": [{"$sample": {"size": 200}}],
    }, builder)

    registry.register({
        "name": "Skip",
        "n_docs": 500,
        "pipeline": [{"$skip": 250}],
    }, builder)

    registry.register({
        "name": "Sort",
        "doc_generator": sort_doc_generator,
        "pipeline": [{"$sort": {"x": 1}}],
    }, builder)

    registry.register({
        "name": "Unwind",
        "doc_generator": unwind_doc_generator,
        "pipeline": [{"$unwind": {"path": "$array", "includeArrayIndex": "index"}}],
    }, builder)


def declare_multi_stage(registry: SuiteRegistry, builder: TestCaseBuilder) -> None:
    """Pipelines the optimizer should be able to rewrite to some extent."""
    registry.register({
        "name": "SortWithLimit",
        "doc_generator": sort_doc_generator,
        "pipeline": [{"$sort": {"x": 1}}, {"$limit": 10}],
    }, builder)

    registry.register({
        "name": "UnwindThenGroup",
        "doc_generator": large_unwind_doc_generator,
        "pipeline": [
            {"$unwind": "$array"},
            {"$group": {"_id": "$array", "count": {"$sum": 1}}},
        ],
    }, builder)


def declare_aggregation_suite(
    registry: Optional[SuiteRegistry] = None,
    builder: Optional[TestCaseBuilder] = None,
) -> SuiteRegistry:
    """
    Declare every aggregation benchmark.

    Args:
        registry: Registry to append to (a new one if omitted)
        builder: Builder to use (the registry's if omitted)

    Returns:
        The registry holding the declared test cases
    """
    if registry is None:
        registry = SuiteRegistry(builder)
    builder = builder or registry.builder

    with log_context(suite="aggregation"):
        declare_single_stage(registry, builder)
        declare_multi_stage(registry, builder)

    logger.info("aggregation_suite_declared", test_cases=len(registry))
    return registry
