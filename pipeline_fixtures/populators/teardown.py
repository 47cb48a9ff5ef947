"""Teardown strategies."""

from typing import Iterable, Tuple

from pymongo.collection import Collection

from pipeline_fixtures.logging import get_logger

from .base import Teardown, sibling

logger = get_logger(__name__)


class DropCollection(Teardown):
    """Default teardown: drop the single benchmark collection."""

    def teardown(self, collection: Collection) -> None:
        collection.drop()
        logger.debug("collection_dropped", collection=collection.name)

    def __repr__(self) -> str:
        return "DropCollection()"


class DropWithSiblings(Teardown):
    """
    Drop the benchmark collection and every ``<name><suffix>`` sibling.

    Needed whenever setup or the pipeline itself (e.g. an ``$out`` stage)
    creates more than the one collection the runner knows about.
    """

    def __init__(self, suffixes: Iterable[str]):
        self.suffixes: Tuple[str, ...] = tuple(suffixes)

    def teardown(self, collection: Collection) -> None:
        collection.drop()
        for suffix in self.suffixes:
            sibling(collection, suffix).drop()
        logger.debug(
            "collections_dropped",
            collection=collection.name,
            suffixes=list(self.suffixes),
        )

    def __repr__(self) -> str:
        return f"DropWithSiblings({self.suffixes!r})"
