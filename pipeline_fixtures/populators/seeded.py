"""Seeded single-collection populator.

Resets a collection, re-seeds its random source, bulk-loads generated
documents and only then builds indexes. Building indexes after the load keeps
index maintenance out of the data load, and seeding at the start of every run
(rather than when the populator is constructed) makes the data independent of
how many other suites were declared earlier in the process.
"""

import random
from typing import List, Optional, Sequence

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from pipeline_fixtures.config import get_settings
from pipeline_fixtures.errors import IndexSetupError
from pipeline_fixtures.generators.documents import DocGenerator, Document, default_doc_generator
from pipeline_fixtures.logging import get_logger

from .base import IndexSpec, Setup

logger = get_logger(__name__)


def index_keys(spec: IndexSpec):
    """Convert a ``{field: kind}`` mapping to the key list pymongo expects."""
    if hasattr(spec, "items"):
        return list(spec.items())
    return list(spec)


def create_indexes(collection: Collection, indices: Sequence[IndexSpec]) -> None:
    """
    Create indexes in declaration order.

    Raises:
        IndexSetupError: On the first index the server rejects
    """
    for position, spec in enumerate(indices):
        try:
            index_name = collection.create_index(index_keys(spec))
        except PyMongoError as e:
            logger.error(
                "index_creation_failed",
                collection=collection.name,
                index=dict(spec) if hasattr(spec, "items") else spec,
                error=str(e),
            )
            raise IndexSetupError(
                "Failed to create index",
                collection=collection.name,
                position=position,
                index=spec,
            ) from e
        logger.debug("index_created", collection=collection.name, index=index_name)


class SeededPopulator(Setup):
    """
    Default setup strategy for single-collection test cases.

    Each ``setup`` call drops the collection, seeds a fresh ``random.Random``
    with the configured seed, generates ``n_docs`` documents in ascending index
    order, inserts them in one unordered bulk write, then creates ``indices``.
    """

    def __init__(
        self,
        n_docs: int,
        indices: Optional[Sequence[IndexSpec]] = None,
        doc_generator: Optional[DocGenerator] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize populator.

        Args:
            n_docs: Number of documents to insert
            indices: Index specifications, created after the load
            doc_generator: Document factory (default: 12 KiB generic documents)
            seed: Random seed (default: settings.seed)
        """
        if n_docs < 0:
            raise ValueError("n_docs must not be negative")
        self.n_docs = n_docs
        self.indices: List[IndexSpec] = list(indices or [])
        self.doc_generator = doc_generator or default_doc_generator
        self.seed = get_settings().seed if seed is None else seed

    def generate(self) -> List[Document]:
        """Produce the full document set for one run, in generation order."""
        rng = random.Random(self.seed)
        return [self.doc_generator(i, rng) for i in range(self.n_docs)]

    def setup(self, collection: Collection) -> None:
        logger.info(
            "populator_started",
            collection=collection.name,
            n_docs=self.n_docs,
            generator=getattr(self.doc_generator, "__name__", repr(self.doc_generator)),
            seed=self.seed,
        )
        collection.drop()

        documents = self.generate()
        if documents:
            result = collection.insert_many(documents, ordered=False)
            logger.info(
                "documents_inserted",
                collection=collection.name,
                inserted=len(result.inserted_ids),
            )

        create_indexes(collection, self.indices)

    def __repr__(self) -> str:
        return (
            f"SeededPopulator(n_docs={self.n_docs}, indices={self.indices!r}, "
            f"doc_generator={getattr(self.doc_generator, '__name__', self.doc_generator)}, "
            f"seed={self.seed})"
        )
