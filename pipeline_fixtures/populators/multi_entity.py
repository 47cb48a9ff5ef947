"""Two-collection populator for join benchmarks.

The runner only hands setup a single collection. That collection is treated
as the join source; the lookup target lives next to it under the same name
plus a suffix (``_lookup`` by default), which is also what pipelines refer to
through ``"#B_COLL_lookup"``.
"""

import random
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Tuple

from pymongo.collection import Collection

from pipeline_fixtures.config import get_settings
from pipeline_fixtures.generators.documents import Document, object_id_from
from pipeline_fixtures.logging import get_logger

from .base import Setup, Teardown, sibling

logger = get_logger(__name__)

LOOKUP_SUFFIX = "_lookup"
DEFAULT_MAX_FAN_OUT = 100
MAX_QUANTITY = 20


class ReferenceShape(str, Enum):
    """How source documents point at target documents."""

    ONE_TO_ONE = "one_to_one"
    FAN_OUT = "fan_out"


class MultiEntityPopulator(Setup, Teardown):
    """
    Populate a source collection and its lookup target in a single pass.

    With ``ONE_TO_ONE`` source document ``i`` is ``{_id: i, foreignKey: i}``.
    With ``FAN_OUT`` each source document is an order holding a random number
    (below ``max_fan_out``) of ``{_id, quantity}`` entries whose ``_id`` is
    drawn from ``[0, n_docs)``. Target documents are ``{_id: i}`` in both
    shapes, so every reference resolves.

    Also serves as the matching teardown, since the default one only knows
    about the source collection.
    """

    def __init__(
        self,
        n_docs: Optional[int] = None,
        shape: ReferenceShape = ReferenceShape.ONE_TO_ONE,
        suffix: str = LOOKUP_SUFFIX,
        seed: Optional[int] = None,
        max_fan_out: int = DEFAULT_MAX_FAN_OUT,
    ):
        settings = get_settings()
        self.n_docs = settings.default_n_docs if n_docs is None else n_docs
        if self.n_docs < 0:
            raise ValueError("n_docs must not be negative")
        if shape == ReferenceShape.FAN_OUT and max_fan_out <= 0:
            raise ValueError("max_fan_out must be positive")
        self.shape = ReferenceShape(shape)
        self.suffix = suffix
        if seed is None:
            seed = settings.lookup_seed if self.shape == ReferenceShape.FAN_OUT else settings.seed
        self.seed = seed
        self.max_fan_out = max_fan_out

    def target_for(self, collection: Collection) -> Collection:
        return sibling(collection, self.suffix)

    def generate(self) -> Tuple[List[Document], List[Document]]:
        """
        Build ``(source_docs, target_docs)`` for one run.

        The random source is seeded once and consumed in ascending ``i``.
        """
        rng = random.Random(self.seed)
        sources: List[Document] = []
        targets: List[Document] = []

        for i in range(self.n_docs):
            targets.append({"_id": i})
            if self.shape == ReferenceShape.ONE_TO_ONE:
                sources.append({"_id": i, "foreignKey": i})
                continue

            n_products = rng.randrange(self.max_fan_out)
            products = [
                {"_id": rng.randrange(self.n_docs), "quantity": rng.randrange(MAX_QUANTITY)}
                for _ in range(n_products)
            ]
            sources.append({
                "_id": object_id_from(rng),
                "products": products,
                "ts": datetime.now(timezone.utc),
            })

        return sources, targets

    def setup(self, collection: Collection) -> None:
        target = self.target_for(collection)
        logger.info(
            "multi_entity_populator_started",
            source=collection.name,
            target=target.name,
            shape=self.shape.value,
            n_docs=self.n_docs,
            seed=self.seed,
        )

        collection.drop()
        target.drop()

        sources, targets = self.generate()
        if targets:
            target.insert_many(targets, ordered=False)
        if sources:
            collection.insert_many(sources, ordered=False)

        logger.info(
            "multi_entity_documents_inserted",
            source=collection.name,
            source_docs=len(sources),
            target=target.name,
            target_docs=len(targets),
        )

    def teardown(self, collection: Collection) -> None:
        collection.drop()
        self.target_for(collection).drop()

    def __repr__(self) -> str:
        return (
            f"MultiEntityPopulator(n_docs={self.n_docs}, shape={self.shape.value}, "
            f"suffix={self.suffix!r}, seed={self.seed})"
        )
