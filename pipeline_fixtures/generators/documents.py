"""Document generators for benchmark collections.

A generator is a function ``(index, rng) -> document``. The only state it may
consult besides ``index`` is the ``random.Random`` handle it is given, which
the populator seeds immediately before generation starts. Anything drawn from
``rng`` must be drawn in the same order on every call so that a fixed seed
always yields the same documents.
"""

import random
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from bson import ObjectId
from bson.int64 import Int64

from .string_pool import get_string_of_length

Document = Dict[str, Any]
DocGenerator = Callable[[int, random.Random], Document]

DEFAULT_STRING_SIZE = 12 * 1024  # 12 KiB
LARGE_STRING_SIZE = 1024 * 1024  # 1 MiB
LARGE_ARRAY_LENGTH = 1000


def object_id_from(rng: random.Random) -> ObjectId:
    """Build an ObjectId from 12 bytes of the seeded source."""
    return ObjectId(rng.getrandbits(96).to_bytes(12, "big"))


def default_doc_generator(i: int, rng: random.Random) -> Document:
    """
    Generic document for pipelines that don't care what the data looks like.

    Documents are at least 12 KiB. ``metadata.created`` is the wall clock at
    generation time and is the one field that differs between runs.
    """
    return {
        "_id": object_id_from(rng),
        "string": get_string_of_length(DEFAULT_STRING_SIZE),
        "sub_docs": [
            {"_id": object_id_from(rng), "x": i, "y": i * i},
        ],
        "metadata": {
            "about": "Used only for performance testing",
            "created": datetime.now(timezone.utc),
        },
    }


def geo_2d_doc_generator(i: int, rng: random.Random) -> Document:
    # Two integer coordinates in [-100, 100).
    return {
        "_id": i,
        "geo": [rng.randrange(200) - 100, rng.randrange(200) - 100],
        "boolFilter": i % 2 == 0,
    }


def geo_2dsphere_doc_generator(i: int, rng: random.Random) -> Document:
    return {
        "_id": i,
        "geo": [
            rng.random() * 360 - 180,  # longitude in [-180, 180)
            rng.random() * 180 - 90,  # latitude in [-90, 90)
        ],
        "boolFilter": i % 2 == 0,
    }


def group_doc_generator(i: int, rng: random.Random) -> Document:
    return {"_id": i, "_idMod10": i % 10}


def id_only_doc_generator(i: int, rng: random.Random) -> Document:
    return {"_id": i}


def projection_doc_generator(i: int, rng: random.Random) -> Document:
    return {"_id": i, "w": i, "x": i, "y": i, "z": i}


def redact_doc_generator(i: int, rng: random.Random) -> Document:
    return {"_id": i, "has_permissions": i % 2 == 0}


def sort_doc_generator(i: int, rng: random.Random) -> Document:
    """Uniformly random sort key in [0, 1)."""
    return {"_id": i, "x": rng.random()}


def unwind_doc_generator(i: int, rng: random.Random) -> Document:
    """Array mixing every common BSON type, for flattening stages."""
    return {
        "_id": i,
        "array": [
            1,
            "some string data",
            object_id_from(rng),
            None,
            Int64(23),
            [4, 5],
            {"x": 1},
        ],
    }


def large_unwind_doc_generator(i: int, rng: random.Random) -> Document:
    """Long array of short strings next to a 1 MiB payload."""
    prefix = get_string_of_length(10)
    large_array: List[str] = [f"{prefix}{j}" for j in range(LARGE_ARRAY_LENGTH)]
    return {
        "_id": i,
        "array": large_array,
        "largeString": get_string_of_length(LARGE_STRING_SIZE),
    }
