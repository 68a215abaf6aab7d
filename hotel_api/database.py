import logging
from collections.abc import Iterator
from contextlib import contextmanager

from bson import ObjectId
from bson.errors import BSONError, InvalidId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from hotel_api.exceptions.custom import StoreError

logger = logging.getLogger(__name__)

HOTELS = "hotels"
REVIEWS = "reviews"
ROOM_TYPES = "roomtypes"

# Driver failures plus encoding failures raised before anything reaches the server
# (bson raises a bare OverflowError for ints wider than 8 bytes)
STORE_FAILURES = (PyMongoError, BSONError, OverflowError)


def to_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise StoreError(f'Cast to ObjectId failed for value "{value}"') from exc


@contextmanager
def store_errors() -> Iterator[None]:
    """Re-raise driver and encoding failures as StoreError, keeping their message."""
    try:
        yield
    except STORE_FAILURES as exc:
        logger.debug("store raised %s", type(exc).__name__)
        raise StoreError(str(exc)) from exc


def fetch_by_ids(collection: Collection, ids: list[ObjectId]) -> dict[ObjectId, dict]:
    if not ids:
        return {}
    cursor = collection.find({"_id": {"$in": list(set(ids))}})
    return {doc["_id"]: doc for doc in cursor}


def populate(ids: list[ObjectId], found: dict[ObjectId, dict]) -> list[dict]:
    """Swap reference ids for their documents.

    Keeps the reference order and repeats; ids whose document no longer
    exists are dropped.
    """
    return [found[ref] for ref in ids if ref in found]
