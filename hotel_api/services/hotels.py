import logging
from typing import Any, TypeVar

from bson import ObjectId
from pydantic import BaseModel, ValidationError
from pymongo.database import Database

from hotel_api.database import (
    HOTELS,
    REVIEWS,
    ROOM_TYPES,
    STORE_FAILURES,
    fetch_by_ids,
    populate,
    store_errors,
    to_object_id,
)
from hotel_api.exceptions.custom import NotFoundError, StoreError, validation_message
from hotel_api.schemas.documents import Hotel, Review, RoomType, utc_now
from hotel_api.schemas.responses import HotelDetail

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

HOTEL_NOT_FOUND = "Hotel not found"
REVIEW_NOT_FOUND = "Review not found"
HOTEL_OR_ROOM_TYPE_NOT_FOUND = "Hotel or Room Type not found"


def _validate(model: type[M], data: dict[str, Any]) -> M:
    """Build a document model, reporting schema violations as StoreError."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise StoreError(validation_message(model.__name__, exc.errors())) from exc


class HotelService:
    def __init__(self, db: Database):
        self._db = db
        self._hotels = db[HOTELS]
        self._reviews = db[REVIEWS]
        self._room_types = db[ROOM_TYPES]

    def ping(self) -> None:
        with store_errors():
            self._db.command("ping")

    # -- hotels --

    def create_hotel(self, name: str, location: str, price: float, rooms: int) -> Hotel:
        hotel = _validate(
            Hotel, {"name": name, "location": location, "price": price, "rooms": rooms}
        )
        with store_errors():
            self._hotels.insert_one(hotel.to_mongo())
        logger.info("Created hotel %s (%s)", hotel.id, hotel.name)
        return hotel

    def list_hotels(self) -> list[HotelDetail]:
        with store_errors():
            docs = list(self._hotels.find())
            found = fetch_by_ids(
                self._reviews, [ref for doc in docs for ref in doc.get("reviews", [])]
            )
        return [self._with_reviews(doc, found) for doc in docs]

    def get_hotel(self, hotel_id: str) -> HotelDetail:
        doc = self._find_hotel(hotel_id)
        with store_errors():
            found = fetch_by_ids(self._reviews, doc.get("reviews", []))
        return self._with_reviews(doc, found)

    def delete_hotel(self, hotel_id: str) -> None:
        oid = to_object_id(hotel_id)
        with store_errors():
            deleted = self._hotels.find_one_and_delete({"_id": oid})
            if deleted is None:
                raise NotFoundError(HOTEL_NOT_FOUND)
            removed = self._reviews.delete_many({"hotel": oid}).deleted_count
        logger.info("Deleted hotel %s and %d review(s)", hotel_id, removed)

    # -- reviews --

    def create_review(self, hotel_id: str, /, **fields: Any) -> Review:
        hotel_oid = self._find_hotel(hotel_id, projection={"_id": 1})["_id"]
        # Fields are checked only once the hotel is known to exist
        review = _validate(Review, {**fields, "hotel": hotel_oid})
        review_oid = ObjectId(review.id)

        with store_errors():
            self._reviews.insert_one(review.to_mongo())

        # Two writes without a transaction: undo the insert if the link does not land
        try:
            result = self._hotels.update_one(
                {"_id": hotel_oid},
                {"$push": {"reviews": review_oid}, "$set": {"updatedAt": utc_now()}},
            )
        except STORE_FAILURES as exc:
            self._discard_review(review_oid)
            raise StoreError(str(exc)) from exc
        if result.matched_count == 0:
            self._discard_review(review_oid)
            raise NotFoundError(HOTEL_NOT_FOUND)

        logger.info("Added review %s to hotel %s", review.id, review.hotel)
        return review

    def list_reviews(self, hotel_id: str) -> list[Review]:
        doc = self._find_hotel(hotel_id, projection={"reviews": 1})
        refs = doc.get("reviews", [])
        with store_errors():
            found = fetch_by_ids(self._reviews, refs)
        return [_validate(Review, review) for review in populate(refs, found)]

    def delete_review(self, hotel_id: str, review_id: str) -> None:
        hotel_oid = to_object_id(hotel_id)
        review_oid = to_object_id(review_id)
        with store_errors():
            deleted = self._reviews.find_one_and_delete({"_id": review_oid})
            if deleted is None:
                raise NotFoundError(REVIEW_NOT_FOUND)
            result = self._hotels.update_one(
                {"_id": hotel_oid},
                {"$pull": {"reviews": review_oid}, "$set": {"updatedAt": utc_now()}},
            )
        if result.matched_count == 0:
            logger.warning(
                "Deleted review %s but hotel %s does not exist", review_id, hotel_id
            )
        else:
            logger.info("Deleted review %s from hotel %s", review_id, hotel_id)

    # -- room types --

    def create_room_type(self, type: str, description: str, price: float) -> RoomType:
        room_type = _validate(
            RoomType, {"type": type, "description": description, "price": price}
        )
        with store_errors():
            self._room_types.insert_one(room_type.to_mongo())
        logger.info("Created room type %s (%s)", room_type.id, room_type.type)
        return room_type

    def link_room_type(self, hotel_id: str, room_type_id: str) -> None:
        hotel_oid = to_object_id(hotel_id)
        room_type_oid = to_object_id(room_type_id)
        with store_errors():
            hotel = self._hotels.find_one({"_id": hotel_oid}, {"_id": 1})
            room_type = self._room_types.find_one({"_id": room_type_oid}, {"_id": 1})
            if hotel is None or room_type is None:
                raise NotFoundError(HOTEL_OR_ROOM_TYPE_NOT_FOUND)
            # No duplicate check: the same room type may be linked more than once
            result = self._hotels.update_one(
                {"_id": hotel_oid},
                {"$push": {"roomTypes": room_type_oid}, "$set": {"updatedAt": utc_now()}},
            )
        if result.matched_count == 0:
            raise NotFoundError(HOTEL_OR_ROOM_TYPE_NOT_FOUND)
        logger.info("Linked room type %s to hotel %s", room_type_id, hotel_id)

    def list_room_types(self, hotel_id: str) -> list[RoomType]:
        doc = self._find_hotel(hotel_id, projection={"roomTypes": 1})
        refs = doc.get("roomTypes", [])
        with store_errors():
            found = fetch_by_ids(self._room_types, refs)
        return [_validate(RoomType, room_type) for room_type in populate(refs, found)]

    # -- helpers --

    def _find_hotel(self, hotel_id: str, projection: dict | None = None) -> dict:
        oid = to_object_id(hotel_id)
        with store_errors():
            doc = self._hotels.find_one({"_id": oid}, projection)
        if doc is None:
            raise NotFoundError(HOTEL_NOT_FOUND)
        return doc

    def _with_reviews(self, doc: dict, found: dict[ObjectId, dict]) -> HotelDetail:
        return _validate(
            HotelDetail, {**doc, "reviews": populate(doc.get("reviews", []), found)}
        )

    def _discard_review(self, review_oid: ObjectId) -> None:
        logger.warning("Could not link review %s to its hotel, removing it", review_oid)
        with store_errors():
            self._reviews.delete_one({"_id": review_oid})
