"""Stored document models.

Each model mirrors one MongoDB collection. Field names are snake_case in
Python and keep the camelCase aliases used in the stored documents and in
API responses (``_id``, ``roomTypes``, ``createdAt``, ``updatedAt``).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from hotel_api.schemas.requests import HotelCreate, ReviewCreate, RoomTypeCreate

# ObjectIds come back from the store as bson.ObjectId; the API exposes hex strings
PyObjectId = Annotated[str, BeforeValidator(str)]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: PyObjectId = Field(default_factory=lambda: str(ObjectId()), alias="_id")
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @model_validator(mode="after")
    def _default_updated_at(self) -> Document:
        if self.updated_at is None:
            self.updated_at = self.created_at
        return self

    def to_mongo(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True)
        data["_id"] = ObjectId(self.id)
        return data


class Hotel(Document, HotelCreate):
    reviews: list[PyObjectId] = []
    room_types: list[PyObjectId] = Field(default_factory=list, alias="roomTypes")

    def to_mongo(self) -> dict[str, Any]:
        data = super().to_mongo()
        data["reviews"] = [ObjectId(review_id) for review_id in self.reviews]
        data["roomTypes"] = [ObjectId(room_type_id) for room_type_id in self.room_types]
        return data


class Review(Document, ReviewCreate):
    hotel: PyObjectId

    def to_mongo(self) -> dict[str, Any]:
        data = super().to_mongo()
        data["hotel"] = ObjectId(self.hotel)
        return data


class RoomType(Document, RoomTypeCreate):
    pass
