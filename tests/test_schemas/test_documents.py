"""Field constraints on the stored document models."""

from datetime import datetime

import pytest
from bson import ObjectId
from pydantic import ValidationError

from hotel_api.schemas.documents import Hotel, Review, RoomType
from hotel_api.schemas.responses import HotelDetail


def _error_fields(exc_info) -> set[str]:
    return {err["loc"][0] for err in exc_info.value.errors()}


# --- Hotel ---


def test_hotel_valid():
    hotel = Hotel(name="Test Hotel", location="California", price=150, rooms=100)

    assert ObjectId.is_valid(hotel.id)
    assert hotel.reviews == []
    assert hotel.room_types == []
    assert isinstance(hotel.created_at, datetime)
    assert hotel.updated_at == hotel.created_at


def test_hotel_name_too_short():
    with pytest.raises(ValidationError) as exc_info:
        Hotel(name="AB", location="California", price=150, rooms=100)

    assert _error_fields(exc_info) == {"name"}


def test_hotel_negative_price():
    with pytest.raises(ValidationError) as exc_info:
        Hotel(name="Test Hotel", location="California", price=-1, rooms=100)

    assert _error_fields(exc_info) == {"price"}


def test_hotel_zero_rooms():
    with pytest.raises(ValidationError) as exc_info:
        Hotel(name="Test Hotel", location="California", price=150, rooms=0)

    assert _error_fields(exc_info) == {"rooms"}


def test_hotel_zero_price_allowed():
    hotel = Hotel(name="Free Stay", location="Nowhere", price=0, rooms=1)
    assert hotel.price == 0


def test_hotel_missing_fields():
    with pytest.raises(ValidationError) as exc_info:
        Hotel(name="Test Hotel")

    assert _error_fields(exc_info) == {"location", "price", "rooms"}


def test_hotel_to_mongo_uses_object_ids_and_aliases():
    hotel = Hotel(
        name="Test Hotel",
        location="California",
        price=150,
        rooms=100,
        roomTypes=[str(ObjectId())],
    )
    data = hotel.to_mongo()

    assert isinstance(data["_id"], ObjectId)
    assert str(data["_id"]) == hotel.id
    assert isinstance(data["roomTypes"][0], ObjectId)
    assert "createdAt" in data and "updatedAt" in data
    assert "room_types" not in data


def test_hotel_from_mongo_document():
    oid, review_oid = ObjectId(), ObjectId()
    hotel = Hotel.model_validate({
        "_id": oid,
        "name": "Test Hotel",
        "location": "California",
        "price": 150,
        "rooms": 100,
        "reviews": [review_oid],
        "roomTypes": [],
    })

    assert hotel.id == str(oid)
    assert hotel.reviews == [str(review_oid)]


def test_hotel_serializes_with_aliases():
    hotel = Hotel(name="Test Hotel", location="California", price=150, rooms=100)
    data = hotel.model_dump(mode="json", by_alias=True)

    assert data["_id"] == hotel.id
    assert data["roomTypes"] == []
    assert "createdAt" in data


# --- Review ---


def test_review_valid():
    hotel_id = str(ObjectId())
    review = Review(author="John Doe", comment="Great place to stay!", rating=5, hotel=hotel_id)

    assert review.author == "John Doe"
    assert review.rating == 5
    assert review.hotel == hotel_id
    assert review.created_at is not None
    assert review.updated_at is not None


def test_review_missing_author_and_hotel():
    with pytest.raises(ValidationError) as exc_info:
        Review(comment="Good hotel, but expensive", rating=4)

    assert {"author", "hotel"} <= _error_fields(exc_info)


def test_review_rating_above_range():
    with pytest.raises(ValidationError) as exc_info:
        Review(author="Jane Doe", comment="Not so good.", rating=10, hotel=str(ObjectId()))

    assert _error_fields(exc_info) == {"rating"}


def test_review_rating_below_range():
    with pytest.raises(ValidationError) as exc_info:
        Review(author="Jane Doe", comment="Not so good.", rating=0, hotel=str(ObjectId()))

    assert _error_fields(exc_info) == {"rating"}


def test_review_empty_comment():
    with pytest.raises(ValidationError) as exc_info:
        Review(author="Jane Doe", comment="", rating=3, hotel=str(ObjectId()))

    assert _error_fields(exc_info) == {"comment"}


def test_review_to_mongo_stores_hotel_as_object_id():
    hotel_oid = ObjectId()
    review = Review(author="Jane", comment="Nice", rating=4, hotel=hotel_oid)

    assert review.hotel == str(hotel_oid)
    assert review.to_mongo()["hotel"] == hotel_oid


# --- RoomType ---


def test_room_type_valid():
    room_type = RoomType(type="Suite", description="A luxurious suite.", price=250)
    assert room_type.type == "Suite"
    assert room_type.price == 250


def test_room_type_missing_description_and_price():
    with pytest.raises(ValidationError) as exc_info:
        RoomType(type="Suite")

    assert _error_fields(exc_info) == {"description", "price"}


# --- HotelDetail ---


def test_hotel_detail_resolves_reviews():
    hotel_oid, review_oid = ObjectId(), ObjectId()
    detail = HotelDetail.model_validate({
        "_id": hotel_oid,
        "name": "Test Hotel",
        "location": "California",
        "price": 150,
        "rooms": 100,
        "reviews": [
            {"_id": review_oid, "author": "A", "comment": "B", "rating": 3, "hotel": hotel_oid},
        ],
        "roomTypes": [],
    })

    assert detail.reviews[0].id == str(review_oid)
    assert detail.reviews[0].hotel == str(hotel_oid)
