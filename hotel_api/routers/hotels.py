from typing import Any

from fastapi import APIRouter, Body

from hotel_api.dependencies import HotelServiceDep
from hotel_api.schemas.documents import Review, RoomType
from hotel_api.schemas.requests import HotelCreate
from hotel_api.schemas.responses import ErrorResponse, HotelDetail, MessageResponse

router = APIRouter(
    prefix="/api/hotels",
    tags=["hotels"],
    responses={
        404: {"model": MessageResponse},
        500: {"model": ErrorResponse},
    },
)


# pymongo is blocking, so handlers are plain functions run in the threadpool
@router.post("", response_model=MessageResponse, status_code=201)
def create_hotel(payload: HotelCreate, service: HotelServiceDep) -> MessageResponse:
    service.create_hotel(**payload.model_dump())
    return MessageResponse(message="Hotel successfully added!")


@router.get("", response_model=list[HotelDetail])
def list_hotels(service: HotelServiceDep) -> list[HotelDetail]:
    return service.list_hotels()


@router.get("/{hotel_id}", response_model=HotelDetail)
def get_hotel(hotel_id: str, service: HotelServiceDep) -> HotelDetail:
    return service.get_hotel(hotel_id)


@router.delete("/{hotel_id}", response_model=MessageResponse)
def delete_hotel(hotel_id: str, service: HotelServiceDep) -> MessageResponse:
    service.delete_hotel(hotel_id)
    return MessageResponse(message="Hotel deleted successfully")


@router.post("/{hotel_id}/reviews", response_model=Review, status_code=201)
def create_review(
    hotel_id: str,
    service: HotelServiceDep,
    payload: dict[str, Any] | None = Body(default=None),
) -> Review:
    # Raw body: the hotel lookup comes first, then the review fields are validated
    return service.create_review(hotel_id, **(payload or {}))


@router.get("/{hotel_id}/reviews", response_model=list[Review])
def list_reviews(hotel_id: str, service: HotelServiceDep) -> list[Review]:
    return service.list_reviews(hotel_id)


@router.delete("/{hotel_id}/reviews/{review_id}", response_model=MessageResponse)
def delete_review(hotel_id: str, review_id: str, service: HotelServiceDep) -> MessageResponse:
    service.delete_review(hotel_id, review_id)
    return MessageResponse(message="Review deleted successfully")


@router.post("/{hotel_id}/room-types/{room_type_id}", response_model=MessageResponse)
def link_room_type(hotel_id: str, room_type_id: str, service: HotelServiceDep) -> MessageResponse:
    service.link_room_type(hotel_id, room_type_id)
    return MessageResponse(message="Room type linked to hotel successfully")


@router.get("/{hotel_id}/room-types", response_model=list[RoomType])
def list_room_types(hotel_id: str, service: HotelServiceDep) -> list[RoomType]:
    return service.list_room_types(hotel_id)
