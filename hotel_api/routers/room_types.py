from fastapi import APIRouter

from hotel_api.dependencies import HotelServiceDep
from hotel_api.schemas.documents import RoomType
from hotel_api.schemas.requests import RoomTypeCreate
from hotel_api.schemas.responses import ErrorResponse

router = APIRouter(
    prefix="/api/room-types",
    tags=["room-types"],
    responses={500: {"model": ErrorResponse}},
)


@router.post("", response_model=RoomType, status_code=201)
def create_room_type(payload: RoomTypeCreate, service: HotelServiceDep) -> RoomType:
    return service.create_room_type(**payload.model_dump())
