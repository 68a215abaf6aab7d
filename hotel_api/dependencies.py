from typing import Annotated

from fastapi import Depends, Request

from hotel_api.services.hotels import HotelService


def get_hotel_service(request: Request) -> HotelService:
    return request.app.state.hotel_service


HotelServiceDep = Annotated[HotelService, Depends(get_hotel_service)]
