from pydantic import BaseModel

from hotel_api.schemas.documents import Hotel, Review


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HotelDetail(Hotel):
    """Hotel with its reviews resolved to full documents."""

    reviews: list[Review] = []


class HealthResponse(BaseModel):
    status: str
    database: str
