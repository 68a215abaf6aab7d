from pydantic import BaseModel, Field


class HotelCreate(BaseModel):
    name: str = Field(min_length=3)
    location: str = Field(min_length=1)
    price: float = Field(ge=0)
    rooms: int = Field(ge=1)


class ReviewCreate(BaseModel):
    author: str = Field(min_length=1)
    comment: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)


class RoomTypeCreate(BaseModel):
    type: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float
