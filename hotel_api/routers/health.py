from fastapi import APIRouter

from hotel_api.dependencies import HotelServiceDep
from hotel_api.schemas.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(service: HotelServiceDep) -> HealthResponse:
    service.ping()
    return HealthResponse(status="ok", database="connected")
