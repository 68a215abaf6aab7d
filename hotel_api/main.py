import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pymongo import MongoClient

from hotel_api.config import Settings
from hotel_api.exceptions.custom import NotFoundError, StoreError
from hotel_api.exceptions.handlers import (
    not_found_error_handler,
    request_validation_error_handler,
    store_error_handler,
)
from hotel_api.routers.health import router as health_router
from hotel_api.routers.hotels import router as hotels_router
from hotel_api.routers.room_types import router as room_types_router
from hotel_api.services.hotels import HotelService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    client = MongoClient(settings.mongodb_uri, tz_aware=True)
    try:
        app.state.mongo_client = client
        app.state.hotel_service = HotelService(client[settings.mongodb_database])
        logger.info("Using MongoDB database '%s'", settings.mongodb_database)
        yield
    finally:
        client.close()


app = FastAPI(title="Hotel Reviews API", lifespan=lifespan)

app.add_exception_handler(NotFoundError, not_found_error_handler)
app.add_exception_handler(StoreError, store_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

app.include_router(hotels_router)
app.include_router(room_types_router)
app.include_router(health_router)
