from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "hotel_reviews"
    log_level: str = "INFO"
