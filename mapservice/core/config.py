from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings

from mapservice.schemas.geocoding import ResponseFormat


class Settings(BaseSettings):
    PROJECT_NAME: str = "Map Service"
    GEOCODING_BASE_URL: str = "https://maps.googleapis.com/maps/api/geocode"
    GEOCODING_FORMAT: ResponseFormat = ResponseFormat.JSON
    GEOCODING_TIMEOUT: float = 20.0
    GOOGLE_MAPS_KEY: str | None = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()


class GeocoderConfig(BaseModel):
    """Fixed settings of a geocoding service instance, never mutated after construction"""

    base_url: str = "https://maps.googleapis.com/maps/api/geocode"
    response_format: ResponseFormat = ResponseFormat.JSON
    api_key: str | None = None
    timeout: float = 20.0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "GeocoderConfig":
        source = source or settings
        return cls(
            base_url=source.GEOCODING_BASE_URL,
            response_format=source.GEOCODING_FORMAT,
            api_key=source.GOOGLE_MAPS_KEY,
            timeout=source.GEOCODING_TIMEOUT,
        )
