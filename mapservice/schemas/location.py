from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """Latitude/longitude pair in degrees. Ranges are not checked."""

    latitude: float = Field(validation_alias=AliasChoices("lat", "latitude"))
    longitude: float = Field(validation_alias=AliasChoices("lng", "longitude"))

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Bound(BaseModel):
    southwest: Coordinate
    northeast: Coordinate

    model_config = ConfigDict(frozen=True, extra="ignore")
