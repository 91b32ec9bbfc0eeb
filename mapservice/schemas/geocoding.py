from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mapservice.schemas.address import AddressComponent
from mapservice.schemas.location import Bound, Coordinate


class ResponseFormat(str, Enum):
    JSON = "json"
    XML = "xml"


class GeocodingStatus(str, Enum):
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class GeocodingQuery(BaseModel):
    """A geocoding lookup, either by address or by coordinate (reverse).

    The model accepts any combination of fields so callers can assemble it
    step by step; ``is_valid`` is checked before the query is turned into a
    URL.
    """

    address: str | None = None
    coordinate: Coordinate | None = None
    bound: Bound | None = None
    region: str | None = None
    language: str | None = None
    sensor: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def has_address(self) -> bool:
        return bool(self.address and self.address.strip())

    @property
    def has_coordinate(self) -> bool:
        return self.coordinate is not None

    def is_valid(self) -> bool:
        return self.has_address != self.has_coordinate


class ByAddress(BaseModel):
    kind: Literal["address"] = "address"
    address: str

    model_config = ConfigDict(frozen=True)

    def to_query(self) -> GeocodingQuery:
        return GeocodingQuery(address=self.address)


class ByQuery(BaseModel):
    kind: Literal["query"] = "query"
    query: GeocodingQuery

    model_config = ConfigDict(frozen=True)

    def to_query(self) -> GeocodingQuery:
        return self.query


GeocodingRequest = Annotated[Union[ByAddress, ByQuery], Field(discriminator="kind")]


class Geometry(BaseModel):
    location: Coordinate
    location_type: str
    viewport: Bound
    # Only present when the result is not point-like (e.g. a city or a route)
    bounds: Bound | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class GeocodingResult(BaseModel):
    formatted_address: str
    address_components: list[AddressComponent]
    geometry: Geometry
    partial_match: bool = False
    types: list[str]

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("partial_match", mode="before")
    @classmethod
    def null_partial_match_is_false(cls, value):
        return False if value is None else value

    def component(self, type_: str) -> AddressComponent | None:
        """Return the first address component tagged with ``type_``."""
        for address_component in self.address_components:
            if address_component.has_type(type_):
                return address_component
        return None


class GeocodingResponse(BaseModel):
    """Normalized provider response: status plus results in provider order"""

    status: GeocodingStatus
    results: list[GeocodingResult]

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_ok(self) -> bool:
        return self.status == GeocodingStatus.OK

    @property
    def first(self) -> GeocodingResult | None:
        return self.results[0] if self.results else None
