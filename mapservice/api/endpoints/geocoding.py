from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from mapservice.core.exceptions import (
    GeocodingError,
    InvalidInputError,
    MalformedResponseError,
    NotSupportedError,
    TransportError,
)
from mapservice.schemas.geocoding import (
    ByAddress,
    ByQuery,
    GeocodingQuery,
    GeocodingRequest,
    GeocodingResponse,
)
from mapservice.schemas.location import Coordinate
from mapservice.services.geocoding import geocoding_service

router = APIRouter()


def _to_http_exception(e: GeocodingError) -> HTTPException:
    if isinstance(e, InvalidInputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if isinstance(e, NotSupportedError):
        return HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail=str(e))
    if isinstance(e, (MalformedResponseError, TransportError)):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


async def _geocode(request: GeocodingRequest) -> GeocodingResponse:
    try:
        return await geocoding_service.geocode(request)
    except GeocodingError as e:
        raise _to_http_exception(e) from e


@router.get("/geocode", response_model=GeocodingResponse)
async def geocode_address(
    address: Annotated[str, Query(description="Address, zipcode, or location to geocode")]
) -> GeocodingResponse:
    """
    Geocode a free-text address.
    Returns the provider status and every result in provider order.
    """
    return await _geocode(ByAddress(address=address))


@router.get("/reverse", response_model=GeocodingResponse)
async def reverse_geocode(
    lat: Annotated[float, Query(description="Latitude in degrees")],
    lng: Annotated[float, Query(description="Longitude in degrees")],
    language: str | None = None,
    region: str | None = None,
) -> GeocodingResponse:
    query = GeocodingQuery(
        coordinate=Coordinate(latitude=lat, longitude=lng), language=language, region=region
    )
    return await _geocode(ByQuery(query=query))


@router.post("/query", response_model=GeocodingResponse)
async def geocode_query(query: GeocodingQuery) -> GeocodingResponse:
    return await _geocode(ByQuery(query=query))
