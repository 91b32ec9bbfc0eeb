from decimal import Decimal
from urllib.parse import quote

from mapservice.core.config import GeocoderConfig
from mapservice.core.exceptions import InvalidInputError
from mapservice.schemas.geocoding import GeocodingQuery
from mapservice.schemas.location import Bound, Coordinate


def format_degrees(value: float) -> str:
    """Render degrees in plain decimal notation: 37.422, -122.084, 0"""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_coordinate(coordinate: Coordinate) -> str:
    return f"{format_degrees(coordinate.latitude)},{format_degrees(coordinate.longitude)}"


def format_bound(bound: Bound) -> str:
    return f"{format_coordinate(bound.southwest)}|{format_coordinate(bound.northeast)}"


def validate_query(query: GeocodingQuery) -> None:
    if query.is_valid():
        return
    if query.has_address and query.has_coordinate:
        raise InvalidInputError(
            "The geocoding query is not valid. It needs an address or a coordinate, not both."
        )
    raise InvalidInputError(
        "The geocoding query is not valid. It needs at least an address or a coordinate."
    )


def build_query_params(query: GeocodingQuery, api_key: str | None = None) -> list[tuple[str, str]]:
    """Ordered (name, value) pairs for the geocoding query string."""
    validate_query(query)

    params: list[tuple[str, str]] = []
    if query.has_address:
        params.append(("address", query.address))
    else:
        params.append(("latlng", format_coordinate(query.coordinate)))

    if query.bound is not None:
        params.append(("bound", format_bound(query.bound)))
    if query.region:
        params.append(("region", query.region))
    if query.language:
        params.append(("language", query.language))

    params.append(("sensor", "true" if query.sensor else "false"))

    if api_key:
        params.append(("key", api_key))
    return params


def encode_query(params: list[tuple[str, str]]) -> str:
    # Commas between degrees stay literal, everything else is percent-encoded
    return "&".join(
        f"{quote(name, safe='')}={quote(value, safe=',' if name in ('latlng', 'bound') else '')}"
        for name, value in params
    )


def build_geocoding_url(query: GeocodingQuery, config: GeocoderConfig) -> str:
    """
    Build ``{base_url}/{format}?...`` for the query.
    Raises InvalidInputError before anything is sent when the query is not valid.
    """
    params = build_query_params(query, api_key=config.api_key)
    base_url = config.base_url.rstrip("/")
    return f"{base_url}/{config.response_format.value}?{encode_query(params)}"
