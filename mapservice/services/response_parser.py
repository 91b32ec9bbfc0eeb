import logging

from pydantic import ValidationError

from mapservice.core.exceptions import MalformedResponseError, NotSupportedError
from mapservice.schemas.geocoding import GeocodingResponse, ResponseFormat

logger = logging.getLogger(__name__)


def parse_geocoding_response(
    body: str | bytes, response_format: ResponseFormat | str = ResponseFormat.JSON
) -> GeocodingResponse:
    """
    Normalize a raw geocoding payload into a GeocodingResponse.
    Either the whole payload validates or MalformedResponseError is raised;
    results keep the provider's order.
    """
    try:
        response_format = ResponseFormat(response_format)
    except ValueError as e:
        raise NotSupportedError(f"Unknown response format: {response_format!r}") from e
    if response_format == ResponseFormat.XML:
        raise NotSupportedError("The xml format is not supported, use json.")
    return parse_json_response(body)


def parse_json_response(body: str | bytes) -> GeocodingResponse:
    try:
        response = GeocodingResponse.model_validate_json(body)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Unexpected response format from geocoding service: {e}"
        ) from e

    logger.debug(
        "Normalized geocoding response with status %s and %d results",
        response.status.value,
        len(response.results),
    )
    return response
