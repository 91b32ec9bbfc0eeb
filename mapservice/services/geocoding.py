import logging
from urllib.parse import quote

from httpx import AsyncClient, HTTPStatusError, RequestError, Response

from mapservice.core.config import GeocoderConfig
from mapservice.core.exceptions import NotSupportedError, TransportError
from mapservice.schemas.geocoding import (
    ByAddress,
    ByQuery,
    GeocodingQuery,
    GeocodingRequest,
    GeocodingResponse,
    ResponseFormat,
)
from mapservice.schemas.location import Bound, Coordinate
from mapservice.services.response_parser import parse_geocoding_response
from mapservice.services.url_builder import build_geocoding_url


class GeocodingService:
    _instance: "GeocodingService" = None

    def __init__(self, config: GeocoderConfig | None = None, client: AsyncClient | None = None):
        self.config = config or GeocoderConfig.from_settings()
        self.client = client
        self.logger = logging.getLogger(__name__)

    @classmethod
    def get_instance(cls) -> "GeocodingService":
        if GeocodingService._instance is None:
            GeocodingService._instance = cls()
        return GeocodingService._instance

    def build_url(self, request: GeocodingRequest) -> str:
        return build_geocoding_url(request.to_query(), self.config)

    async def geocode(self, request: GeocodingRequest) -> GeocodingResponse:
        """
        Geocode an address or a structured query and return the provider status
        with the results in provider order.
        """
        url = self.build_url(request)
        if self.config.response_format != ResponseFormat.JSON:
            raise NotSupportedError(
                f"The {self.config.response_format.value} format is not supported, use json."
            )

        r = await self._get(url)
        return parse_geocoding_response(r.content, self.config.response_format)

    async def geocode_address(self, address: str) -> GeocodingResponse:
        return await self.geocode(ByAddress(address=address))

    async def geocode_query(self, query: GeocodingQuery) -> GeocodingResponse:
        return await self.geocode(ByQuery(query=query))

    async def reverse_geocode(
        self,
        latitude: float,
        longitude: float,
        *,
        bound: Bound | None = None,
        region: str | None = None,
        language: str | None = None,
        sensor: bool = False,
    ) -> GeocodingResponse:
        query = GeocodingQuery(
            coordinate=Coordinate(latitude=latitude, longitude=longitude),
            bound=bound,
            region=region,
            language=language,
            sensor=sensor,
        )
        return await self.geocode_query(query)

    async def _get(self, url: str) -> Response:
        self.logger.debug("Geocoding request: %s", self._redact(url))
        try:
            if self.client is not None:
                r = await self.client.get(url)
            else:
                async with AsyncClient(timeout=self.config.timeout) as client:
                    r = await client.get(url)
            r.raise_for_status()
        except HTTPStatusError as e:
            raise TransportError(
                f"Geocoding service returned error status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except RequestError as e:
            raise TransportError(f"Geocoding request failed: {e}") from e
        return r

    def _redact(self, url: str) -> str:
        if not self.config.api_key:
            return url
        return url.replace(quote(self.config.api_key, safe=""), "<redacted>").replace(
            self.config.api_key, "<redacted>"
        )


geocoding_service = GeocodingService.get_instance()
