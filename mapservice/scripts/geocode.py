"""
Command-line geocoding lookup.

Usage:
    python -m mapservice.scripts.geocode "1600 Amphitheatre Parkway, Mountain View, CA"
    python -m mapservice.scripts.geocode --latlng 37.422,-122.084 --language en
"""

import argparse
import asyncio
import logging
import sys

from mapservice.core.config import settings
from mapservice.core.exceptions import GeocodingError, InvalidInputError
from mapservice.schemas.geocoding import ByQuery, GeocodingQuery, GeocodingResponse
from mapservice.schemas.location import Coordinate
from mapservice.services.geocoding import geocoding_service

logger = logging.getLogger(__name__)


def parse_latlng(value: str) -> Coordinate:
    try:
        lat, lng = (float(part) for part in value.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected LAT,LNG, got {value!r}") from e
    return Coordinate(latitude=lat, longitude=lng)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geocode an address or a coordinate")
    parser.add_argument("address", nargs="?", help="Free-text address to geocode")
    parser.add_argument("--latlng", type=parse_latlng, help="Coordinate to reverse geocode")
    parser.add_argument("--region", help="Region bias, e.g. us")
    parser.add_argument("--language", help="Language of the results, e.g. en")
    parser.add_argument("--sensor", action="store_true", help="Request comes from a sensor")
    return parser


def format_response(response: GeocodingResponse) -> str:
    lines = [f"Status: {response.status.value} ({len(response.results)} results)"]
    for i, result in enumerate(response.results, start=1):
        location = result.geometry.location
        lines.append(
            f"{i}. {result.formatted_address} "
            f"[{location.latitude}, {location.longitude}] {result.geometry.location_type}"
        )
        if result.partial_match:
            lines.append("   partial match")
    return "\n".join(lines)


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    query = GeocodingQuery(
        address=args.address,
        coordinate=args.latlng,
        region=args.region,
        language=args.language,
        sensor=args.sensor,
    )
    try:
        response = await geocoding_service.geocode(ByQuery(query=query))
    except InvalidInputError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 2
    except GeocodingError as e:
        logger.error("Geocoding failed: %s", e)
        return 1

    print(format_response(response))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
