from typing import Optional

import structlog
from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from weather_proxy.exceptions.request import MissingCityError
from weather_proxy.models.weather.weather import CityRequiredResponse
from weather_proxy.services.weather_service import weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(tags=["Weather"])


@router.get(
    "/getData",
    summary="Get Current Weather",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": CityRequiredResponse,
            "description": "The city query parameter is missing or empty",
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "description": "The weather provider could not be reached or answered with invalid JSON",
            "content": {"application/json": {"schema": {"type": "string"}}},
        },
    },
)
async def get_data(
    city: Optional[str] = Query(default=None, description="City name to look up"),
):
    """
    Get current weather for a city straight from OpenWeatherMap.

    The provider's JSON is relayed unchanged with status 200, including its
    own error payloads (for example an unknown city).

    Args:
        city: City name to query.

    Returns:
        The provider's JSON body.

    Raises:
        MissingCityError: If `city` is absent or empty (answered with 400).
        WeatherServiceError: If the provider call fails (answered with 500).
    """
    if not city:
        raise MissingCityError("City is required")

    logger.info("API request: Get current weather", city=city)

    data = await weather_service.get_current_weather(city)

    return JSONResponse(status_code=status.HTTP_200_OK, content=data)
