from typing import Any, Optional

import httpx
import structlog

from weather_proxy.config.config import WeatherProviderSettings
from weather_proxy.exceptions.weather import APIRequestError, InvalidResponseError

logger = structlog.get_logger(__name__)


def build_weather_url(city: str, settings: WeatherProviderSettings) -> str:
    """
    Build the OpenWeatherMap current weather URL for a city.

    The city is embedded exactly as received. httpx normalises characters
    that are illegal in a URL (spaces become %20), but reserved characters
    such as '&' or '#' pass through and change the meaning of the query.

    Args:
        city: Name of the city
        settings: Provider settings supplying endpoint, units, language and key

    Returns:
        Fully formed request URL
    """
    return (
        f"{settings.openweather_base_url}"
        f"?q={city}"
        f"&units={settings.openweather_units}"
        f"&lang={settings.openweather_lang}"
        f"&appid={settings.openweather_api_key or ''}"
    )


class WeatherService:
    """
    Relays current weather requests to the OpenWeatherMap API.

    Each call reads provider settings afresh, sends exactly one GET and hands
    back whatever JSON the provider answered with, whatever its status code.
    """

    def __init__(self, settings: Optional[WeatherProviderSettings] = None):
        """
        Initialize the weather service.

        Args:
            settings: Fixed provider settings. When omitted, settings are
                loaded from the environment on every request.
        """
        self._settings = settings

    def _get_settings(self) -> WeatherProviderSettings:
        if self._settings is not None:
            return self._settings
        return WeatherProviderSettings()

    async def get_current_weather(self, city: str) -> Any:
        """
        Get current weather data for a city.

        Args:
            city: Name of the city

        Returns:
            Decoded JSON body of the upstream response

        Raises:
            APIRequestError: If the request could not be completed
            InvalidResponseError: If the response body is not JSON
        """
        settings = self._get_settings()
        url = build_weather_url(city, settings)

        # The URL carries the API key, so only the city is logged
        logger.info(
            "Fetching current weather",
            city=city,
            api_key_configured=bool(settings.openweather_api_key),
        )

        try:
            async with httpx.AsyncClient(timeout=None, follow_redirects=True) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Weather API request failed", city=city, error=str(e))
            raise APIRequestError(str(e)) from e

        if not response.is_success:
            logger.warning(
                "Weather API returned non-success status",
                city=city,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(
                "Failed to decode weather API response",
                city=city,
                status_code=response.status_code,
                error=str(e),
            )
            raise InvalidResponseError(str(e)) from e

        logger.info("Successfully fetched current weather", city=city, status_code=response.status_code)
        return data


weather_service = WeatherService()
