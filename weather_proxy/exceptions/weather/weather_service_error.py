from weather_proxy.exceptions.base import WeatherProxyError


class WeatherServiceError(WeatherProxyError):
    """Base exception for weather service errors."""

    pass
