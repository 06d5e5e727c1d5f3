from weather_proxy.exceptions.weather.weather_service_error import WeatherServiceError


class InvalidResponseError(WeatherServiceError):
    """Exception for weather API bodies that are not valid JSON."""

    pass
