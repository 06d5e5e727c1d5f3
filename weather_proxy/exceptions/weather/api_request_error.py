from weather_proxy.exceptions.weather.weather_service_error import WeatherServiceError


class APIRequestError(WeatherServiceError):
    """Exception for transport failures while calling the weather API."""

    pass
