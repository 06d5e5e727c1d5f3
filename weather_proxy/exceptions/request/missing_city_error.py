from weather_proxy.exceptions.base import WeatherProxyError


class MissingCityError(WeatherProxyError):
    """Exception for requests that do not name a city."""

    pass
