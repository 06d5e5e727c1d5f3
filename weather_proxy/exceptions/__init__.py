from weather_proxy.exceptions.base import WeatherProxyError
from weather_proxy.exceptions.request import MissingCityError
from weather_proxy.exceptions.weather import (
    APIRequestError,
    InvalidResponseError,
    WeatherServiceError,
)

__all__ = [
    "APIRequestError",
    "InvalidResponseError",
    "MissingCityError",
    "WeatherProxyError",
    "WeatherServiceError",
]
