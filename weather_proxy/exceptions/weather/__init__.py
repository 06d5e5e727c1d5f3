from weather_proxy.exceptions.weather.api_request_error import APIRequestError
from weather_proxy.exceptions.weather.invalid_response_error import InvalidResponseError
from weather_proxy.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = ["APIRequestError", "InvalidResponseError", "WeatherServiceError"]
