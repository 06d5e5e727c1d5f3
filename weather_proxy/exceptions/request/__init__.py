from weather_proxy.exceptions.request.missing_city_error import MissingCityError

__all__ = ["MissingCityError"]
