from weather_proxy.api.weather.weather_routes import router as weather_router

__all__ = ["weather_router"]
