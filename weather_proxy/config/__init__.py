from weather_proxy.config.config import Config, WeatherProviderSettings, config

__all__ = ["Config", "WeatherProviderSettings", "config"]
