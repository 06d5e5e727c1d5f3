from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WeatherProviderSettings(BaseSettings):
    """
    OpenWeatherMap settings.

    Instantiated on every upstream call so a rotated API key is picked up
    without restarting the process.
    """

    openweather_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("VITE_WEATHER_API_KEY", "OPENWEATHER_API_KEY"),
        description="OpenWeatherMap API key for weather data",
    )
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current weather endpoint",
    )
    openweather_units: str = Field(default="metric", description="Temperature units")
    openweather_lang: str = Field(default="uk", description="Language of weather descriptions")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Covers the HTTP server and logging. Provider settings live in
    WeatherProviderSettings.
    """

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
