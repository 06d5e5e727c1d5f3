from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from weather_proxy.config.config import WeatherProviderSettings


@pytest.fixture
def provider_settings():
    """Provider settings with a known API key."""
    return WeatherProviderSettings(
        openweather_api_key="test-weather-key",
        openweather_base_url="https://api.openweathermap.org/data/2.5/weather",
        openweather_units="metric",
        openweather_lang="uk",
    )


@pytest.fixture
def london_weather():
    """Minimal OpenWeatherMap payload for London."""
    return {"name": "London", "main": {"temp": 15}}


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and yield the client returned by `async with`."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def make_response():
    """Factory for stand-ins of httpx.Response."""

    def _make_response(status_code=200, json_data=None, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _make_response


@pytest.fixture
def client():
    """HTTP client for the FastAPI application."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
