import json

import httpx
import pytest


@pytest.fixture(autouse=True)
def weather_api_key(monkeypatch):
    """Provide a known API key through the environment."""
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.setenv("VITE_WEATHER_API_KEY", "test-weather-key")


class TestGetDataRoute:
    """Test cases for GET /api/getData."""

    def test_missing_city_returns_400(self, client, mock_http_client):
        """Test that a request without city is rejected before any upstream call."""
        response = client.get("/api/getData")

        assert response.status_code == 400
        assert response.json() == {"error": "City is required"}
        mock_http_client.get.assert_not_called()

    def test_empty_city_returns_400(self, client, mock_http_client):
        """Test that an empty city behaves like a missing one."""
        response = client.get("/api/getData", params={"city": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "City is required"}
        mock_http_client.get.assert_not_called()

    def test_success_relays_upstream_json(
        self, client, mock_http_client, make_response, london_weather
    ):
        """Test that upstream JSON is returned verbatim with status 200."""
        mock_http_client.get.return_value = make_response(200, london_weather)

        response = client.get("/api/getData", params={"city": "London"})

        assert response.status_code == 200
        assert response.json() == {"name": "London", "main": {"temp": 15}}

        upstream_url = mock_http_client.get.call_args.args[0]
        assert "q=London" in upstream_url
        assert "units=metric&lang=uk" in upstream_url
        assert upstream_url.endswith("&appid=test-weather-key")

    def test_upstream_error_payload_returns_200(self, client, mock_http_client, make_response):
        """Test that upstream error statuses are not translated."""
        not_found = {"cod": "404", "message": "city not found"}
        mock_http_client.get.return_value = make_response(404, not_found)

        response = client.get("/api/getData", params={"city": "Atlantis"})

        assert response.status_code == 200
        assert response.json() == not_found

    def test_network_failure_returns_500_with_message(self, client, mock_http_client):
        """Test that a transport failure is relayed as a bare message string."""
        mock_http_client.get.side_effect = httpx.ConnectError("All connection attempts failed")

        response = client.get("/api/getData", params={"city": "London"})

        assert response.status_code == 500
        assert response.json() == "All connection attempts failed"

    def test_invalid_json_returns_500_with_message(
        self, client, mock_http_client, make_response
    ):
        """Test that an undecodable upstream body is relayed as a bare message string."""
        decode_error = json.JSONDecodeError("Expecting value", "<html>", 0)
        mock_http_client.get.return_value = make_response(502, json_error=decode_error)

        response = client.get("/api/getData", params={"city": "London"})

        assert response.status_code == 500
        assert response.json() == str(decode_error)

    @pytest.mark.parametrize("city", ["a\nb", "\x01"])
    def test_unusable_city_returns_500_with_message(self, client, city):
        """Test that a city httpx cannot put in a URL is relayed as a bare message string."""
        response = client.get("/api/getData", params={"city": city})

        assert response.status_code == 500
        assert isinstance(response.json(), str)
        assert response.json() != ""

    def test_process_time_header(self, client, mock_http_client, make_response, london_weather):
        """Test that the logging middleware stamps the processing time."""
        mock_http_client.get.return_value = make_response(200, london_weather)

        response = client.get("/api/getData", params={"city": "London"})

        assert "x-process-time" in response.headers


class TestServiceRoutes:
    """Test cases for health and root endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Weather Proxy API is running"
        assert body["version"] == "1.0.0"

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"
