import sys
import time

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_proxy import __version__
from weather_proxy.api import api_router
from weather_proxy.api.health import health_router
from weather_proxy.config.config import config
from weather_proxy.exceptions import MissingCityError, WeatherServiceError
from weather_proxy.utils.logging_config import setup_logging

# Configure logging
setup_logging()
logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Proxy API",
        description="""
        ## Weather Proxy API

        Relays current weather lookups to OpenWeatherMap.

        ### Endpoint:
        - **GET /api/getData?city=London**: the provider's JSON, verbatim

        ### Errors:
        - **400**: `{"error": "City is required"}` when `city` is missing or empty
        - **500**: the failure message as a JSON string when the provider call fails
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Browser clients call the proxy directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            raise

    @app.exception_handler(MissingCityError)
    async def missing_city_handler(request: Request, exc: MissingCityError):
        """Answer requests without a city with a structured 400."""
        logger.warning("Rejected request without city", url=str(request.url))

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc)},
        )

    @app.exception_handler(WeatherServiceError)
    async def weather_service_error_handler(request: Request, exc: WeatherServiceError):
        """Relay weather provider failures as a bare message string."""
        logger.error(
            "Weather provider call failed",
            url=str(request.url),
            error_type=type(exc).__name__,
            error=str(exc),
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=str(exc),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
                "timestamp": time.time(),
            },
        )

    app.include_router(health_router)
    app.include_router(api_router)

    # Root endpoint (hide from swagger)
    @app.get("/", tags=["Root"], include_in_schema=False)
    async def root():
        """Root endpoint providing basic system information."""
        return {
            "message": "Weather Proxy API",
            "version": __version__,
            "status": "running",
            "timestamp": time.time(),
            "docs": "/docs",
        }

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting Weather Proxy server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
