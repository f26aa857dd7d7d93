"""
FastAPI application entry point.

Ties together:
- The HTML calculator form
- JSON arithmetic endpoints
- Health check
- Error handling and logging
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from digitmath import __version__
from digitmath.api.routes import arithmetic, calculator, health
from digitmath.config import get_settings
from digitmath.domain.errors import InvalidInput

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup and shutdown."""
    settings = get_settings()

    logger.info(f"Starting digitmath v{__version__}")
    logger.info(f"Debug mode: {settings.debug}")
    if settings.max_factorial_n is not None:
        logger.info(f"Factorial limit: n <= {settings.max_factorial_n}")

    yield  # Application runs here

    logger.info("Shutting down digitmath")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance ready to serve requests.
    """
    settings = get_settings()
    logging.getLogger("digitmath").setLevel(settings.log_level)

    app = FastAPI(
        title="digitmath",
        description=(
            "Arbitrary-precision decimal arithmetic on digit arrays.\n\n"
            "Multiplication and factorial are computed using addition only."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(calculator.router)
    app.include_router(arithmetic.router, prefix="/api/v1")

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        """Report rejected input as a client error."""
        logger.info(f"Invalid input on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid input",
                "detail": str(exc),
            },
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all exception handler for unhandled errors."""
        logger.exception(f"Unhandled error: {exc}")

        # Don't expose internal errors in production
        if settings.debug:
            detail = str(exc)
        else:
            detail = "An internal error occurred"

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal Server Error",
                "detail": detail,
            },
        )

    return app


# Create the application instance
app = create_app()


# Development server entry point
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "digitmath.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
