"""
Main entry point of the complexity estimator service.

Exposes `create_app` for tests and ASGI servers (Uvicorn, Gunicorn, ...) and a
module-level `app` used by default when run with Uvicorn.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .api.analyzer_routes import router as analyzer_router
from .config import settings


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    """
    Creates and configures the FastAPI application.

    - Configures logging from the settings.
    - Configures CORS for the frontend.
    - Registers the analysis router.

    Returns:
        Configured `FastAPI` instance.
    """
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Complexity Estimator Service",
        version="1.0.0",
        description=(
            "Microservice that estimates asymptotic time and space complexity "
            "of short C, Python, Pascal and JavaScript snippets from their "
            "loop, nesting and recursion patterns."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- CORS Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(analyzer_router)

    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)

    return app


# Default instance used by Uvicorn
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )
