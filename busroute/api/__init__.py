from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from busroute.core.settings import Settings
from busroute.monitoring.logging_config import setup_logging
from .dependencies import close_optimization_services, get_settings
from .routes import router as api_router
from .schemas import ErrorResponse, HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_optimization_services()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(
        level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
        json_logs=settings.LOG_JSON,
        config_path=settings.LOG_CONFIG_PATH,
    )

    app = FastAPI(title=f"{settings.APP_NAME} API", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.ALLOWED_ORIGINS),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


app = create_app()

__all__ = ["app", "create_app", "ErrorResponse", "HealthResponse"]
