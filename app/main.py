from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.curp.router import router as curp_router
from app.api.v1.health.router import router as health_router
from app.core.config import Settings, get_settings, settings
from app.core.logging import configure_logging


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level)

    app = FastAPI(title="CURP Generator")

    # CORS: only the frontend origin may call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
        max_age=app_settings.cors_max_age,
    )

    if app_settings is not settings:
        app.dependency_overrides[get_settings] = lambda: app_settings

    # Routers
    app.include_router(curp_router)
    app.include_router(health_router)

    return app


app = create_app()
