from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.logging import RequestLoggingMiddleware, setup_logging
from app.api.v1 import catalog, design, simulations


def create_app() -> FastAPI:
    setup_logging(json_format=settings.json_logs)

    # Interactive docs are not served in production.
    is_production = settings.environment == "production"
    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        debug=settings.debug,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(simulations.router, prefix="/api/v1", tags=["simulation"])
    application.include_router(design.router, prefix="/api/v1", tags=["design"])
    application.include_router(catalog.router, prefix="/api/v1", tags=["catalog"])

    @application.get("/health")
    async def health():
        return {"status": "ok", "app": settings.app_name, "environment": settings.environment}

    return application


app = create_app()
