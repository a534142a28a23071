# automation_value_engine/value_engine/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI

from value_engine.config import setup_json_logging, settings
from value_engine.api.routes.calculations import router as calculations_router
from value_engine.api.routes.realization import router as realization_router


def create_app() -> FastAPI:
    setup_json_logging(log_level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(
        title=settings.API_TITLE,
        version="0.1.0",
    )

    app.include_router(calculations_router)
    app.include_router(realization_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
