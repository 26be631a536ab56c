import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assessment.logic.constants import DEFAULT_TOP_N, ENGINE_VERSION
from assessment.routes import routers
from db import create_session_factory

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


def _cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


def _report_top_n() -> int:
    try:
        return int(os.getenv("REPORT_TOP_N", str(DEFAULT_TOP_N)))
    except ValueError:
        logger.warning("REPORT_TOP_N is not an integer, using default")
        return DEFAULT_TOP_N


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Build the API with its own database session factory."""
    app = FastAPI(title="NextU Stream Assessment", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.session_factory = create_session_factory(database_url)
    app.state.report_top_n = _report_top_n()

    for router in routers:
        app.include_router(router)

    @app.get("/api/health", tags=["health"])
    def health_check():
        return {"status": "ok", "engine": "assessment", "version": ENGINE_VERSION}

    logger.info("App started")
    return app


app = create_app()
