# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import API_PREFIX, CORS_ORIGINS, DATABASE_URL
from .core.exceptions import AppError
from .core.logging import setup_logging
from .database import build_database, init_db
from .routers import chat, plan, profile, user
from .utils.openai_client import PlanGenerator

logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None, plan_generator: PlanGenerator | None = None) -> FastAPI:
    database_url = database_url or DATABASE_URL
    generator = plan_generator or PlanGenerator()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(database_url)
        await app.state.database.connect()
        logger.info("AI provider key present: %s", generator.configured)
        yield
        await app.state.database.disconnect()

    app = FastAPI(title="ArogyaMitra", lifespan=lifespan)
    app.state.database = build_database(database_url)
    app.state.plan_generator = generator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(user.router, prefix=API_PREFIX)
    app.include_router(profile.router, prefix=API_PREFIX)
    app.include_router(plan.router, prefix=API_PREFIX)
    app.include_router(chat.router, prefix=API_PREFIX)

    return app


def get_app() -> FastAPI:
    """Entry point for `uvicorn arogyamitra.main:get_app --factory`."""
    setup_logging()
    return create_app()
