# pomoauth/main.py

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from pomoauth.api import auth
from pomoauth.config import Settings, load_settings
from pomoauth.database import init_db, make_engine, make_session_factory
from pomoauth.logging_config import setup_logging


logger = logging.getLogger(__name__)


async def bad_body_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Failed to read body"})


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    if not settings.secret_key:
        logger.warning("JWT_SECRET_KEY is not set; sign-in and session checks will fail")

    engine = engine or make_engine(settings.database_url)
    init_db(engine)

    app = FastAPI(title="pomo-auth")
    app.state.settings = settings
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, bad_body_handler)
    app.include_router(auth.router)
    return app
