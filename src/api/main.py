"""Main FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings, settings
from api.dependencies import build_form_manager
from api.routers import form, submissions
from form_store.manager import FormManager
from utils.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    manager: FormManager = app.state.form_manager
    logger.info(f"Serving form '{manager.schema.title}' with {len(manager.schema)} fields")
    yield

    # Records live in process memory only
    manager.store.clear()
    logger.info("Record store cleared")


def create_app(manager: Optional[FormManager] = None, app_settings: Settings = settings) -> FastAPI:
    """Create FastAPI application.

    Args:
        manager: Form manager to serve; built from the settings when omitted
        app_settings: Settings for the application
    """
    app = FastAPI(title=app_settings.api_title, version=app_settings.api_version, description=app_settings.api_description, lifespan=lifespan)
    app.state.form_manager = manager if manager is not None else build_form_manager(app_settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add routers
    app.include_router(form.router)
    app.include_router(submissions.router)

    return app


app = create_app()
