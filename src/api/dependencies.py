"""API dependencies."""

from fastapi import Request

from api.config import Settings
from form_store.loader import load_form_schema
from form_store.manager import FormManager


def build_form_manager(app_settings: Settings) -> FormManager:
    """Create the form manager described by the settings."""
    return FormManager(
        schema=load_form_schema(app_settings.form_schema_path),
        validation_mode=app_settings.validation_mode,
        revalidate_on_update=app_settings.revalidate_on_update,
        reject_unknown_fields=app_settings.reject_unknown_fields,
    )


async def get_form_manager(request: Request) -> FormManager:
    """Dependency for getting the application's form manager."""
    return request.app.state.form_manager
