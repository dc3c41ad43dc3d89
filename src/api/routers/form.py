"""Form router serving the form schema."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_form_manager
from form_store.manager import FormManager

router = APIRouter(tags=["form"])


@router.get("/form-schema")
async def get_form_schema(manager: FormManager = Depends(get_form_manager)) -> Dict[str, Any]:
    """Return the form schema for client-side rendering and validation."""
    return manager.schema.to_document()
