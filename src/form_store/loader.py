"""Loading of form schema documents."""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from form_store.defaults import ONBOARDING_FORM
from form_store.exceptions import InvalidFormSchemaError
from form_store.models.schema import FormSchema
from utils.logging import logger


def load_form_schema(path: Optional[Union[str, Path]] = None) -> FormSchema:
    """Load a form schema from a JSON document.

    Args:
        path: Location of the schema document; the built-in onboarding form is
            used when omitted

    Returns:
        FormSchema: The validated schema

    Raises:
        InvalidFormSchemaError: If the document cannot be read or is not a valid schema
    """
    if path is None:
        logger.debug("No form schema path configured, using built-in onboarding form")
        return FormSchema.model_validate(ONBOARDING_FORM)

    logger.info(f"Loading form schema from {path}")
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidFormSchemaError(f"Failed to read form schema from {path}: {str(e)}")

    try:
        schema = FormSchema.model_validate(document)
    except ValidationError as e:
        raise InvalidFormSchemaError(f"Invalid form schema in {path}: {str(e)}")

    logger.info(f"Loaded form schema '{schema.title}' with {len(schema)} fields")
    return schema
