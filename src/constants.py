"""Constants for the application."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_bool(key: str, default: bool = False) -> bool:
    return os.environ.get(key, str(default)).strip().lower() in ("true", "1", "yes")


# Logging
LOGGING_LEVEL = os.environ.get("LOGGING_LEVEL", "DEBUG").upper()

# Form schema document; the built-in onboarding form is used when unset
FORM_SCHEMA_PATH = os.environ.get("FORM_SCHEMA_PATH") or None

# Validation behaviour
REVALIDATE_ON_UPDATE = _get_bool("REVALIDATE_ON_UPDATE")
REJECT_UNKNOWN_FIELDS = _get_bool("REJECT_UNKNOWN_FIELDS")
