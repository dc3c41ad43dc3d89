"""FastAPI application serving the form and its submissions."""
