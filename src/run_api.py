"""Run the FastAPI server."""

import uvicorn

from api.config import settings

if __name__ == "__main__":
    # Records are held in process memory, so a single worker serves them all
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
    )
