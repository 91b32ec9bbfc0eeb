import logging

from fastapi import FastAPI

from mapservice.api.endpoints import geocoding
from mapservice.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME)

app.include_router(geocoding.router, prefix="/geocoding", tags=["geocoding"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
