"""
FastAPI application for the tech-fest admin backend.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.fastapi.core.init_settings import global_settings
from backend.fastapi.core.lifespan import lifespan
from backend.fastapi.core.middleware import setup_cors
from backend.fastapi.core.routers import setup_routers

logging.basicConfig(
    level=global_settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=global_settings.APP_NAME,
    version=global_settings.APP_VERSION,
    lifespan=lifespan
)

setup_cors(app)
setup_routers(app)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report schema failures as 400 Bad Request."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())}
    )


@app.get("/", tags=["main"])
async def read_root():
    return {"message": f"{global_settings.APP_NAME} is running", "version": global_settings.APP_VERSION}
