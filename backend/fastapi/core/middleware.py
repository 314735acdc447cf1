import logging
import os
from fastapi.middleware.cors import CORSMiddleware
from backend.fastapi.core.init_settings import global_settings

logger = logging.getLogger(__name__)

def setup_cors(app):
    # Check if we should allow all origins (for debugging)
    allow_all_origins = os.getenv("ALLOW_ALL_ORIGINS", "false").lower() == "true"

    if allow_all_origins:
        logger.warning("CORS is set to allow ALL origins. Only use this for debugging!")
        origins = ["*"]
        allow_credentials = False  # Can't use credentials with wildcard origins
    else:
        origins = global_settings.CORS_ORIGINS
        allow_credentials = True

    logger.info("CORS allowed origins: %s", origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Accept-Language",
            "X-Forwarded-For"
        ]
    )
