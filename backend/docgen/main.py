import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docgen.api.routes import documents, health
from docgen.config import settings as app_settings
from docgen.middleware.error_handler import register_error_handlers
from docgen.middleware.rate_limit import RateLimitMiddleware
from docgen.middleware.security import SecurityMiddleware
from docgen.services.export.registry import list_formats

# Configure logging
logging.basicConfig(
    level=app_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(title=app_settings.app_name, version="0.1.0")

# Middleware (order matters: outermost first)
app.add_middleware(
    RateLimitMiddleware,
    max_requests=app_settings.rate_limit_requests,
    window_seconds=app_settings.rate_limit_window,
)
app.add_middleware(SecurityMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error handlers
register_error_handlers(app)

# Routes
app.include_router(health.router)
app.include_router(documents.router)

logger.info("%s ready, renderers: %s", app_settings.app_name, ", ".join(list_formats()))
