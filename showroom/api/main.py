"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showroom.utils.config import api_prefix, cors_origins, log_level_name
from showroom.utils.domains import OPTION_LISTS

# Configure logging
LOG_LEVEL_NAME = log_level_name()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from showroom.api.errors import install_exception_handlers
from showroom.api.clients import router as clients_router
from showroom.api.emails import router as emails_router
from showroom.api.knowledge import router as knowledge_router
from showroom.api.statistics import router as statistics_router
from showroom.api.users import router as users_router
from showroom.api.vehicles import router as vehicles_router
from showroom.api.waitlist import router as waitlist_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Showroom Dashboard Service",
    description="API for the dealership dashboard: inbox, inventory, waitlist, knowledge base and statistics.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

API_PREFIX = api_prefix()

for resource_router in (
    emails_router,
    vehicles_router,
    waitlist_router,
    knowledge_router,
    clients_router,
    users_router,
    statistics_router,
):
    app.include_router(resource_router, prefix=API_PREFIX)


@app.get(f"{API_PREFIX}/options", tags=["options"])
def list_options():
    """Allowed values of every enumerated field, for form selects."""
    return OPTION_LISTS


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "showroom-service"}
