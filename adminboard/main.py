"""
Admin dashboard API.

Loads the access policy and the admin pool once at startup, then serves the
dashboard groups of the authenticated user:
- /dashboard/groups: groups with admins shown on the dashboard
- /dashboard/groups/creatable: groups with admins the user can create with
"""
from __future__ import annotations
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from adminboard.admin.pool import Pool
from adminboard.dashboard.catalog import build_pool
from adminboard.policy.pdp import PDP
from adminboard.routes import auth_router, dashboard_router
from adminboard.utils.config import get_settings, load_env
from adminboard.utils.rate_limit import limiter

# Load environment from .env without overriding existing env vars
load_env(override=False)
SETTINGS = get_settings()

logging.basicConfig(
    level=SETTINGS["LOG_LEVEL"].upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(pool: Pool | None = None) -> FastAPI:
    app = FastAPI(title="adminboard")
    if pool is None:
        pdp = PDP.load(SETTINGS["POLICY_PATH"])
        pool = build_pool(pdp)
        logger.info("Loaded policy from %s with %d rules", SETTINGS["POLICY_PATH"], len(pdp.rules))
    app.state.pool = pool
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.include_router(auth_router)
    app.include_router(dashboard_router)
    return app


app = create_app()
