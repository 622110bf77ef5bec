"""
Route modules for the admin dashboard API.
"""
from adminboard.routes.auth import router as auth_router
from adminboard.routes.dashboard import router as dashboard_router
