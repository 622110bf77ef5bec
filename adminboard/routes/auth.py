"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, Request

from adminboard.routes.deps import authenticate
from adminboard.utils.rate_limit import limiter

router = APIRouter(tags=["auth"])


@router.get("/login")
@limiter.limit("30/minute")
def login(request: Request, user=Depends(authenticate)):
    """Login endpoint - validates credentials and returns user info."""
    return {"message": f"Welcome {user['username']}!", "role": user["role"]}
