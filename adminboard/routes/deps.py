"""
Shared dependencies for route modules.
"""
from __future__ import annotations
import hashlib
import secrets
from typing import Dict

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from adminboard.admin.pool import Pool
from adminboard.dashboard.group_runtime import GroupRuntime

security = HTTPBasic()


def _hash_password(password: str, salt: str = "") -> str:
    """Hash password with SHA256 + salt. For production, use bcrypt/argon2."""
    if not salt:
        salt = secrets.token_hex(16)
    hashed = hashlib.sha256((salt + password).encode()).hexdigest()
    return f"{salt}${hashed}"


def _verify_password(password: str, stored: str) -> bool:
    salt, _ = stored.split("$", 1)
    return secrets.compare_digest(_hash_password(password, salt), stored)


# Stand-in user store; real deployments resolve users upstream
users_db: Dict[str, Dict[str, str]] = {
    "Alice": {"password": _hash_password("rootpass"), "role": "super_admin"},
    "Eddie": {"password": _hash_password("editpass"), "role": "editor"},
    "Ann": {"password": _hash_password("writepass"), "role": "author"},
    "Victor": {"password": _hash_password("viewpass"), "role": "viewer"},
}


def authenticate(credentials: HTTPBasicCredentials = Depends(security)) -> Dict[str, str]:
    """Authentication dependency that returns user info."""
    user = users_db.get(credentials.username)
    if not user or not _verify_password(credentials.password, user["password"]):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return {"username": credentials.username, "role": user["role"]}


def get_pool(request: Request, user: Dict[str, str] = Depends(authenticate)) -> Pool:
    """Pool with every admin bound to the authenticated user."""
    pool: Pool = request.app.state.pool
    return pool.for_subject({"username": user["username"], "role": user["role"]})


def get_group_runtime(pool: Pool = Depends(get_pool)) -> GroupRuntime:
    return GroupRuntime(pool)
