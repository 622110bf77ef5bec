"""
Dashboard routes (visible groups, groups with creatable admins).
"""
from __future__ import annotations
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from adminboard.admin.pool import Pool
from adminboard.dashboard.group_runtime import GroupRuntime
from adminboard.dashboard.models import GroupDescriptor
from adminboard.routes.deps import authenticate, get_group_runtime, get_pool
from adminboard.utils.audit import gen_correlation_id, log_event
from adminboard.utils.rate_limit import DASHBOARD_RATE_LIMIT, limiter

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _serialize(groups: List[GroupDescriptor]) -> List[Dict[str, Any]]:
    return [group.model_dump() for group in groups]


@router.get("/groups")
@limiter.limit(DASHBOARD_RATE_LIMIT)
def dashboard_groups(request: Request, response: Response, user=Depends(authenticate),
                     runtime: GroupRuntime = Depends(get_group_runtime)):
    """Groups shown on the dashboard, pruned to displayable admins."""
    cid = gen_correlation_id()
    response.headers["X-Correlation-ID"] = cid
    log_event(cid, "dashboard_groups.start", {"role": user["role"]})
    groups = runtime.get_dashboard_groups()
    log_event(cid, "dashboard_groups.end", {"count": len(groups)})
    return {"count": len(groups), "groups": _serialize(groups), "correlation_id": cid}


@router.get("/groups/creatable")
@limiter.limit(DASHBOARD_RATE_LIMIT)
def dashboard_creatable_groups(request: Request, response: Response, user=Depends(authenticate),
                               runtime: GroupRuntime = Depends(get_group_runtime)):
    """Groups holding admins the user can create with (the "add new" menu)."""
    cid = gen_correlation_id()
    response.headers["X-Correlation-ID"] = cid
    log_event(cid, "dashboard_creatable.start", {"role": user["role"]})
    groups = runtime.get_dashboard_groups_with_creatable_admins()
    log_event(cid, "dashboard_creatable.end", {"count": len(groups)})
    return {"count": len(groups), "groups": _serialize(groups), "correlation_id": cid}


@router.get("/groups/{group_key}/admins")
@limiter.limit(DASHBOARD_RATE_LIMIT)
def dashboard_group_admins(group_key: str, request: Request, response: Response, user=Depends(authenticate),
                           pool: Pool = Depends(get_pool)):
    """Admin codes of one group, with the create capability of each."""
    cid = gen_correlation_id()
    response.headers["X-Correlation-ID"] = cid
    log_event(cid, "dashboard_group_admins.start", {"group": group_key, "role": user["role"]})
    try:
        admins = pool.get_admins_by_group(group_key)
    except KeyError:
        log_event(cid, "dashboard_group_admins.not_found", {"group": group_key})
        raise HTTPException(status_code=404, detail=f"Unknown dashboard group: {group_key}",
                            headers={"X-Correlation-ID": cid})
    resp = {
        "group": group_key,
        "admins": [
            {
                "code": getattr(admin, "code", None),
                "label": getattr(admin, "label", None),
                "creatable": admin.has_route("create") and admin.has_access("create"),
            }
            for admin in admins
        ],
        "correlation_id": cid,
    }
    log_event(cid, "dashboard_group_admins.end", {"count": len(resp["admins"])})
    return resp
