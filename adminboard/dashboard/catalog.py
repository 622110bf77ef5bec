"""
Built-in admins and dashboard groups served by the API.

Group entries use the same literal shape the Pool validates into
GroupDescriptor values.
"""
from __future__ import annotations
from typing import Any, Dict, List

from adminboard.admin.base import Admin
from adminboard.admin.pool import Pool
from adminboard.policy.pdp import PDP


def _item(admin: str, label: str, route: str = "list") -> Dict[str, Any]:
    return {
        "admin": admin,
        "label": label,
        "roles": [],
        "route": route,
        "route_params": {},
        "route_absolute": False,
    }


ADMIN_GROUPS: Dict[str, Dict[str, Any]] = {
    "content": {
        "label": "Content",
        "label_catalogue": "default",
        "icon": "fa fa-file-text",
        "items": {
            "article": _item("admin.article", "Articles"),
            "page": _item("admin.page", "Pages"),
            "comment": _item("admin.comment", "Comments"),
        },
        "item_adds": [],
        "keep_open": True,
        "on_top": False,
        "roles": [],
    },
    "users": {
        "label": "Users",
        "label_catalogue": "default",
        "icon": "fa fa-users",
        "items": {
            "user": _item("admin.user", "Users"),
            "group": _item("admin.group", "Groups"),
        },
        "item_adds": [],
        "keep_open": False,
        "on_top": False,
        "roles": [],
    },
    "reports": {
        "label": "Reports",
        "label_catalogue": "default",
        "icon": "fa fa-bar-chart",
        "items": {
            "audit": _item("admin.audit_log", "Audit log"),
            "docs": {
                "label": "Documentation",
                "route": "docs_index",
                "route_params": {},
                "route_absolute": True,
            },
        },
        "item_adds": [],
        "keep_open": False,
        "on_top": True,
        "roles": [],
    },
}


def build_admins(pdp: PDP) -> List[Admin]:
    return [
        Admin("admin.article", "Articles", attributes={"section": "content"}, pdp=pdp),
        Admin("admin.page", "Pages", attributes={"section": "content"}, pdp=pdp),
        # comments are created by readers, never from the backend
        Admin("admin.comment", "Comments", routes=("list", "edit", "delete", "show"),
              attributes={"section": "content"}, pdp=pdp),
        Admin("admin.user", "Users", attributes={"section": "users"}, pdp=pdp),
        Admin("admin.group", "Groups", attributes={"section": "users"}, pdp=pdp),
        Admin("admin.audit_log", "Audit log", routes=("list", "show"),
              attributes={"section": "reports"}, pdp=pdp),
    ]


def build_pool(pdp: PDP) -> Pool:
    admins = build_admins(pdp)
    container = {admin.code: admin for admin in admins}
    return Pool(container, [admin.code for admin in admins], ADMIN_GROUPS)
