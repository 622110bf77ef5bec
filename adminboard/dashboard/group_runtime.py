from __future__ import annotations
from typing import List

from adminboard.admin.base import AdminEntity
from adminboard.admin.pool import Pool
from adminboard.dashboard.models import GroupDescriptor

CREATE_ACTION = "create"


def _creatable(admin: AdminEntity) -> bool:
    return admin.has_route(CREATE_ACTION) and admin.has_access(CREATE_ACTION)


class GroupRuntime:
    """Dashboard group helpers exposed to the presentation layer."""

    def __init__(self, pool: Pool):
        self.pool = pool

    def get_dashboard_groups(self) -> List[GroupDescriptor]:
        return self.pool.get_dashboard_groups()

    def get_dashboard_groups_with_creatable_admins(self) -> List[GroupDescriptor]:
        """Groups holding at least one admin the current user can create with.

        Each returned group is a copy restricted to its creatable items.
        Group and item order follow the configuration. Unresolved admins,
        missing create routes and denied access all just drop the item.
        """
        # show_in_dashboard() is not consulted: admins hidden from the
        # dashboard still appear here when they are creatable
        return self.pool.filter_groups(_creatable)
