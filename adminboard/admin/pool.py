"""
Admin pool: the registry of admins and dashboard groups.

The pool owns the group configuration and resolves admin codes to admin
entities through a plain mapping. Everything else only reads from it.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from adminboard.admin.base import AdminEntity
from adminboard.dashboard.models import GroupDescriptor

logger = logging.getLogger(__name__)

GroupConfig = Union[GroupDescriptor, Mapping[str, Any]]


class AdminCodeNotFoundError(KeyError):
    """Raised when an admin code is not registered in the pool."""


class Pool:
    def __init__(
        self,
        container: Mapping[str, AdminEntity],
        admin_service_codes: List[str],
        admin_groups: Optional[Mapping[str, GroupConfig]] = None,
    ):
        self.container = container
        self.admin_service_codes = list(admin_service_codes)
        # descriptors never leave the pool; readers get deep copies
        self._admin_groups: Dict[str, GroupDescriptor] = {
            key: group.model_copy(deep=True) if isinstance(group, GroupDescriptor)
            else GroupDescriptor.model_validate(group)
            for key, group in (admin_groups or {}).items()
        }

    def get_admin_groups(self) -> Dict[str, GroupDescriptor]:
        return {key: group.model_copy(deep=True) for key, group in self._admin_groups.items()}

    def get_admin_service_codes(self) -> List[str]:
        return list(self.admin_service_codes)

    def has_admin_by_admin_code(self, code: str) -> bool:
        return code in self.admin_service_codes and code in self.container

    def find_instance(self, code: Optional[str]) -> Optional[AdminEntity]:
        """Resolve an admin code, returning None when it cannot be resolved."""
        if not code or not self.has_admin_by_admin_code(code):
            return None
        return self.container[code]

    def get_instance(self, code: str) -> AdminEntity:
        admin = self.find_instance(code)
        if admin is None:
            raise AdminCodeNotFoundError(f'Admin service "{code}" not found in admin pool.')
        return admin

    def get_admins_by_group(self, group_key: str) -> List[AdminEntity]:
        if group_key not in self._admin_groups:
            raise KeyError(f'Group "{group_key}" not found in admin pool.')
        admins: List[AdminEntity] = []
        for item in self._admin_groups[group_key].items.values():
            admin = self.find_instance(item.admin)
            if admin is not None:
                admins.append(admin)
        return admins

    def filter_groups(self, predicate: Callable[[AdminEntity], bool]) -> List[GroupDescriptor]:
        """Copies of the groups keeping only items whose resolved admin passes predicate.

        Group and item order follow the configuration. Items whose admin does
        not resolve are dropped, and groups left without items are omitted.
        """
        groups: List[GroupDescriptor] = []
        for key, group in self._admin_groups.items():
            items = {}
            for item_key, item in group.items.items():
                admin = self.find_instance(item.admin)
                if admin is None:
                    if item.admin:
                        logger.debug("Skipping unresolved admin %r in group %r", item.admin, key)
                    continue
                if predicate(admin):
                    items[item_key] = item
            if items:
                groups.append(group.with_items(items))
        return groups

    def get_dashboard_groups(self) -> List[GroupDescriptor]:
        """Groups pruned to the admins that want to be shown on the dashboard."""
        return self.filter_groups(lambda admin: admin.show_in_dashboard())

    def for_subject(self, subject: Dict[str, Any]) -> "Pool":
        """Copy of the pool with every bindable admin bound to subject."""
        container = {
            code: admin.for_subject(subject) if hasattr(admin, "for_subject") else admin
            for code, admin in self.container.items()
        }
        return Pool(container, self.admin_service_codes, self._admin_groups)
