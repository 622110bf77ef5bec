"""
Admin entities

An admin manages one resource type in the backend. The dashboard only needs
three questions answered by it:
- should it be listed on the dashboard at all
- does it expose a given route (list, create, edit, ...)
- may the current user perform a given action

Anything answering these can sit in the Pool, including test doubles.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

from adminboard.policy.pdp import PDP

DEFAULT_ROUTES = ("list", "create", "edit", "delete", "show")


class AdminEntity(ABC):
    """Capability interface every admin implements."""

    @abstractmethod
    def show_in_dashboard(self) -> bool:
        pass

    @abstractmethod
    def has_route(self, name: str) -> bool:
        pass

    @abstractmethod
    def has_access(self, action: str) -> bool:
        pass


class Admin(AdminEntity):
    """Admin backed by the policy decision point.

    Access is decided per subject, so an Admin that has not been bound with
    for_subject() denies every action.
    """

    def __init__(
        self,
        code: str,
        label: str,
        routes: Iterable[str] = DEFAULT_ROUTES,
        attributes: Optional[Dict[str, Any]] = None,
        dashboard: bool = True,
        pdp: Optional[PDP] = None,
        subject: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.label = label
        self.routes = frozenset(routes)
        self.attributes = dict(attributes or {})
        self.dashboard = dashboard
        self.pdp = pdp
        self.subject = subject

    def for_subject(self, subject: Dict[str, Any]) -> "Admin":
        return Admin(
            code=self.code,
            label=self.label,
            routes=self.routes,
            attributes=self.attributes,
            dashboard=self.dashboard,
            pdp=self.pdp,
            subject=subject,
        )

    def show_in_dashboard(self) -> bool:
        return self.dashboard

    def has_route(self, name: str) -> bool:
        return name in self.routes

    def has_access(self, action: str) -> bool:
        if self.pdp is None or not self.subject:
            return False
        resource = {"admin": self.code, **self.attributes}
        return self.pdp.evaluate(subject=self.subject, resource=resource, action=action).permitted

    def __repr__(self) -> str:
        return f"Admin(code={self.code!r})"
