from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemDescriptor(BaseModel):
    """One dashboard entry. Items without an admin code are plain route links."""

    model_config = ConfigDict(frozen=True)

    admin: Optional[str] = None
    label: str = ""
    roles: List[str] = Field(default_factory=list)
    route: Optional[str] = None
    route_params: Dict[str, Any] = Field(default_factory=dict)
    route_absolute: bool = False


class GroupDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    label_catalogue: str = "default"
    icon: Optional[str] = None
    items: Dict[str, ItemDescriptor] = Field(default_factory=dict)  # insertion order is display order
    item_adds: List[Dict[str, Any]] = Field(default_factory=list)
    keep_open: bool = False
    on_top: bool = False
    roles: List[str] = Field(default_factory=list)

    def with_items(self, items: Dict[str, ItemDescriptor]) -> "GroupDescriptor":
        """Deep copy of the group holding items instead of its own."""
        copied = {key: item.model_copy(deep=True) for key, item in items.items()}
        return self.model_copy(update={"items": copied}, deep=True)
