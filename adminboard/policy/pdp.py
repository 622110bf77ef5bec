from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml


@dataclass
class Decision:
    effect: str  # "permit" or "deny"
    rule: Optional[str] = None

    @property
    def permitted(self) -> bool:
        return self.effect == "permit"


class PDP:
    """Rule list evaluated top to bottom; the first matching rule decides."""

    def __init__(self, policy: Dict[str, Any]):
        self.policy = policy or {}
        self.default = self.policy.get("default", "deny")
        self.rules: List[Dict[str, Any]] = self.policy.get("rules", [])

    @staticmethod
    def load(path: str) -> "PDP":
        with open(path, "r", encoding="utf-8") as f:
            policy = yaml.safe_load(f)
        return PDP(policy)

    def evaluate(self, subject: Dict[str, Any], resource: Dict[str, Any], action: str, flags: Optional[Dict[str, Any]] = None) -> Decision:
        ctx = {
            "subject": subject or {},
            "resource": resource or {},
            "action": action,
            "flags": flags or {},
        }
        for rule in self.rules:
            when = rule.get("when")
            if when is None:
                continue
            if self._eval_when(when, ctx):
                return Decision(effect=rule.get("effect", self.default), rule=rule.get("name"))
        return Decision(effect=self.default, rule=None)

    def _eval_when(self, when: Dict[str, Any], ctx: Dict[str, Any]) -> bool:
        # all: [...] needs every condition, any: [...] needs one
        if "all" in when:
            conditions = when["all"] or []
            return all(self._eval_condition(cond, ctx) for cond in conditions)
        if "any" in when:
            conditions = when["any"] or []
            return any(self._eval_condition(cond, ctx) for cond in conditions)
        return False

    def _eval_condition(self, cond: Dict[str, Any], ctx: Dict[str, Any]) -> bool:
        if not isinstance(cond, dict) or len(cond) != 1:
            return False
        op, args = next(iter(cond.items()))
        if not isinstance(args, list) or len(args) != 2:
            return False
        left = self._resolve(args[0], ctx)
        right = self._resolve(args[1], ctx)

        if op == "eq":
            return left == right
        if op == "ne":
            return left != right
        if op == "in":
            return left in (right or [])
        if op == "not_in":
            return left not in (right or [])
        return False

    def _resolve(self, value: Any, ctx: Dict[str, Any]) -> Any:
        if not isinstance(value, str):
            return value
        if value == "action":
            return ctx.get("action")
        scope, _, rest = value.partition(".")
        if rest and scope in ("subject", "resource", "flags"):
            return self._deep_get(ctx.get(scope, {}), rest.split("."))
        return value

    @staticmethod
    def _deep_get(d: Dict[str, Any], path: List[str]) -> Any:
        cur: Any = d
        for p in path:
            if isinstance(cur, dict) and p in cur:
                cur = cur[p]
            else:
                return None
        return cur
