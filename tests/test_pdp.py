from adminboard.policy.pdp import PDP
from adminboard.utils.config import get_settings


def make_pdp():
    return PDP.load(get_settings()["POLICY_PATH"])


def test_super_admin_full_access_anything():
    decision = make_pdp().evaluate(
        subject={"role": "super_admin"},
        resource={"admin": "admin.user", "section": "users"},
        action="delete",
    )
    assert decision.effect == "permit"
    assert decision.rule == "super_admin_full_access"


def test_users_section_deny_for_editor():
    decision = make_pdp().evaluate(
        subject={"role": "editor"},
        resource={"admin": "admin.user", "section": "users"},
        action="list",
    )
    assert decision.effect == "deny"
    assert decision.rule == "users_section_super_admin_only"


def test_viewer_read_only():
    pdp = make_pdp()
    resource = {"admin": "admin.article", "section": "content"}
    assert pdp.evaluate({"role": "viewer"}, resource, "show").permitted
    assert not pdp.evaluate({"role": "viewer"}, resource, "create").permitted


def test_author_cannot_delete_content():
    pdp = make_pdp()
    resource = {"admin": "admin.article", "section": "content"}
    assert pdp.evaluate({"role": "author"}, resource, "create").permitted
    decision = pdp.evaluate({"role": "author"}, resource, "delete")
    assert decision.effect == "deny"
    assert decision.rule is None


def test_any_conditions_and_flags():
    pdp = PDP({
        "default": "deny",
        "rules": [
            {
                "name": "maintenance_or_ops",
                "effect": "permit",
                "when": {"any": [
                    {"eq": ["flags.maintenance", "on"]},
                    {"eq": ["subject.team.name", "ops"]},
                ]},
            },
        ],
    })
    assert pdp.evaluate({}, {}, "create", flags={"maintenance": "on"}).permitted
    assert pdp.evaluate({"team": {"name": "ops"}}, {}, "create").permitted
    assert not pdp.evaluate({"team": {"name": "dev"}}, {}, "create").permitted


def test_malformed_conditions_do_not_match():
    pdp = PDP({
        "default": "deny",
        "rules": [
            {"name": "bad_arity", "effect": "permit", "when": {"all": [{"eq": ["action"]}]}},
            {"name": "unknown_op", "effect": "permit", "when": {"all": [{"gt": ["action", "x"]}]}},
            {"name": "no_when", "effect": "permit"},
        ],
    })
    assert pdp.evaluate({}, {}, "create").effect == "deny"
