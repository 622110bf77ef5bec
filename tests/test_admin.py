from adminboard.admin.base import Admin
from adminboard.policy.pdp import PDP
from adminboard.utils.config import get_settings


def make_pdp():
    return PDP.load(get_settings()["POLICY_PATH"])


def test_unbound_admin_denies_everything():
    admin = Admin("admin.article", "Articles", attributes={"section": "content"}, pdp=make_pdp())
    assert admin.has_route("create")
    assert not admin.has_access("list")
    assert not admin.has_access("create")


def test_admin_without_pdp_denies():
    admin = Admin("admin.article", "Articles", subject={"role": "super_admin"})
    assert not admin.has_access("create")


def test_editor_can_create_content():
    admin = Admin("admin.article", "Articles", attributes={"section": "content"}, pdp=make_pdp())
    assert admin.for_subject({"role": "editor"}).has_access("create")
    assert not admin.for_subject({"role": "viewer"}).has_access("create")
    assert admin.for_subject({"role": "viewer"}).has_access("list")


def test_users_section_limited_to_super_admin():
    admin = Admin("admin.user", "Users", attributes={"section": "users"}, pdp=make_pdp())
    assert not admin.for_subject({"role": "editor"}).has_access("list")
    assert admin.for_subject({"role": "super_admin"}).has_access("create")


def test_routes_and_dashboard_flag():
    admin = Admin("admin.audit_log", "Audit log", routes=("list", "show"), dashboard=False)
    assert admin.has_route("list")
    assert not admin.has_route("create")
    assert not admin.show_in_dashboard()
