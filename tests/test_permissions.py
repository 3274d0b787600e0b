"""Unit tests for security.auth."""
from types import SimpleNamespace

from config import STAFF_ROLE_NAME
from models.identity import Caller
from security.auth import has_required_role, member_roles


def _caller(roles) -> Caller:
    return Caller(user_id="1", display_name="Ann", roles=roles)


class TestHasRequiredRole:
    def test_missing_caller_is_denied(self) -> None:
        assert has_required_role(None) is False

    def test_missing_role_collection_is_denied(self) -> None:
        assert has_required_role(_caller(None)) is False

    def test_empty_roles_are_denied(self) -> None:
        assert has_required_role(_caller(())) is False

    def test_other_roles_are_denied(self) -> None:
        assert has_required_role(_caller(("member", "administrator"))) is False

    def test_match_is_case_sensitive(self) -> None:
        assert has_required_role(_caller((STAFF_ROLE_NAME.lower(),))) is False

    def test_sentinel_role_is_allowed(self) -> None:
        assert has_required_role(_caller(("administrator", STAFF_ROLE_NAME))) is True

    def test_custom_role_name(self) -> None:
        assert has_required_role(_caller(("creator",)), role_name="creator") is True


class TestMemberRoles:
    def test_status_and_custom_title(self) -> None:
        member = SimpleNamespace(status="administrator", custom_title="Staff")
        assert member_roles(member) == ("administrator", "Staff")

    def test_status_only(self) -> None:
        member = SimpleNamespace(status="member")
        assert member_roles(member) == ("member",)

    def test_blank_custom_title_is_ignored(self) -> None:
        member = SimpleNamespace(status="creator", custom_title=None)
        assert member_roles(member) == ("creator",)
