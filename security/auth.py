"""
security/auth.py
-----------------
Role-based permission check for privileged ledger commands.
"""

from typing import Optional

from telegram import ChatMember

from config import STAFF_ROLE_NAME
from models.identity import Caller


def member_roles(member: ChatMember) -> tuple[str, ...]:
    """
    Collect the role names a chat member holds.

    Telegram has no free-form roles, so a member's roles are its status
    (``creator``, ``administrator``, ``member``, ...) plus the custom title
    an owner or administrator may carry.
    """
    roles = [member.status]
    custom_title = getattr(member, "custom_title", None)
    if custom_title:
        roles.append(custom_title)
    return tuple(roles)


def has_required_role(caller: Optional[Caller], role_name: str = STAFF_ROLE_NAME) -> bool:
    """
    Return True iff the caller holds a role named exactly ``role_name``.

    A missing caller or a caller without a role collection is denied.
    """
    if caller is None or caller.roles is None:
        return False
    return any(role == role_name for role in caller.roles)
