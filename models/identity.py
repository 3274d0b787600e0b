"""
models/identity.py
------------------
Domain models for the people involved in a command invocation.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TargetUser:
    """
    The user a privileged command acts on.

    Attributes:
        user_id: Telegram user ID as a decimal string (the ledger key).
        display_name: Name shown in replies.
    """
    user_id: str
    display_name: str


@dataclass(frozen=True)
class Caller:
    """
    The user invoking a command.

    Attributes:
        user_id: Telegram user ID as a decimal string.
        display_name: Name shown in replies.
        roles: Role names held in the current chat, or None when the chat
            has no member roles (e.g. a private chat).
    """
    user_id: str
    display_name: str
    roles: Optional[tuple[str, ...]] = None

    def __str__(self) -> str:
        return f"{self.display_name} ({self.user_id})"
