"""
handlers/interaction.py
------------------------
Per-invocation state shared by the ledger command handlers.

An `Interaction` wraps one Telegram update: it knows who called, how to
reply publicly or privately, and whether a reply has been sent yet.
`interaction_command` turns a handler into a python-telegram-bot callback
and is the last-resort error backstop for it.
"""

from functools import wraps
from typing import Awaitable, Callable, Optional

from telegram import Message, MessageEntity, Update, User
from telegram.constants import ChatType, ParseMode
from telegram.error import Forbidden, TelegramError
from telegram.ext import ContextTypes

from models.identity import Caller, TargetUser
from security.auth import member_roles
from services.ledger_service import LedgerService
from utils.formatting import parse_amount
from utils.logger import get_logger

logger = get_logger(__name__)

LEDGER_KEY = "ledger"

GENERIC_ERROR_TEXT = "There was an error while executing this command!"
DM_BLOCKED_TEXT = (
    "📬 I couldn't message you privately. "
    "Open a chat with me and press Start, then try again."
)

_GROUP_CHATS = (ChatType.GROUP, ChatType.SUPERGROUP)


def display_name(user: User) -> str:
    """Best human-readable name for a Telegram user."""
    return user.full_name or user.username or str(user.id)


def _is_user_reply(message: Optional[Message]) -> bool:
    """True if the replied-to message was written by a human, not a bot or a topic header."""
    if message is None or message.from_user is None or message.from_user.is_bot:
        return False
    # forum topics quote their creation message as reply_to_message
    return message.forum_topic_created is None


class Interaction:
    """One command invocation and the replies sent for it."""

    def __init__(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        self.update = update
        self.context = context
        self.replied = False

    @property
    def user(self) -> User:
        return self.update.effective_user

    @property
    def in_group(self) -> bool:
        return self.update.effective_chat.type in _GROUP_CHATS

    async def resolve_caller(self) -> Caller:
        """
        Build the caller identity, including chat roles when in a group.

        Private chats have no member roles, so `roles` stays None there.
        """
        roles = None
        if self.in_group:
            member = await self.update.effective_chat.get_member(self.user.id)
            roles = member_roles(member)
        return Caller(user_id=str(self.user.id), display_name=display_name(self.user), roles=roles)

    async def target_and_amount(self) -> tuple[Optional[TargetUser], Optional[int]]:
        """
        Work out who a privileged command targets and by how much.

        The target is, in order of preference: a numeric user ID given as the
        first of at least two arguments, the author of the replied-to message,
        the first text mention, or a lone numeric argument. Replies to bots
        and to forum topic headers never select a target. The amount is the
        last remaining argument.

        Returns:
            (target, amount); either is None when it could not be parsed.
        """
        message = self.update.effective_message
        args = list(self.context.args or [])
        target = None

        if len(args) >= 2 and args[0].isdecimal():
            return await self._lookup_user(int(args.pop(0))), parse_amount(args[-1])

        replied_to = message.reply_to_message
        if _is_user_reply(replied_to):
            target = TargetUser(str(replied_to.from_user.id), display_name(replied_to.from_user))
        else:
            for entity in message.entities:
                if entity.type == MessageEntity.TEXT_MENTION and entity.user is not None:
                    target = TargetUser(str(entity.user.id), display_name(entity.user))
                    break

        if target is None and args and args[0].isdecimal():
            target = await self._lookup_user(int(args.pop(0)))

        amount = parse_amount(args[-1]) if args else None
        return target, amount

    async def _lookup_user(self, user_id: int) -> TargetUser:
        """Resolve a bare user ID to a display name via the current chat, if possible."""
        if self.in_group:
            try:
                member = await self.update.effective_chat.get_member(user_id)
                return TargetUser(str(user_id), display_name(member.user))
            except TelegramError as e:
                logger.debug(f"Could not look up user {user_id} in chat: {e}")
        return TargetUser(str(user_id), str(user_id))

    async def reply(self, text: str, private: bool = True) -> None:
        """Answer the command. Private replies go to the caller's DM when in a group."""
        await self._deliver(text, private, quote=True)
        self.replied = True

    async def follow_up(self, text: str, private: bool = True) -> None:
        """Send an additional message after the command was already answered."""
        await self._deliver(text, private, quote=False)

    async def _deliver(self, text: str, private: bool, quote: bool) -> None:
        message = self.update.effective_message
        if private and self.in_group:
            try:
                await self.context.bot.send_message(
                    chat_id=self.user.id, text=text, parse_mode=ParseMode.MARKDOWN
                )
            except Forbidden:
                logger.warning(f"Cannot DM user {self.user.id}, posting notice in chat instead.")
                await message.reply_text(DM_BLOCKED_TEXT)
            return

        if quote:
            await message.reply_text(text, parse_mode=ParseMode.MARKDOWN)
        else:
            await message.chat.send_message(text, parse_mode=ParseMode.MARKDOWN)


LedgerCommand = Callable[[Interaction, LedgerService], Awaitable[None]]


def interaction_command(func: LedgerCommand):
    """
    Adapt a ledger command handler to a python-telegram-bot callback.

    Behavior:
        - Builds the `Interaction` and fetches the ledger from ``bot_data``.
        - Any exception escaping the handler is logged and answered with a
          generic private message: a follow-up if the handler had already
          replied, a reply otherwise.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.effective_user is None or update.effective_message is None:
            return

        interaction = Interaction(update, context)
        try:
            await func(interaction, context.bot_data[LEDGER_KEY])
        except Exception:
            logger.exception(f"Error executing command {func.__name__}")
            if interaction.replied:
                await interaction.follow_up(GENERIC_ERROR_TEXT)
            else:
                await interaction.reply(GENERIC_ERROR_TEXT)

    return wrapper
