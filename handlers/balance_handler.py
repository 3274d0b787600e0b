"""
handlers/balance_handler.py
----------------------------
Handles the balance commands: /viewbalance, /creditmoney, /debitmoney.
Each handler answers exactly once; ledger logic lives in LedgerService.
"""

from telegram.helpers import escape_markdown

from config import STAFF_ROLE_NAME
from handlers.interaction import Interaction
from models.identity import Caller
from security.auth import has_required_role
from services.ledger_service import LedgerService
from utils.formatting import format_money
from utils.logger import get_logger

logger = get_logger(__name__)

TRANSACTION_ERROR_TEXT = "❌ There was an error processing the transaction. Please try again later."
ACCESS_DENIED_TEXT = (
    f'❌ *Access Denied:* You need the "{escape_markdown(STAFF_ROLE_NAME)}" role '
    f"to use this command."
)
INVALID_AMOUNT_TEXT = "❌ *Invalid Amount:* Please enter a positive number."


def _usage(command: str) -> str:
    return (
        f"⚠️ *Usage:*\n"
        f"• Reply to a user's message with `/{command} <amount>`\n"
        f"• `/{command} <user id> <amount>`"
    )


async def _check_staff(interaction: Interaction, command: str) -> Caller | None:
    """Return the caller if they hold the staff role, else deny and return None."""
    caller = await interaction.resolve_caller()
    if has_required_role(caller):
        return caller
    logger.warning(f"🚫 Unauthorized /{command} attempt by {caller}")
    await interaction.reply(ACCESS_DENIED_TEXT)
    return None


async def view_balance(interaction: Interaction, ledger: LedgerService) -> None:
    """Handle /viewbalance - privately show the caller's own balance."""
    try:
        balance = ledger.get_balance(str(interaction.user.id))
        await interaction.reply(f"💰 *Your Balance:* {format_money(balance)}")
    except Exception:
        if interaction.replied:
            raise
        logger.exception("Error in viewbalance command")
        await interaction.reply(
            "❌ There was an error retrieving your balance. Please try again later."
        )


async def credit_money(interaction: Interaction, ledger: LedgerService) -> None:
    """
    Handle /creditmoney - add money to a user's account (staff only).

    Usage:
        reply to a message:  /creditmoney 500
        by user ID:          /creditmoney 123456789 500
    """
    try:
        caller = await _check_staff(interaction, "creditmoney")
        if caller is None:
            return

        target, amount = await interaction.target_and_amount()
        if target is None or amount is None:
            await interaction.reply(_usage("creditmoney"))
            return
        if amount <= 0:
            await interaction.reply(INVALID_AMOUNT_TEXT)
            return

        new_balance = ledger.credit(target.user_id, amount)
        logger.info(f"{caller} credited {amount} to {target.user_id}")
        await interaction.reply(
            f"💰 *Money Added Successfully!*\n"
            f"👤 *User:* {escape_markdown(target.display_name)}\n"
            f"➕ *Amount Added:* {format_money(amount)}\n"
            f"💳 *New Balance:* {format_money(new_balance)}\n"
            f"👷‍♂️ *Added by:* {escape_markdown(caller.display_name)}",
            private=False,
        )
    except Exception:
        if interaction.replied:
            raise
        logger.exception("Error in creditmoney command")
        await interaction.reply(TRANSACTION_ERROR_TEXT)


async def debit_money(interaction: Interaction, ledger: LedgerService) -> None:
    """
    Handle /debitmoney - remove money from a user's account (staff only).
    Refuses instead of clamping when the user cannot cover the amount.
    """
    try:
        caller = await _check_staff(interaction, "debitmoney")
        if caller is None:
            return

        target, amount = await interaction.target_and_amount()
        if target is None or amount is None:
            await interaction.reply(_usage("debitmoney"))
            return
        if amount <= 0:
            await interaction.reply(INVALID_AMOUNT_TEXT)
            return

        current = ledger.get_balance(target.user_id)
        if current < amount:
            await interaction.reply(
                f"❌ *Insufficient Funds:* {escape_markdown(target.display_name)} only has "
                f"{format_money(current)}, but you're trying to remove {format_money(amount)} "
                f"(short by {format_money(amount - current)})."
            )
            return

        new_balance = ledger.debit(target.user_id, amount)
        logger.info(f"{caller} debited {amount} from {target.user_id}")
        await interaction.reply(
            f"💸 *Money Removed Successfully!*\n"
            f"👤 *User:* {escape_markdown(target.display_name)}\n"
            f"➖ *Amount Removed:* {format_money(amount)}\n"
            f"💳 *New Balance:* {format_money(new_balance)}\n"
            f"👷‍♂️ *Removed by:* {escape_markdown(caller.display_name)}",
            private=False,
        )
    except Exception:
        if interaction.replied:
            raise
        logger.exception("Error in debitmoney command")
        await interaction.reply(TRANSACTION_ERROR_TEXT)
