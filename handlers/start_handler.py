"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from telegram import Update
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from config import STAFF_ROLE_NAME
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = f"""
🤖 *Balance Bot*

*💰 For everyone:*
/viewbalance - show your balance (sent privately)

*👷‍♂️ Staff only* (role "{escape_markdown(STAFF_ROLE_NAME)}"):
/creditmoney - add money to a user
/debitmoney - remove money from a user

Reply to the user's message with `/creditmoney 500`,
or pass their numeric ID: `/creditmoney 123456789 500`.
"""


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - greet the user and show the command list."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")
    await update.message.reply_text(
        f"Hello {escape_markdown(user.first_name)}! 👋\n{HELP_TEXT}",
        parse_mode="Markdown",
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")
