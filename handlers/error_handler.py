"""
handlers/error_handler.py
--------------------------
Application-wide error handler. Logs anything no command handler caught.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log an unhandled error together with the update that caused it."""
    if isinstance(update, Update) and update.effective_user:
        logger.error(
            f"Unhandled error while processing update {update.update_id} "
            f"from user {update.effective_user.id}",
            exc_info=context.error,
        )
    else:
        logger.error("Unhandled error in bot application", exc_info=context.error)
