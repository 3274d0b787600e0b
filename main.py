"""
main.py
-------
Entry point for the balance ledger Telegram bot.

Responsibilities:
    - Refuse to start without a bot token.
    - Load the ledger from disk and share it with the handlers.
    - Configure and start the Telegram bot with all handlers.
    - Schedule the periodic ledger snapshot.
"""

import sys

from telegram import BotCommand
from telegram.error import TelegramError
from telegram.ext import Application, CommandHandler, ContextTypes

from config import AUTOSAVE_INTERVAL_SECONDS, LEDGER_PATH, TELEGRAM_BOT_TOKEN
from handlers.balance_handler import credit_money, debit_money, view_balance
from handlers.error_handler import error_handler
from handlers.interaction import LEDGER_KEY, interaction_command
from handlers.start_handler import help_command, start_command
from repositories.ledger_repo import LedgerRepository
from services.ledger_service import LedgerService
from utils.logger import get_logger

logger = get_logger(__name__)


async def autosave_ledger(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Scheduled job: write a full ledger snapshot."""
    context.job.data.save()
    logger.debug("Periodic ledger snapshot written.")


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("viewbalance", "💰 Check your current balance"),
        BotCommand("creditmoney", "➕ Add money to a user's account (Staff only)"),
        BotCommand("debitmoney", "➖ Remove money from a user's account (Staff only)"),
        BotCommand("help", "📖 Show help"),
    ]
    try:
        await application.bot.set_my_commands(commands)
        logger.info("✅ Bot commands menu registered successfully.")
    except TelegramError as e:
        logger.error(f"❌ Failed to register bot commands: {e}")


def build_application(token: str, ledger: LedgerService) -> Application:
    """Build the Telegram application with all handlers and jobs attached."""
    app = Application.builder().token(token).post_init(set_bot_commands).build()
    app.bot_data[LEDGER_KEY] = ledger

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler(["viewbalance", "userprofile"], interaction_command(view_balance)))
    app.add_handler(CommandHandler(["creditmoney", "addmoney"], interaction_command(credit_money)))
    app.add_handler(CommandHandler(["debitmoney", "removemoney"], interaction_command(debit_money)))
    app.add_error_handler(error_handler)

    job_queue = app.job_queue
    if job_queue:
        job_queue.run_repeating(
            autosave_ledger,
            interval=AUTOSAVE_INTERVAL_SECONDS,
            first=AUTOSAVE_INTERVAL_SECONDS,
            data=ledger,
            name="ledger_autosave",
        )
        logger.info(f"Scheduled ledger autosave every {AUTOSAVE_INTERVAL_SECONDS}s")
    else:
        logger.warning("JobQueue unavailable; install python-telegram-bot[job-queue] for autosave.")

    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Credentials ────────────────────────────────────
    if not TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN environment variable is required!")
        sys.exit(1)

    # ── 2. Ledger ─────────────────────────────────────────
    ledger = LedgerService(LedgerRepository(LEDGER_PATH))
    ledger.load()

    # ── 3. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN, ledger)

    # ── 4. Start polling ──────────────────────────────────
    logger.info("🚀 Balance bot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])

    # ── 5. Final snapshot on shutdown ─────────────────────
    ledger.save()
    logger.info("Balance bot stopped.")


if __name__ == "__main__":
    main()
