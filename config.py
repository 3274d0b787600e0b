"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── Ledger storage ────────────────────────────────────────
LEDGER_PATH: Path = Path(os.getenv("LEDGER_PATH", str(BASE_DIR / "userdata.json")))
AUTOSAVE_INTERVAL_SECONDS: int = int(os.getenv("AUTOSAVE_INTERVAL_SECONDS", "300"))

# ── Permissions ───────────────────────────────────────────
# Chat member status or admin custom title required for credit/debit.
STAFF_ROLE_NAME: str = os.getenv("STAFF_ROLE_NAME", "Staff 👷‍♂️")

# ── Currency ──────────────────────────────────────────────
CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "$")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
