"""
repositories/ledger_repo.py
----------------------------
Data access layer for the balance ledger.
The whole ledger lives in a single JSON object on disk:
``{"<telegram user id>": <balance>, ...}``.
"""

import contextlib
import json
import os
from pathlib import Path

from utils.logger import get_logger

logger = get_logger(__name__)


class LedgerRepository:
    """Reads and writes full ledger snapshots to a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> dict[str, int]:
        """
        Read the ledger from disk.

        A missing file is a valid empty ledger. An unreadable or malformed
        file is logged and also treated as empty, so startup never fails here.

        Returns:
            Mapping of user ID to non-negative balance.
        """
        if not self.path.exists():
            logger.info(f"No ledger found at {self.path}, starting with empty data.")
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load ledger from {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(
                f"Ledger at {self.path} is not a JSON object "
                f"(got {type(data).__name__}), starting with empty data."
            )
            return {}

        balances: dict[str, int] = {}
        for user_id, balance in data.items():
            if isinstance(balance, bool) or not isinstance(balance, int) or balance < 0:
                logger.warning(f"Skipping invalid ledger entry {user_id!r}: {balance!r}")
                continue
            balances[str(user_id)] = balance

        logger.info(f"Ledger loaded: {len(balances)} accounts from {self.path}")
        return balances

    def save(self, balances: dict[str, int]) -> None:
        """
        Write a full snapshot of the ledger.

        The file is written to a temporary sibling and swapped in with
        ``os.replace``. Failures are logged and swallowed.
        """
        tmp = self.path.with_name(f".tmp_{self.path.name}")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(balances, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save ledger to {self.path}: {e}")
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
