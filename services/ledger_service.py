"""
services/ledger_service.py
---------------------------
Business logic for per-user balances.

Durability is best effort: every mutation is followed by a full snapshot
write, but a failed write is only logged and the in-memory change stands.
Callers get no guarantee beyond "the last snapshot that succeeded".
"""

from repositories.ledger_repo import LedgerRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def _validate_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValueError(f"Amount must be a positive integer, got {amount!r}")


class LedgerService:
    """
    Owns the in-memory balance ledger and its load/save lifecycle.

    Not thread-safe. The bot processes one update at a time on a single
    asyncio loop, and the autosave job runs on that same loop.
    """

    def __init__(self, repo: LedgerRepository):
        self.repo = repo
        self._balances: dict[str, int] = {}

    def load(self) -> None:
        """Replace the in-memory ledger with what is on disk."""
        self._balances = self.repo.load()

    def save(self) -> None:
        """Persist a full snapshot of the ledger."""
        self.repo.save(self.snapshot())

    def snapshot(self) -> dict[str, int]:
        """Return a copy of the current ledger."""
        return dict(self._balances)

    def get_balance(self, user_id: str) -> int:
        """
        Get a user's balance.

        Unknown users are opened with a balance of 0, which is saved
        immediately, so this read may write to disk.
        """
        if user_id not in self._balances:
            self._balances[user_id] = 0
            logger.info(f"Opened ledger account for user {user_id}")
            self.save()
        return self._balances[user_id]

    def credit(self, user_id: str, amount: int) -> int:
        """
        Add money to a user's balance.

        Args:
            user_id: Ledger key of the user.
            amount: Positive integer to add. There is no upper bound.

        Returns:
            The new balance.

        Raises:
            ValueError: If amount is not a positive integer.
        """
        _validate_amount(amount)
        new_balance = self.get_balance(user_id) + amount
        self._balances[user_id] = new_balance
        self.save()
        logger.info(f"Credited {amount} to user {user_id}, balance now {new_balance}")
        return new_balance

    def debit(self, user_id: str, amount: int) -> int:
        """
        Remove money from a user's balance, clamping at zero.

        Returns:
            The new balance, never negative.

        Raises:
            ValueError: If amount is not a positive integer.
        """
        _validate_amount(amount)
        new_balance = max(0, self.get_balance(user_id) - amount)
        self._balances[user_id] = new_balance
        self.save()
        logger.info(f"Debited {amount} from user {user_id}, balance now {new_balance}")
        return new_balance
