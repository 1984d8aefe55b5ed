from __future__ import annotations

from typing import List, Optional, Protocol

from .models import Account


class AccountRepository(Protocol):
    """
    Storage abstraction for launcher accounts, keyed by username.

    Implementations are responsible for:
    - Keeping at most one `Account` per username.
    - Returning the stored `Account` itself, so that changes made through
      its methods are visible on the next lookup.
    """

    def get_by_username(self, username: str) -> Optional[Account]:
        """Return the account with the given username, or None if not found."""

        ...

    def add_account(self, account: Account) -> None:
        """Store a new account. Callers check for collisions first."""

        ...

    def get_all_accounts(self) -> List[Account]:
        """Return all accounts in registration order."""

        ...


class GameCatalog(Protocol):
    """
    The fixed set of purchasable titles.

    The contents never change for the lifetime of the process.
    """

    def list_games(self) -> List[str]:
        ...

    def contains(self, game_id: str) -> bool:
        ...
