from __future__ import annotations

from typing import Dict, List, Optional

from domain.models import Account
from domain.repositories import AccountRepository


class InMemoryAccountRepository(AccountRepository):
    """
    Dict-backed implementation of `AccountRepository`.

    Accounts live only as long as the process. The dict preserves
    insertion order, which doubles as registration order.
    """

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def get_by_username(self, username: str) -> Optional[Account]:
        return self._accounts.get(username)

    def add_account(self, account: Account) -> None:
        # First registration wins; never overwrite an existing account.
        self._accounts.setdefault(account.username, account)

    def get_all_accounts(self) -> List[Account]:
        return list(self._accounts.values())
