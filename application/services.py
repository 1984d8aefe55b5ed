from __future__ import annotations

import logging
from typing import List, Optional

from domain.models import Account
from domain.repositories import AccountRepository, GameCatalog

logger = logging.getLogger(__name__)


class AccountDirectory:
    """
    Identity registry and authentication gate.

    The directory is constructed explicitly and handed to whatever needs
    it; there is no module-level instance.
    """

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def register(self, username: str, password: str) -> bool:
        """
        Create a new account.

        Returns False, without touching the existing account, when the
        username is already taken (exact, case-sensitive match).
        """

        if self._account_repo.get_by_username(username) is not None:
            logger.debug("Registration refused, username %r already exists", username)
            return False

        self._account_repo.add_account(Account(username=username, password=password))
        logger.info("Registered account %r", username)
        return True

    def login(self, username: str, password: str) -> Optional[Account]:
        """
        Return the account if the credentials match, otherwise None.

        An unknown username and a wrong password both yield None; callers
        cannot tell them apart.
        """

        account = self._account_repo.get_by_username(username)
        if account is None or not account.check_password(password):
            logger.debug("Login failed for %r", username)
            return None

        logger.info("Account %r logged in", username)
        return account

    def accounts(self) -> List[Account]:
        return self._account_repo.get_all_accounts()


class CatalogService:
    """Browsing and purchasing against a fixed game catalog."""

    def __init__(self, catalog: GameCatalog) -> None:
        self._catalog = catalog

    def browse(self) -> List[str]:
        return self._catalog.list_games()

    def purchase(self, account: Account, game_id: str) -> bool:
        """
        Add `game_id` to the account's library.

        Fails (returns False, no change) when the title is not in the
        catalog or the account already owns it.
        """

        if not self._catalog.contains(game_id):
            logger.debug("Purchase refused, %r is not in the catalog", game_id)
            return False

        if game_id in account.library:
            logger.debug("Purchase refused, %r already owns %r", account.username, game_id)
            return False

        account.add_game(game_id)
        logger.info("%r purchased %r", account.username, game_id)
        return True
