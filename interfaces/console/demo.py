from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from application.services import AccountDirectory, CatalogService


def format_games(games: Sequence[str]) -> str:
    return f"Available Games: {list(games)}"


def format_friends(friends: Sequence[str]) -> str:
    return f"Friends: {list(friends)}"


def format_accounts(usernames: Sequence[str]) -> str:
    return f"Registered Accounts: {list(usernames)}"


def format_achievements(achievements: Dict[str, Tuple[str, ...]]) -> str:
    """Render achievements as `{game: [labels]}`."""

    rendered = {game_id: list(labels) for game_id, labels in achievements.items()}
    return f"Achievements: {rendered}"


def run_demo(
    directory: AccountDirectory,
    catalog_service: CatalogService,
    username: str = "player1",
    password: str = "pass123",
    game_id: str = "Game1",
    friends_to_add: Sequence[str] = ("player2", "player3"),
    friend_to_remove: str = "player2",
    achievement: str = "First Win",
) -> List[str]:
    """
    Walk through the launcher features for one user and return the lines
    to show on the console.

    Steps: register, log in, browse, purchase, manage friends, record an
    achievement, list registered accounts. A failed login stops the
    walk-through.
    """

    # A collision here is fine: the login below decides whether we continue.
    directory.register(username, password)

    account = directory.login(username, password)
    if account is None:
        return ["Login Failed"]

    lines = ["Login Successful", format_games(catalog_service.browse())]

    if catalog_service.purchase(account, game_id):
        lines.append(f"Game Purchased: {game_id}")

    for friend in friends_to_add:
        account.add_friend(friend)
    account.remove_friend(friend_to_remove)
    lines.append(format_friends(account.friends))

    account.add_achievement(game_id, achievement)
    lines.append(format_achievements(account.achievements))
    lines.append(format_accounts([a.username for a in directory.accounts()]))

    return lines
