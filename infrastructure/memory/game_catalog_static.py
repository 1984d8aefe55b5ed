from __future__ import annotations

from typing import Iterable, List, Tuple

from domain.repositories import GameCatalog


DEFAULT_CATALOG: Tuple[str, ...] = ("Game1", "Game2", "Game3")


class StaticGameCatalog(GameCatalog):
    """
    Immutable implementation of `GameCatalog`.

    The titles are frozen into a tuple at construction time; order is kept
    as given.
    """

    def __init__(self, games: Iterable[str] = DEFAULT_CATALOG) -> None:
        self._games: Tuple[str, ...] = tuple(games)

    def list_games(self) -> List[str]:
        return list(self._games)

    def contains(self, game_id: str) -> bool:
        return game_id in self._games
