from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Account:
    """
    Domain representation of a launcher user.

    Holds the login credentials together with everything the user owns:
    purchased games, friends and per-game achievements. Credentials are
    fixed once the account exists. The containers are private and start
    empty; read them through the properties, which hand out copies, and
    change them only through the methods below.
    """

    username: str
    password: str
    _library: List[str] = field(default_factory=list, init=False, repr=False, compare=False)
    _friends: List[str] = field(default_factory=list, init=False, repr=False, compare=False)
    _achievements: Dict[str, List[str]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @property
    def library(self) -> Tuple[str, ...]:
        return tuple(self._library)

    @property
    def friends(self) -> Tuple[str, ...]:
        return tuple(self._friends)

    @property
    def achievements(self) -> Dict[str, Tuple[str, ...]]:
        return {game_id: tuple(labels) for game_id, labels in self._achievements.items()}

    def check_password(self, candidate: str) -> bool:
        # Plain-text, case-sensitive comparison.
        return self.password == candidate

    def add_game(self, game_id: str) -> None:
        """
        Append a game to the library.

        No duplicate check here; `CatalogService.purchase` is the gate.
        """

        self._library.append(game_id)

    def add_friend(self, friend_name: str) -> None:
        if friend_name not in self._friends:
            self._friends.append(friend_name)

    def remove_friend(self, friend_name: str) -> None:
        if friend_name in self._friends:
            self._friends.remove(friend_name)

    def add_achievement(self, game_id: str, label: str) -> None:
        self._achievements.setdefault(game_id, []).append(label)
