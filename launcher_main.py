import logging
import os
from typing import List

from dotenv import load_dotenv

from application.services import AccountDirectory, CatalogService
from infrastructure.memory.account_repository_memory import InMemoryAccountRepository
from infrastructure.memory.game_catalog_static import DEFAULT_CATALOG, StaticGameCatalog
from interfaces.console.demo import run_demo


load_dotenv()

LAUNCHER_USERNAME = os.environ.get("LAUNCHER_USERNAME", "player1")
LAUNCHER_PASSWORD = os.environ.get("LAUNCHER_PASSWORD", "pass123")
LAUNCHER_GAME = os.environ.get("LAUNCHER_GAME", "Game1")
LAUNCHER_CATALOG = os.environ.get("LAUNCHER_CATALOG", ",".join(DEFAULT_CATALOG))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")


def parse_catalog(raw: str) -> List[str]:
    """Split a comma-separated catalog, dropping blanks."""

    return [title.strip() for title in raw.split(",") if title.strip()]


def main() -> None:
    level = LOG_LEVEL.upper()
    # getLevelName maps known names to ints and anything else to a string.
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"LOG_LEVEL {LOG_LEVEL!r} is not a logging level name.")
    logging.basicConfig(level=level)

    if not LAUNCHER_USERNAME:
        raise RuntimeError("LAUNCHER_USERNAME environment variable is empty.")

    games = parse_catalog(LAUNCHER_CATALOG)
    if not games:
        raise RuntimeError("LAUNCHER_CATALOG must name at least one game.")

    directory = AccountDirectory(InMemoryAccountRepository())
    catalog_service = CatalogService(StaticGameCatalog(games))

    for line in run_demo(
        directory,
        catalog_service,
        username=LAUNCHER_USERNAME,
        password=LAUNCHER_PASSWORD,
        game_id=LAUNCHER_GAME,
    ):
        print(line)


if __name__ == "__main__":
    main()
