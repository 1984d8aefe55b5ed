import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

import launcher_main
from application.services import AccountDirectory, CatalogService
from infrastructure.memory.account_repository_memory import InMemoryAccountRepository
from infrastructure.memory.game_catalog_static import StaticGameCatalog
from interfaces.console.demo import format_accounts, format_achievements, run_demo


EXPECTED_LINES = [
    "Login Successful",
    "Available Games: ['Game1', 'Game2', 'Game3']",
    "Game Purchased: Game1",
    "Friends: ['player3']",
    "Achievements: {'Game1': ['First Win']}",
    "Registered Accounts: ['player1']",
]


class RunDemoTests(unittest.TestCase):
    def setUp(self) -> None:
        self.directory = AccountDirectory(InMemoryAccountRepository())
        self.catalog_service = CatalogService(StaticGameCatalog())

    def test_default_scenario(self):
        lines = run_demo(self.directory, self.catalog_service)
        self.assertEqual(lines, EXPECTED_LINES)

        account = self.directory.login("player1", "pass123")
        self.assertEqual(account.library, ("Game1",))
        self.assertEqual(account.friends, ("player3",))
        self.assertEqual(account.achievements, {"Game1": ("First Win",)})
        self.assertFalse(self.catalog_service.purchase(account, "Game1"))

    def test_login_failure_stops_early(self):
        self.directory.register("player1", "someone-else")
        lines = run_demo(self.directory, self.catalog_service)
        self.assertEqual(lines, ["Login Failed"])

    def test_unknown_game_skips_purchase_line(self):
        lines = run_demo(self.directory, self.catalog_service, game_id="Game9")
        self.assertNotIn("Game Purchased: Game9", lines)
        self.assertEqual(lines[-2], "Achievements: {'Game9': ['First Win']}")

    def test_summary_lists_every_registered_account(self):
        self.directory.register("player0", "secret")
        lines = run_demo(self.directory, self.catalog_service)
        self.assertEqual(lines[-1], "Registered Accounts: ['player0', 'player1']")

    def test_format_accounts(self):
        self.assertEqual(format_accounts([]), "Registered Accounts: []")

    def test_format_achievements(self):
        self.assertEqual(
            format_achievements({"Game1": ("A", "A")}),
            "Achievements: {'Game1': ['A', 'A']}",
        )


class LauncherMainTests(unittest.TestCase):
    def test_parse_catalog(self):
        self.assertEqual(
            launcher_main.parse_catalog(" Game1, ,Game2,"),
            ["Game1", "Game2"],
        )

    def test_main_prints_scenario(self):
        out = io.StringIO()
        with mock.patch.multiple(
            launcher_main,
            LAUNCHER_USERNAME="player1",
            LAUNCHER_PASSWORD="pass123",
            LAUNCHER_GAME="Game1",
            LAUNCHER_CATALOG="Game1,Game2,Game3",
            LOG_LEVEL="WARNING",
        ), redirect_stdout(out):
            launcher_main.main()

        self.assertEqual(out.getvalue().splitlines(), EXPECTED_LINES)

    def test_main_rejects_empty_catalog(self):
        with mock.patch.object(launcher_main, "LAUNCHER_CATALOG", " , "):
            with self.assertRaises(RuntimeError):
                launcher_main.main()

    def test_main_rejects_unknown_log_level(self):
        with mock.patch.object(launcher_main, "LOG_LEVEL", "LOUD"):
            with self.assertRaises(RuntimeError):
                launcher_main.main()

    def test_main_rejects_empty_username(self):
        with mock.patch.object(launcher_main, "LAUNCHER_USERNAME", ""):
            with self.assertRaises(RuntimeError):
                launcher_main.main()


if __name__ == "__main__":
    unittest.main()
