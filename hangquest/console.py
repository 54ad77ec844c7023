"""Terminal driver: menus and the round loop."""

import logging
import sys
from typing import Callable, Optional

from hangquest.api.game_config import GameConfig, GameConfigManager
from hangquest.config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from hangquest.engine.catalog import basic_items, basic_quests
from hangquest.engine.session import GameSession
from hangquest.engine.stat_calculator import StatCalculator
from hangquest.engine.words import WordsManager
from hangquest.localization import Language, get_texts
from hangquest.models.difficulty import Difficulty
from hangquest.models.items import Inventory
from hangquest.models.profile import PlayerProfile
from hangquest.models.round import RoundStatus
from hangquest.persistence.profile_store import ProfileStore
from hangquest.persistence.stats_store import StatsStore
from hangquest.security.input_sanitizer import InputSanitizer

logger = logging.getLogger(__name__.split(".")[-1])

LOCAL_PLAYER_ID = "local"


class ConsoleUI:
    """Plain-text presentation of a game session."""

    def __init__(
        self,
        session: GameSession,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Initialize console UI.

        Args:
            session: Session to drive
            input_func: Reads one line after showing a prompt
            output: Writes one line
        """
        self.session = session
        self._input = input_func or input
        self._output = output or print
        self._sanitizer = InputSanitizer()

    @property
    def texts(self) -> dict[str, str]:
        """Text table of the player's language."""
        return get_texts(self.session.profile.language)

    def _ask_option(self) -> Optional[int]:
        return self._sanitizer.parse_option(self._input(self.texts["select_option"]))

    def run(self) -> None:
        """Main menu loop; returns when the player exits."""
        actions = {
            1: self.play_round,
            2: self.select_difficulty,
            3: self.show_stats,
            4: self.show_inventory,
            5: self.show_quests,
            6: self.show_shop,
            7: self.use_item,
            8: self.select_language,
        }

        while True:
            self.print_main_menu()
            option = self._ask_option()
            if option == 9:
                self._output(self.texts["goodbye"])
                return
            action = actions.get(option)
            if action is None:
                self._output(self.texts["invalid_option"])
                continue
            action()

    def print_main_menu(self) -> None:
        t = self.texts
        progression = self.session.progression.progression
        self._output(f"=== {t['title']} ===")
        self._output(
            f"{t['level']} {progression.level}  {t['experience']} "
            f"{progression.experience}/{progression.next_level_xp}"
        )
        for number, key in enumerate(
            [
                "menu_new_game",
                "menu_difficulty",
                "menu_statistics",
                "menu_inventory",
                "menu_quests",
                "menu_shop",
                "menu_use_item",
                "menu_language",
                "menu_exit",
            ],
            start=1,
        ):
            self._output(f"{number}. {t[key]}")

    def print_round(self) -> None:
        t = self.texts
        round_engine = self.session.current_round
        self._output(f"{t['word']} {round_engine.reveal()}")
        self._output(f"{t['wrong_guesses']} {round_engine.wrong_guesses_text()}")
        self._output(f"{t['remaining_attempts']} {round_engine.remaining_attempts}")
        self._output(f"{t['points']} {round_engine.score:+d}")
        self._output(f"{t['progress']} {round_engine.completion_percentage():.1f}%")

    def play_round(self) -> None:
        """Play one round until it is won or lost."""
        t = self.texts
        round_engine = self.session.start_round()

        while not round_engine.is_finished:
            self.print_round()
            letter = self._sanitizer.extract_letter(self._input(t["enter_letter"]))
            if letter is None:
                self._output(t["invalid_character"])
                continue
            if not self.session.guess(letter):
                self._output(t["already_guessed"])

        self.print_round()
        outcome = self.session.last_outcome
        if round_engine.status == RoundStatus.WON:
            self._output(f"{t['you_won']} {outcome.word}")
        else:
            self._output(f"{t['you_lost']} {outcome.word}")
        self._output(f"{t['you_earned']} {outcome.score:+d}")

        if outcome.leveled_up:
            self._output(f"{t['level_up']} {outcome.level}")
        for quest in outcome.completed_quests:
            self._output(f"{t['quest_complete']} {quest.name} (+{quest.reward} XP)")

    def select_difficulty(self) -> None:
        t = self.texts
        self._output(f"1. {t['easy']}  2. {t['medium']}  3. {t['hard']}")
        option = self._ask_option()
        difficulty = Difficulty.from_selector(option if option is not None else 0)
        self.session.set_default_difficulty(difficulty)
        if option in (1, 2, 3):
            self._output(f"{t['difficulty_set']} {t[difficulty.value]}")
        else:
            self._output(t["default_difficulty"])

    def show_stats(self) -> None:
        t = self.texts
        store = self.session.stats_store
        if store is None:
            return
        stats = store.stats
        self._output(f"{t['games_played']} {stats.games_played}")
        self._output(f"{t['games_won']} {stats.games_won}")
        self._output(f"{t['win_rate']} {store.win_rate():.1f}%")
        self._output(f"{t['total_points']} {stats.total_points}")
        self._output(f"{t['average_score']} {store.average_score():.1f}")
        self._output(f"{t['highest_score']} {stats.highest_score}")

        last_games = store.last_games(5)
        if last_games:
            self._output(f"=== {t['recent_games']} ===")
        for number, record in enumerate(last_games, start=1):
            difficulty = Difficulty.from_attempts(record.difficulty)
            difficulty_text = t[difficulty.value] if difficulty else str(record.difficulty)
            result_text = t["won"] if record.result == "win" else t["lost"]
            self._output(
                f"{number}. {record.date:%d.%m.%Y %H:%M}: {record.word} [{difficulty_text}] - "
                f"{result_text} ({record.points:+d})"
            )

    def show_inventory(self) -> None:
        t = self.texts
        inventory = self.session.inventory.inventory
        self._output(f"{t['items']} ({len(inventory.items)}/{inventory.capacity})")
        if not inventory.items:
            self._output(t["empty_inventory"])
        for number, item in enumerate(inventory.items, start=1):
            used = " [x]" if item.used else ""
            self._output(f"{number}. {item.name} ({item.rarity.value}, {item.kind.value}){used} - {item.description}")

        attributes = self.session.effective_attributes()
        for name, value in StatCalculator.bonuses(attributes).items():
            self._output(f"  {name}: {value}")

    def show_quests(self) -> None:
        t = self.texts
        self._output(f"=== {t['active_quests']} ===")
        active = self.session.quests.active()
        if not active:
            self._output(t["no_quests"])
        for quest in active:
            self._output(f"{quest.name}: {quest.description} ({quest.progress}/{quest.target}, {quest.reward} XP)")

        self._output(f"=== {t['completed_quests']} ===")
        completed = self.session.quests.completed()
        if not completed:
            self._output(t["no_quests"])
        for quest in completed:
            self._output(f"+ {quest.name}: {quest.description}")

    def show_shop(self) -> None:
        t = self.texts
        items = basic_items()
        for number, item in enumerate(items, start=1):
            self._output(f"{number}. {item.name} ({item.rarity.value}) - {item.description}")
        self._output(f"0. {t['back']}")

        option = self._ask_option()
        if option is None or not 1 <= option <= len(items):
            return
        item = items[option - 1]
        if self.session.add_item(item):
            self._output(f"{t['item_added']} {item.name}")
        else:
            self._output(t["inventory_full"])

    def use_item(self) -> None:
        t = self.texts
        items = [item for item in self.session.inventory.items if not item.used]
        if not items:
            self._output(t["empty_inventory"])
            return
        for number, item in enumerate(items, start=1):
            self._output(f"{number}. {item.name}")
        self._output(f"0. {t['back']}")

        option = self._ask_option()
        if option is None or not 1 <= option <= len(items):
            return
        item = items[option - 1]
        effects, found = self.session.use_item(item.item_id)
        if not found:
            self._output(t["item_not_found"])
            return
        self._output(f"{t['item_used']} {item.name}")
        for effect in effects:
            self._output(f"  {effect.kind.value}: {effect.value:+d}")

    def select_language(self) -> None:
        languages = list(Language)
        for number, language in enumerate(languages, start=1):
            self._output(f"{number}. {get_texts(language)['language_name']}")
        option = self._ask_option()
        if option is None or not 1 <= option <= len(languages):
            return
        self.session.set_language(languages[option - 1])


def load_or_create_profile(store: ProfileStore, config: GameConfig) -> PlayerProfile:
    """Saved local profile, or a fresh one built from the config."""
    profile = store.load_profile(LOCAL_PLAYER_ID)
    if profile is not None:
        return profile
    return PlayerProfile(
        player_id=LOCAL_PLAYER_ID,
        inventory=Inventory(capacity=config.inventory_capacity),
        quests=basic_quests(),
        language=config.language,
        default_difficulty=config.default_difficulty,
    )


def main(config: Optional[GameConfig] = None) -> int:
    """Run the terminal game; returns the process exit status."""
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=LOG_FORMAT)
    config = GameConfigManager(config).config

    try:
        words = WordsManager.from_file(config.words_file)
        stats_store = StatsStore(config.stats_file)
        profile_store = ProfileStore(config.profile_dir)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to start: {e}", exc_info=True)
        return 1

    session = GameSession(load_or_create_profile(profile_store, config), words, stats_store=stats_store)
    try:
        ConsoleUI(session).run()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, exiting")
    finally:
        profile_store.dump_profile(session.profile)
    return 0


def main_entry() -> None:
    """Console script entry point."""
    sys.exit(main())
