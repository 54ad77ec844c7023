"""Language-keyed text tables for the presentation layer."""

from enum import Enum


class Language(str, Enum):
    """Supported languages."""

    POLISH = "pl"
    ENGLISH = "en"

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Language for a code such as 'en', falling back to Polish."""
        try:
            return cls(code.strip().lower())
        except ValueError:
            return cls.POLISH


TEXTS: dict[Language, dict[str, str]] = {
    Language.POLISH: {
        "language_name": "Polski",
        "title": "WISIELEC RPG",
        "menu_new_game": "Nowa gra",
        "menu_difficulty": "Poziom trudności",
        "menu_statistics": "Statystyki",
        "menu_inventory": "Ekwipunek",
        "menu_quests": "Dziennik zadań",
        "menu_shop": "Sklep",
        "menu_use_item": "Użyj przedmiotu",
        "menu_language": "Język",
        "menu_exit": "Wyjście",
        "select_option": "Wybierz opcję: ",
        "invalid_option": "Nieprawidłowa opcja.",
        "easy": "Łatwy",
        "medium": "Średni",
        "hard": "Trudny",
        "difficulty_set": "Ustawiono poziom trudności:",
        "default_difficulty": "Nieprawidłowy wybór, ustawiono poziom średni.",
        "word": "Słowo:",
        "wrong_guesses": "Błędne litery:",
        "remaining_attempts": "Pozostałe próby:",
        "points": "Punkty:",
        "progress": "Postęp:",
        "enter_letter": "Podaj literę: ",
        "invalid_character": "Podaj jedną literę.",
        "already_guessed": "Ta litera była już podana.",
        "you_won": "Gratulacje! Odgadłeś słowo:",
        "you_lost": "Przegrałeś! Słowo to:",
        "you_earned": "Zdobyte punkty:",
        "level_up": "Awans! Aktualny poziom:",
        "quest_complete": "Ukończono zadanie:",
        "games_played": "Rozegrane gry:",
        "games_won": "Wygrane gry:",
        "win_rate": "Współczynnik wygranych:",
        "total_points": "Łączna liczba punktów:",
        "average_score": "Średni wynik:",
        "highest_score": "Najwyższy wynik:",
        "recent_games": "OSTATNIE GRY",
        "won": "WYGRANA",
        "lost": "PRZEGRANA",
        "level": "Poziom:",
        "experience": "Doświadczenie:",
        "items": "Przedmioty",
        "empty_inventory": "Ekwipunek jest pusty.",
        "inventory_full": "Ekwipunek jest pełny.",
        "item_added": "Dodano przedmiot:",
        "item_used": "Użyto przedmiotu:",
        "item_not_found": "Brak takiego przedmiotu.",
        "active_quests": "Aktywne zadania",
        "completed_quests": "Ukończone zadania",
        "no_quests": "Brak zadań.",
        "back": "Powrót",
        "goodbye": "Do zobaczenia!",
    },
    Language.ENGLISH: {
        "language_name": "English",
        "title": "HANGMAN RPG",
        "menu_new_game": "New game",
        "menu_difficulty": "Difficulty",
        "menu_statistics": "Statistics",
        "menu_inventory": "Inventory",
        "menu_quests": "Quest log",
        "menu_shop": "Item shop",
        "menu_use_item": "Use item",
        "menu_language": "Language",
        "menu_exit": "Exit",
        "select_option": "Select an option: ",
        "invalid_option": "Invalid option.",
        "easy": "Easy",
        "medium": "Medium",
        "hard": "Hard",
        "difficulty_set": "Difficulty set to:",
        "default_difficulty": "Invalid choice, difficulty set to medium.",
        "word": "Word:",
        "wrong_guesses": "Wrong letters:",
        "remaining_attempts": "Remaining attempts:",
        "points": "Points:",
        "progress": "Progress:",
        "enter_letter": "Enter a letter: ",
        "invalid_character": "Enter a single letter.",
        "already_guessed": "You already tried that letter.",
        "you_won": "Congratulations! You guessed the word:",
        "you_lost": "You lost! The word was:",
        "you_earned": "Points earned:",
        "level_up": "Level up! Current level:",
        "quest_complete": "Quest completed:",
        "games_played": "Games played:",
        "games_won": "Games won:",
        "win_rate": "Win rate:",
        "total_points": "Total points:",
        "average_score": "Average score:",
        "highest_score": "Highest score:",
        "recent_games": "RECENT GAMES",
        "won": "WON",
        "lost": "LOST",
        "level": "Level:",
        "experience": "Experience:",
        "items": "Items",
        "empty_inventory": "Your inventory is empty.",
        "inventory_full": "Your inventory is full.",
        "item_added": "Item added:",
        "item_used": "Item used:",
        "item_not_found": "No such item.",
        "active_quests": "Active quests",
        "completed_quests": "Completed quests",
        "no_quests": "No quests.",
        "back": "Back",
        "goodbye": "Goodbye!",
    },
}


def get_texts(language: Language) -> dict[str, str]:
    """Text table for a language."""
    return TEXTS[language]
