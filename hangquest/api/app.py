"""Flask API application."""

import logging
import uuid
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from hangquest.api.game_config import GameConfigManager
from hangquest.config import DEFAULT_LOG_LEVEL, DEFAULT_MAX_SESSIONS, LOG_FORMAT
from hangquest.engine.catalog import basic_quests, find_item
from hangquest.engine.round_engine import RoundEngine
from hangquest.engine.session import GameSession
from hangquest.engine.stat_calculator import StatCalculator
from hangquest.engine.words import WordsManager
from hangquest.models.difficulty import Difficulty
from hangquest.models.items import Inventory
from hangquest.models.profile import PlayerProfile
from hangquest.persistence.profile_store import ProfileStore
from hangquest.persistence.stats_store import StatsStore
from hangquest.security.input_sanitizer import InputSanitizer

logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=LOG_FORMAT)

app = Flask("flask.hangquest")


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    app.logger.error(f"Internal server error: {e}", exc_info=True)
    return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500


# Player sessions: player_id -> GameSession, least recently used first
_sessions: dict[str, GameSession] = {}
_max_sessions = DEFAULT_MAX_SESSIONS
_config_manager = GameConfigManager()
_profile_store: ProfileStore | None = None
_words: WordsManager | None = None
_input_sanitizer = InputSanitizer()


def _get_profile_store() -> ProfileStore:
    """Get or create the profile store."""
    global _profile_store
    if _profile_store is None:
        _profile_store = ProfileStore(dump_directory=_config_manager.config.profile_dir)
    return _profile_store


def _get_words() -> WordsManager:
    """Get or load the word source."""
    global _words
    if _words is None:
        _words = WordsManager.from_file(_config_manager.config.words_file)
    return _words


def _stats_path(player_id: str) -> Path:
    return Path(_config_manager.config.stats_dir) / f"{player_id}.json"


def _create_session(profile: PlayerProfile) -> GameSession:
    return GameSession(profile, _get_words(), stats_store=StatsStore(_stats_path(profile.player_id)))


def _remember_session(session: GameSession) -> None:
    """Keep a session in memory, saving and dropping the least recently used ones over the limit."""
    player_id = session.profile.player_id
    _sessions.pop(player_id, None)
    _sessions[player_id] = session

    while len(_sessions) > _max_sessions:
        evicted_id = next(iter(_sessions))
        _save_profile(_sessions.pop(evicted_id))
        app.logger.info(f"Dropped session of player {evicted_id} from memory")


def _get_session(player_id: str) -> Optional[GameSession]:
    """Get a player's session, restoring it from disk when needed."""
    if player_id in _sessions:
        session = _sessions.pop(player_id)
        _sessions[player_id] = session
        return session

    profile = _get_profile_store().load_profile(player_id)
    if profile is None:
        return None

    session = _create_session(profile)
    _remember_session(session)
    app.logger.info(f"Restored player {player_id} from disk")
    return session


def _save_profile(session: GameSession) -> None:
    """Dump the session's profile to disk."""
    try:
        _get_profile_store().dump_profile(session.profile)
    except Exception as e:
        app.logger.error(f"Failed to dump profile {session.profile.player_id}: {e}", exc_info=True)


def _player_not_found(player_id: str):
    return jsonify({"error": "Player not found", "player_id": player_id}), 404


def _round_view(round_engine: RoundEngine) -> dict:
    """Round as seen by the player; the word is hidden while playing."""
    state = round_engine.state
    return {
        "status": state.status.value,
        "difficulty": state.difficulty.value,
        "masked_word": round_engine.reveal(),
        "word": state.word if round_engine.is_finished else None,
        "wrong_letters": list(state.wrong_letters),
        "remaining_attempts": round_engine.remaining_attempts,
        "max_attempts": state.max_attempts,
        "score": state.score,
        "completion": round_engine.completion_percentage(),
    }


def _profile_view(session: GameSession) -> dict:
    profile = session.profile
    effective = session.effective_attributes()
    return {
        "player_id": profile.player_id,
        "name": profile.name,
        "language": profile.language.value,
        "default_difficulty": profile.default_difficulty.value,
        "progression": profile.progression.model_dump(),
        "xp_progress": session.progression.xp_progress(),
        "effective_attributes": effective.model_dump(),
        "bonuses": StatCalculator.bonuses(effective),
    }


@app.route("/api/players", methods=["GET"])
def list_players():
    """List all saved players."""
    players = [
        {"player_id": player_id, "name": profile.name}
        for player_id, profile in _get_profile_store().load_all_profiles().items()
    ]
    return jsonify({"players": players})


@app.route("/api/players", methods=["POST"])
def create_player():
    """Create a new player with a fresh character."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json() or {}
    config = _config_manager.config

    profile = PlayerProfile(
        player_id=str(uuid.uuid4()),
        name=str(data.get("name") or "Player"),
        inventory=Inventory(capacity=config.inventory_capacity),
        quests=basic_quests(),
        language=config.language,
        default_difficulty=config.default_difficulty,
    )

    try:
        session = _create_session(profile)
    except Exception as e:
        app.logger.error(f"Error creating player: {e}", exc_info=True)
        return jsonify({"error": "Failed to create player", "message": str(e)}), 500

    _save_profile(session)
    _remember_session(session)
    return jsonify({"success": True, "player_id": profile.player_id}), 201


@app.route("/api/players/<player_id>", methods=["GET"])
def get_player(player_id: str):
    """Get a player's character sheet."""
    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)
    return jsonify(_profile_view(session))


@app.route("/api/players/<player_id>/rounds", methods=["POST"])
def start_round(player_id: str):
    """Start a new round; 'difficulty' is a 1-3 selector, anything else means medium."""
    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)

    data = request.get_json(silent=True) or {}
    difficulty = None
    if "difficulty" in data:
        selector = data["difficulty"]
        difficulty = Difficulty.from_selector(selector if type(selector) is int else 0)

    round_engine = session.start_round(difficulty)
    return jsonify({"success": True, "round": _round_view(round_engine)}), 201


@app.route("/api/players/<player_id>/rounds/current", methods=["GET"])
def get_current_round(player_id: str):
    """Get the current round."""
    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)
    if session.current_round is None:
        return jsonify({"error": "No round in progress"}), 404
    return jsonify({"round": _round_view(session.current_round)})


@app.route("/api/players/<player_id>/rounds/current/guess", methods=["POST"])
def guess_letter(player_id: str):
    """Guess one letter in the current round."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)
    if session.current_round is None:
        return jsonify({"error": "No round in progress"}), 404

    data = request.get_json() or {}
    raw_letter = data.get("letter")
    if not isinstance(raw_letter, str):
        return jsonify({"error": "Field 'letter' must be a string"}), 400

    letter = _input_sanitizer.extract_letter(raw_letter)
    if letter is None:
        return jsonify({"error": "Invalid letter", "message": "Send exactly one letter"}), 400

    was_finished = session.current_round.is_finished
    accepted = session.guess(letter)

    response = {"accepted": accepted, "round": _round_view(session.current_round), "outcome": None}
    if session.current_round.is_finished and not was_finished:
        response["outcome"] = session.last_outcome.model_dump(mode="json")
        _save_profile(session)
    return jsonify(response)


@app.route("/api/players/<player_id>/quests", methods=["GET"])
def get_quests(player_id: str):
    """Get a player's quest log."""
    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)
    return jsonify(
        {
            "active": [quest.model_dump() for quest in session.quests.active()],
            "completed": [quest.model_dump() for quest in session.quests.completed()],
        }
    )


@app.route("/api/players/<player_id>/inventory", methods=["GET"])
def get_inventory(player_id: str):
    """Get a player's inventory."""
    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)
    return jsonify(session.inventory.inventory.model_dump(mode="json"))


@app.route("/api/players/<player_id>/inventory", methods=["POST"])
def add_inventory_item(player_id: str):
    """Add a catalog item to a player's inventory."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)

    data = request.get_json() or {}
    item = find_item(str(data.get("item_id", "")))
    if item is None:
        return jsonify({"error": "Unknown item", "item_id": data.get("item_id")}), 404

    if not session.add_item(item):
        return jsonify({"error": "Inventory full", "capacity": session.inventory.inventory.capacity}), 409

    _save_profile(session)
    return jsonify({"success": True, "item": item.model_dump(mode="json")}), 201


@app.route("/api/players/<player_id>/inventory/<item_id>/use", methods=["POST"])
def use_inventory_item(player_id: str, item_id: str):
    """Use an item and return its effects."""
    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)

    effects, found = session.use_item(item_id)
    if not found:
        return jsonify({"error": "No unused item with this id", "item_id": item_id}), 404

    _save_profile(session)
    return jsonify({"success": True, "effects": [effect.model_dump(mode="json") for effect in effects]})


@app.route("/api/players/<player_id>/stats", methods=["GET"])
def get_stats(player_id: str):
    """Get a player's game statistics."""
    session = _get_session(player_id)
    if session is None:
        return _player_not_found(player_id)

    store = session.stats_store
    stats = store.stats
    return jsonify(
        {
            "games_played": stats.games_played,
            "games_won": stats.games_won,
            "total_points": stats.total_points,
            "highest_score": stats.highest_score,
            "win_rate": store.win_rate(),
            "average_score": store.average_score(),
            "last_games": [record.model_dump(mode="json") for record in store.last_games(5)],
        }
    )
