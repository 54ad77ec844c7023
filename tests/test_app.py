"""Tests for the Flask API."""

import pytest

from hangquest.api import app as app_module
from hangquest.api.game_config import GameConfig, GameConfigManager
from hangquest.engine.words import WordsManager


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Test client with storage in a temporary directory and a one-word list."""
    config = GameConfig(profile_dir=str(tmp_path / "profiles"), stats_dir=str(tmp_path / "stats"), inventory_capacity=2)
    monkeypatch.setattr(app_module, "_sessions", {})
    monkeypatch.setattr(app_module, "_config_manager", GameConfigManager(config))
    monkeypatch.setattr(app_module, "_profile_store", None)
    monkeypatch.setattr(app_module, "_words", WordsManager(["kot"]))
    app_module.app.config["TESTING"] = True
    return app_module.app.test_client()


@pytest.fixture
def player_id(client):
    """Id of a freshly created player."""
    response = client.post("/api/players", json={"name": "Ola"})
    return response.get_json()["player_id"]


class TestPlayers:
    """Test suite for player routes."""

    def test_create_player(self, client):
        """Test creating a player."""
        response = client.post("/api/players", json={"name": "Ola"})
        assert response.status_code == 201
        data = response.get_json()
        assert data["success"] is True

        player = client.get(f"/api/players/{data['player_id']}").get_json()
        assert player["name"] == "Ola"
        assert player["progression"]["level"] == 1
        assert player["effective_attributes"]["luck"] == 1

    def test_create_player_requires_json(self, client):
        """Test that non-JSON bodies are rejected."""
        response = client.post("/api/players", data="name=Ola")
        assert response.status_code == 400

    def test_unknown_player(self, client):
        """Test that an unknown player is a 404."""
        response = client.get("/api/players/missing")
        assert response.status_code == 404
        assert response.get_json()["player_id"] == "missing"

    def test_list_players(self, client, player_id):
        """Test listing saved players."""
        players = client.get("/api/players").get_json()["players"]
        assert players == [{"player_id": player_id, "name": "Ola"}]

    def test_player_restored_from_disk(self, client, player_id, monkeypatch):
        """Test that a saved player is loaded after the sessions are dropped."""
        monkeypatch.setattr(app_module, "_sessions", {})
        response = client.get(f"/api/players/{player_id}")
        assert response.status_code == 200
        assert response.get_json()["name"] == "Ola"

    def test_list_players_does_not_load_sessions(self, client, player_id, monkeypatch):
        """Test that listing reads saved profiles without opening sessions."""
        monkeypatch.setattr(app_module, "_sessions", {})
        players = client.get("/api/players").get_json()["players"]
        assert [player["player_id"] for player in players] == [player_id]
        assert app_module._sessions == {}

    def test_sessions_bounded(self, client, monkeypatch):
        """Test that the least recently used session is saved and dropped."""
        monkeypatch.setattr(app_module, "_max_sessions", 2)
        first, second, third = (
            client.post("/api/players", json={"name": name}).get_json()["player_id"] for name in ["A", "B", "C"]
        )
        assert list(app_module._sessions) == [second, third]

        client.get(f"/api/players/{second}")
        response = client.get(f"/api/players/{first}")
        assert response.status_code == 200
        assert response.get_json()["name"] == "A"
        assert list(app_module._sessions) == [second, first]

    def test_unknown_route_is_json(self, client):
        """Test that HTTP errors under /api/ are JSON."""
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.get_json()["code"] == 404


class TestRounds:
    """Test suite for round routes."""

    def test_start_round(self, client, player_id):
        """Test starting a round with a selector."""
        response = client.post(f"/api/players/{player_id}/rounds", json={"difficulty": 3})
        assert response.status_code == 201
        game_round = response.get_json()["round"]
        assert game_round["difficulty"] == "hard"
        assert game_round["max_attempts"] == 4
        assert game_round["masked_word"] == "_ _ _"
        assert game_round["word"] is None

    def test_invalid_selector_means_medium(self, client, player_id):
        """Test the fallback difficulty."""
        response = client.post(f"/api/players/{player_id}/rounds", json={"difficulty": "x"})
        assert response.get_json()["round"]["difficulty"] == "medium"

    @pytest.mark.parametrize("selector", [True, False])
    def test_boolean_selector_means_medium(self, client, player_id, selector):
        """Test that booleans are not taken as selectors."""
        response = client.post(f"/api/players/{player_id}/rounds", json={"difficulty": selector})
        assert response.get_json()["round"]["difficulty"] == "medium"

    def test_no_round(self, client, player_id):
        """Test that the current round is a 404 before starting one."""
        assert client.get(f"/api/players/{player_id}/rounds/current").status_code == 404
        response = client.post(f"/api/players/{player_id}/rounds/current/guess", json={"letter": "k"})
        assert response.status_code == 404

    def test_win_flow(self, client, player_id):
        """Test guessing the whole word."""
        client.post(f"/api/players/{player_id}/rounds", json={"difficulty": 2})

        data = None
        for letter in "kot":
            data = client.post(f"/api/players/{player_id}/rounds/current/guess", json={"letter": letter}).get_json()
            assert data["accepted"] is True

        assert data["round"]["status"] == "won"
        assert data["round"]["word"] == "kot"
        assert data["outcome"]["score"] == 110
        assert data["outcome"]["level"] == 2

        stats = client.get(f"/api/players/{player_id}/stats").get_json()
        assert stats["games_played"] == 1
        assert stats["win_rate"] == 100.0

        quests = client.get(f"/api/players/{player_id}/quests").get_json()
        assert [quest["quest_id"] for quest in quests["completed"]] == ["quest_perfect"]

    def test_repeated_guess(self, client, player_id):
        """Test that a repeated letter is not accepted."""
        client.post(f"/api/players/{player_id}/rounds", json={})
        client.post(f"/api/players/{player_id}/rounds/current/guess", json={"letter": "a"})
        data = client.post(f"/api/players/{player_id}/rounds/current/guess", json={"letter": "A"}).get_json()
        assert data["accepted"] is False
        assert data["round"]["wrong_letters"] == ["a"]
        assert data["outcome"] is None

    @pytest.mark.parametrize("body", [{"letter": "ab"}, {"letter": "1"}, {"letter": 5}, {}])
    def test_invalid_guess(self, client, player_id, body):
        """Test that invalid letters are a 400."""
        client.post(f"/api/players/{player_id}/rounds", json={})
        response = client.post(f"/api/players/{player_id}/rounds/current/guess", json=body)
        assert response.status_code == 400


class TestInventory:
    """Test suite for inventory routes."""

    def test_add_and_use_item(self, client, player_id):
        """Test adding a consumable and using it once."""
        response = client.post(f"/api/players/{player_id}/inventory", json={"item_id": "potion_hint"})
        assert response.status_code == 201

        response = client.post(f"/api/players/{player_id}/inventory/potion_hint/use")
        assert response.status_code == 200
        assert response.get_json()["effects"][0]["kind"] == "reveal_letter"

        response = client.post(f"/api/players/{player_id}/inventory/potion_hint/use")
        assert response.status_code == 404

        inventory = client.get(f"/api/players/{player_id}/inventory").get_json()
        assert inventory["items"][0]["used"] is True

    def test_unknown_item(self, client, player_id):
        """Test adding an item that is not in the catalog."""
        response = client.post(f"/api/players/{player_id}/inventory", json={"item_id": "sword"})
        assert response.status_code == 404

    def test_full_inventory(self, client, player_id):
        """Test that a full inventory is a 409."""
        for _ in range(2):
            client.post(f"/api/players/{player_id}/inventory", json={"item_id": "ring_fortune"})
        response = client.post(f"/api/players/{player_id}/inventory", json={"item_id": "ring_fortune"})
        assert response.status_code == 409
        assert response.get_json()["capacity"] == 2

    def test_equipment_in_player_view(self, client, player_id):
        """Test that equipment shows in effective attributes."""
        client.post(f"/api/players/{player_id}/inventory", json={"item_id": "ring_fortune"})
        player = client.get(f"/api/players/{player_id}").get_json()
        assert player["effective_attributes"]["luck"] == 4
