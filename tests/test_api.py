"""
API tests for the FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from dreamlife.api.app import create_app
from dreamlife.chat.prompts import CLEARED_MESSAGE, PROCESSING_FAILED_MESSAGE, WELCOME_MESSAGE
from dreamlife.config import DreamLifeSettings
from dreamlife.exceptions import EmbeddingError

FAILING_QUESTION = "Tell me about my dream vacation"


@pytest.fixture
def client(engine, embedder):
    embedder.failures[FAILING_QUESTION] = EmbeddingError("no vector")
    app = create_app(
        engine=engine,
        settings=DreamLifeSettings(session_cleanup_interval=3600),
    )
    with TestClient(app) as client:
        yield client


class TestAppFactory:
    @pytest.mark.parametrize("debug", [True, False])
    def test_debug_setting_reaches_app(self, engine, debug):
        app = create_app(engine=engine, settings=DreamLifeSettings(debug=debug))
        assert app.debug is debug


class TestHealthEndpoint:
    def test_health_check(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert "timestamp" in data


class TestAskEndpoint:
    def test_pricing_question(self, client):
        response = client.post("/api/chat/ask", json={"question": "How much is Legend?"})
        assert response.status_code == 200

        data = response.json()
        assert data["mode"] == "reused"
        assert data["source"] == "database"
        assert data["similarity"] == 1.0
        assert "34.99" in data["answer"]

    def test_blocked_question(self, client):
        response = client.post("/api/chat/ask", json={"question": "Explain python generators"})
        assert response.status_code == 200
        assert response.json()["mode"] == "blocked"

    def test_embedding_failure_returns_503(self, client):
        response = client.post("/api/chat/ask", json={"question": FAILING_QUESTION})

        assert response.status_code == 503
        assert response.json()["detail"] == PROCESSING_FAILED_MESSAGE

    def test_missing_question(self, client):
        response = client.post("/api/chat/ask", json={})
        assert response.status_code == 422


class TestStatsEndpoints:
    def test_chat_metrics(self, client):
        client.post("/api/chat/ask", json={"question": "How much is Legend?"})
        client.post("/api/chat/ask", json={"question": "Explain python generators"})

        response = client.get("/api/metrics/chat")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 2
        assert data["scope_blocked"] == 1
        assert data["answered"] == 1
        assert data["distribution"]["reused"] == {"count": 1, "percent": 100.0}
        assert data["thresholds"] == {"reuse": 0.9, "adapt": 0.65, "retrieval": 0.4}

    def test_knowledge_stats(self, client):
        response = client.get("/api/knowledge/stats")
        assert response.status_code == 200

        data = response.json()
        assert data["total_entries"] == 1
        assert data["latest_entry"]["question"] == "How does the Blueprint work?"


class TestChatWebSocket:
    def test_conversation(self, client):
        with client.websocket_connect("/api/chat/ws") as ws:
            welcome = ws.receive_json()
            assert welcome["event"] == "bot_message"
            assert welcome["data"]["message"] == WELCOME_MESSAGE

            ws.send_json({"event": "user_message", "data": {"message": "How much is Legend?"}})
            assert ws.receive_json() == {"event": "bot_typing", "data": True}
            reply = ws.receive_json()
            assert reply["event"] == "bot_message"
            assert reply["data"]["mode"] == "reused"
            assert reply["data"]["type"] == "bot"
            assert ws.receive_json() == {"event": "bot_typing", "data": False}

            ws.send_json({"event": "get_chat_history"})
            history = ws.receive_json()
            assert history["event"] == "chat_history"
            assert [m["type"] for m in history["data"]] == ["bot", "user", "bot"]

    def test_failure_sends_try_again(self, client):
        with client.websocket_connect("/api/chat/ws") as ws:
            ws.receive_json()

            ws.send_json({"event": "user_message", "data": {"message": FAILING_QUESTION}})
            ws.receive_json()
            reply = ws.receive_json()

            assert reply["data"]["message"] == PROCESSING_FAILED_MESSAGE
            assert reply["data"]["mode"] is None

    def test_clear_chat(self, client):
        with client.websocket_connect("/api/chat/ws") as ws:
            ws.receive_json()

            ws.send_json({"event": "clear_chat"})
            assert ws.receive_json() == {"event": "chat_cleared", "data": None}
            again = ws.receive_json()
            assert again["data"]["message"] == CLEARED_MESSAGE

            ws.send_json({"event": "get_chat_history"})
            assert len(ws.receive_json()["data"]) == 1

    def test_typing_and_unknown_events(self, client):
        with client.websocket_connect("/api/chat/ws") as ws:
            ws.receive_json()

            ws.send_json({"event": "user_typing", "data": {"is_typing": True}})
            ws.send_json({"event": "dance"})
            error = ws.receive_json()

            assert error["event"] == "error"
            assert "dance" in error["data"]["message"]

    def test_malformed_frame_keeps_session(self, client):
        with client.websocket_connect("/api/chat/ws") as ws:
            ws.receive_json()

            ws.send_text("{not json")
            error = ws.receive_json()
            assert error["event"] == "error"
            assert "Malformed" in error["data"]["message"]

            ws.send_json({"event": "get_chat_history"})
            history = ws.receive_json()
            assert history["event"] == "chat_history"
            assert len(history["data"]) == 1
