"""
Tests for the web API using FastAPI's TestClient.

Supabase, the LLM services, and file-backed stores are replaced with mocks
or temp-dir instances.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from casework.knowledge import DocumentLibrary
from casework.models.records import GeneratedContent
from casework.web.app import app
from casework.web.auth import AuthenticatedUser, get_current_user, get_optional_user

USER = AuthenticatedUser(id="user-1", email="sarah@example.org", access_token="token-1")


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def signed_in():
    """Authenticate every request as USER."""
    app.dependency_overrides[get_current_user] = lambda: USER
    app.dependency_overrides[get_optional_user] = lambda: USER
    yield USER
    app.dependency_overrides.clear()


@pytest.fixture
def db_client(mock_supabase):
    """Route all per-request Supabase clients to mock_supabase."""
    with patch("casework.web.action_routes.get_authenticated_client", return_value=mock_supabase), \
         patch("casework.web.generation_routes.get_authenticated_client", return_value=mock_supabase), \
         patch("casework.db.client.get_authenticated_client", return_value=mock_supabase):
        yield mock_supabase


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestActions:

    def test_crisis_types(self, client):
        response = client.get("/api/crisis-types")

        assert response.status_code == 200
        options = response.json()
        assert len(options) == 10
        assert {"value": "housing", "label": "Housing Instability"} in options

    def test_next_action_personalizes_script(self, client):
        response = client.post(
            "/api/actions/next",
            json={"crisis_type": "housing", "urgency": "high", "client_initials": "J.D.", "caseworker_name": "Sarah"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "housing-high-shelter"
        assert body["personalized_script"].startswith("Hi J.D., this is Sarah.")
        assert body["timestamp"]

    def test_next_action_escalates(self, client):
        response = client.post("/api/actions/next", json={"crisis_type": "spiritual", "urgency": "low"})

        body = response.json()
        assert body["domain"] == "Escalation"
        assert body["button_type"] == "link"

    def test_unknown_crisis_type_rejected(self, client):
        response = client.post("/api/actions/next", json={"crisis_type": "gambling", "urgency": "low"})
        assert response.status_code == 422

    def test_log_requires_auth(self, client):
        response = client.post(
            "/api/actions/log",
            json={"timestamp": "t", "action_id": "a", "crisis_type": "housing", "urgency": "high"},
        )
        assert response.status_code == 401

    def test_log_action(self, client, signed_in, db_client):
        db_client.table.return_value.execute.return_value = MagicMock(data=[{"id": 3}])

        response = client.post(
            "/api/actions/log",
            json={
                "timestamp": "2026-01-01T00:00:00+00:00",
                "action_id": "housing-high-shelter",
                "crisis_type": "housing",
                "urgency": "high",
                "completed": True,
            },
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "id": 3}

    def test_metrics(self, client, signed_in, db_client):
        db_client.table.return_value.execute.return_value = MagicMock(data=[
            {"timestamp": "t", "action_id": "a", "crisis_type": "housing", "urgency": "high", "completed": True},
            {"timestamp": "t", "action_id": "b", "crisis_type": "housing", "urgency": "low", "completed": False},
        ])

        response = client.get("/api/metrics")

        assert response.status_code == 200
        assert response.json()["completion_rate"] == 50.0


class TestAuth:

    def test_missing_header(self, client):
        assert client.get("/api/metrics").status_code == 401

    def test_wrong_scheme(self, client):
        response = client.get("/api/metrics", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_invalid_token(self, client):
        service = MagicMock()
        service.auth.get_user.side_effect = Exception("bad jwt")

        with patch("casework.web.auth.get_service_client", return_value=service):
            response = client.get("/api/metrics", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401


class TestGeneration:

    def test_generate_plan_anonymous(self, client):
        result = GeneratedContent(content="Plan", metadata={"model": "gpt-4o-mini"})

        with patch("casework.web.generation_routes.generate_case_plan", new=AsyncMock(return_value=result)), \
             patch("casework.web.generation_routes.save_case_plan") as mock_save:
            response = client.post("/api/generate-plan", json={"primary_need": "housing", "urgency": "high"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "content": "Plan",
            "metadata": {"model": "gpt-4o-mini"},
            "saved_id": None,
        }
        mock_save.assert_not_called()

    def test_generate_plan_saves_for_user(self, client, signed_in, db_client):
        result = GeneratedContent(content="Plan")

        with patch("casework.web.generation_routes.generate_case_plan", new=AsyncMock(return_value=result)), \
             patch("casework.web.generation_routes.save_case_plan", return_value={"id": 11}) as mock_save:
            response = client.post("/api/generate-plan", json={"primary_need": "housing", "urgency": "high"})

        assert response.json()["saved_id"] == 11
        assert mock_save.call_args.kwargs["urgency"] == "high"

    def test_save_failure_does_not_fail_request(self, client, signed_in, db_client):
        result = GeneratedContent(content="Resource")

        with patch("casework.web.generation_routes.generate_skill_resource", new=AsyncMock(return_value=result)), \
             patch("casework.web.generation_routes.save_resource", side_effect=Exception("db down")):
            response = client.post("/api/generate-skill-resource", json={"skill_topic": "boundaries"})

        assert response.status_code == 200
        assert response.json()["content"] == "Resource"
        assert response.json()["saved_id"] is None

    def test_client_resource_category(self, client, signed_in, db_client):
        result = GeneratedContent(content="Handout")

        with patch("casework.web.generation_routes.generate_client_resource", new=AsyncMock(return_value=result)), \
             patch("casework.web.generation_routes.save_resource", return_value={"id": 5}) as mock_save:
            client.post("/api/generate-client-resource", json={"skill_topic": "sleep"})

        assert mock_save.call_args.kwargs["category"] == "client-resource"

    def test_generation_failure_is_500(self, client):
        with patch(
            "casework.web.generation_routes.generate_case_plan",
            new=AsyncMock(side_effect=RuntimeError("OpenAI down")),
        ):
            response = client.post("/api/generate-plan", json={"primary_need": "housing", "urgency": "high"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert "OpenAI down" in body["error"]

    def test_invalid_urgency_is_422(self, client):
        response = client.post("/api/generate-plan", json={"primary_need": "housing", "urgency": "urgent"})
        assert response.status_code == 422


class TestKnowledge:

    @pytest.fixture(autouse=True)
    def stores(self, knowledge_store, tmp_path):
        library = DocumentLibrary(tmp_path / "library")
        with patch("casework.web.knowledge_routes.get_knowledge_store", return_value=knowledge_store), \
             patch("casework.web.knowledge_routes.get_document_library", return_value=library):
            yield knowledge_store, library

    def test_get_knowledge(self, client):
        response = client.get("/api/knowledge")

        assert response.status_code == 200
        assert response.json()["organization"]["name"] == "Test Recovery Center"

    def test_put_requires_pin(self, client, knowledge_data):
        assert client.put("/api/knowledge", json=knowledge_data).status_code == 403

    def test_put_wrong_pin(self, client, knowledge_data):
        response = client.put("/api/knowledge", json=knowledge_data, headers={"X-Admin-Pin": "0000"})
        assert response.status_code == 403

    def test_put_saves(self, client, knowledge_data, stores):
        store, _ = stores
        knowledge_data["organization"]["name"] = "Renamed Center"

        response = client.put("/api/knowledge", json=knowledge_data, headers={"X-Admin-Pin": "8853"})

        assert response.status_code == 200
        assert store.load().organization.name == "Renamed Center"

    def test_documents(self, client, stores):
        _, library = stores
        doc = library.save(b"text", "policy.txt")

        listed = client.get("/api/documents").json()
        assert [d["id"] for d in listed] == [doc.id]

        assert client.delete(f"/api/documents/{doc.id}").status_code == 403
        response = client.delete(f"/api/documents/{doc.id}", headers={"X-Admin-Pin": "8853"})
        assert response.status_code == 200
        assert library.list_documents() == []

    def test_delete_unknown_document(self, client):
        response = client.delete("/api/documents/doc_missing", headers={"X-Admin-Pin": "8853"})
        assert response.status_code == 404

    def test_log_feedback(self, client, tmp_path):
        settings = MagicMock(feedback_log_path=tmp_path / "feedback.jsonl")

        with patch("casework.web.knowledge_routes.settings", settings):
            response = client.post(
                "/api/log-feedback",
                json={"content_type": "case_plan", "feedback": "up", "generated_content": "Plan"},
            )

        assert response.status_code == 200
        assert (tmp_path / "feedback.jsonl").read_text().count("\n") == 1

    def test_feedback_requires_fields(self, client):
        response = client.post("/api/log-feedback", json={"content_type": "case_plan"})
        assert response.status_code == 422


class TestRecords:

    @pytest.fixture(autouse=True)
    def db(self, signed_in, mock_supabase):
        with patch("casework.web.record_routes.db.get_authenticated_client", return_value=mock_supabase):
            yield mock_supabase

    def test_list_clients(self, client, db):
        db.table.return_value.execute.return_value = MagicMock(data=[{"id": 1, "initials": "J.D."}])

        response = client.get("/api/clients")

        assert response.json() == [{"id": 1, "initials": "J.D.", "user_id": None, "created_at": None}]

    def test_add_client_uppercases(self, client, db):
        db.table.return_value.execute.return_value = MagicMock(data=[{"id": 2, "initials": "J.D."}])

        client.post("/api/clients", json={"initials": " j.d. "})

        assert db.table.return_value.insert.call_args.args[0] == {"initials": "J.D.", "user_id": "user-1"}

    def test_recent_case_plans(self, client, db):
        db.table.return_value.execute.return_value = MagicMock(data=[{"id": 1, "client": {"initials": "J.D."}}])

        response = client.get("/api/case-plans?limit=3")

        assert response.json()[0]["client"]["initials"] == "J.D."
        db.table.return_value.limit.assert_called_with(3)

    def test_todo_lifecycle(self, client, db):
        db.table.return_value.execute.return_value = MagicMock(data=[{"id": 9, "task": "Call J.D."}])
        assert client.post("/api/todos", json={"task": "Call J.D."}).json()["id"] == 9

        db.table.return_value.execute.return_value = MagicMock(data=[{"id": 9, "task": "Call J.D.", "is_complete": True}])
        assert client.patch("/api/todos/9", json={"is_complete": True}).json()["is_complete"] is True

        assert client.delete("/api/todos/9").json() == {"success": True}

    def test_update_missing_todo(self, client, db):
        db.table.return_value.execute.return_value = MagicMock(data=[])
        assert client.patch("/api/todos/404", json={"is_complete": True}).status_code == 404

    def test_blank_todo_rejected(self, client):
        assert client.post("/api/todos", json={"task": "   "}).status_code == 422
