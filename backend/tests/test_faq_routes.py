"""
FAQDesk Backend: FAQ Route Tests
==================================

What:  End-to-end tests of the /faq endpoints over HTTP.
How:   HTTPX AsyncClient → ASGI app → FaqService → in-memory SQLite store.

What we test:
    ✅ The create / get / update / delete / get-404 scenario
    ✅ Newest-first listing
    ✅ Blank questions rejected with 400 and no new row
    ✅ 404 for unknown and non-integer ids
    ✅ Store failures surface as 500 with the raw failure text
"""

from datetime import datetime

import pytest

from app.config import settings


async def _create(client, question, answer=None):
    data = {"question": question}
    if answer is not None:
        data["answer"] = answer
    response = await client.post("/faq", data=data)
    assert response.status_code == 200, response.text
    return response.json()


class TestFaqScenario:
    """Full lifecycle of one entry."""

    @pytest.mark.asyncio
    async def test_create_get_update_delete(self, test_client):
        created = await _create(test_client, "What is X?")
        assert created["question"] == "What is X?"
        assert created["answer"] is None
        entry_id = created["id"]

        response = await test_client.get(f"/faq/{entry_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == entry_id
        assert body["question"] == "What is X?"
        assert body["answer"] is None
        assert body["createdAt"]
        assert body["updatedAt"] is None

        response = await test_client.put(
            f"/faq/{entry_id}", data={"question": "What is X, exactly?"}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == entry_id
        assert body["question"] == "What is X, exactly?"
        assert body["answer"] is None

        response = await test_client.delete(f"/faq/{entry_id}")
        assert response.status_code == 200
        assert response.content == b""

        response = await test_client.get(f"/faq/{entry_id}")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestFaqList:
    """GET /faq."""

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/faq")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_newest_first(self, test_client):
        for i in range(3):
            await _create(test_client, f"Question {i}?", f"Answer {i}")

        response = await test_client.get("/faq")
        entries = response.json()

        assert [e["question"] for e in entries] == ["Question 2?", "Question 1?", "Question 0?"]
        assert entries[0]["answer"] == "Answer 2"
        assert set(entries[0]) == {"id", "question", "answer", "createdAt", "updatedAt"}


class TestFaqCreate:
    """POST /faq."""

    @pytest.mark.asyncio
    async def test_create_with_answer(self, test_client):
        created = await _create(test_client, "Where are you?", "Berlin")
        assert created["answer"] == "Berlin"
        assert isinstance(created["id"], int)
        datetime.fromisoformat(created["createdAt"])

    @pytest.mark.asyncio
    async def test_empty_answer_stored_as_null(self, test_client):
        created = await _create(test_client, "Anyone?", "")

        response = await test_client.get(f"/faq/{created['id']}")
        assert response.json()["answer"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question", ["", "   "])
    async def test_blank_question_rejected(self, test_client, question):
        await _create(test_client, "Existing?")

        response = await test_client.post("/faq", data={"question": question, "answer": "x"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Question is required."
        assert body["details"] == {"field": "question"}
        assert len((await test_client.get("/faq")).json()) == 1

    @pytest.mark.asyncio
    async def test_missing_question_rejected(self, test_client):
        response = await test_client.post("/faq", data={"answer": "orphan"})
        assert response.status_code == 400


class TestFaqUpdate:
    """PUT /faq/{id}."""

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, test_client):
        created = await _create(test_client, "Old?", "old answer")

        response = await test_client.put(
            f"/faq/{created['id']}", data={"question": "New?", "answer": "new answer"}
        )

        body = response.json()
        assert body["question"] == "New?"
        assert body["answer"] == "new answer"
        assert body["createdAt"] == created["createdAt"]
        assert datetime.fromisoformat(body["updatedAt"]) >= datetime.fromisoformat(
            body["createdAt"]
        )

    @pytest.mark.asyncio
    async def test_update_clears_answer(self, test_client):
        created = await _create(test_client, "Q?", "A")

        response = await test_client.put(f"/faq/{created['id']}", data={"question": "Q?"})

        assert response.json()["answer"] is None

    @pytest.mark.asyncio
    async def test_update_missing_id(self, test_client):
        created = await _create(test_client, "Keep me?", "kept")

        response = await test_client.put("/faq/999", data={"question": "Overwrite?"})

        assert response.status_code == 404
        entries = (await test_client.get("/faq")).json()
        assert [(e["id"], e["question"]) for e in entries] == [(created["id"], "Keep me?")]

    @pytest.mark.asyncio
    async def test_update_blank_question(self, test_client):
        created = await _create(test_client, "Stay?")

        response = await test_client.put(f"/faq/{created['id']}", data={"question": " "})

        assert response.status_code == 400
        body = (await test_client.get(f"/faq/{created['id']}")).json()
        assert body["question"] == "Stay?"
        assert body["updatedAt"] is None


class TestFaqDelete:
    """DELETE /faq/{id}."""

    @pytest.mark.asyncio
    async def test_delete_missing_id(self, test_client):
        await _create(test_client, "Survivor?")

        response = await test_client.delete("/faq/12345")

        assert response.status_code == 404
        assert len((await test_client.get("/faq")).json()) == 1


class TestFaqRouting:
    """Path handling for ids."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["get", "delete"])
    async def test_non_integer_id_not_routed(self, test_client, method):
        response = await getattr(test_client, method)("/faq/abc")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_non_integer_id_put_not_routed(self, test_client):
        response = await test_client.put("/faq/abc", data={"question": "Q?"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_out_of_range_id_not_found(self, test_client, method):
        data = {"question": "Q?"} if method == "PUT" else None

        response = await test_client.request(method, "/faq/99999999999999999999", data=data)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_out_of_range_id_blank_question(self, test_client):
        response = await test_client.put("/faq/99999999999999999999", data={"question": " "})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/faq", headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"


class TestFaqStoreFailure:
    """Store errors on every operation map to 500."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path, data",
        [
            ("GET", "/faq", None),
            ("GET", "/faq/1", None),
            ("POST", "/faq", {"question": "Q?"}),
            ("PUT", "/faq/1", {"question": "Q?"}),
            ("DELETE", "/faq/1", None),
        ],
    )
    async def test_store_error_message_echoed(self, failing_client, method, path, data):
        response = await failing_client.request(method, path, data=data)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "store_error"
        assert body["message"] == "Lost connection to server during query"

    @pytest.mark.asyncio
    async def test_store_error_redacted(self, failing_client, monkeypatch):
        monkeypatch.setattr(settings, "expose_store_errors", False)

        response = await failing_client.get("/faq")

        assert response.status_code == 500
        assert "Lost connection" not in response.json()["message"]

    @pytest.mark.asyncio
    async def test_validation_precedes_store(self, failing_client, mock_db_session):
        response = await failing_client.post("/faq", data={"question": ""})

        assert response.status_code == 400
        mock_db_session.add.assert_not_called()
