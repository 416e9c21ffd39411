"""
Tests for the todo endpoints, run against an in-memory collection.
"""

from bson import ObjectId
from pymongo.errors import OperationFailure


class TestListTodos:
    def test_empty_collection_returns_empty_list(self, client):
        response = client.get("/todo/get-todos")
        assert response.status_code == 200
        assert response.json() == []

    def test_lists_created_todos_in_insertion_order(self, client):
        client.post("/todo/add-todo", json={"text": "first"})
        client.post("/todo/add-todo", json={"text": "second"})

        response = client.get("/todo/get-todos")
        assert response.status_code == 200
        assert [t["text"] for t in response.json()] == ["first", "second"]

    def test_skips_documents_that_do_not_fit(self, client, todos_collection):
        client.post("/todo/add-todo", json={"text": "valid"})
        todos_collection.documents.append(
            {"_id": ObjectId(), "text": 5, "completed": False}
        )
        todos_collection.documents.append({"_id": ObjectId(), "completed": True})

        response = client.get("/todo/get-todos")
        assert response.status_code == 200
        assert [t["text"] for t in response.json()] == ["valid"]

    def test_store_failure_returns_500(self, client, todos_collection):
        todos_collection.error = OperationFailure("boom")

        response = client.get("/todo/get-todos")
        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}


class TestAddTodo:
    def test_creates_not_completed_todo_with_generated_id(self, client, todos_collection):
        response = client.post("/todo/add-todo", json={"text": "buy milk"})

        assert response.status_code == 201
        data = response.json()
        assert data["text"] == "buy milk"
        assert data["completed"] is False
        assert ObjectId.is_valid(data["_id"])
        assert todos_collection.documents[0]["_id"] == ObjectId(data["_id"])

    def test_ids_are_unique(self, client):
        ids = {
            client.post("/todo/add-todo", json={"text": f"todo {i}"}).json()["_id"]
            for i in range(5)
        }
        assert len(ids) == 5

    def test_client_supplied_id_is_ignored(self, client):
        supplied = str(ObjectId())
        response = client.post("/todo/add-todo", json={"text": "x", "_id": supplied})
        assert response.status_code == 201
        assert response.json()["_id"] != supplied

    def test_empty_text_is_rejected(self, client, todos_collection):
        response = client.post("/todo/add-todo", json={"text": ""})

        assert response.status_code == 400
        assert response.json() == {"message": "Todo text is required"}
        assert todos_collection.documents == []

    def test_missing_text_is_rejected(self, client, todos_collection):
        response = client.post("/todo/add-todo", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "Todo text is required"}
        assert todos_collection.documents == []

    def test_missing_body_is_rejected(self, client, todos_collection):
        response = client.post("/todo/add-todo")

        assert response.status_code == 400
        assert "message" in response.json()
        assert todos_collection.documents == []

    def test_store_failure_returns_500(self, client, todos_collection):
        todos_collection.error = OperationFailure("write failed")

        response = client.post("/todo/add-todo", json={"text": "buy milk"})
        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}


class TestDeleteTodo:
    def test_deletes_existing_todo(self, client):
        todo_id = client.post("/todo/add-todo", json={"text": "gone"}).json()["_id"]

        response = client.delete(f"/todo/delete-todo/{todo_id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Todo deleted"}

        remaining = client.get("/todo/get-todos").json()
        assert todo_id not in [t["_id"] for t in remaining]

    def test_unknown_id_returns_404(self, client):
        response = client.delete(f"/todo/delete-todo/{ObjectId()}")
        assert response.status_code == 404
        assert response.json() == {"message": "Todo not found"}

    def test_malformed_id_returns_404(self, client):
        response = client.delete("/todo/delete-todo/not-an-id")
        assert response.status_code == 404
        assert response.json() == {"message": "Todo not found"}

    def test_second_delete_returns_404(self, client):
        todo_id = client.post("/todo/add-todo", json={"text": "once"}).json()["_id"]

        assert client.delete(f"/todo/delete-todo/{todo_id}").status_code == 200
        assert client.delete(f"/todo/delete-todo/{todo_id}").status_code == 404


class TestToggleTodo:
    def test_toggle_flips_completed(self, client, todos_collection):
        todo_id = client.post("/todo/add-todo", json={"text": "buy milk"}).json()["_id"]

        response = client.post(f"/todo/toggle-todo/{todo_id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Todo status toggled", "completed": True}
        assert todos_collection.documents[0]["completed"] is True

    def test_two_toggles_restore_original_value(self, client):
        todo_id = client.post("/todo/add-todo", json={"text": "buy milk"}).json()["_id"]

        first = client.post(f"/todo/toggle-todo/{todo_id}").json()
        second = client.post(f"/todo/toggle-todo/{todo_id}").json()

        assert first["completed"] is True
        assert second["completed"] is False
        listed = client.get("/todo/get-todos").json()
        assert listed[0]["completed"] is False

    def test_unknown_id_returns_404(self, client):
        response = client.post(f"/todo/toggle-todo/{ObjectId()}")
        assert response.status_code == 404
        assert response.json() == {"message": "Todo not found"}

    def test_malformed_id_returns_404(self, client):
        response = client.post("/todo/toggle-todo/123")
        assert response.status_code == 404

    def test_store_failure_returns_500(self, client, todos_collection):
        todo_id = client.post("/todo/add-todo", json={"text": "x"}).json()["_id"]
        todos_collection.error = OperationFailure("read failed")

        response = client.post(f"/todo/toggle-todo/{todo_id}")
        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}
