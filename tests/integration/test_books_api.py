"""
Integration tests for the bookshelf HTTP API.

Every test gets its own application and an empty in-memory store, and talks
to it through FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from src.application.api import create_app
from src.application.config import Settings
from src.application.controller import BookshelfController
from src.infrastructure.local_book_store import LocalBookStore


@pytest.fixture
def store():
    """Create a fresh LocalBookStore for each test."""
    return LocalBookStore()


@pytest.fixture
def client(store):
    app = create_app(store=store, app_settings=Settings(_env_file=None))
    with TestClient(app) as test_client:
        yield test_client


def book_payload(**overrides) -> dict:
    payload = {
        "name": "Dune",
        "year": 1965,
        "author": "Frank Herbert",
        "summary": "Desert planet politics",
        "publisher": "Chilton",
        "pageCount": 412,
        "readPage": 120,
        "reading": True,
    }
    payload.update(overrides)
    return payload


def add_book(client: TestClient, **overrides) -> str:
    response = client.post("/books", json=book_payload(**overrides))
    assert response.status_code == 201
    return response.json()["data"]["bookId"]


class TestCreateBook:
    """POST /books"""

    def test_create_returns_new_id(self, client, store):
        response = client.post("/books", json=book_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Book added successfully"
        assert body["data"]["bookId"] == store.list_books()[0].id

    def test_created_book_round_trips(self, client):
        """Test that get-by-id returns the input plus server-assigned fields."""
        payload = book_payload()
        book_id = add_book(client)

        book = client.get(f"/books/{book_id}").json()["data"]["book"]

        for key, value in payload.items():
            assert book[key] == value
        assert book["id"] == book_id
        assert book["finished"] is False
        assert book["insertedAt"]
        assert book["updatedAt"] == book["insertedAt"]

    def test_finished_when_all_pages_read(self, client):
        book_id = add_book(client, name="X", year=2020, pageCount=100, readPage=100, reading=False)

        book = client.get(f"/books/{book_id}").json()["data"]["book"]

        assert book["finished"] is True

    def test_read_page_past_page_count(self, client, store):
        response = client.post(
            "/books",
            json={"name": "X", "year": 2020, "pageCount": 100, "readPage": 150, "reading": False},
        )

        assert response.status_code == 400
        assert response.json() == {
            "status": "fail",
            "message": "Failed to add book. readPage cannot be greater than pageCount",
        }
        assert len(store) == 0

    def test_missing_name(self, client, store):
        response = client.post("/books", json={"year": 2020, "pageCount": 10, "readPage": 0, "reading": True})

        assert response.status_code == 400
        assert response.json()["status"] == "fail"
        assert response.json()["message"] == "Failed to add book. Please provide the book name"
        assert len(store) == 0

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"year": "1965"}, "Failed to add book. Please provide valid numbers for year, pageCount and readPage"),
            ({"pageCount": -5}, "Failed to add book. year, pageCount and readPage must not be negative"),
            ({"reading": "yes"}, "Failed to add book. Please provide reading as true or false"),
            ({"author": 7}, "Failed to add book. author, summary and publisher must be text"),
        ],
    )
    def test_invalid_payloads(self, client, store, overrides, message):
        response = client.post("/books", json=book_payload(**overrides))

        assert response.status_code == 400
        assert response.json() == {"status": "fail", "message": message}
        assert len(store) == 0

    @pytest.mark.parametrize("body", ["[]", "\"Dune\"", "not json", ""])
    def test_body_not_a_json_object(self, client, store, body):
        response = client.post("/books", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {
            "status": "fail",
            "message": "Failed to add book. Request body must be a JSON object",
        }
        assert len(store) == 0


class TestListBooks:
    """GET /books"""

    def test_empty_shelf(self, client):
        response = client.get("/books")

        assert response.status_code == 200
        assert response.json() == {"status": "success", "data": {"books": []}}

    def test_list_is_summary_view_in_insertion_order(self, client):
        first = add_book(client, name="First", publisher="A")
        second = add_book(client, name="Second", publisher=None)

        books = client.get("/books").json()["data"]["books"]

        assert books == [
            {"id": first, "name": "First", "publisher": "A"},
            {"id": second, "name": "Second", "publisher": None},
        ]
        for book in books:
            assert set(book) == {"id", "name", "publisher"}


class TestGetBook:
    """GET /books/{bookId}"""

    def test_unknown_id(self, client):
        response = client.get("/books/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"status": "fail", "message": "Book not found"}


class TestUpdateBook:
    """PUT /books/{bookId}"""

    def test_update(self, client):
        book_id = add_book(client)
        before = client.get(f"/books/{book_id}").json()["data"]["book"]

        response = client.put(
            f"/books/{book_id}",
            json=book_payload(name="Dune Messiah", pageCount=256, readPage=256, reading=False),
        )

        assert response.status_code == 200
        assert response.json() == {"status": "success", "message": "Book updated successfully"}
        after = client.get(f"/books/{book_id}").json()["data"]["book"]
        assert after["id"] == book_id
        assert after["name"] == "Dune Messiah"
        assert after["finished"] is True
        assert after["insertedAt"] == before["insertedAt"]
        assert after["updatedAt"]

    def test_update_unknown_id(self, client, store):
        add_book(client)
        before = store.list_books()

        response = client.put("/books/does-not-exist", json=book_payload())

        assert response.status_code == 404
        assert response.json() == {"status": "fail", "message": "Failed to update book. Id not found"}
        assert store.list_books() == before

    def test_update_missing_name(self, client):
        book_id = add_book(client)

        response = client.put(f"/books/{book_id}", json=book_payload(name=""))

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to update book. Please provide the book name"

    def test_update_read_page_past_page_count(self, client):
        book_id = add_book(client)

        response = client.put(f"/books/{book_id}", json=book_payload(pageCount=10, readPage=11))

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to update book. readPage cannot be greater than pageCount"
        assert client.get(f"/books/{book_id}").json()["data"]["book"]["readPage"] == 120

    def test_update_body_not_a_json_object(self, client):
        book_id = add_book(client)

        response = client.put(f"/books/{book_id}", json=[1, 2])

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to update book. Request body must be a JSON object"


class TestDeleteBook:
    """DELETE /books/{bookId}"""

    def test_delete_twice(self, client):
        """Test that the first delete succeeds and the second reports not found."""
        book_id = add_book(client)
        add_book(client, name="Other")

        first = client.delete(f"/books/{book_id}")
        second = client.delete(f"/books/{book_id}")

        assert first.status_code == 200
        assert first.json() == {"status": "success", "message": "Book deleted successfully"}
        assert second.status_code == 404
        assert second.json() == {"status": "fail", "message": "Failed to delete book. Id not found"}
        assert len(client.get("/books").json()["data"]["books"]) == 1


class FailingStore(LocalBookStore):
    """Store whose reads blow up, to exercise the internal error path."""

    def list_books(self):
        raise RuntimeError("store unavailable")


def test_unexpected_error_returns_500():
    app = create_app(store=FailingStore(), app_settings=Settings(_env_file=None))
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/books")

    assert response.status_code == 500
    assert response.json() == {"status": "fail", "message": "Internal server error"}


def test_health(client):
    add_book(client)

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["books"] == 1
    assert body["store"] == "LocalBookStore"
    assert body["app"] == "bookshelf-api"


class TestLargeNumbers:
    """Whole numbers written as large floats."""

    def test_huge_year(self, client):
        response = client.post("/books", json=book_payload(name="X", year=1e308, pageCount=100, readPage=10, reading=False))

        assert response.status_code == 201
        book_id = response.json()["data"]["bookId"]
        book = client.get(f"/books/{book_id}").json()["data"]["book"]
        assert book["year"] == int(1e308)

    def test_huge_page_counts(self, client):
        response = client.post("/books", json=book_payload(pageCount=1e20, readPage=1e20))

        assert response.status_code == 201
        book_id = response.json()["data"]["bookId"]
        book = client.get(f"/books/{book_id}").json()["data"]["book"]
        assert book["pageCount"] == 10 ** 20
        assert book["finished"] is True

    def test_huge_read_page_past_page_count(self, client, store):
        response = client.post("/books", json=book_payload(pageCount=1e20, readPage=1e21))

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to add book. readPage cannot be greater than pageCount"
        assert len(store) == 0


def test_store_and_controller_are_exclusive(store):
    with pytest.raises(ValueError):
        create_app(store=store, controller=BookshelfController(store=LocalBookStore()))


def test_prebuilt_controller_is_served():
    shelf = LocalBookStore()
    app = create_app(controller=BookshelfController(store=shelf), app_settings=Settings(_env_file=None))
    with TestClient(app) as client:
        add_book(client)

    assert len(shelf) == 1
