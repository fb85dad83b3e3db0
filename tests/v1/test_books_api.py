# tests/v1/test_books_api.py
"""Tests for book search and catalog endpoints."""

import uuid

import httpx
import pytest
from fastapi import status

from folio.api.v1.dependencies import get_google_books_client
from folio.services.google_books import GoogleBooksClient

VOLUME = {
    "id": "abc123",
    "volumeInfo": {
        "title": "Piranesi",
        "authors": ["Susanna Clarke"],
        "industryIdentifiers": [{"type": "ISBN_13", "identifier": "9781635575637"}],
        "language": "en",
    },
}


@pytest.fixture()
def provider(app, test_settings):
    """Route Google Books calls to a programmable mock transport."""
    state = {"status": 200, "payload": {"items": [VOLUME]}}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(state["status"], json=state["payload"])

    client = GoogleBooksClient(test_settings, transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_google_books_client] = lambda: client
    try:
        yield state
    finally:
        app.dependency_overrides.pop(get_google_books_client, None)


def test_search_books(client, provider) -> None:
    response = client.get("/books/search", params={"q": "piranesi", "maxResults": 5})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["success"] is True
    assert body["total"] == 1
    assert body["data"][0]["isbn13"] == "9781635575637"


def test_search_books_validates_params(client, provider) -> None:
    assert client.get("/books/search").status_code == status.HTTP_400_BAD_REQUEST
    response = client.get("/books/search", params={"q": "x", "maxResults": 41})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_search_provider_failure(client, provider) -> None:
    provider["status"] = 500
    provider["payload"] = {"error": "boom"}

    response = client.get("/books/search", params={"q": "piranesi"})

    assert response.status_code == status.HTTP_502_BAD_GATEWAY


def test_isbn_lookup(client, provider) -> None:
    response = client.get("/books/search/isbn/9781635575637")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["title"] == "Piranesi"

    provider["payload"] = {"totalItems": 0}
    response = client.get("/books/search/isbn/0000000000")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_import_from_google_is_idempotent(client, alice, auth_headers) -> None:
    headers = auth_headers(alice)
    payload = {"googleBooksId": "abc123", "title": "Piranesi", "authors": ["Susanna Clarke"]}

    first = client.post("/books/from-google", json=payload, headers=headers)
    assert first.status_code == status.HTTP_201_CREATED
    assert first.json()["message"] == "Book added successfully"

    second = client.post(
        "/books/from-google", json={**payload, "title": "Renamed"}, headers=headers
    )
    assert second.status_code == status.HTTP_200_OK
    assert second.json()["data"]["id"] == first.json()["data"]["id"]
    assert second.json()["data"]["title"] == "Piranesi"


def test_create_custom_book_and_fetch(client, alice, auth_headers) -> None:
    response = client.post(
        "/books/custom",
        json={"title": "Family Recipes", "authors": ["Grandma"], "pageCount": 40},
        headers=auth_headers(alice),
    )
    assert response.status_code == status.HTTP_201_CREATED
    book = response.json()["data"]
    assert book["createdBy"] == str(alice.id)

    response = client.get(f"/books/{book['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["title"] == "Family Recipes"


def test_create_custom_book_requires_an_author(client, alice, auth_headers) -> None:
    response = client.post(
        "/books/custom", json={"title": "Anonymous", "authors": []}, headers=auth_headers(alice)
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_and_get_books(client, make_book) -> None:
    make_book(title="Beloved", authors=["Toni Morrison"])
    make_book(title="Jazz", authors=["Toni Morrison"])

    response = client.get("/books", params={"search": "morrison", "limit": 1})
    body = response.json()
    assert len(body["data"]) == 1
    assert body["pagination"] == {"limit": 1, "offset": 0, "total": 1}

    assert client.get(f"/books/{uuid.uuid4()}").status_code == status.HTTP_404_NOT_FOUND
