# tests/v1/test_users_api.py
"""Tests for user profile endpoints."""

from fastapi import status


def test_own_profile_includes_email(client, alice, auth_headers) -> None:
    response = client.get("/users/profile", headers=auth_headers(alice))

    assert response.status_code == status.HTTP_200_OK
    profile = response.json()["profile"]
    assert profile["email"] == alice.email
    assert profile["followersCount"] == 0


def test_update_profile(client, alice, auth_headers) -> None:
    response = client.put(
        "/users/profile",
        json={"username": "alice_reads", "bio": "Mostly sci-fi", "readingGoal": 30},
        headers=auth_headers(alice),
    )

    assert response.status_code == status.HTTP_200_OK
    profile = response.json()["profile"]
    assert profile["username"] == "alice_reads"
    assert profile["bio"] == "Mostly sci-fi"
    assert profile["readingGoal"] == 30
    assert profile["name"] == "Alice"


def test_update_profile_conflict_and_validation(client, alice, bob, auth_headers) -> None:
    headers = auth_headers(alice)

    response = client.put("/users/profile", json={"username": "bob"}, headers=headers)
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["detail"] == "Username already taken"

    response = client.put(
        "/users/profile",
        json={"username": "no spaces!", "website": "not a url", "readingGoal": -1},
        headers=headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"username", "website", "readingGoal"}


def test_public_profile_hides_email(client, alice) -> None:
    response = client.get("/users/alice")

    assert response.status_code == status.HTTP_200_OK
    profile = response.json()["profile"]
    assert profile["id"] == str(alice.id)
    assert "email" not in profile

    assert client.get("/users/nobody").status_code == status.HTTP_404_NOT_FOUND


def test_search_users(client, make_user) -> None:
    make_user(name="Toni Morrison Fan", username="beloved")
    make_user(name="Someone Else", username="toni_reads", followers_count=3)

    response = client.get("/users/search", params={"query": "toni", "limit": 2})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert [u["username"] for u in body["users"]] == ["toni_reads", "beloved"]
    assert body["hasMore"] is True
