# tests/services/test_engagement.py
"""Tests for likes and comments."""

import uuid

import pytest

from folio.core.errors import AlreadyLikedError, NotFoundError, NotLikedError
from folio.models import PostComment
from folio.services import engagement


def test_like_increments_once(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)

    engagement.like_post(db_session, bob.id, post.id)

    db_session.refresh(post)
    assert post.likes_count == 1


def test_double_like_conflicts_with_single_increment(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)
    engagement.like_post(db_session, bob.id, post.id)

    with pytest.raises(AlreadyLikedError) as exc_info:
        engagement.like_post(db_session, bob.id, post.id)

    assert exc_info.value.status_code == 409
    db_session.refresh(post)
    assert post.likes_count == 1


def test_like_missing_post_is_not_found(db_session, bob) -> None:
    with pytest.raises(NotFoundError):
        engagement.like_post(db_session, bob.id, uuid.uuid4())


def test_like_then_unlike_restores_count(db_session, alice, bob, carol, make_post) -> None:
    post = make_post(alice)
    engagement.like_post(db_session, carol.id, post.id)
    db_session.refresh(post)
    before = post.likes_count

    engagement.like_post(db_session, bob.id, post.id)
    engagement.unlike_post(db_session, bob.id, post.id)

    db_session.refresh(post)
    assert post.likes_count == before


def test_unlike_without_like_fails(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)

    with pytest.raises(NotLikedError) as exc_info:
        engagement.unlike_post(db_session, bob.id, post.id)

    assert exc_info.value.status_code == 404
    db_session.refresh(post)
    assert post.likes_count == 0


def test_unlike_floors_at_zero(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)
    engagement.like_post(db_session, bob.id, post.id)
    post.likes_count = 0
    db_session.flush()

    engagement.unlike_post(db_session, bob.id, post.id)

    db_session.refresh(post)
    assert post.likes_count == 0


def test_add_comment_increments_count(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)

    comment = engagement.add_comment(db_session, bob.id, post.id, "Loved this chapter")

    db_session.refresh(post)
    assert post.comments_count == 1
    assert comment.parent_comment_id is None
    assert comment.content == "Loved this chapter"


def test_reply_is_stored_with_parent(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)
    parent = engagement.add_comment(db_session, bob.id, post.id, "First")

    reply = engagement.add_comment(db_session, alice.id, post.id, "Reply", parent.id)

    db_session.refresh(post)
    assert reply.parent_comment_id == parent.id
    assert post.comments_count == 2


def test_comment_with_unknown_parent_is_rejected(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)

    with pytest.raises(NotFoundError):
        engagement.add_comment(db_session, bob.id, post.id, "Hello", uuid.uuid4())

    db_session.refresh(post)
    assert post.comments_count == 0
    assert db_session.query(PostComment).count() == 0


def test_comment_parent_must_belong_to_same_post(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)
    other = make_post(alice)
    foreign = engagement.add_comment(db_session, bob.id, other.id, "Elsewhere")

    with pytest.raises(NotFoundError):
        engagement.add_comment(db_session, bob.id, post.id, "Hello", foreign.id)

    db_session.refresh(post)
    assert post.comments_count == 0


def test_comment_on_missing_post_is_not_found(db_session, bob) -> None:
    with pytest.raises(NotFoundError):
        engagement.add_comment(db_session, bob.id, uuid.uuid4(), "Hello")


def test_list_comments_returns_top_level_newest_first(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)
    first = engagement.add_comment(db_session, bob.id, post.id, "first")
    second = engagement.add_comment(db_session, alice.id, post.id, "second")
    engagement.add_comment(db_session, alice.id, post.id, "reply", first.id)

    page = engagement.list_comments(db_session, post.id, limit=10)

    assert [c.id for c in page.items] == [second.id, first.id]
    assert page.items[0].user.username == "alice"
    assert page.has_more is False


def test_list_comments_has_more_on_full_page(db_session, alice, bob, make_post) -> None:
    post = make_post(alice)
    for n in range(3):
        engagement.add_comment(db_session, bob.id, post.id, f"comment {n}")

    page = engagement.list_comments(db_session, post.id, limit=3)

    assert len(page.items) == 3
    assert page.has_more is True
