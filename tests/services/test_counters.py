# tests/services/test_counters.py
"""Tests for counter adjustment and reconciliation."""

from folio.models import User
from folio.services import engagement, social_graph
from folio.services.counters import adjust_counter, reconcile_counters


def test_adjust_counter_is_relative(db_session, alice) -> None:
    alice.followers_count = 3
    db_session.flush()

    adjust_counter(db_session, User, alice.id, User.followers_count, 2)
    adjust_counter(db_session, User, alice.id, User.followers_count, -10)

    db_session.refresh(alice)
    assert alice.followers_count == 0


def test_reconcile_repairs_drift(db_session, alice, bob, make_post) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    post = make_post(bob)
    engagement.like_post(db_session, alice.id, post.id)
    engagement.add_comment(db_session, alice.id, post.id, "nice")

    alice.following_count = 7
    bob.followers_count = 0
    post.likes_count = 5
    post.comments_count = 0
    db_session.flush()

    fixed = reconcile_counters(db_session)

    assert fixed["users.following_count"] == 1
    assert fixed["users.followers_count"] == 1
    assert fixed["post.likes_count"] == 1
    assert fixed["post.comments_count"] == 1
    for obj in (alice, bob, post):
        db_session.refresh(obj)
    assert alice.following_count == 1
    assert bob.followers_count == 1
    assert post.likes_count == 1
    assert post.comments_count == 1


def test_reconcile_is_noop_when_consistent(db_session, alice, bob) -> None:
    social_graph.follow(db_session, alice.id, bob.id)

    fixed = reconcile_counters(db_session)

    assert set(fixed.values()) == {0}
