"""
Tests for the repository: read queries, writes and the subscription race.
"""

from __future__ import annotations

import logging
import threading
from unittest.mock import MagicMock

import pytest

from wanderlust.db.models import EntityKind
from wanderlust.db.repositories import (
    DuplicateSubscription,
    DuplicateUsername,
    Repository,
    SortOrder,
)
from wanderlust.db.schemas import (
    ContactMessageCreate,
    InquiryCreate,
    SubscriberCreate,
    UserCreate,
    validate_payload,
)
from wanderlust.db.store import MemoryStore
from wanderlust.services.notifications import EmailNotifier


def _inquiry(**overrides) -> InquiryCreate:
    payload = {
        "fullName": "Raj Patel",
        "email": "raj@example.com",
        "phone": "+91 98200 12345",
        "tourId": "5",
        "travelers": 2,
    }
    payload.update(overrides)
    return validate_payload(InquiryCreate, payload)


# ----------------------------------------------------------------------
# Generic queries
# ----------------------------------------------------------------------

def test_list_all_is_stable(repo: Repository) -> None:
    """Repeated reads return the same records and counts."""
    for kind in EntityKind:
        first = repo.list_all(kind)
        second = repo.list_all(kind)
        assert first == second


def test_get_by_id_bali(repo: Repository) -> None:
    bali = repo.get_by_id("destinations", "1")
    assert bali.name == "Bali"
    assert bali.rating == 4.9
    assert bali.price_from == 899
    assert repo.get_by_id("destinations", "1") == bali


def test_get_by_id_missing(repo: Repository) -> None:
    assert repo.get_by_id("destinations", "nonexistent") is None


def test_get_by_slug(repo: Repository) -> None:
    assert repo.get_by_slug("hidden-gems-bali").id == "1"
    assert repo.get_by_slug("no-such-slug") is None


def test_filter_by_flag(repo: Repository) -> None:
    featured = repo.filter_by_flag("destinations", "featured")
    assert [d.id for d in featured] == ["1", "2", "3", "5", "6"]
    trending = repo.filter_by_flag("destinations", "trending")
    assert [d.id for d in trending] == ["1", "3", "5", "7", "8"]


def test_filter_by_flag_accepts_alias(repo: Repository) -> None:
    assert [d.id for d in repo.filter_by_flag("destinations", "isNew")] == ["4", "7", "9"]


def test_filter_by_flag_rejects_non_flags(repo: Repository) -> None:
    with pytest.raises(ValueError):
        repo.filter_by_flag("destinations", "name")
    with pytest.raises(ValueError):
        repo.filter_by_flag("destinations", "doesNotExist")


def test_itinerary_sorted_by_day(repo: Repository) -> None:
    days = repo.filter_by_relation("tourItinerary", "tourId", "1")
    assert [d.day for d in days] == [1, 2, 3, 4]


def test_itinerary_sorted_even_when_inserted_out_of_order(store: MemoryStore) -> None:
    repo = Repository(store)
    store.insert(
        EntityKind.TOUR_ITINERARY,
        store.get(EntityKind.TOUR_ITINERARY, "1").model_copy(update={"id": "10", "tour_id": "2", "day": 3}),
    )
    store.insert(
        EntityKind.TOUR_ITINERARY,
        store.get(EntityKind.TOUR_ITINERARY, "1").model_copy(update={"id": "11", "tour_id": "2", "day": 1}),
    )
    assert [d.day for d in repo.get_tour_itinerary("2")] == [1, 3]


def test_relation_to_missing_target_is_empty(repo: Repository) -> None:
    assert repo.get_tour_itinerary("6") == []
    assert repo.get_tours_by_destination("nonexistent") == []


def test_tours_by_destination(repo: Repository) -> None:
    assert [t.id for t in repo.get_tours_by_destination("1")] == ["1"]
    assert repo.get_tours_by_destination("4") == []


def test_faqs_by_tour_include_general(repo: Repository) -> None:
    """Every seeded FAQ is general, so any tour sees all of them."""
    assert len(repo.get_faqs_by_tour("1")) == 5
    assert len(repo.get_faqs_by_tour("unknown-tour")) == 5


def test_featured_queries(repo: Repository) -> None:
    assert len(repo.get_featured_tours()) == 5
    assert len(repo.get_featured_testimonials()) == 5
    assert [p.slug for p in repo.get_featured_blog_posts()] == ["hidden-gems-bali"]


def test_blog_posts_newest_first(repo: Repository) -> None:
    assert [p.id for p in repo.get_all_blog_posts()] == ["1", "2", "3"]


# ----------------------------------------------------------------------
# Search
# ----------------------------------------------------------------------

def test_search_destinations_by_continent(repo: Repository) -> None:
    results = repo.search_destinations(continents=["asia"])
    assert [d.id for d in results] == ["5", "8", "1", "3"]


def test_search_destinations_price_range(repo: Repository) -> None:
    results = repo.search_destinations(min_price=1000, max_price=2000, sort=SortOrder.PRICE_LOW)
    assert [d.price_from for d in results] == [1299, 1399, 1599, 1799, 1899]


def test_search_destinations_text(repo: Repository) -> None:
    assert [d.name for d in repo.search_destinations(query="japan")] == ["Tokyo"]


def test_search_destinations_has_no_duration_order(repo: Repository) -> None:
    with pytest.raises(ValueError):
        repo.search_destinations(sort=SortOrder.DURATION)



def test_search_tours_by_category(repo: Repository) -> None:
    results = repo.search_tours(categories=["adventure"])
    assert [t.id for t in results] == ["1", "6"]


def test_search_tours_sorting(repo: Repository) -> None:
    by_price = repo.search_tours(sort="price-high")
    assert [t.price for t in by_price] == [3999, 3499, 2799, 1899, 1699, 1299]
    by_length = repo.search_tours(sort=SortOrder.DURATION)
    assert [t.id for t in by_length] == ["2", "6", "3", "1", "5", "4"]


def test_search_tours_no_match(repo: Repository) -> None:
    assert repo.search_tours(query="antarctic cruise") == []


# ----------------------------------------------------------------------
# Writes
# ----------------------------------------------------------------------

def test_create_inquiry(repo: Repository, store: MemoryStore) -> None:
    inquiry = repo.create_inquiry(_inquiry())
    assert inquiry.id
    assert inquiry.created_at is not None
    assert inquiry.contact_preference == "email"
    assert store.get(EntityKind.INQUIRIES, inquiry.id) == inquiry


def test_inquiries_have_unique_ids(repo: Repository) -> None:
    ids = {repo.create_inquiry(_inquiry()).id for _ in range(5)}
    assert len(ids) == 5
    assert len(repo.get_all_inquiries()) == 5


def test_inquiry_with_dangling_tour_reference(repo: Repository) -> None:
    """Weak references are not enforced."""
    inquiry = repo.create_inquiry(_inquiry(tourId="does-not-exist"))
    assert inquiry.tour_id == "does-not-exist"


def test_subscribe_then_duplicate(repo: Repository) -> None:
    first = repo.subscribe_newsletter(validate_payload(SubscriberCreate, {"email": "a@b.com"}))
    assert first.email == "a@b.com"
    with pytest.raises(DuplicateSubscription):
        repo.subscribe_newsletter(validate_payload(SubscriberCreate, {"email": "a@b.com"}))
    assert len(repo.list_all(EntityKind.SUBSCRIBERS)) == 1


def test_duplicate_check_ignores_case(repo: Repository) -> None:
    repo.subscribe_newsletter(validate_payload(SubscriberCreate, {"email": "a@b.com"}))
    with pytest.raises(DuplicateSubscription):
        repo.subscribe_newsletter(validate_payload(SubscriberCreate, {"email": "A@B.com"}))
    assert repo.is_email_subscribed("A@b.COM")


def test_concurrent_subscriptions_single_winner(repo: Repository) -> None:
    """N simultaneous signups with one email: one success, N-1 duplicates."""
    n = 32
    barrier = threading.Barrier(n)
    outcomes = []
    outcomes_lock = threading.Lock()
    data = validate_payload(SubscriberCreate, {"email": "race@example.com"})

    def worker():
        barrier.wait()
        try:
            repo.subscribe_newsletter(data)
            result = "ok"
        except DuplicateSubscription:
            result = "duplicate"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("duplicate") == n - 1
    assert len(repo.list_all(EntityKind.SUBSCRIBERS)) == 1


def test_create_contact_message_returns_id_only(repo: Repository, store: MemoryStore) -> None:
    data = validate_payload(
        ContactMessageCreate,
        {
            "fullName": "Yuki Tanaka",
            "email": "yuki@example.com",
            "subject": "Private tour",
            "message": "Could you arrange a private version of the Japan tour?",
        },
    )
    ack = repo.create_contact_message(data)
    assert list(ack) == ["id"]
    stored = store.get(EntityKind.CONTACT_MESSAGES, ack["id"])
    assert stored.subject == "Private tour"


def test_create_user_hashes_password(repo: Repository) -> None:
    user = repo.create_user(validate_payload(UserCreate, {"username": "alex", "password": "correct-horse"}))
    assert user.password_hash.startswith("pbkdf2_sha256$")
    assert "correct-horse" not in user.password_hash
    assert "passwordHash" not in user.model_dump(by_alias=True)
    assert repo.get_user_by_username("alex") == user
    assert repo.get_user(user.id) == user
    with pytest.raises(DuplicateUsername):
        repo.create_user(validate_payload(UserCreate, {"username": "alex", "password": "another-pass"}))


# ----------------------------------------------------------------------
# Notifications
# ----------------------------------------------------------------------

def test_writes_notify(store: MemoryStore) -> None:
    notifier = MagicMock()
    repo = Repository(store, notifier)
    inquiry = repo.create_inquiry(_inquiry())
    notifier.inquiry_received.assert_called_once_with(inquiry)
    subscriber = repo.subscribe_newsletter(validate_payload(SubscriberCreate, {"email": "n@example.com"}))
    notifier.subscriber_added.assert_called_once_with(subscriber)
    ack = repo.create_contact_message(
        validate_payload(
            ContactMessageCreate,
            {
                "fullName": "Yuki Tanaka",
                "email": "yuki@example.com",
                "subject": "Private tour",
                "message": "Could you arrange a private version of the Japan tour?",
            },
        )
    )
    notifier.contact_message_received.assert_called_once_with(store.get(EntityKind.CONTACT_MESSAGES, ack["id"]))
    user = repo.create_user(validate_payload(UserCreate, {"username": "alex", "password": "correct-horse"}))
    notifier.user_registered.assert_called_once_with(user)


def test_duplicate_subscription_does_not_notify(store: MemoryStore) -> None:
    notifier = MagicMock()
    repo = Repository(store, notifier)
    data = validate_payload(SubscriberCreate, {"email": "n@example.com"})
    repo.subscribe_newsletter(data)
    with pytest.raises(DuplicateSubscription):
        repo.subscribe_newsletter(data)
    assert notifier.subscriber_added.call_count == 1


def test_notifier_failure_does_not_fail_write(store: MemoryStore) -> None:
    notifier = MagicMock()
    notifier.inquiry_received.side_effect = RuntimeError("smtp down")
    repo = Repository(store, notifier)
    inquiry = repo.create_inquiry(_inquiry())
    assert store.get(EntityKind.INQUIRIES, inquiry.id) == inquiry


def test_simulated_email_is_logged(store: MemoryStore, caplog) -> None:
    repo = Repository(store, EmailNotifier(enabled=True, recipient="desk@example.com"))
    with caplog.at_level(logging.INFO, logger="wanderlust"):
        repo.create_inquiry(_inquiry())
    assert "[EMAIL SIMULATION]" in caplog.text
    assert "Raj Patel" in caplog.text
