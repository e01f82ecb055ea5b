"""
Repository pattern for data access over the in-memory store.

Lookups that find nothing return None; callers map that to 404.
Business-rule conflicts raise the typed errors below; callers map
them to 409. Anything else that goes wrong propagates.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, List, Optional, Set, Type
import hashlib
import logging
import re
import secrets
import uuid

from fastapi import Depends

from wanderlust.core.config import settings
from wanderlust.db.models import (
    MODEL_FOR_KIND,
    BlogPost,
    ContactMessage,
    Destination,
    EntityKind,
    Faq,
    Inquiry,
    NewsletterSubscriber,
    Record,
    TeamMember,
    Testimonial,
    Tour,
    TourGuide,
    TourItinerary,
    User,
)
from wanderlust.db.schemas import ContactMessageCreate, InquiryCreate, SubscriberCreate, UserCreate
from wanderlust.db.store import MemoryStore, get_store
from wanderlust.services.notifications import EmailNotifier

logger = logging.getLogger(__name__)

GENERAL_FAQ_CATEGORY = "general"
PASSWORD_HASH_ITERATIONS = 260000

_LEADING_NUMBER = re.compile(r"\d+")


class DuplicateSubscription(Exception):
    """The email is already on the newsletter list."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already subscribed")


class DuplicateUsername(Exception):
    """The username is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username already exists")


class SortOrder(str, Enum):
    POPULAR = "popular"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"
    DURATION = "duration"


class DestinationSort(str, Enum):
    """Destinations have no length, so there is no duration order."""

    POPULAR = "popular"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _resolve_field(model: Type[Record], name: str) -> str:
    """Accept either the attribute name or its camelCase alias."""
    if name in model.model_fields:
        return name
    for field_name, info in model.model_fields.items():
        if info.alias == name:
            return field_name
    raise ValueError(f"{model.__name__} has no field {name!r}")


def _duration_days(tour: Tour) -> int:
    match = _LEADING_NUMBER.search(tour.duration)
    return int(match.group()) if match else 0


def _enum_values(items: Optional[Iterable[Any]]) -> Set[str]:
    return {getattr(item, "value", item) for item in items or []}


def _matches_text(query: Optional[str], *values: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return any(needle in value.lower() for value in values)


def hash_password(password: str, salt: Optional[bytes] = None) -> str:
    salt = salt or secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt, PASSWORD_HASH_ITERATIONS)
    return f"pbkdf2_sha256${PASSWORD_HASH_ITERATIONS}${salt.hex()}${digest.hex()}"


class Repository:
    """
    Read queries and validated writes for every entity kind.
    All writes run inside the store lock so check-then-insert is atomic.
    """

    def __init__(self, store: MemoryStore, notifier: Optional[EmailNotifier] = None):
        self.store = store
        self.notifier = notifier or EmailNotifier(enabled=False)

    # ------------------------------------------------------------------
    # Generic queries
    # ------------------------------------------------------------------

    def list_all(self, kind: EntityKind) -> List[Record]:
        return self.store.values(kind)

    def get_by_id(self, kind: EntityKind, record_id: str) -> Optional[Record]:
        return self.store.get(kind, record_id)

    def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        return next((p for p in self.store.values(EntityKind.BLOG) if p.slug == slug), None)

    def filter_by_flag(self, kind: EntityKind, flag: str) -> List[Record]:
        """Records of a kind whose boolean flag (featured, trending, ...) is set."""
        model = MODEL_FOR_KIND[EntityKind(kind)]
        field = _resolve_field(model, flag)
        if model.model_fields[field].annotation is not bool:
            raise ValueError(f"{model.__name__}.{field} is not a flag")
        return [r for r in self.store.values(kind) if getattr(r, field)]

    def filter_by_relation(self, kind: EntityKind, foreign_key: str, value: str) -> List[Record]:
        """
        Records whose weak reference equals value. A reference to a record
        that does not exist just yields an empty list.

        Itinerary days come back sorted by day. FAQ lookups by tour also
        return every general FAQ.
        """
        kind = EntityKind(kind)
        field = _resolve_field(MODEL_FOR_KIND[kind], foreign_key)
        rows = self.store.values(kind)

        if kind == EntityKind.FAQS and field == "tour_id":
            return [f for f in rows if f.tour_id == value or f.category == GENERAL_FAQ_CATEGORY]

        matches = [r for r in rows if getattr(r, field) == value]
        if kind == EntityKind.TOUR_ITINERARY:
            matches.sort(key=lambda day: day.day)
        return matches

    # ------------------------------------------------------------------
    # Destinations
    # ------------------------------------------------------------------

    def get_all_destinations(self) -> List[Destination]:
        return self.list_all(EntityKind.DESTINATIONS)

    def get_destination(self, destination_id: str) -> Optional[Destination]:
        return self.get_by_id(EntityKind.DESTINATIONS, destination_id)

    def get_featured_destinations(self) -> List[Destination]:
        return self.filter_by_flag(EntityKind.DESTINATIONS, "featured")

    def search_destinations(
        self,
        query: Optional[str] = None,
        continents: Optional[Iterable[str]] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        sort: DestinationSort = DestinationSort.POPULAR,
    ) -> List[Destination]:
        """
        Filter destinations by name/country text, continent and starting price.
        Sort by popularity (review count), price or rating. Any other sort
        order raises ValueError.
        """
        sort = DestinationSort(getattr(sort, "value", sort))
        wanted = _enum_values(continents)
        results = [
            d for d in self.get_all_destinations()
            if _matches_text(query, d.name, d.country)
            and (not wanted or d.continent in wanted)
            and (min_price is None or d.price_from >= min_price)
            and (max_price is None or d.price_from <= max_price)
        ]
        if sort == DestinationSort.PRICE_LOW:
            results.sort(key=lambda d: d.price_from)
        elif sort == DestinationSort.PRICE_HIGH:
            results.sort(key=lambda d: d.price_from, reverse=True)
        elif sort == DestinationSort.RATING:
            results.sort(key=lambda d: d.rating, reverse=True)
        else:
            results.sort(key=lambda d: d.review_count, reverse=True)
        return results

    # ------------------------------------------------------------------
    # Tours
    # ------------------------------------------------------------------

    def get_all_tours(self) -> List[Tour]:
        return self.list_all(EntityKind.TOURS)

    def get_tour(self, tour_id: str) -> Optional[Tour]:
        return self.get_by_id(EntityKind.TOURS, tour_id)

    def get_featured_tours(self) -> List[Tour]:
        return self.filter_by_flag(EntityKind.TOURS, "featured")

    def get_tours_by_destination(self, destination_id: str) -> List[Tour]:
        return self.filter_by_relation(EntityKind.TOURS, "destination_id", destination_id)

    def get_tour_itinerary(self, tour_id: str) -> List[TourItinerary]:
        return self.filter_by_relation(EntityKind.TOUR_ITINERARY, "tour_id", tour_id)

    def search_tours(
        self,
        query: Optional[str] = None,
        categories: Optional[Iterable[str]] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        sort: SortOrder = SortOrder.POPULAR,
    ) -> List[Tour]:
        """
        Filter tours by title/summary text, category and price.
        Sort by popularity (review count), price, rating or length in days.
        """
        wanted = _enum_values(categories)
        results = [
            t for t in self.get_all_tours()
            if _matches_text(query, t.title, t.short_description)
            and (not wanted or t.category in wanted)
            and (min_price is None or t.price >= min_price)
            and (max_price is None or t.price <= max_price)
        ]
        sort = SortOrder(sort)
        if sort == SortOrder.PRICE_LOW:
            results.sort(key=lambda t: t.price)
        elif sort == SortOrder.PRICE_HIGH:
            results.sort(key=lambda t: t.price, reverse=True)
        elif sort == SortOrder.RATING:
            results.sort(key=lambda t: t.rating, reverse=True)
        elif sort == SortOrder.DURATION:
            results.sort(key=_duration_days)
        else:
            results.sort(key=lambda t: t.review_count, reverse=True)
        return results

    # ------------------------------------------------------------------
    # Guides, testimonials, blog, team, FAQs
    # ------------------------------------------------------------------

    def get_all_guides(self) -> List[TourGuide]:
        return self.list_all(EntityKind.GUIDES)

    def get_guide(self, guide_id: str) -> Optional[TourGuide]:
        return self.get_by_id(EntityKind.GUIDES, guide_id)

    def get_all_testimonials(self) -> List[Testimonial]:
        return self.list_all(EntityKind.TESTIMONIALS)

    def get_featured_testimonials(self) -> List[Testimonial]:
        return self.filter_by_flag(EntityKind.TESTIMONIALS, "featured")

    def get_all_blog_posts(self) -> List[BlogPost]:
        """Newest first."""
        return sorted(self.list_all(EntityKind.BLOG), key=lambda p: p.published_at, reverse=True)

    def get_blog_post(self, slug: str) -> Optional[BlogPost]:
        return self.get_by_slug(slug)

    def get_featured_blog_posts(self) -> List[BlogPost]:
        return self.filter_by_flag(EntityKind.BLOG, "featured")

    def get_all_team_members(self) -> List[TeamMember]:
        return self.list_all(EntityKind.TEAM)

    def get_all_faqs(self) -> List[Faq]:
        return self.list_all(EntityKind.FAQS)

    def get_faqs_by_tour(self, tour_id: str) -> List[Faq]:
        return self.filter_by_relation(EntityKind.FAQS, "tour_id", tour_id)

    # ------------------------------------------------------------------
    # Inquiries
    # ------------------------------------------------------------------

    def create_inquiry(self, data: InquiryCreate) -> Inquiry:
        inquiry = Inquiry(id=_new_id(), created_at=_utcnow(), **data.model_dump())
        self.store.insert(EntityKind.INQUIRIES, inquiry)
        logger.info(f"Inquiry {inquiry.id} stored for tour {inquiry.tour_id or 'general'}")
        self._notify(self.notifier.inquiry_received, inquiry)
        return inquiry

    def get_all_inquiries(self) -> List[Inquiry]:
        """Newest first."""
        return sorted(self.list_all(EntityKind.INQUIRIES), key=lambda i: i.created_at, reverse=True)

    # ------------------------------------------------------------------
    # Newsletter
    # ------------------------------------------------------------------

    def is_email_subscribed(self, email: str) -> bool:
        email = email.strip().lower()
        return any(s.email == email for s in self.store.values(EntityKind.SUBSCRIBERS))

    def subscribe_newsletter(self, data: SubscriberCreate) -> NewsletterSubscriber:
        """Add a subscriber. Raises DuplicateSubscription if the email is already listed."""
        with self.store.lock:
            if self.is_email_subscribed(data.email):
                logger.info(f"Duplicate newsletter subscription rejected: {data.email}")
                raise DuplicateSubscription(data.email)
            subscriber = NewsletterSubscriber(id=_new_id(), email=data.email, subscribed_at=_utcnow())
            self.store.insert(EntityKind.SUBSCRIBERS, subscriber)

        self._notify(self.notifier.subscriber_added, subscriber)
        return subscriber

    # ------------------------------------------------------------------
    # Contact messages
    # ------------------------------------------------------------------

    def create_contact_message(self, data: ContactMessageCreate) -> dict:
        message = ContactMessage(id=_new_id(), created_at=_utcnow(), **data.model_dump())
        self.store.insert(EntityKind.CONTACT_MESSAGES, message)
        self._notify(self.notifier.contact_message_received, message)
        return {"id": message.id}

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> Optional[User]:
        return self.get_by_id(EntityKind.USERS, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.store.values(EntityKind.USERS) if u.username == username), None)

    def create_user(self, data: UserCreate) -> User:
        """Register a user. Raises DuplicateUsername if the name is taken."""
        with self.store.lock:
            if self.get_user_by_username(data.username) is not None:
                raise DuplicateUsername(data.username)
            user = User(id=_new_id(), username=data.username, password_hash=hash_password(data.password))
            self.store.insert(EntityKind.USERS, user)

        self._notify(self.notifier.user_registered, user)
        return user

    # ------------------------------------------------------------------

    def _notify(self, send, record: Any) -> None:
        # the write already succeeded; a broken notifier must not undo that
        try:
            send(record)
        except Exception as e:
            logger.warning(f"Notification for {type(record).__name__} {record.id} failed: {e}")


def get_notifier() -> EmailNotifier:
    return EmailNotifier(
        enabled=settings.notifications_enabled,
        recipient=settings.notification_recipient,
    )


def get_repository(
    store: MemoryStore = Depends(get_store),
    notifier: EmailNotifier = Depends(get_notifier),
) -> Repository:
    """FastAPI dependency for the repository."""
    return Repository(store, notifier)
