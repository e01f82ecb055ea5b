"""
Domain records -- read-only pydantic models for every entity kind.
Wire format is camelCase; Python attributes are snake_case.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TourCategory(str, Enum):
    ADVENTURE = "adventure"
    LUXURY = "luxury"
    FAMILY = "family"
    HONEYMOON = "honeymoon"
    SOLO = "solo"
    CULTURAL = "cultural"
    WILDLIFE = "wildlife"
    BEACH = "beach"


class Continent(str, Enum):
    ASIA = "asia"
    EUROPE = "europe"
    AFRICA = "africa"
    NORTH_AMERICA = "north-america"
    SOUTH_AMERICA = "south-america"
    OCEANIA = "oceania"
    ANTARCTICA = "antarctica"


class ContactPreference(str, Enum):
    EMAIL = "email"
    PHONE = "phone"
    WHATSAPP = "whatsapp"


class EntityKind(str, Enum):
    """Names of the keyed collections held by the store."""
    DESTINATIONS = "destinations"
    TOURS = "tours"
    TOUR_ITINERARY = "tourItinerary"
    GUIDES = "guides"
    INQUIRIES = "inquiries"
    TESTIMONIALS = "testimonials"
    BLOG = "blog"
    SUBSCRIBERS = "newsletterSubscribers"
    TEAM = "team"
    FAQS = "faqs"
    CONTACT_MESSAGES = "contactMessages"
    USERS = "users"


class Record(BaseModel):
    """
    Base for stored entities.
    Frozen, and array fields are tuples, so a returned record cannot be
    changed in place by a caller.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    id: str


class Destination(Record):
    name: str
    country: str
    continent: Continent
    description: str
    short_description: str
    image_url: str
    rating: float = 4.5
    review_count: int = 0
    price_from: int
    featured: bool = False
    trending: bool = False
    popular: bool = False
    is_new: bool = False


class Tour(Record):
    title: str
    destination_id: str
    description: str
    short_description: str
    duration: str
    price: int
    original_price: Optional[int] = None
    rating: float = 4.5
    review_count: int = 0
    max_group_size: int = 12
    spots_left: int = 8
    category: TourCategory
    image_url: str
    gallery_images: Tuple[str, ...] = ()
    inclusions: Tuple[str, ...] = ()
    exclusions: Tuple[str, ...] = ()
    highlights: Tuple[str, ...] = ()
    featured: bool = False


class TourItinerary(Record):
    tour_id: str
    day: int
    title: str
    description: str
    activities: Tuple[str, ...] = ()


class TourGuide(Record):
    name: str
    title: str
    bio: str
    image_url: str
    languages: Tuple[str, ...] = ()
    experience: int
    rating: float = 4.8


class Inquiry(Record):
    full_name: str
    email: str
    phone: str
    tour_id: Optional[str] = None
    destination_id: Optional[str] = None
    travel_date: Optional[str] = None
    travelers: int = 2
    message: Optional[str] = None
    contact_preference: ContactPreference = ContactPreference.EMAIL
    created_at: datetime


class Testimonial(Record):
    name: str
    location: str
    image_url: str
    rating: int = 5
    review: str
    tour_id: Optional[str] = None
    destination_name: Optional[str] = None
    featured: bool = False


class BlogPost(Record):
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: str
    category: str
    author: str
    author_image: Optional[str] = None
    read_time: int = 5
    published_at: datetime
    featured: bool = False


class NewsletterSubscriber(Record):
    email: str
    subscribed_at: datetime


class TeamMember(Record):
    name: str
    role: str
    bio: str
    image_url: str
    linked_in: Optional[str] = None
    twitter: Optional[str] = None


class Faq(Record):
    question: str
    answer: str
    category: str = "general"
    tour_id: Optional[str] = None


class ContactMessage(Record):
    full_name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    created_at: datetime


class User(Record):
    username: str
    password_hash: str = Field(exclude=True, repr=False)


MODEL_FOR_KIND: Dict[EntityKind, Type[Record]] = {
    EntityKind.DESTINATIONS: Destination,
    EntityKind.TOURS: Tour,
    EntityKind.TOUR_ITINERARY: TourItinerary,
    EntityKind.GUIDES: TourGuide,
    EntityKind.INQUIRIES: Inquiry,
    EntityKind.TESTIMONIALS: Testimonial,
    EntityKind.BLOG: BlogPost,
    EntityKind.SUBSCRIBERS: NewsletterSubscriber,
    EntityKind.TEAM: TeamMember,
    EntityKind.FAQS: Faq,
    EntityKind.CONTACT_MESSAGES: ContactMessage,
    EntityKind.USERS: User,
}
