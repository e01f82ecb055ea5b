"""
Simulated email notifications.

Nothing is actually sent: each message is written to the log with an
[EMAIL SIMULATION] prefix so the booking team can see what a real mail
integration would have delivered.
"""

from typing import List
import logging

from wanderlust.db.models import ContactMessage, Inquiry, NewsletterSubscriber, User

logger = logging.getLogger(__name__)


class EmailNotifier:
    def __init__(self, enabled: bool = True, recipient: str = "bookings@wanderlust-tours.example"):
        self.enabled = enabled
        self.recipient = recipient

    def send(self, subject: str, body: str, recipients: List[str]) -> None:
        if not self.enabled:
            logger.debug(f"Notifications disabled, dropping: {subject}")
            return
        logger.info(
            f"[EMAIL SIMULATION] {subject} -> {', '.join(recipients)}: {body}",
            extra={"notification": {"subject": subject, "recipients": recipients}},
        )

    def inquiry_received(self, inquiry: Inquiry) -> None:
        self.send(
            subject="New tour inquiry",
            body=(
                f"New inquiry from {inquiry.full_name} ({inquiry.email}) "
                f"for tour {inquiry.tour_id or 'general'}, "
                f"{inquiry.travelers} traveler(s), date {inquiry.travel_date or 'flexible'}"
            ),
            recipients=[self.recipient],
        )

    def subscriber_added(self, subscriber: NewsletterSubscriber) -> None:
        self.send(
            subject="Welcome to the Wanderlust newsletter",
            body=f"New newsletter subscriber: {subscriber.email}",
            recipients=[subscriber.email],
        )

    def contact_message_received(self, message: ContactMessage) -> None:
        self.send(
            subject=f"Contact form: {message.subject}",
            body=f"New contact message from {message.full_name} ({message.email})",
            recipients=[self.recipient],
        )

    def user_registered(self, user: User) -> None:
        self.send(
            subject="New user account",
            body=f"User {user.username} registered",
            recipients=[self.recipient],
        )
