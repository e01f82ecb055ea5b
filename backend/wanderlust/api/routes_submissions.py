"""
Visitor submissions: tour inquiries, newsletter signups, contact messages.
Payloads are validated against the insert schemas before they reach the
repository; bad input never touches the store.
"""

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from typing import Any, Dict
import logging

from wanderlust.core.rate_limiting import limiter, SUBMISSION_LIMIT
from wanderlust.db.models import Inquiry, NewsletterSubscriber
from wanderlust.db.repositories import DuplicateSubscription, Repository, get_repository
from wanderlust.db.schemas import (
    ContactMessageCreate,
    InquiryCreate,
    SubscriberCreate,
    ValidationFailure,
    validate_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["submissions"])


@router.post("/inquiries", response_model=Inquiry, status_code=201)
@limiter.limit(SUBMISSION_LIMIT)
def create_inquiry(
    request: Request,
    payload: Any = Body(...),
    repo: Repository = Depends(get_repository),
):
    """Store a tour inquiry and notify the booking team."""
    try:
        data = validate_payload(InquiryCreate, payload)
    except ValidationFailure as e:
        logger.info(f"Rejected inquiry: {e}")
        raise HTTPException(status_code=400, detail={"error": "Invalid inquiry data", "details": e.errors})
    return repo.create_inquiry(data)


@router.post("/newsletter", response_model=NewsletterSubscriber, status_code=201)
@limiter.limit(SUBMISSION_LIMIT)
def subscribe_newsletter(
    request: Request,
    payload: Any = Body(...),
    repo: Repository = Depends(get_repository),
):
    """Add an email to the newsletter list. 409 if it is already there."""
    try:
        data = validate_payload(SubscriberCreate, payload)
    except ValidationFailure as e:
        raise HTTPException(status_code=400, detail={"error": "Invalid email", "details": e.errors})
    try:
        return repo.subscribe_newsletter(data)
    except DuplicateSubscription:
        raise HTTPException(status_code=409, detail="Email already subscribed")


@router.post("/contact", response_model=Dict[str, str], status_code=201)
@limiter.limit(SUBMISSION_LIMIT)
def create_contact_message(
    request: Request,
    payload: Any = Body(...),
    repo: Repository = Depends(get_repository),
):
    """Store a contact form message. Responds with the new message id only."""
    try:
        data = validate_payload(ContactMessageCreate, payload)
    except ValidationFailure as e:
        logger.info(f"Rejected contact message: {e}")
        raise HTTPException(status_code=400, detail={"error": "Invalid contact data", "details": e.errors})
    return repo.create_contact_message(data)
