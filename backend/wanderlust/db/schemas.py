"""
Insert schemas for the writable entities.

Each schema validates an untrusted mapping coming from the HTTP layer.
validate_payload() returns the parsed schema or raises ValidationFailure
listing every field that broke a rule.
"""

import re
from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from wanderlust.db.models import ContactPreference

MIN_TRAVELERS = 1
MAX_TRAVELERS = 20

_WHOLE_NUMBER = re.compile(r"^[+-]?\d+$")

S = TypeVar("S", bound="InsertSchema")


class ValidationFailure(Exception):
    """Write input broke one or more field rules."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__("; ".join(self.messages))

    @property
    def messages(self) -> List[str]:
        return [f"{e['field']}: {e['message']}" for e in self.errors]

    @property
    def fields(self) -> List[str]:
        return [e["field"] for e in self.errors]


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("not a valid email address") from None
    return value


EmailText = Annotated[str, AfterValidator(_check_email)]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class InsertSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
        extra="ignore",
    )


class InquiryCreate(InsertSchema):
    full_name: str = Field(min_length=2)
    email: EmailText
    phone: str = Field(min_length=10)
    tour_id: Optional[str] = None
    destination_id: Optional[str] = None
    travel_date: Optional[str] = None
    travelers: int = 2
    message: Optional[str] = None
    contact_preference: ContactPreference = ContactPreference.EMAIL

    @field_validator("tour_id", "destination_id", "travel_date", "message", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("travelers", mode="before")
    @classmethod
    def _coerce_travelers(cls, value: Any) -> Any:
        # numeric strings are accepted, anything else that is not a whole number is not
        if isinstance(value, bool):
            raise ValueError("must be a whole number")
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if value.is_integer():
                return int(value)
            raise ValueError("must be a whole number")
        if isinstance(value, str) and _WHOLE_NUMBER.match(value.strip()):
            return int(value.strip())
        raise ValueError("must be a whole number")

    @field_validator("travelers")
    @classmethod
    def _travelers_range(cls, value: int) -> int:
        if not MIN_TRAVELERS <= value <= MAX_TRAVELERS:
            raise ValueError(f"must be between {MIN_TRAVELERS} and {MAX_TRAVELERS}")
        return value


class SubscriberCreate(InsertSchema):
    email: str

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return _check_email(value).lower()


class ContactMessageCreate(InsertSchema):
    full_name: str = Field(min_length=2)
    email: EmailText
    phone: Optional[str] = None
    subject: str = Field(min_length=5)
    message: str = Field(min_length=20)

    @field_validator("phone", mode="before")
    @classmethod
    def _optional_phone(cls, value: Any) -> Any:
        return _blank_to_none(value)


class UserCreate(InsertSchema):
    username: str = Field(min_length=3)
    password: str = Field(min_length=8)


def _describe(error: Dict[str, Any]) -> str:
    """Turn a pydantic error entry into a short rule description."""
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind == "missing":
        return "is required"
    if kind == "string_too_short":
        return f"must be at least {ctx.get('min_length')} characters"
    if kind == "string_type":
        return "must be a string"
    if kind == "enum":
        return f"must be one of {ctx.get('expected')}"
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return error["msg"]


def validate_payload(schema: Type[S], payload: Any) -> S:
    """Validate an untrusted payload against an insert schema."""
    if not isinstance(payload, dict):
        raise ValidationFailure([{"field": "body", "message": "must be a JSON object"}])
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        errors = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "body"
            errors.append({"field": field, "message": _describe(error)})
        raise ValidationFailure(errors) from exc
