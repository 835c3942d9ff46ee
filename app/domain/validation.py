from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

# Shallow local@domain.tld shape check; not RFC 5322.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

RejectionCode = Literal["missing_fields", "invalid_email"]


@dataclass(frozen=True)
class ContactFields:
    name: str
    email: str
    message: str


@dataclass(frozen=True)
class ContactRejection:
    code: RejectionCode


def _clean(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_contact(name: object, email: object, message: object) -> ContactFields | ContactRejection:
    """Normalize raw form values and check them.

    Values that are absent or not strings count as empty. Whitespace is
    trimmed from every field and the email is lowercased before any check
    runs, so validating a previous result returns it unchanged.
    """
    clean_name = _clean(name)
    clean_email = _clean(email).lower()
    clean_message = _clean(message)

    if not clean_name or not clean_email or not clean_message:
        return ContactRejection(code="missing_fields")
    if not is_valid_email(clean_email):
        return ContactRejection(code="invalid_email")
    return ContactFields(name=clean_name, email=clean_email, message=clean_message)
