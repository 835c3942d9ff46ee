from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from app.domain.validation import ContactRejection, validate_contact

DEFAULT_API_URL = "http://127.0.0.1:8000/contact"
API_URL_ENV = "CONTACT_API_URL"

MISSING_FIELDS_MESSAGE = "Please fill in all fields."
INVALID_EMAIL_MESSAGE = "Please enter a valid email address."
GENERIC_FAILURE_MESSAGE = "Error sending message. Please try again."
NETWORK_FAILURE_MESSAGE = "Network error. Please check your connection and try again."

REJECTION_MESSAGES = {
    "missing_fields": MISSING_FIELDS_MESSAGE,
    "invalid_email": INVALID_EMAIL_MESSAGE,
}


@dataclass(frozen=True)
class ContactSent:
    submission_id: str | None


@dataclass(frozen=True)
class ContactSendFailed:
    message: str
    status_code: int | None = None


ContactSendResult = ContactSent | ContactSendFailed


def resolve_api_url(configured: str | None = None) -> str:
    """Pick the endpoint once: explicit value, then environment, then default."""
    for candidate in (configured, os.getenv(API_URL_ENV)):
        if candidate and candidate.strip():
            return candidate.strip()
    return DEFAULT_API_URL


class ContactApiClient:
    def __init__(
        self,
        *,
        api_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self.api_url = resolve_api_url(api_url)
        self._http = http_client or httpx.Client(timeout=timeout_s)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> ContactApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send(self, *, name: str, email: str, message: str) -> ContactSendResult:
        validated = validate_contact(name, email, message)
        if isinstance(validated, ContactRejection):
            return ContactSendFailed(message=REJECTION_MESSAGES[validated.code])

        try:
            response = self._http.post(
                self.api_url,
                json={"name": validated.name, "email": validated.email, "message": validated.message},
                headers={"Content-Type": "application/json", "Accept": "application/json"},
            )
        except httpx.HTTPError:
            return ContactSendFailed(message=NETWORK_FAILURE_MESSAGE)

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_success and data.get("success") is True:
            submission_id = data.get("id")
            return ContactSent(submission_id=submission_id if isinstance(submission_id, str) else None)

        server_message = data.get("message")
        if not isinstance(server_message, str) or not server_message:
            server_message = GENERIC_FAILURE_MESSAGE
        return ContactSendFailed(message=server_message, status_code=response.status_code)
