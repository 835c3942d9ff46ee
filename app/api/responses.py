from __future__ import annotations

from dataclasses import dataclass, field

from app.api.schemas import ContactResponse
from app.domain.error_taxonomy import ErrorCode, resolve_error_response

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "OPTIONS,POST,GET",
}

JSON_MEDIA_TYPE = "application/json"
SUCCESS_MESSAGE = "Contact form submitted successfully"


@dataclass(frozen=True)
class ContactHttpResponse:
    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    @property
    def media_type(self) -> str | None:
        return JSON_MEDIA_TYPE if self.body else None


def preflight_response() -> ContactHttpResponse:
    return ContactHttpResponse(status_code=200)


def success_response(submission_id: str) -> ContactHttpResponse:
    payload = ContactResponse(success=True, message=SUCCESS_MESSAGE, id=submission_id)
    return ContactHttpResponse(status_code=200, body=payload.model_dump_json(exclude_none=True))


def error_response(code: ErrorCode) -> ContactHttpResponse:
    status_code, message = resolve_error_response(code)
    payload = ContactResponse(success=False, message=message)
    return ContactHttpResponse(status_code=status_code, body=payload.model_dump_json(exclude_none=True))
