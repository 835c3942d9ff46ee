from __future__ import annotations

import json
import logging

from app.api.handlers.deps import ApiDeps
from app.api.responses import ContactHttpResponse, error_response, preflight_response, success_response
from app.domain.error_taxonomy import ErrorCode, categorize_error, classify_error
from app.domain.errors import InvalidRequestBodyError
from app.domain.models import new_contact_submission
from app.domain.validation import ContactRejection, validate_contact

COMPONENT_ID = "api.submit_contact"

PREFLIGHT_METHOD = "OPTIONS"
SUBMIT_METHOD = "POST"

logger = logging.getLogger("contact")


def _reject_constant(name: str) -> object:
    raise ValueError(f"{name} is not a valid JSON value")


def parse_contact_payload(body: str | bytes | None) -> dict[str, object]:
    """Decode a request body into a field mapping.

    Valid JSON that is not an object yields an empty mapping, so its fields
    are reported as missing rather than as a parse failure. ``NaN`` and
    ``Infinity`` literals are rejected.
    """
    if body is None:
        raise InvalidRequestBodyError("request body is empty")
    try:
        payload = json.loads(body, parse_constant=_reject_constant)

    except (ValueError, UnicodeDecodeError) as exc:
        raise InvalidRequestBodyError("request body is not valid JSON") from exc
    if not isinstance(payload, dict):
        return {}
    return payload


async def submit_contact_handler(
    *,
    method: str,
    body: str | bytes | None,
    api_deps: ApiDeps,
) -> ContactHttpResponse:
    method = method.upper()
    if method == PREFLIGHT_METHOD:
        return preflight_response()

    if method != SUBMIT_METHOD:
        _log_rejection("method_not_allowed", method=method)
        return error_response("method_not_allowed")

    try:
        payload = parse_contact_payload(body)
    except InvalidRequestBodyError:
        _log_rejection("invalid_json", method=method)
        return error_response("invalid_json")

    validated = validate_contact(payload.get("name"), payload.get("email"), payload.get("message"))
    if isinstance(validated, ContactRejection):
        _log_rejection(validated.code, method=method)
        return error_response(validated.code)

    submission = new_contact_submission(validated, now=api_deps.clock())
    try:
        await api_deps.repository.put_submission(submission=submission)
    except Exception:
        logger.exception(
            "contact submission write failed",
            extra={"submission_id": submission.id, **_error_extra("storage_failed")},
        )
        return error_response("storage_failed")

    logger.info(
        "contact submission stored",
        extra={"component": COMPONENT_ID, "submission_id": submission.id},
    )
    return success_response(submission.id)


def _error_extra(code: ErrorCode) -> dict[str, str]:
    return {
        "component": COMPONENT_ID,
        "error_code": code,
        "error_category": categorize_error(code),
        "retry": classify_error(code),
    }


def _log_rejection(code: ErrorCode, *, method: str) -> None:
    logger.info(
        "contact submission rejected",
        extra={"method": method, **_error_extra(code)},
    )
