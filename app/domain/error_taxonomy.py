from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

# Canonical error vocabulary for the contact intake path.
ErrorCode = Literal[
    "invalid_json",
    "missing_fields",
    "invalid_email",
    "method_not_allowed",
    "storage_failed",
]

ErrorCategory = Literal["client_shape", "validation", "method", "storage"]

RetryClassification = Literal["recoverable", "terminal"]

CANONICAL_ERROR_CODES: tuple[ErrorCode, ...] = (
    "invalid_json",
    "missing_fields",
    "invalid_email",
    "method_not_allowed",
    "storage_failed",
)

ERROR_CATEGORIES: Mapping[ErrorCode, ErrorCategory] = {
    "invalid_json": "client_shape",
    "missing_fields": "validation",
    "invalid_email": "validation",
    "method_not_allowed": "method",
    "storage_failed": "storage",
}

# A storage failure leaves no partial record, so the caller may resend as is.
RECOVERABLE_ERROR_CODES: frozenset[ErrorCode] = frozenset(
    {
        "invalid_json",
        "missing_fields",
        "invalid_email",
        "storage_failed",
    }
)

# Status code and caller-facing message per error. Messages never carry
# internal detail.
ERROR_RESPONSES: Mapping[ErrorCode, tuple[int, str]] = {
    "invalid_json": (400, "Invalid JSON in request body"),
    "missing_fields": (400, "Missing required fields: name, email, and message are required"),
    "invalid_email": (400, "Invalid email format"),
    "method_not_allowed": (405, "Method not allowed"),
    "storage_failed": (500, "Internal server error"),
}


def is_canonical_error_code(code: str) -> bool:
    return code in CANONICAL_ERROR_CODES


def categorize_error(code: ErrorCode) -> ErrorCategory:
    return ERROR_CATEGORIES[code]


def classify_error(code: ErrorCode) -> RetryClassification:
    if code in RECOVERABLE_ERROR_CODES:
        return "recoverable"
    return "terminal"


def resolve_error_response(code: str) -> tuple[int, str]:
    if is_canonical_error_code(code):
        return ERROR_RESPONSES[code]  # type: ignore[index]
    # Unknown codes are reported as opaque server errors.
    return ERROR_RESPONSES["storage_failed"]
