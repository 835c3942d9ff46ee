from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ContactSettings:
    table_name: str | None = None
    aws_region: str | None = None
    dynamodb_endpoint_url: str | None = None
    host: str = "0.0.0.0"
    port: int = 8000


def contact_settings_from_env() -> ContactSettings:
    return ContactSettings(
        table_name=_env_str("DYNAMODB_TABLE"),
        aws_region=_env_str("AWS_REGION"),
        dynamodb_endpoint_url=_env_str("DYNAMODB_ENDPOINT_URL"),
        host=_env_str("APP_HOST") or "0.0.0.0",
        port=_env_int("APP_PORT", 8000),
    )


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default

    try:
        parsed = int(value)
    except ValueError:
        return default

    return parsed if parsed > 0 else default
