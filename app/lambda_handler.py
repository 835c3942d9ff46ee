"""AWS Lambda entrypoint for API Gateway proxy events.

The runtime container, and with it the DynamoDB client, is built on the
first invocation of a cold container and reused by every later invocation.
"""
from __future__ import annotations

import asyncio
import base64
import binascii
from typing import Any

from app.api.handlers.contact import submit_contact_handler
from app.api.responses import ContactHttpResponse
from app.logging_setup import configure_logging
from app.services.bootstrap import RuntimeContainer, build_runtime_container

_container: RuntimeContainer | None = None


def get_container() -> RuntimeContainer:
    global _container
    if _container is None:
        configure_logging()
        _container = build_runtime_container()
    return _container


def _event_method(event: dict[str, Any]) -> str:
    method = event.get("httpMethod")
    if method is None:
        # HTTP API (payload format 2.0) keeps the method under requestContext.
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return str(method or "")


def _event_body(event: dict[str, Any]) -> str | bytes | None:
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError):
        # Undecodable payloads go through as-is and fail JSON parsing.
        return body


def to_proxy_response(result: ContactHttpResponse) -> dict[str, Any]:
    headers = dict(result.headers)
    if result.media_type is not None:
        headers["Content-Type"] = result.media_type
    return {
        "statusCode": result.status_code,
        "headers": headers,
        "body": result.body,
    }


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    del context
    container = get_container()
    result = asyncio.run(
        submit_contact_handler(
            method=_event_method(event),
            body=_event_body(event),
            api_deps=container.api_deps,
        )
    )
    return to_proxy_response(result)
