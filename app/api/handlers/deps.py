from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from app.domain.contracts import ContactRepository


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class ApiDeps:
    repository: ContactRepository
    clock: Callable[[], datetime] = field(default=_utc_now)
