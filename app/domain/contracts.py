from __future__ import annotations

from typing import Protocol, runtime_checkable

from app.domain.models import ContactSubmission


@runtime_checkable
class ContactRepository(Protocol):
    """Write-only storage contract for contact submissions.

    One call stores one record keyed by ``submission.id``. Implementations
    raise on failure; nothing is retried here.
    """

    async def put_submission(self, *, submission: ContactSubmission) -> None: ...
