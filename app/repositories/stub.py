from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.models import ContactSubmission


@dataclass
class InMemoryContactRepository:
    """Non-network repository with deterministic behavior for local mode.

    Set ``fail_with`` to make every write raise that exception.
    """

    items: dict[str, dict[str, str]] = field(default_factory=dict)
    writes: list[ContactSubmission] = field(default_factory=list)
    fail_with: Exception | None = None

    async def put_submission(self, *, submission: ContactSubmission) -> None:
        self.writes.append(submission)
        if self.fail_with is not None:
            raise self.fail_with
        self.items[submission.id] = submission.to_item()
