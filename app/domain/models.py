from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from app.domain.ids import new_contact_submission_id
from app.domain.validation import ContactFields


@dataclass(frozen=True)
class ContactSubmission:
    id: str
    name: str
    email: str
    message: str
    created_at: datetime

    def to_item(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }


def new_contact_submission(fields: ContactFields, *, now: datetime | None = None) -> ContactSubmission:
    return ContactSubmission(
        id=new_contact_submission_id(),
        name=fields.name,
        email=fields.email,
        message=fields.message,
        created_at=now or datetime.now(tz=UTC),
    )
