from __future__ import annotations

import uuid


def new_contact_submission_id() -> str:
    return str(uuid.uuid4())
