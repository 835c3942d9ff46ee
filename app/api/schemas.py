from __future__ import annotations

from pydantic import BaseModel, Field


SUBMISSION_ID_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"


class HealthResponse(BaseModel):
    status: str
    role: str
    mode: str


class ReadyResponse(BaseModel):
    status: str
    role: str
    storage: str


class ContactResponse(BaseModel):
    success: bool
    message: str
    id: str | None = Field(default=None, pattern=SUBMISSION_ID_PATTERN)
