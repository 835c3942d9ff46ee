from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import boto3
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from app.domain.errors import ContactStorageError
from app.domain.models import ContactSubmission

_serializer = TypeSerializer()


def serialize_item(item: dict[str, Any]) -> dict[str, dict[str, Any]]:
    return {key: _serializer.serialize(value) for key, value in item.items()}


@dataclass
class DynamoDbClientManager:
    """Holds one low-level DynamoDB client per process, created on first use.

    Clients are safe to share across threads; resources are not.
    """

    region_name: str | None = None
    endpoint_url: str | None = None
    client: Any | None = None

    def get_client(self) -> Any:
        if self.client is None:
            self.client = boto3.client(
                "dynamodb",
                region_name=self.region_name,
                endpoint_url=self.endpoint_url,
            )
        return self.client


@dataclass
class DynamoDbContactRepository:
    client_manager: DynamoDbClientManager
    table_name: str

    async def put_submission(self, *, submission: ContactSubmission) -> None:
        try:
            # Created on the event loop thread, then shared with the worker thread.
            client = self.client_manager.get_client()
            # boto3 is blocking; keep the event loop free while the write runs.
            await asyncio.to_thread(
                client.put_item,
                TableName=self.table_name,
                Item=serialize_item(submission.to_item()),
            )
        except (BotoCoreError, ClientError) as exc:
            raise ContactStorageError(
                f"failed to put contact submission {submission.id} into {self.table_name}"
            ) from exc
