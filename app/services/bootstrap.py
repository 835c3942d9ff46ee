from __future__ import annotations

import logging
from dataclasses import dataclass

from app.api.handlers.deps import ApiDeps
from app.domain.contracts import ContactRepository
from app.repositories.dynamodb import DynamoDbContactRepository, DynamoDbClientManager
from app.repositories.stub import InMemoryContactRepository
from app.settings import ContactSettings, contact_settings_from_env


@dataclass
class RuntimeContainer:
    settings: ContactSettings
    repository: ContactRepository
    api_deps: ApiDeps
    storage_mode: str


def build_runtime_container(settings: ContactSettings | None = None) -> RuntimeContainer:
    settings = settings or contact_settings_from_env()
    repository: ContactRepository
    if settings.table_name:
        client_manager = DynamoDbClientManager(
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )
        repository = DynamoDbContactRepository(
            client_manager=client_manager,
            table_name=settings.table_name,
        )
        storage_mode = "dynamodb"
    else:
        logging.getLogger("runtime").warning(
            "DYNAMODB_TABLE is not set; contact submissions are kept in memory",
            extra={"component": "services.bootstrap"},
        )
        repository = InMemoryContactRepository()
        storage_mode = "memory"

    return RuntimeContainer(
        settings=settings,
        repository=repository,
        api_deps=ApiDeps(repository=repository),
        storage_mode=storage_mode,
    )
