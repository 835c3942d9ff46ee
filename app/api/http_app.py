from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, Response

from app.api.handlers.contact import submit_contact_handler
from app.api.handlers.deps import ApiDeps
from app.api.schemas import ContactResponse, HealthResponse, ReadyResponse


def build_app(
    role: str,
    run_id: str,
    api_deps: ApiDeps,
    storage_mode: str = "memory",
) -> FastAPI:
    logger = logging.getLogger("runtime")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        del app
        logger.info(
            "role started",
            extra={"role": role, "service": role, "run_id": run_id},
        )

        yield

        logger.info(
            "role stopped",
            extra={"role": role, "service": role, "run_id": run_id},
        )

    app = FastAPI(title="contact-intake", version="0.1.0", lifespan=lifespan)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", role=role, mode="contact")

    @app.get("/ready", response_model=ReadyResponse, tags=["System"])
    async def ready() -> ReadyResponse:
        return ReadyResponse(status="ready", role=role, storage=storage_mode)

    async def submit_contact(request: Request) -> Response:
        body = await request.body()
        result = await submit_contact_handler(
            method=request.method,
            body=body,
            api_deps=api_deps,
        )
        return Response(
            content=result.body,
            status_code=result.status_code,
            headers=result.headers,
            media_type=result.media_type,
        )

    app.add_api_route(
        "/contact",
        submit_contact,
        methods=["POST"],
        responses={
            200: {"model": ContactResponse},
            400: {"model": ContactResponse},
            405: {"model": ContactResponse},
            500: {"model": ContactResponse},
        },
        tags=["Contact"],
    )
    # Plain route with no method filter, so the handler also answers
    # preflight and builds the 405 for every other method.
    app.add_route("/contact", submit_contact, methods=None, include_in_schema=False)

    return app
