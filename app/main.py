from __future__ import annotations

import argparse
import logging
import sys
import uuid

import uvicorn

from app.api.http_app import build_app
from app.logging_setup import configure_logging
from app.services.bootstrap import build_runtime_container
from app.settings import contact_settings_from_env

ROLE = "api"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Contact intake HTTP entrypoint")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument(
        "--dry-run-startup",
        action="store_true",
        help="Validate startup and exit",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable code reload (dev mode)",
    )
    return parser.parse_args(argv)


def create_runtime_app() -> object:
    run_id = str(uuid.uuid4())
    configure_logging()
    container = build_runtime_container()
    return build_app(
        role=ROLE,
        run_id=run_id,
        api_deps=container.api_deps,
        storage_mode=container.storage_mode,
    )


def run(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.port is not None and args.port <= 0:
        sys.stderr.write(f"ERROR: invalid port {args.port}\n")
        sys.stderr.write("Port must be a positive integer.\n")
        return 2

    settings = contact_settings_from_env()
    configure_logging()
    run_id = str(uuid.uuid4())
    logger = logging.getLogger("runtime")

    logger.info(
        "runtime initialized",
        extra={"role": ROLE, "service": ROLE, "run_id": run_id},
    )

    if args.dry_run_startup:
        logger.info(
            "dry-run startup complete",
            extra={"role": ROLE, "service": ROLE, "run_id": run_id},
        )
        return 0

    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port
    if args.reload:
        uvicorn.run(
            "app.main:create_runtime_app",
            host=host,
            port=port,
            log_level="warning",
            reload=True,
            factory=True,
        )
    else:
        container = build_runtime_container(settings)
        app = build_app(
            role=ROLE,
            run_id=run_id,
            api_deps=container.api_deps,
            storage_mode=container.storage_mode,
        )
        uvicorn.run(app, host=host, port=port, log_level="warning")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
