"""Celery worker and task lifecycle hooks.

- Worker process start: open the database connection up front.
- Worker process shutdown: release every connection.
- Task start: bind a correlation ID (``x_request_id`` header or the task id)
  into structlog context vars so every log line of the task carries it.
- Task end: clear the context.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from celery.signals import (
    task_postrun,
    task_prerun,
    worker_process_init,
    worker_process_shutdown,
)
from django.db import connections

from shared.infrastructure.rpc import REQUEST_ID_HEADER

logger = structlog.get_logger(__name__)


@worker_process_init.connect
def connect_database(**kwargs: Any) -> None:
    connection = connections["default"]
    connection.ensure_connection()
    logger.info("database.connected", vendor=connection.vendor)


@worker_process_shutdown.connect
def disconnect_database(**kwargs: Any) -> None:
    connections.close_all()
    logger.info("database.disconnected")


def resolve_correlation_id(task: Any, task_id: Optional[str]) -> str:
    """Pick the caller supplied request id, falling back to the task id."""
    request = getattr(task, "request", None)
    headers = getattr(request, "headers", None) or {}
    return (
        headers.get(REQUEST_ID_HEADER)
        or getattr(request, REQUEST_ID_HEADER, None)
        or task_id
        or ""
    )


@task_prerun.connect
def bind_task_context(
    task_id: Optional[str] = None, task: Any = None, **kwargs: Any
) -> None:
    cid = resolve_correlation_id(task, task_id)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        correlation_id=cid,
        task=getattr(task, "name", None),
    )
    logger.info("task_started", task_id=task_id)


@task_postrun.connect
def clear_task_context(
    task_id: Optional[str] = None, state: Optional[str] = None, **kwargs: Any
) -> None:
    logger.info("task_finished", task_id=task_id, state=state)
    structlog.contextvars.clear_contextvars()
