"""Core service tasks."""

import time
from typing import Any, Dict

import structlog
from celery import shared_task
from django.db import connections
from django.utils import timezone

logger = structlog.get_logger(__name__)


@shared_task(name="core.health_check")
def health_check() -> Dict[str, Any]:
    """Report whether the worker can reach the database."""
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check_db_failure")

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return {
        "status": "healthy" if overall_healthy else "unhealthy",
        "timestamp": timezone.now().isoformat(),
        "services": services,
    }
