"""Base abstract models for the products service.

Provides:
- ``BaseModel``: integer auto-increment primary key + created_at / updated_at.
- ``AvailabilityModel``: extends BaseModel with soft-delete via ``available``.

Design decisions:
- Single ``available`` flag is the source of truth for visibility.
- ``objects`` manager returns ALL records (unfiltered).  Use ``.available()``
  explicitly to exclude soft-deleted rows.
- Bulk ``QuerySet.update()`` skips ``auto_now``; the queryset helpers below
  always stamp ``updated_at`` themselves.
"""

from __future__ import annotations

from typing import Any

from django.db import models
from django.utils import timezone

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with integer PK and timestamp bookkeeping."""

    id = models.BigAutoField(primary_key=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Availability (soft delete) infrastructure
# ---------------------------------------------------------------------------


class AvailabilityQuerySet(models.QuerySet):
    """QuerySet with availability helpers."""

    def available(self) -> AvailabilityQuerySet:
        """Return only active records."""
        return self.filter(available=True)

    def unavailable(self) -> AvailabilityQuerySet:
        """Return only soft-deleted records."""
        return self.filter(available=False)

    def touch(self, **fields: Any) -> int:
        """``update()`` that also stamps ``updated_at``; returns matched rows."""
        return self.update(updated_at=timezone.now(), **fields)

    def deactivate(self) -> int:
        """Bulk soft-delete of the active rows in the queryset."""
        return self.available().touch(available=False)


class AvailabilityManager(models.Manager):
    """Manager that exposes ``.available()`` / ``.unavailable()`` on the queryset."""

    def get_queryset(self) -> AvailabilityQuerySet:
        return AvailabilityQuerySet(self.model, using=self._db)

    def available(self) -> AvailabilityQuerySet:
        return self.get_queryset().available()

    def unavailable(self) -> AvailabilityQuerySet:
        return self.get_queryset().unavailable()


class AvailabilityModel(BaseModel):
    """Abstract model with soft-delete via an ``available`` flag.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.available()`` to exclude soft-deleted rows.
    - There is no hard delete: ``delete()`` only clears the flag.
    """

    available = models.BooleanField(default=True, db_index=True)

    objects = AvailabilityManager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        """Computed: ``True`` when the record has been soft-deleted."""
        return not self.available

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Soft-delete this instance (no-op if already unavailable)."""
        if self.is_deleted:
            return 0, {}
        self.available = False
        self.save(update_fields=["available"])
        return 1, {self._meta.label: 1}
