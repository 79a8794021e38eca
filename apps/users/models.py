"""User models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore


class User(models.Model):
    """Owner of units and author of bookings. Immutable after creation."""

    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(max_length=100, unique=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.username
