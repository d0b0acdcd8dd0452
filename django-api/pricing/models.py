"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class PricingConfigRecord(models.Model):
    """Persistence model for a pricing table.

    key is "global" for the studio default or "photographer:<uuid>".
    """

    key = models.CharField(max_length=100, primary_key=True)
    config = models.JSONField(default=dict)
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self) -> str:
        return f"{self.key} (v{self.version})"
