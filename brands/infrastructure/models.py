"""
Brand models.
"""

import uuid

from django.db import models


class Brand(models.Model):
    """
    Represents a catalog brand (manufacturer or label products are sold under).
    Brands are soft-deleted, never removed.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text="Brand display name")
    description = models.TextField(null=True, blank=True)
    url = models.CharField(
        max_length=255,
        unique=True,
        help_text="Unique slug used in catalog urls",
    )
    deleted = models.BooleanField(default=False)
    logo_url = models.CharField(max_length=500, null=True, blank=True)
    logo_alt_text = models.CharField(max_length=255, null=True, blank=True)
    logo_mime_type = models.CharField(max_length=100, null=True, blank=True)
    seo_title = models.CharField(max_length=255, null=True, blank=True)
    seo_description = models.TextField(null=True, blank=True)
    seo_keywords = models.CharField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "catalog_brands"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["url"]),
            models.Index(fields=["deleted"]),
        ]

    def clean(self):
        """Validate brand fields."""
        from django.core.exceptions import ValidationError

        if not self.name:
            raise ValidationError("Name is required")
        if not self.url:
            raise ValidationError("Url is required")

    def save(self, *args, **kwargs):
        """Save brand with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
