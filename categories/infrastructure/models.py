"""
Category models.
"""

import uuid

from django.db import models


class Category(models.Model):
    """
    Represents a node of the catalog category tree.
    Only the parent pointer is stored; child sets are rebuilt from it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=100, unique=True, help_text="Category unique code")
    name = models.CharField(max_length=255, help_text="Category display name")
    url = models.CharField(
        max_length=255,
        unique=True,
        help_text="Unique slug used in catalog urls",
    )
    description = models.TextField(null=True, blank=True)
    is_visible = models.BooleanField(default=False)
    visible_from = models.DateTimeField(null=True, blank=True)
    visible_to = models.DateTimeField(null=True, blank=True)
    deleted = models.BooleanField(default=False)
    parent = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="children",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "catalog_categories"
        ordering = ["code"]
        indexes = [
            models.Index(fields=["url"]),
            models.Index(fields=["parent"]),
        ]

    def clean(self):
        """Validate category fields."""
        from django.core.exceptions import ValidationError

        if not self.code:
            raise ValidationError("Code is required")
        if not self.name:
            raise ValidationError("Name is required")
        if not self.url:
            raise ValidationError("Url is required")
        if self.visible_from and self.visible_to and self.visible_from >= self.visible_to:
            raise ValidationError("Visible from must be before visible to")

    def save(self, *args, **kwargs):
        """Save category with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.code} - {self.name}"


class ProductCategory(models.Model):
    """
    Join table between categories and products.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.ForeignKey(
        Category, on_delete=models.CASCADE, related_name="product_links"
    )
    product = models.ForeignKey(
        "products.Product", on_delete=models.CASCADE, related_name="category_links"
    )

    class Meta:
        db_table = "catalog_product_categories"
        unique_together = [["category", "product"]]

    def __str__(self):
        return f"{self.category_id} - {self.product_id}"
