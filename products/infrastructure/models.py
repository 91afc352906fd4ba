"""
Product, tier price and custom attribute models.
"""
import uuid

from django.db import models

from products.read_models.tier_prices import by_product


class Product(models.Model):
    """
    Represents a catalog product.
    The vendor is the brand the product is sold under.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vendor = models.ForeignKey(
        "brands.Brand",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    ean_code = models.CharField(max_length=20, help_text="European article number")
    sku = models.CharField(max_length=100, unique=True, help_text="Stock keeping unit")
    name = models.CharField(max_length=255, help_text="Product display name")
    url = models.CharField(max_length=255, unique=True, help_text="Unique slug")
    description = models.TextField(null=True, blank=True)
    deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "catalog_products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["vendor"]),
            models.Index(fields=["ean_code"]),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.ean_code:
            raise ValidationError("EAN code is required")
        if not self.sku:
            raise ValidationError("SKU is required")
        if not self.name:
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.sku} - {self.name}"


class TierPriceQuerySet(models.QuerySet):
    """Query shaping for tier price read models."""

    def by_product(self, product_id: uuid.UUID) -> "TierPriceQuerySet":
        """Tier prices of a single product."""
        return by_product(self, product_id)


class TierPrice(models.Model):
    """
    Unit price of a product for a quantity band.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="tier_prices")
    from_quantity = models.PositiveIntegerField()
    to_quantity = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = TierPriceQuerySet.as_manager()

    class Meta:
        db_table = "catalog_tier_prices"
        ordering = ["product", "from_quantity"]
        indexes = [
            models.Index(fields=["product", "from_quantity"]),
        ]

    def __str__(self):
        return f"{self.product_id} [{self.from_quantity}-{self.to_quantity}] {self.price}"


class CustomAttribute(models.Model):
    """
    Custom product attribute definition.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    data_type = models.CharField(max_length=50)
    unit_of_measure = models.CharField(max_length=50, null=True, blank=True)
    deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "catalog_custom_attributes"
        ordering = ["name"]

    def __str__(self):
        return self.name
