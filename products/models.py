"""
Model discovery for the products app.

Django imports `<app>.models`; the models themselves live in the
infrastructure layer.
"""
from products.infrastructure.models import CustomAttribute, Product, TierPrice  # noqa: F401
