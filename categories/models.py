"""
Model discovery for the categories app.

Django imports `<app>.models`; the models themselves live in the
infrastructure layer.
"""
from categories.infrastructure.models import Category, ProductCategory  # noqa: F401
