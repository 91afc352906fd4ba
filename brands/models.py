"""
Model discovery for the brands app.

Django imports `<app>.models`; the models themselves live in the
infrastructure layer.
"""
from brands.infrastructure.models import Brand  # noqa: F401
