"""
Products module - Product, custom attribute and tier price management.

This module handles:
- Product and CustomAttribute entities and their domain events
- Tier prices and the tier price read-model helpers
- Product repository (port) and Django ORM adapters
"""
