"""
Categories module - Category tree management.

This module handles:
- Category entity, visibility windows and parent/child links
- Category/product associations
- Category repository (port) and Django ORM adapters
"""
