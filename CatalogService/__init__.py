"""
Catalog Service Django project.
"""
