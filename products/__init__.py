"""
Products module - catalog product management.

This module handles:
- Product entity
- Product repository and image storage (ports)
- Product CRUD commands, queries and handlers
- Django ORM and file-system adapters
"""
