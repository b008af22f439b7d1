"""
REST API package (Django REST Framework).
"""
