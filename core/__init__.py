"""
Core module for shared infrastructure.

This module contains:
- Domain exceptions
- Observability (logging middleware, tracing, metrics)
- Health check views
- Management commands
"""
