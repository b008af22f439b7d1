"""
Brands module - brand summaries and logo resolution.

This module handles:
- Brand logo table and the tiered logo resolver
- Brand summaries (products grouped by brand)
"""
