"""
Product Catalog Django project.
"""
