"""
Storefront module - server-rendered catalog pages.

Home page with brand logos, brand pages, product create/read/edit/delete
pages and static about/contact pages.
"""
